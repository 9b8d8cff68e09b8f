import os
from dotenv import load_dotenv

load_dotenv()


def normalize_max_depth(value: int | None) -> int | None:
    """Depth limits of 0 or below turn the recursion guard off."""
    if value is None or value <= 0:
        return None
    return value


class Settings:
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    VALIDATION_MAX_DEPTH: int = int(os.getenv("VALIDATION_MAX_DEPTH", "256"))

    @property
    def max_depth(self) -> int | None:
        return normalize_max_depth(self.VALIDATION_MAX_DEPTH)


settings = Settings()
