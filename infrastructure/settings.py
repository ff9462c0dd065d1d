import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

ENV_PREFIX = "TASKS"


def _env(suffix: str, default: str) -> str:
    value = os.getenv(f"{ENV_PREFIX}_{suffix}")
    if value is None or value.strip() == "":
        return default
    return value.strip()


@dataclass(frozen=True, slots=True)
class Settings:
    log_level: str
    repository: str

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            log_level=_env("LOG_LEVEL", "INFO").upper(),
            repository=_env("REPOSITORY", "memory").lower(),
        )


def get_settings() -> Settings:
    return Settings.from_env()
