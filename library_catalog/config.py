import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str = "False") -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


@dataclass
class Settings:
    # Application settings
    app_name: str = os.getenv("APP_NAME", "Library CLI")
    app_version: str = os.getenv("APP_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG")
    environment: str = os.getenv("ENVIRONMENT", "development")

    # Logging settings
    log_level: str = os.getenv("LOG_LEVEL", "WARNING")
    log_format: str = os.getenv("LOG_FORMAT", "%(levelname)s %(name)s: %(message)s")

    # CLI settings
    output_mode: str = os.getenv("LIB_CLI_OUTPUT", "plain")
    seed_demo_data: bool = _env_flag("LIBRARY_SEED_DEMO")

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level.upper()


settings = Settings()
