from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        # make it absolute so reload/CWD doesn't break it
        env_file=Path(__file__).resolve().parents[1] / ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="ComplexObsStore", validation_alias="APP_NAME")
    app_env: Literal["development", "staging", "production"] = Field(
        default="development",
        validation_alias="APP_ENV",
    )
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_dir: Path | None = Field(
        default=None,
        validation_alias="LOG_DIR",
        description="Directory for rotating log files. Console only when unset.",
    )

    # Complex obs storage
    complex_obs_dir: str = Field(
        default=str(Path(__file__).resolve().parents[1] / "complex_obs"),
        validation_alias="COMPLEX_OBS_DIR",
        description="Local directory or fsspec URL. Must already exist; it is never created.",
    )
    complex_obs_handler: Literal["binary_data"] = Field(
        default="binary_data",
        validation_alias="COMPLEX_OBS_HANDLER",
    )
    complex_obs_storage_options: dict = {}


# Global settings instance
settings = Settings()
