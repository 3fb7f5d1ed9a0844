from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    model_config = SettingsConfigDict(
        env_file="macaddress.env",
        env_file_encoding="utf-8",
        env_prefix="MACADDRESS_",
        case_sensitive=False,
        extra="forbid",
    )

    strip_whitespace: bool = False

    log_level: str = "INFO"
    log_file: Path | None = None

    @field_validator("log_file")
    @classmethod
    def make_path_absolute(cls, value: Path | None) -> Path | None:
        # relative to the working directory of the application
        if value is None:
            return None
        return Path(value).resolve()


config = Config()
