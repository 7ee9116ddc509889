from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings."""

    model_config = SettingsConfigDict(
        env_prefix="humane_errors_",
        validate_assignment=True,
    )

    capture_location: bool = Field(
        default=True,
        description="Record the caller's source location when annotating errors",
    )
    log_reports: bool = Field(
        default=True,
        description="Log rendered reports for errors surfaced by tools and the CLI",
    )
    exit_code: int = Field(
        default=1,
        ge=1,
        le=255,
        description="Exit status of the CLI when the target fails",
    )


SETTINGS = Settings()
