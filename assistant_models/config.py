"""Logging settings read from ``ASSISTANT_MODELS_*`` environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings consumed by ``configure_from_settings``.

    Only the process environment is read, e.g.
    ``ASSISTANT_MODELS_LOG_LEVEL=DEBUG`` or ``ASSISTANT_MODELS_JSON_LOGS=false``.
    """

    model_config = SettingsConfigDict(
        env_prefix="ASSISTANT_MODELS_",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = "WARNING"
    json_logs: bool = True
