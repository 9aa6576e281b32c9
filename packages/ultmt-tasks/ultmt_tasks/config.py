from functools import lru_cache

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigurationError(ValueError):
    pass


class TaskSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # Google Cloud
    gcp_project_id: str = Field(..., min_length=1)
    message_queue_name: str = Field(..., min_length=1)
    message_queue_region: str = Field(..., min_length=1)
    gcp_service_account: str = Field(..., min_length=1)

    # Callback target
    ultmt_api_url: str = Field(..., min_length=1)
    api_key: str = Field(..., min_length=1)


def load_task_settings(**overrides) -> TaskSettings:
    """Read task settings from the environment, failing on any missing value."""
    try:
        return TaskSettings(**overrides)
    except ValidationError as exc:
        names = sorted({str(error["loc"][0]).upper() for error in exc.errors() if error.get("loc")})
        raise ConfigurationError(f"Missing or empty task configuration: {', '.join(names)}") from exc


@lru_cache(maxsize=1)
def get_task_settings() -> TaskSettings:
    return load_task_settings()
