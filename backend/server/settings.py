"""Version server configuration via environment variables."""

from pydantic import field_validator
from pydantic_settings import BaseSettings
from pydantic_settings.sources.base import PydanticBaseSettingsSource

from shared.validators import StringListEnvSettingsSource, parse_string_list


class ServerSettings(BaseSettings):
    model_config = {"env_prefix": "SERVER_"}

    log_dir: str = "backend/logs/server"
    version_path: str = "/ver.json"
    cors_origins: list[str] = []

    @field_validator("version_path")
    @classmethod
    def validate_version_path(cls, v: str) -> str:
        if not v.startswith("/") or v == "/":
            raise ValueError("version_path must be an absolute, non-root URL path")
        return v

    @field_validator("cors_origins", mode="before")
    @classmethod
    def validate_cors_origins(cls, v: str | list[str]) -> list[str]:
        return parse_string_list(v, allow_empty=True)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        env_source = StringListEnvSettingsSource(settings_cls, string_list_fields=frozenset({"cors_origins"}))
        return (init_settings, env_source, dotenv_settings, file_secret_settings)
