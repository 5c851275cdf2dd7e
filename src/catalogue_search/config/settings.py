"""Configuration management using Pydantic Settings v2."""

from typing import Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from catalogue_search.config.constants import (
    DEFAULT_DATASET_PATH,
    DEFAULT_SEARCH_MODE,
    SUPPORTED_MODES,
)

# Load .env into os.environ before any nested BaseSettings class is
# instantiated. The nested classes have no env_file of their own and
# only search os.environ.
load_dotenv()


class DatasetSettings(BaseSettings):
    """Reference dataset location."""

    path: str = DEFAULT_DATASET_PATH

    model_config = SettingsConfigDict(env_prefix="DATASET_")


class SearchSettings(BaseSettings):
    """Search configuration."""

    default_mode: str = DEFAULT_SEARCH_MODE

    model_config = SettingsConfigDict(env_prefix="SEARCH_")

    @field_validator("default_mode")
    @classmethod
    def validate_default_mode(cls, v: str) -> str:
        """Normalise the mode to lowercase and reject unknown modes."""
        v = v.strip().lower()
        if v not in SUPPORTED_MODES:
            raise ValueError(
                f"default_mode must be one of: {', '.join(SUPPORTED_MODES)}"
            )
        return v


class LookupSettings(BaseSettings):
    """Outbound lookup sites for identifiers that were not found.

    ``LOOKUP_SITES`` is a JSON object mapping a display name to a URL
    template containing ``{id}``.
    """

    sites: dict[str, str] = {}

    model_config = SettingsConfigDict(env_prefix="LOOKUP_")


class ApiSettings(BaseSettings):
    """HTTP API server configuration."""

    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: list[str] = ["http://localhost:3000"]

    model_config = SettingsConfigDict(env_prefix="API_")


class Settings(BaseSettings):
    """Root settings class combining all sections."""

    # Factories, so every Settings() re-reads the environment
    dataset: DatasetSettings = Field(default_factory=DatasetSettings)
    search: SearchSettings = Field(default_factory=SearchSettings)
    lookup: LookupSettings = Field(default_factory=LookupSettings)
    api: ApiSettings = Field(default_factory=ApiSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore prefixed env vars handled by nested classes
    )


_settings_instance: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the global Settings instance (singleton pattern)."""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance


def reload_settings() -> Settings:
    """Reload settings from environment (mainly for testing)."""
    global _settings_instance
    _settings_instance = Settings()
    return _settings_instance
