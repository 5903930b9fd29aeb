import logging
import os
import sys
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, model_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource
from typing_extensions import Self

from indexsync.domain.index.model.index import IndexDefinition

DEFAULT_DATA_DIR = "~/.indexsync"


# =============================================================================
# Indexing Configuration
# =============================================================================


class IndexingConfig(BaseModel):
    """Indexing behaviour (nested in Config, uses env_nested_delimiter).

    Read by DispatchPolicy on every call, so changes take effect immediately.
    """

    enable_indexer: bool = True
    use_queued_indexing: bool = False  # Per-record index/remove via job queue
    use_sync_jobs: bool = False  # Bulk jobs (clear index) run in-process
    excluded_types: list[str] = []  # Record types never touched by the lifecycle hook


class SearchConfig(BaseModel):
    """Search backend configuration."""

    backend: Literal["http", "memory"] = "http"
    url: str = "http://localhost:9200"
    api_key: str = ""
    timeout: float = 10.0
    indexes: list[IndexDefinition] = []


# =============================================================================
# Application Configuration
# =============================================================================


class YamlConfigSettingsSource(PydanticBaseSettingsSource):
    """Load settings from YAML file specified by INDEXSYNC_CONFIG_FILE env var."""

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Get the value for a field from the YAML config."""
        yaml_data = self._load_yaml_config()
        field_value = yaml_data.get(field_name)
        return field_value, field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return all settings from YAML file."""
        return self._load_yaml_config()

    def _load_yaml_config(self) -> dict[str, Any]:
        """Load config from YAML file if specified."""
        config_file = os.environ.get("INDEXSYNC_CONFIG_FILE")
        if config_file:
            path = Path(config_file)
            if path.exists():
                return yaml.safe_load(path.read_text()) or {}
        return {}


class DatabaseConfig(BaseModel):
    """Database configuration.

    An empty url means "derive from the data directory"; Config fills it in.
    """

    url: str = ""
    echo: bool = False
    auto_create: bool = True  # Create tables on startup


class LoggingConfig(BaseModel):
    """Logging configuration (nested in Config, uses env_nested_delimiter)."""

    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"

    @property
    def file(self) -> str | None:
        """Get log file path from INDEXSYNC_LOG_FILE env var."""
        return os.environ.get("INDEXSYNC_LOG_FILE")


class JobsConfig(BaseModel):
    """Job worker configuration."""

    poll_interval: float = 1.0  # Seconds between queue polls when idle
    batch_size: int = 20  # Maximum jobs claimed per poll
    max_retries: int = 3


class Config(BaseSettings):
    indexing: IndexingConfig = IndexingConfig()
    search: SearchConfig = SearchConfig()
    database: DatabaseConfig = DatabaseConfig()
    logging: LoggingConfig = LoggingConfig()
    jobs: JobsConfig = JobsConfig()
    data_dir: str = DEFAULT_DATA_DIR

    model_config = {
        "env_prefix": "INDEXSYNC_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_nested_delimiter": "__",  # Allows INDEXSYNC_INDEXING__USE_SYNC_JOBS
    }

    @model_validator(mode="after")
    def derive_database_url(self) -> Self:
        """Point an unset database url at a SQLite file in the data directory."""
        if not self.database.url:
            db_file = Path(self.data_dir).expanduser() / "indexsync.db"
            self.database = DatabaseConfig(
                url=f"sqlite+aiosqlite:///{db_file}",
                echo=self.database.echo,
                auto_create=self.database.auto_create,
            )
        return self

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources to include YAML config.

        Priority (highest to lowest):
        1. init_settings - values passed to Config()
        2. env_settings - environment variables
        3. dotenv_settings - .env file
        4. yaml_settings - INDEXSYNC_CONFIG_FILE yaml
        5. file_secret_settings - secrets from files
        """
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )


def configure_logging(config: LoggingConfig) -> None:
    """Configure Python logging based on config.

    Should be called once at process startup, before the container is built.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(config.level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter = logging.Formatter(config.format, datefmt=config.date_format)

    if config.file:
        log_path = Path(config.file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
        file_handler.setLevel(config.level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
    else:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(config.level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)

    logging.debug("Logging configured: level=%s, file=%s", config.level, config.file)
