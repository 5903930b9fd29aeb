"""Process setup shared by CLI commands."""

from dishka import AsyncContainer

from indexsync.application.di import create_container
from indexsync.config import Config, configure_logging


def open_container() -> AsyncContainer:
    """Load configuration, configure logging and build the DI container."""
    config = Config()  # type: ignore[call-arg]
    configure_logging(config.logging)
    return create_container(config)
