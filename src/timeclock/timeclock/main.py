from __future__ import annotations

import importlib
import logging
from types import ModuleType

from dotenv import load_dotenv

from config import get_settings_module

from .container import Container, build_container
from .logging_utils import setup_logging

logger = logging.getLogger(__name__)


def load_settings() -> ModuleType:
    load_dotenv(override=False)
    return importlib.import_module(get_settings_module())


def bootstrap() -> Container:
    """Load settings, configure logging and wire the services."""
    settings = load_settings()
    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"), json_output=bool(getattr(settings, "LOG_JSON", False)))

    db_config = settings.DB_CONFIG
    logger.info(
        "Settings loaded",
        extra={
            "settings_module": settings.__name__,
            "db": f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}",
            "timezone": getattr(settings, "TIMEZONE", None),
        },
    )
    return build_container(settings=settings)
