from __future__ import annotations

from .config import LIBRARY_NAMESPACE, LoggingConfig
from .core import (
    _CONFIGURED_FLAG_ATTR,
    _QUEUE_LISTENER_ATTR,
    configure_logging,
    get_logger,
    shutdown_logging,
)
from .handlers import _HANDLER_TAG_ATTR

__all__ = [
    "LIBRARY_NAMESPACE",
    "LoggingConfig",
    "configure_logging",
    "get_logger",
    "shutdown_logging",
]
