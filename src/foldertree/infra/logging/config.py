from __future__ import annotations

"""
Logging Configuration Model.

Settings an embedding application passes to configure_logging(). The
library logs every tree walk at DEBUG, so the ``foldertree`` namespace can
be tuned independently of the application's own level.
"""

from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

LIBRARY_NAMESPACE = "foldertree"


@dataclass(frozen=True)
class LoggingConfig:
    """
    Immutable logging settings.

    Attributes:
        level: Root level applied to the application and its handlers.
        namespace_level: Optional level for the ``foldertree`` loggers only
            (e.g. "DEBUG" to trace inserts while the app stays at INFO).
        console: Write records to stderr.
        log_file: Optional rotating log file.
        max_bytes: Rollover threshold of the log file.
        backup_count: Rotated files to keep.
    """
    level: str = "INFO"
    namespace_level: Optional[str] = None
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 1024 * 1024
    backup_count: int = 3

    console_fmt: str = "%(levelname)s | %(name)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> LoggingConfig:
        """Build from a plain dict (e.g. a "logging" block of a JSON file), ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in (data or {}).items() if k in known})
