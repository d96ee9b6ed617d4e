from __future__ import annotations

"""
Tree Error Hierarchy.

Every failure raised by the tree carries a human readable message plus a
``details`` dictionary with the offending values, so callers can re-prompt
or report without parsing strings. Each kind also derives from the closest
builtin exception so generic handlers keep working.
"""

from typing import Any, Dict, Optional


class TreeError(Exception):
    """Base exception class for foldertree errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class MalformedPathError(TreeError, ValueError):
    """Raised when a path has no usable name, or a file name has no extension."""
    pass


class InvalidInsertTargetError(TreeError, TypeError):
    """Raised when inserting into a file, or inserting a root or foreign object."""
    pass


class MissingBootstrapFolderError(TreeError, LookupError):
    """Raised when a root-targeted insert cannot find the bootstrap folder."""
    pass
