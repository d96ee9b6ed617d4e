from __future__ import annotations

"""
Logical Path Helpers.

Pure string parsing for the slash-addressed paths used as node identities.
Nothing here touches the real filesystem.
"""

import logging
from dataclasses import dataclass

from foldertree.domain.constants import EXTENSION_SEPARATOR, PATH_SEPARATOR
from foldertree.domain.errors import MalformedPathError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PathParts:
    """
    Components of a logical path.

    Attributes:
        name: Final segment.
        parent: Everything before the final separator ("" at top level).
        extension: Suffix after the last dot of ``name`` ("" if none).
    """
    name: str
    parent: str
    extension: str


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def split_path(path: str, separator: str = PATH_SEPARATOR) -> PathParts:
    """
    Break a logical path into name, parent and extension.

    Args:
        path: Raw path string, e.g. "root/docs/readme.md".
        separator: Segment separator.

    Returns:
        PathParts: Parsed components. The extension is empty when the
        name carries no dot; callers decide whether that is an error.

    Raises:
        MalformedPathError: If the path is not a string or has no final segment.
    """
    if not isinstance(path, str):
        raise MalformedPathError(
            f"Path must be a string, received {type(path).__name__}.",
            {"path": path},
        )

    parent, _, name = path.rpartition(separator)
    if not name:
        raise MalformedPathError(f"Path '{path}' has no name segment.", {"path": path})

    return PathParts(name=name, parent=parent, extension=get_extension(name, required=False))


def get_extension(name: str, required: bool = True) -> str:
    """
    Return the substring after the last dot of ``name``.

    Raises:
        MalformedPathError: If ``required`` and the name has no extension.
    """
    _, dot, ext = name.rpartition(EXTENSION_SEPARATOR)
    if dot and ext:
        return ext

    if required:
        raise MalformedPathError(f"File name '{name}' has no extension.", {"name": name})
    return ""


def join_path(*segments: str, separator: str = PATH_SEPARATOR) -> str:
    """Join segments with a single separator, skipping empty ones."""
    parts = [s.strip(separator) for s in segments if s and s.strip(separator)]
    return separator.join(parts)
