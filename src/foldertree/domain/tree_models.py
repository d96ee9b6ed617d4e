from __future__ import annotations

"""
Virtual File Tree Data Models.

Provides the closed set of node variants (File, Folder, Root) that make up
the in-memory explorer tree. Parents own their children through plain
``items`` dictionaries keyed by the child's derived name.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Union

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass
class FileNode:
    """
    Represents a leaf entry (file) in the virtual tree.

    Attributes:
        name: Final segment of the logical path.
        path: Full logical path, used as the lookup key.
        extension: Suffix after the last dot of the name.
        args: Free-form UI arguments attached to the entry.
    """
    name: str
    path: str
    extension: str
    args: List[str] = field(default_factory=list)


@dataclass
class FolderNode:
    """
    Represents a container entry (folder) in the virtual tree.

    Attributes:
        name: Final segment of the logical path.
        path: Full logical path, used as the lookup key.
        open: UI expansion flag.
        args: Free-form UI arguments attached to the entry.
        items: Children keyed by their derived name.
    """
    name: str
    path: str
    open: bool = True
    args: List[str] = field(default_factory=list)
    items: Dict[str, "Item"] = field(default_factory=dict)


@dataclass
class RootNode:
    """Top-level container. Exactly one per tree, never attached as an item."""
    items: Dict[str, "Item"] = field(default_factory=dict)


# Anything that may live inside an ``items`` map
Item = Union[FileNode, FolderNode]

# Anything that may own an ``items`` map
Container = Union[FolderNode, RootNode]

Node = Union[FileNode, FolderNode, RootNode]
