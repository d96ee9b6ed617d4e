"""In-memory, path-addressed file/folder tree for explorer views."""

from __future__ import annotations

from foldertree.core.operations import ItemInfo
from foldertree.core.paths import PathParts, get_extension, join_path, split_path
from foldertree.core.tree import FileTree
from foldertree.core.validator import validate_config
from foldertree.domain.config import get_default_config, load_config
from foldertree.domain.errors import (
    InvalidInsertTargetError,
    MalformedPathError,
    MissingBootstrapFolderError,
    TreeError,
)
from foldertree.domain.tree_models import FileNode, FolderNode, Item, Node, RootNode

__version__ = "1.0.0"

__all__ = [
    "FileNode",
    "FileTree",
    "FolderNode",
    "InvalidInsertTargetError",
    "Item",
    "ItemInfo",
    "MalformedPathError",
    "MissingBootstrapFolderError",
    "Node",
    "PathParts",
    "RootNode",
    "TreeError",
    "get_default_config",
    "get_extension",
    "join_path",
    "load_config",
    "split_path",
    "validate_config",
]
