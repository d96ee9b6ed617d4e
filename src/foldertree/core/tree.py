from __future__ import annotations

"""
File Tree Service.

Owns the single RootNode of a virtual explorer tree and exposes the public
API: node construction, insertion, removal, lookup and open-state toggling.
All work is synchronous and in memory; nothing touches the real disk.
"""

import logging
from typing import Any, Dict, List, NoReturn, Optional

from foldertree.core import operations
from foldertree.core.operations import ItemInfo
from foldertree.core.paths import get_extension, split_path
from foldertree.core.renderer import render_tree_structure
from foldertree.core.validator import validate_config
from foldertree.domain.errors import (
    InvalidInsertTargetError,
    MalformedPathError,
    MissingBootstrapFolderError,
)
from foldertree.domain.tree_models import Container, FileNode, FolderNode, Item, Node, RootNode

logger = logging.getLogger(__name__)


class FileTree:
    """
    In-memory mirror of a file/folder hierarchy.

    Two variants exist. ``FileTree.new()`` yields a bare root whose ``items``
    receive root-targeted inserts directly. ``FileTree.with_bootstrap()``
    seeds the root with one folder (conventionally ``"root"``) and redirects
    root-targeted inserts into it.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config, warnings = validate_config(config)
        for w in warnings:
            logger.warning(w)

        self.root = RootNode()
        self.bootstrap: Optional[str] = None

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------
    @classmethod
    def new(cls, config: Optional[Dict[str, Any]] = None) -> FileTree:
        """Create a tree holding only an empty root."""
        return cls(config)

    @classmethod
    def with_bootstrap(
            cls,
            path: Optional[str] = None,
            args: Optional[List[str]] = None,
            config: Optional[Dict[str, Any]] = None,
    ) -> FileTree:
        """
        Create a tree whose root holds a single bootstrap folder.

        Args:
            path: Path of the bootstrap folder. Defaults to the configured
                ``bootstrap_folder`` name.
            args: UI arguments for the bootstrap folder.
            config: Raw configuration overrides.

        Returns:
            FileTree: The seeded tree.
        """
        tree = cls(config)
        folder = tree.new_folder(path or tree.config["bootstrap_folder"], args)
        operations.attach(tree.root, folder)
        tree.bootstrap = folder.name
        logger.debug(f"Bootstrapped tree with folder '{folder.path}'")
        return tree

    def new_file(self, path: str, args: Optional[List[str]] = None) -> FileNode:
        """
        Build a free-standing file node from its path.

        Raises:
            MalformedPathError: If the path has no name, or no extension while
                ``require_extension`` is enabled.
        """
        parts = split_path(path, self.config["path_separator"])
        try:
            extension = get_extension(parts.name, required=self.config["require_extension"])
        except MalformedPathError as e:
            logger.warning(f"Rejected file path '{path}': {e}")
            raise
        return FileNode(name=parts.name, path=path, extension=extension, args=list(args or []))

    def new_folder(self, path: str, args: Optional[List[str]] = None) -> FolderNode:
        """Build a free-standing, empty folder node from its path."""
        parts = split_path(path, self.config["path_separator"])
        return FolderNode(
            name=parts.name,
            path=path,
            open=self.config["default_open"],
            args=list(args or []),
        )

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------
    def add_item(self, target: Node, item: Item) -> None:
        """
        Attach ``item`` under ``target``, replacing any entry with the same name.

        Every check runs before the tree is touched, so a failed insert
        leaves it unchanged.

        Raises:
            InvalidInsertTargetError: If ``target`` is a file or a foreign
                root, ``item`` is a root or not a node, ``item`` is already
                attached to this tree, or a folder would end up inside itself.
            MissingBootstrapFolderError: If ``target`` is the root of a
                bootstrapped tree whose bootstrap folder is gone.
        """
        destination = self._resolve_destination(target)

        if not isinstance(item, (FileNode, FolderNode)):
            self._reject(f"Cannot insert {type(item).__name__} as an item.", item=type(item).__name__)
        if isinstance(item, FolderNode) and operations.contains(item, destination):
            self._reject(f"Folder '{item.path}' cannot be inserted into its own subtree.", item=item.path)

        attached = {id(n) for n in operations.walk(self.root)}
        for n in operations.walk(item):
            if id(n) in attached:
                self._reject(f"Item '{n.path}' is already attached to this tree.", item=n.path)

        replaced = operations.attach(destination, item)
        if replaced is not None:
            logger.debug(f"Replaced '{replaced.path}' with '{item.path}' under key '{item.name}'")
        else:
            logger.debug(f"Inserted '{item.path}'")

    def remove_item(self, path: str, target: Optional[Container] = None) -> Optional[FolderNode]:
        """
        Remove the direct child folder of ``target`` (default: root) matching ``path``.

        Files are never removed by this operation and grandchildren are not
        searched.
        """
        container = self.root if target is None else target
        removed = operations.remove_folder(container, path)
        if removed is None:
            logger.debug(f"remove_item: no folder '{path}' at this level")
        else:
            logger.debug(f"Removed folder '{path}' ({operations.count_items(removed)} descendants)")
        return removed

    def set_open_state(self, path: str, open_state: bool) -> int:
        """Set the open flag of every folder matching ``path``. Returns the match count."""
        updated = operations.set_open_state(self.root, path, open_state)
        if not updated:
            logger.debug(f"set_open_state: no folder '{path}'")
        return updated

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------
    def get_item_info(
            self,
            path: str,
            target: Optional[Container] = None,
            recursive: Optional[bool] = None,
    ) -> ItemInfo:
        """
        Describe the item matching ``path`` inside ``target`` (default: root).

        Args:
            path: Target path.
            target: Container to search.
            recursive: Search the whole subtree instead of direct children.
                Defaults to the ``recursive_lookup`` setting.

        Returns:
            ItemInfo: ("file", name, path, extension) or
            ("folder", name, path, "true"/"false", "child,names"); empty on a miss.
        """
        container = self.root if target is None else target
        if recursive is None:
            recursive = self.config["recursive_lookup"]
        return operations.get_item_info(container, path, recursive=recursive)

    def get_open_state(self, path: str) -> Optional[bool]:
        """Open flag of the folder at ``path``; None if no folder has that path."""
        return operations.get_open_state(self.root, path)

    def get_data(self, path: str) -> Optional[Item]:
        """The node stored at ``path`` anywhere in the tree, or None."""
        return operations.find_item(self.root, path)

    @property
    def bootstrap_folder(self) -> Optional[FolderNode]:
        """The bootstrap folder, if this tree has one and it is still present."""
        if self.bootstrap is None:
            return None
        folder = self.root.items.get(self.bootstrap)
        return folder if isinstance(folder, FolderNode) else None

    def count_items(self) -> int:
        return operations.count_items(self.root)

    def __len__(self) -> int:
        return self.count_items()

    def render(self, show_collapsed: bool = False) -> List[str]:
        """Explorer view of the tree as ASCII lines."""
        lines: List[str] = []
        render_tree_structure(self.root, lines, show_collapsed=show_collapsed)
        return lines

    # -------------------------------------------------------------------------
    # Internal Helpers
    # -------------------------------------------------------------------------
    def _resolve_destination(self, target: Node) -> Container:
        """Map an insert target to the container that receives the item."""
        if isinstance(target, FolderNode):
            return target

        if isinstance(target, RootNode):
            if target is not self.root:
                self._reject("Cannot insert into the root of another tree.")
            if self.bootstrap is None:
                return self.root
            folder = self.bootstrap_folder
            if folder is None:
                msg = f"Bootstrap folder '{self.bootstrap}' is missing from the root."
                logger.warning(msg)
                raise MissingBootstrapFolderError(msg, {"bootstrap": self.bootstrap})
            return folder

        self._reject(
            f"Cannot insert into {type(target).__name__}.",
            target=getattr(target, "path", None),
        )

    @staticmethod
    def _reject(message: str, **details: Any) -> NoReturn:
        logger.warning(message)
        raise InvalidInsertTargetError(message, details)
