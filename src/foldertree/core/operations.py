from __future__ import annotations

"""
Node-Level Tree Operations.

Recursive walks over the node model. Every function takes the node to start
from and dispatches on the closed set of variants (FileNode, FolderNode,
RootNode). The FileTree facade wires these to its RootNode and config.
"""

import logging
from typing import Iterator, Optional, Tuple

from foldertree.domain.constants import CHILD_NAMES_SEPARATOR, KIND_FILE, KIND_FOLDER
from foldertree.domain.errors import InvalidInsertTargetError
from foldertree.domain.tree_models import Container, FileNode, FolderNode, Item, Node, RootNode

logger = logging.getLogger(__name__)

ItemInfo = Tuple[str, ...]

# -----------------------------------------------------------------------------
# INSERTION
# -----------------------------------------------------------------------------

def attach(container: Container, item: Item) -> Optional[Item]:
    """
    Store ``item`` in ``container.items`` under its name.

    Returns:
        Optional[Item]: The entry that was overwritten, if any.

    Raises:
        InvalidInsertTargetError: If ``container`` cannot hold items or
        ``item`` is not a file or folder.
    """
    if not isinstance(container, (FolderNode, RootNode)):
        raise InvalidInsertTargetError(
            f"Cannot insert into {type(container).__name__}.",
            {"target": getattr(container, "path", None)},
        )
    if not isinstance(item, (FileNode, FolderNode)):
        raise InvalidInsertTargetError(
            f"Cannot insert {type(item).__name__} as an item.",
            {"item": type(item).__name__},
        )

    previous = container.items.get(item.name)
    container.items[item.name] = item
    return previous


def contains(node: Node, candidate: Node) -> bool:
    """True if ``candidate`` is ``node`` itself or sits anywhere below it (identity)."""
    return any(n is candidate for n in walk(node))


# -----------------------------------------------------------------------------
# TRAVERSAL
# -----------------------------------------------------------------------------

def walk(node: Node) -> Iterator[Node]:
    """Yield ``node`` and every descendant in depth-first pre-order."""
    yield node
    if isinstance(node, (FolderNode, RootNode)):
        for child in node.items.values():
            yield from walk(child)


def find_item(node: Node, path: str) -> Optional[Item]:
    """First file or folder below ``node`` whose path equals ``path``."""
    for n in walk(node):
        if n is not node and isinstance(n, (FileNode, FolderNode)) and n.path == path:
            return n
    return None


def count_items(node: Node) -> int:
    """Number of files and folders below ``node`` (excluding itself)."""
    return sum(1 for n in walk(node) if n is not node)


# -----------------------------------------------------------------------------
# OPEN STATE
# -----------------------------------------------------------------------------

def set_open_state(node: Node, path: str, open_state: bool) -> int:
    """
    Set the open flag of every folder matching ``path`` below ``node``.

    The walk is exhaustive: matching folders are updated and still recursed
    into, so coincidental duplicates in other branches are updated as well.
    Files end the walk. A miss is not an error.

    Returns:
        int: Number of folders updated.
    """
    updated = 0

    if isinstance(node, FolderNode) and node.path == path:
        node.open = open_state
        updated += 1

    if isinstance(node, (FolderNode, RootNode)):
        for child in node.items.values():
            updated += set_open_state(child, path, open_state)

    return updated


def get_open_state(node: Node, path: str) -> Optional[bool]:
    """Open flag of the first folder matching ``path``, None if there is none."""
    for n in walk(node):
        if isinstance(n, FolderNode) and n.path == path:
            return n.open
    return None


# -----------------------------------------------------------------------------
# REMOVAL
# -----------------------------------------------------------------------------

def remove_folder(container: Container, path: str) -> Optional[FolderNode]:
    """
    Delete the direct child folder of ``container`` whose path equals ``path``.

    Only one level is scanned and files are never matched. The removed
    folder takes its whole subtree with it.

    Returns:
        Optional[FolderNode]: The removed folder, or None on a miss.
    """
    for key, child in list(container.items.items()):
        if isinstance(child, FolderNode) and child.path == path:
            del container.items[key]
            return child
    return None


# -----------------------------------------------------------------------------
# DESCRIPTORS
# -----------------------------------------------------------------------------

def describe(item: Item) -> ItemInfo:
    """Build the display descriptor of a single file or folder."""
    if isinstance(item, FileNode):
        return (KIND_FILE, item.name, item.path, item.extension)

    child_names = CHILD_NAMES_SEPARATOR.join(sorted(item.items))
    return (KIND_FOLDER, item.name, item.path, str(item.open).lower(), child_names)


def get_item_info(container: Container, path: str, recursive: bool = False) -> ItemInfo:
    """
    Describe the item of ``container`` whose path equals ``path``.

    Args:
        container: Folder or root to search.
        path: Target path.
        recursive: If False only direct children are checked; if True the
            whole subtree is searched depth-first.

    Returns:
        ItemInfo: The descriptor, or an empty tuple on a miss.
    """
    if recursive:
        found = find_item(container, path)
        return describe(found) if found is not None else ()

    for child in container.items.values():
        if child.path == path:
            return describe(child)
    return ()
