from __future__ import annotations

"""
Tree Renderer.

Converts the node model into the ASCII lines an explorer sidebar would
show. Collapsed folders are listed with a marker but their children are
hidden, mirroring what the user sees.
"""

from typing import List

from foldertree.domain.constants import (
    BLANK_PREFIX,
    BRANCH_CONNECTOR,
    COLLAPSED_MARKER,
    LAST_CONNECTOR,
    PIPE_PREFIX,
)
from foldertree.domain.tree_models import Container, FolderNode

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree_structure(
        container: Container,
        lines: List[str],
        prefix: str = "",
        show_collapsed: bool = False,
) -> None:
    """
    Recursively transform a container into a list of strings.

    Uses standard ASCII connectors (├──, └──) and sorts entries by name.

    Args:
        container: Folder or root to process.
        lines: Accumulator list for output strings.
        prefix: Indentation prefix for the current recursion level.
        show_collapsed: If True, children of closed folders are listed too.
    """
    entries = sorted(container.items.keys())
    total = len(entries)

    for i, entry in enumerate(entries):
        is_last = (i == total - 1)
        connector = LAST_CONNECTOR if is_last else BRANCH_CONNECTOR

        node = container.items[entry]

        if isinstance(node, FolderNode):
            marker = "" if node.open else COLLAPSED_MARKER
            lines.append(f"{prefix}{connector}{entry}{marker}")
            if node.open or show_collapsed:
                new_prefix = prefix + (BLANK_PREFIX if is_last else PIPE_PREFIX)
                render_tree_structure(node, lines, prefix=new_prefix, show_collapsed=show_collapsed)
            continue

        lines.append(f"{prefix}{connector}{entry}")
