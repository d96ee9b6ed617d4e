from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared tree fixtures used across unit and integration tests.
"""

import os
import sys
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from foldertree.core.tree import FileTree  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def mock_config_dict() -> Dict[str, Any]:
    """Return a valid, complete configuration dictionary for testing."""
    return {
        "path_separator": "/",
        "bootstrap_folder": "root",
        "default_open": True,
        "require_extension": True,
        "recursive_lookup": False,
    }


@pytest.fixture
def simple_tree() -> FileTree:
    """Empty tree without a bootstrap folder."""
    return FileTree.new()


@pytest.fixture
def project_tree() -> FileTree:
    """
    Bootstrapped tree with a small project layout.

    Structure:
    root
      docs
        readme.md
        guides
          setup.txt
      src
        main.py
      LICENSE.txt
    """
    tree = FileTree.with_bootstrap()
    docs = tree.new_folder("root/docs")
    guides = tree.new_folder("root/docs/guides")
    src = tree.new_folder("root/src")

    tree.add_item(tree.root, docs)
    tree.add_item(tree.root, src)
    tree.add_item(tree.root, tree.new_file("root/LICENSE.txt"))
    tree.add_item(docs, tree.new_file("root/docs/readme.md"))
    tree.add_item(docs, guides)
    tree.add_item(guides, tree.new_file("root/docs/guides/setup.txt"))
    tree.add_item(src, tree.new_file("root/src/main.py"))
    return tree
