from __future__ import annotations

"""
Domain Constants.

Centralizes the static values shared by the tree model, the path
collaborator and the configuration layer.
"""

CURRENT_CONFIG_VERSION = "1.0.0"

# -----------------------------------------------------------------------------
# PATH ADDRESSING
# -----------------------------------------------------------------------------

PATH_SEPARATOR = "/"
EXTENSION_SEPARATOR = "."

# Key of the top-level folder seeded by FileTree.with_bootstrap()
BOOTSTRAP_FOLDER_KEY = "root"

# -----------------------------------------------------------------------------
# DESCRIPTORS
# -----------------------------------------------------------------------------

KIND_FILE = "file"
KIND_FOLDER = "folder"

CHILD_NAMES_SEPARATOR = ","

# -----------------------------------------------------------------------------
# RENDERING
# -----------------------------------------------------------------------------

BRANCH_CONNECTOR = "├── "
LAST_CONNECTOR = "└── "
PIPE_PREFIX = "│   "
BLANK_PREFIX = "    "
COLLAPSED_MARKER = " [+]"
