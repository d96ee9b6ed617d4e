from __future__ import annotations

"""
Integration tests for a full explorer session.

Drives the public package API the way a sidebar would: bootstrap, insert,
describe, collapse and remove.
"""

import pytest

import foldertree
from foldertree import FileTree


def test_bootstrap_insert_describe_toggle_scenario() -> None:
    tree = FileTree.with_bootstrap()
    root_folder = tree.bootstrap_folder

    docs = tree.new_folder("root/docs")
    tree.add_item(tree.root, docs)
    tree.add_item(docs, tree.new_file("root/docs/readme.md"))

    assert tree.get_item_info("root/docs/readme.md", target=docs) == (
        "file", "readme.md", "root/docs/readme.md", "md"
    )

    tree.set_open_state("root/docs", False)
    info = tree.get_item_info("root/docs", target=root_folder)

    assert info[0] == "folder"
    assert info[3] == "false"
    assert "readme.md" in info[4].split(",")


def test_session_with_config_and_removal(tmp_path) -> None:
    cfg_path = tmp_path / "foldertree.json"
    cfg_path.write_text('{"bootstrap_folder": "workspace", "recursive_lookup": "true"}', encoding="utf-8")

    tree = FileTree.with_bootstrap(config=foldertree.load_config(str(cfg_path)))
    src = tree.new_folder(foldertree.join_path("workspace", "src"))
    tree.add_item(tree.root, src)
    tree.add_item(src, tree.new_file("workspace/src/app.py"))

    assert tree.bootstrap == "workspace"
    assert tree.get_item_info("workspace/src/app.py")[0] == "file"

    tree.remove_item("workspace/src", target=tree.bootstrap_folder)

    assert tree.get_item_info("workspace/src/app.py") == ()
    assert tree.render() == ["└── workspace"]


def test_failed_insert_leaves_tree_unchanged() -> None:
    tree = FileTree.with_bootstrap()
    readme = tree.new_file("root/readme.md")
    tree.add_item(tree.root, readme)
    before = tree.render()

    with pytest.raises(foldertree.InvalidInsertTargetError):
        tree.add_item(readme, tree.new_file("root/readme.md/x.txt"))  # type: ignore[arg-type]

    assert tree.render() == before
