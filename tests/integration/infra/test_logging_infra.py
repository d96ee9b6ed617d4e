from __future__ import annotations

"""
Integration tests for Logging Infrastructure.

Verifies the asynchronous QueueListener architecture, idempotency
of configuration, and log file persistence.
"""

import logging
import time
from logging.handlers import QueueListener
from pathlib import Path

import pytest

from foldertree.core.tree import FileTree
from foldertree.infra.logging.core import _stop_at_exit
from foldertree.infra.logging import (
    _CONFIGURED_FLAG_ATTR,
    _HANDLER_TAG_ATTR,
    _QUEUE_LISTENER_ATTR,
    LIBRARY_NAMESPACE,
    LoggingConfig,
    configure_logging,
    get_logger,
    shutdown_logging,
)


@pytest.fixture(autouse=True)
def reset_logging() -> None:
    """Clean up root logger handlers before and after each test."""
    root = logging.getLogger()
    original_level = root.level

    def _reset() -> None:
        listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
        if listener and isinstance(listener, QueueListener):
            listener.stop()
            setattr(root, _QUEUE_LISTENER_ATTR, None)
        for h in list(root.handlers):
            if getattr(h, _HANDLER_TAG_ATTR, False):
                root.removeHandler(h)
                h.close()
        if hasattr(root, _CONFIGURED_FLAG_ATTR):
            delattr(root, _CONFIGURED_FLAG_ATTR)

    _reset()
    yield
    _reset()
    root.setLevel(original_level)
    logging.getLogger(LIBRARY_NAMESPACE).setLevel(logging.NOTSET)


def _our_handlers() -> list:
    return [h for h in logging.getLogger().handlers if getattr(h, _HANDLER_TAG_ATTR, False)]


def test_logging_idempotency() -> None:
    cfg = LoggingConfig(level="INFO", console=True)

    configure_logging(cfg)
    initial = len(_our_handlers())
    configure_logging(cfg)

    assert initial == 1
    assert len(_our_handlers()) == initial, "Handlers were duplicated."


def test_force_reconfigures_level() -> None:
    configure_logging(LoggingConfig(level="INFO"))
    configure_logging(LoggingConfig(level="debug"), force=True)

    assert logging.getLogger().level == logging.DEBUG
    assert len(_our_handlers()) == 1


def test_unknown_level_defaults_to_info() -> None:
    configure_logging(LoggingConfig(level="chatty"))

    assert logging.getLogger().level == logging.INFO


def test_tree_warnings_reach_log_file(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "foldertree.log"
    configure_logging(LoggingConfig(level="DEBUG", console=False, log_file=str(log_file)))

    tree = FileTree.new()
    with pytest.raises(Exception):
        tree.new_file("root/Makefile")

    shutdown_logging()
    time.sleep(0.1)

    content = log_file.read_text(encoding="utf-8")
    assert "Rejected file path 'root/Makefile'" in content
    assert "foldertree.core.tree" in content


def test_no_handlers_leaves_root_untouched() -> None:
    configure_logging(LoggingConfig(console=False, log_file=None))

    assert _our_handlers() == []
    assert getattr(logging.getLogger(), _QUEUE_LISTENER_ATTR, None) is None


def test_get_logger_is_named() -> None:
    assert get_logger("foldertree.test").name == "foldertree.test"


def test_namespace_level_traces_library_only(tmp_path: Path) -> None:
    log_file = tmp_path / "trace.log"
    configure_logging(LoggingConfig(
        level="WARNING", namespace_level="DEBUG", console=False, log_file=str(log_file)
    ))

    tree = FileTree.new()
    tree.add_item(tree.root, tree.new_folder("docs"))
    logging.getLogger("host.app").info("host chatter")

    shutdown_logging()

    content = log_file.read_text(encoding="utf-8")
    assert "Inserted 'docs'" in content
    assert "host chatter" not in content
    assert logging.getLogger(LIBRARY_NAMESPACE).level == logging.DEBUG


def test_config_from_dict_ignores_unknown_keys() -> None:
    cfg = LoggingConfig.from_dict({"level": "DEBUG", "log_file": None, "theme": "dark"})

    assert cfg.level == "DEBUG"
    assert cfg.namespace_level is None
    assert LoggingConfig.from_dict(None) == LoggingConfig()


def test_exit_hook_skips_listener_already_stopped() -> None:
    configure_logging(LoggingConfig(console=True))
    listener = getattr(logging.getLogger(), _QUEUE_LISTENER_ATTR)

    shutdown_logging()
    _stop_at_exit(listener)

    assert getattr(logging.getLogger(), _QUEUE_LISTENER_ATTR) is None


def test_exit_hook_stops_active_listener() -> None:
    configure_logging(LoggingConfig(console=True))
    listener = getattr(logging.getLogger(), _QUEUE_LISTENER_ATTR)

    _stop_at_exit(listener)

    assert getattr(logging.getLogger(), _QUEUE_LISTENER_ATTR) is None
