from __future__ import annotations

import logging

from depgraph.logging import (
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    reset_logging,
    set_global_log_level,
    setup_root_logger,
)


def test_set_global_log_level_and_get_logger_smoke(caplog) -> None:
    set_global_log_level(logging.WARNING)
    lg = get_logger("depgraph.smoke")
    assert lg.isEnabledFor(logging.WARNING)
    assert not lg.isEnabledFor(logging.INFO)

    caplog.set_level(logging.DEBUG, logger="depgraph.smoke")
    lg.debug("debug message")
    assert any(
        r.levelno == logging.DEBUG and r.name == "depgraph.smoke" for r in caplog.records
    )


def test_debug_toggle() -> None:
    enable_debug_logging()
    assert logging.getLogger("depgraph").level == logging.DEBUG
    disable_debug_logging()
    assert logging.getLogger("depgraph").level == logging.INFO


def test_reset_and_custom_handler() -> None:
    reset_logging()
    root = logging.getLogger("depgraph")
    assert root.handlers == []

    handler = logging.NullHandler()
    setup_root_logger(level=logging.ERROR, handler=handler)
    assert root.handlers == [handler]
    assert root.level == logging.ERROR

    # a second setup call is ignored
    setup_root_logger(level=logging.DEBUG)
    assert root.handlers == [handler]

    reset_logging()
    setup_root_logger(handler=logging.NullHandler())
    assert len(root.handlers) == 1
    assert root.propagate
