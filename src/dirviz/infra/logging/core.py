from __future__ import annotations

"""
Logging Bootstrap.

Wires the root logger for one CLI run. Parsers and the state engine log
through module loggers; their records go into a queue and the sinks
(stderr, optional rotating file) are driven by a QueueListener thread.
Calling `configure_logging` again is a no-op unless `force` is given.
"""

import atexit
import logging
import queue
import sys
from logging.handlers import QueueHandler, QueueListener
from typing import List, Optional

from dirviz.infra.logging.config import LoggingConfig
from dirviz.infra.logging.handlers import (
    _create_console_handler,
    _create_rotating_file_handler,
    _is_our_handler,
    _tag_handler,
)

_CONFIGURED_FLAG_ATTR: str = "_dirviz_configured"
_QUEUE_LISTENER_ATTR: str = "_dirviz_queue_listener"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Attach dirviz's queue handler to the root logger.

    Args:
        cfg: Level, sinks and formats for this run.
        force: Tear down and rebuild an existing configuration.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()
    if getattr(root, _CONFIGURED_FLAG_ATTR, False) and not force:
        return root

    try:
        level_int = cfg.level_number
        root.setLevel(level_int)
        _detach(root)

        sinks = _build_sinks(cfg, level_int)
        if sinks:
            _start_queue(root, sinks)
        return root

    except Exception:
        return _fall_back_to_stderr(root)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def shutdown_logging() -> None:
    """Drain the queue, close the sinks and forget the configuration."""
    root = logging.getLogger()
    _detach(root)
    if hasattr(root, _CONFIGURED_FLAG_ATTR):
        delattr(root, _CONFIGURED_FLAG_ATTR)

# -----------------------------------------------------------------------------
# WIRING
# -----------------------------------------------------------------------------

def _build_sinks(cfg: LoggingConfig, level_int: int) -> List[logging.Handler]:
    sinks: List[logging.Handler] = []
    if cfg.console:
        sinks.append(_create_console_handler(level_int, cfg.console_fmt))
    if cfg.log_file:
        fh = _create_rotating_file_handler(
            cfg.log_file,
            level_int,
            logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt),
            cfg.max_bytes,
            cfg.backup_count,
        )
        if fh:
            sinks.append(fh)
    return sinks


def _start_queue(root: logging.Logger, sinks: List[logging.Handler]) -> None:
    log_queue: queue.Queue[logging.LogRecord] = queue.Queue(-1)
    listener = QueueListener(log_queue, *sinks, respect_handler_level=True)
    listener.start()

    root.addHandler(_tag_handler(QueueHandler(log_queue)))
    setattr(root, _QUEUE_LISTENER_ATTR, listener)
    setattr(root, _CONFIGURED_FLAG_ATTR, True)

    # Records still queued at exit are flushed by stopping the listener
    atexit.register(_safe_stop_listener, listener)


def _fall_back_to_stderr(root: logging.Logger) -> logging.Logger:
    """Replace a half-built setup with a plain stderr handler."""
    root.setLevel(logging.INFO)
    _detach(root)
    sh = logging.StreamHandler(sys.stderr)
    sh.setFormatter(logging.Formatter("dirviz (fallback): %(levelname)s: %(message)s"))
    root.addHandler(_tag_handler(sh))
    root.warning("Logging setup failed; records go to stderr only.")
    return root


def _detach(root: logging.Logger) -> None:
    """Stop the listener and close every tagged handler on the root."""
    listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
    if listener:
        _safe_stop_listener(listener)
        setattr(root, _QUEUE_LISTENER_ATTR, None)

    for h in list(root.handlers):
        if _is_our_handler(h):
            root.removeHandler(h)
            h.close()


def _safe_stop_listener(listener: Optional[QueueListener]) -> None:
    """
    Stop a QueueListener unless it was already stopped.

    QueueListener.stop() fails once its thread has been joined and cleared,
    which happens when atexit runs after an explicit shutdown.
    """
    if not listener:
        return
    if getattr(listener, "_thread", None) is not None:
        listener.stop()
