"""Logging bootstrap utilities with optional structured output."""

from __future__ import annotations

from collections.abc import Callable, Mapping
import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from .store import ConfigStore

DEFAULT_LOG_FILE = "~/.local/state/adaptorkit/adaptorkit.log"
PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _best_effort_private_permissions(path: Path) -> None:
    if os.name != "posix":
        return
    try:
        path.chmod(0o600)
    except OSError:
        logging.getLogger(__name__).warning(
            "Unable to enforce 0600 permissions for %s", path
        )


def _build_formatter(structured: bool) -> logging.Formatter:
    if not structured:
        return logging.Formatter(PLAIN_FORMAT)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    return structlog.stdlib.ProcessorFormatter(
        processor=structlog.processors.JSONRenderer(
            ensure_ascii=False, separators=(",", ":")
        ),
        foreign_pre_chain=[
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
        ],
    )


def configure_logging(logging_config: Mapping[str, Any]) -> None:
    """Configure root logging from a logging settings mapping.

    Missing keys fall back to defaults, so an empty mapping is valid.
    """
    level_name = str(logging_config.get("level", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)
    structured = bool(logging_config.get("structured", True))
    log_to_file = bool(logging_config.get("log_to_file", False))
    log_file_path = str(logging_config.get("log_file_path", DEFAULT_LOG_FILE))

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()

    formatter = _build_formatter(structured)

    def app_only_filter(record: logging.LogRecord) -> bool:
        return record.name.startswith("adaptorkit")

    stderr_handler = logging.StreamHandler()
    stderr_handler.setLevel(max(level, logging.WARNING))
    stderr_handler.setFormatter(formatter)
    stderr_handler.addFilter(app_only_filter)
    root.addHandler(stderr_handler)

    if log_to_file:
        target = Path(log_file_path).expanduser()
        target.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(target, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
        _best_effort_private_permissions(target)


def bind_logging(store: ConfigStore) -> Callable[[dict[str, Any]], None]:
    """Configure logging from ``store.logging`` and follow later changes.

    Returns the subscriber so callers can ``store.unsubscribe`` it.
    """
    configure_logging(store.get("logging") or {})

    def _on_config_update(delta: dict[str, Any]) -> None:
        if "logging" in delta:
            configure_logging(delta["logging"] or {})

    store.subscribe(_on_config_update)
    return _on_config_update
