"""Logging pipeline for focus sessions.

Session records carry a `focus` mapping (passed through `extra=`) with the
row indices and rates behind each message. Both formatters surface it: the
JSON formatter as a `focus` object, the text formatter as trailing
`key=value` pairs.
"""

from __future__ import annotations

import json
import logging
import queue
from collections.abc import Mapping
from datetime import UTC, datetime
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

from cellfocus.api.logging import FocusLoggingConfig, LogFormat
from cellfocus.runtime.config import FocusConfig, get_focus_config

_QUEUE_LISTENER: QueueListener | None = None
_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def focus_fields(**fields: object) -> dict[str, dict[str, object]]:
    """Return an `extra=` mapping attaching focus fields to a record."""
    return {"focus": dict(fields)}


def _record_focus(record: logging.LogRecord) -> Mapping[str, object] | None:
    value = getattr(record, "focus", None)
    return value if isinstance(value, Mapping) else None


class FocusTextFormatter(logging.Formatter):
    """Plain text lines with focus fields appended."""

    def __init__(self) -> None:
        super().__init__(_TEXT_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        focus = _record_focus(record)
        if not focus:
            return line
        pairs = " ".join(f"{key}={value}" for key, value in focus.items())
        return f"{line} [{pairs}]"


class JsonFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "ts": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        focus = _record_focus(record)
        if focus:
            payload["focus"] = dict(focus)
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True, default=str)


def logging_config_for(
    config: FocusConfig,
    *,
    console_format: LogFormat = "text",
    file_path: str | None = None,
) -> FocusLoggingConfig:
    """Build a logging pipeline config at the level chosen by `config`."""
    return FocusLoggingConfig(
        level_name=config.log_level,
        console_format=console_format,
        file_path=file_path,
        file_format="json",
    )


def configure_logging(config: FocusLoggingConfig) -> None:
    """Replace root handlers; a file target is written through a queue listener."""
    global _QUEUE_LISTENER

    _stop_listener()
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(getattr(logging, config.level_name.upper(), logging.INFO))

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(_formatter(config.console_format))
    if not config.file_path:
        root.addHandler(console_handler)
        return

    file_path = Path(config.file_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(file_path, mode="a", encoding="utf-8", delay=True)
    file_handler.setFormatter(_formatter(config.file_format))

    log_queue: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
    root.addHandler(QueueHandler(log_queue))
    _QUEUE_LISTENER = QueueListener(
        log_queue, console_handler, file_handler, respect_handler_level=True
    )
    _QUEUE_LISTENER.start()


def shutdown_logging() -> None:
    """Drain the queue listener and close its handlers."""
    _stop_listener()


def setup_logging(config: FocusConfig | None = None) -> None:
    """Configure console logging at the configured level unless handlers exist."""
    if logging.getLogger().handlers:
        return
    focus_config = config if config is not None else get_focus_config()
    configure_logging(logging_config_for(focus_config))


def get_logger(name: str) -> logging.Logger:
    """Return namespaced logger instance."""
    return logging.getLogger(name)


def _stop_listener() -> None:
    global _QUEUE_LISTENER

    listener = _QUEUE_LISTENER
    _QUEUE_LISTENER = None
    if listener is None:
        return
    listener.stop()
    for handler in listener.handlers:
        handler.close()


def _formatter(kind: str) -> logging.Formatter:
    if kind.strip().lower() == "json":
        return JsonFormatter()
    return FocusTextFormatter()
