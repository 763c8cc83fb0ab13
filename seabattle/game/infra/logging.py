"""Logging setup: plain console output plus a JSON-lines run log."""

from __future__ import annotations

import json
import logging
import os
import queue
from dataclasses import dataclass
from datetime import UTC, datetime
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

__all__ = ["JsonFormatter", "LoggingConfig", "build_logging_config", "configure_logging", "setup_logging"]

CONSOLE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DEFAULT_LOG_DIR = Path("appdata") / "logs"

# Attributes every LogRecord carries; anything else came in through ``extra=``.
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}

_QUEUE_LISTENER: QueueListener | None = None


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    """Root level and optional run-log file."""

    level_name: str = "INFO"
    file_path: str | None = None


class JsonFormatter(logging.Formatter):
    """One JSON object per record, keeping ``extra=`` values under ``fields``."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        fields = {key: value for key, value in vars(record).items() if key not in _RECORD_ATTRS}
        if fields:
            payload["fields"] = fields
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True, default=str)


def configure_logging(config: LoggingConfig) -> None:
    """Install console logging, fanning out to the run log through a queue when one is set."""
    global _QUEUE_LISTENER

    shutdown_logging()
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(getattr(logging, config.level_name.upper(), logging.INFO))

    console = logging.StreamHandler()
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    if not config.file_path:
        root.addHandler(console)
        return

    file_path = Path(config.file_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    run_log = logging.FileHandler(file_path, mode="a", encoding="utf-8", delay=True)
    run_log.setFormatter(JsonFormatter())

    log_queue: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
    root.addHandler(QueueHandler(log_queue))
    _QUEUE_LISTENER = QueueListener(log_queue, console, run_log, respect_handler_level=True)
    _QUEUE_LISTENER.start()


def shutdown_logging() -> None:
    """Flush and stop the queued run log, if any."""
    global _QUEUE_LISTENER
    if _QUEUE_LISTENER is not None:
        _QUEUE_LISTENER.stop()
        _QUEUE_LISTENER = None


def build_logging_config() -> LoggingConfig:
    level_name = os.getenv("SEABATTLE_LOG_LEVEL", os.getenv("LOG_LEVEL", "INFO")).upper()
    return LoggingConfig(level_name=level_name, file_path=_resolve_run_log_file_path())


def setup_logging() -> None:
    """Configure application logging from the environment."""
    config = build_logging_config()
    configure_logging(config)
    logging.getLogger(__name__).info("logging_file=%s", config.file_path)


def _resolve_run_log_file_path() -> str:
    configured = os.getenv("SEABATTLE_LOG_DIR", "").strip()
    base_dir = Path(configured) if configured else DEFAULT_LOG_DIR
    stamp = datetime.now(UTC).strftime("%Y%m%dT%H%M%S")
    return str(base_dir / f"seabattle_run_{stamp}.jsonl")
