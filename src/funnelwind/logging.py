"""
FunnelWind logging setup.

Library modules log through ``logging.getLogger(__name__)`` and never
configure handlers themselves. ``setup_logging`` is called by the CLI:

- Console output on stderr: human-readable, coloured unless NO_COLOR is set
  or stderr is not a terminal
- Optional log file in JSONL format, one JSON object per record
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

ROOT_LOGGER = "funnelwind"


# =============================================================================
# Terminal Colors (respects NO_COLOR)
# =============================================================================


def colors_enabled(stream: Any = None) -> bool:
    stream = stream or sys.stderr
    if os.environ.get("NO_COLOR"):
        return False
    return bool(getattr(stream, "isatty", lambda: False)())


class Colors:
    """ANSI color codes for terminal output."""

    RESET = "\033[0m"
    DIM = "\033[2m"

    DEBUG = "\033[36m"  # Cyan
    INFO = "\033[32m"  # Green
    WARNING = "\033[33m"  # Yellow
    ERROR = "\033[31m"  # Red
    CRITICAL = "\033[35m"  # Magenta


# =============================================================================
# Formatters
# =============================================================================


class JSONLFormatter(logging.Formatter):
    """
    Formats log records as JSON Lines.

    Example output:
    {"timestamp":"2026-01-15T10:30:45.123000Z","level":"WARNING","logger":"funnelwind.styleguide.loader","message":"Invalid styleguide JSON: ..."}
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, UTC)
            .isoformat()
            .replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        context = getattr(record, "context", None)
        if context:
            entry["context"] = context

        # Source location for warnings and above
        if record.levelno >= logging.WARNING:
            source_info: dict[str, Any] = {}
            if record.pathname:
                source_info["file"] = record.pathname
            if record.lineno:
                source_info["line"] = record.lineno
            if record.funcName and record.funcName != "<module>":
                source_info["function"] = record.funcName
            if source_info:
                entry["source"] = source_info

        if record.exc_info and record.exc_info[0]:
            entry["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
            }

        return json.dumps(entry, default=str)


class ConsoleFormatter(logging.Formatter):
    """Human-readable formatter for console output."""

    LEVEL_COLORS = {
        logging.DEBUG: Colors.DEBUG,
        logging.INFO: Colors.INFO,
        logging.WARNING: Colors.WARNING,
        logging.ERROR: Colors.ERROR,
        logging.CRITICAL: Colors.CRITICAL,
    }

    def __init__(self, use_color: bool | None = None) -> None:
        super().__init__()
        self.use_color = colors_enabled() if use_color is None else use_color

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")
        component = record.name.removeprefix(f"{ROOT_LOGGER}.")

        if self.use_color:
            prefix = f"{Colors.DIM}{timestamp}{Colors.RESET} [{component}]"
        else:
            prefix = f"[{timestamp}] [{component}]"

        # Level shown for non-INFO messages
        if record.levelno != logging.INFO:
            level_name = record.levelname
            if self.use_color:
                level_name = f"{self.LEVEL_COLORS.get(record.levelno, '')}{level_name}{Colors.RESET}"
            prefix = f"{prefix} {level_name}:"

        message = f"{prefix} {record.getMessage()}"
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        return message


# =============================================================================
# Logger Setup
# =============================================================================


def parse_level(level: int | str) -> int:
    """Map a level name or number to a logging level (unknown names -> WARNING)."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    return value if isinstance(value, int) else logging.WARNING


def setup_logging(
    level: int | str = logging.WARNING,
    log_file: Path | str | None = None,
    json_format: bool = False,
) -> logging.Logger:
    """
    Configure the ``funnelwind`` logger.

    Args:
        level: Minimum log level (name or number)
        log_file: Optional JSONL log file
        json_format: Emit JSONL on the console as well

    Returns:
        The configured package logger
    """
    resolved = parse_level(level)
    root_logger = logging.getLogger(ROOT_LOGGER)
    root_logger.setLevel(resolved)

    # Remove existing handlers
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(JSONLFormatter() if json_format else ConsoleFormatter())
    console_handler.setLevel(resolved)
    root_logger.addHandler(console_handler)

    if log_file is not None:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setFormatter(JSONLFormatter())
        file_handler.setLevel(resolved)
        root_logger.addHandler(file_handler)

    return root_logger


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    context: dict[str, Any] | None = None,
    **kwargs: Any,
) -> None:
    """Log a message with structured context data (kept in JSONL output)."""
    extra = {"context": {**(context or {}), **kwargs}} if (context or kwargs) else {}
    logger.log(level, message, extra=extra)
