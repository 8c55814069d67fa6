#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Logging configuration and utilities
"""

# Standard library imports
import os
import sys
import time
from datetime import datetime
from pathlib import Path
from typing import Optional

# Third-party imports
import logging
import logging.handlers
import urllib3
from urllib3.exceptions import InsecureRequestWarning

# Local imports
from config import (
    LOG_BACKUP_COUNT_DEFAULT,
    LOG_FILE_PREFIX,
    LOG_MAX_FILE_SIZE_MB_DEFAULT,
    LOG_SEPARATOR_WIDTH,
    APP_NAME,
)

# Add custom TRACE logging level (below DEBUG)
TRACE = 5
logging.addLevelName(TRACE, "TRACE")


def trace(self, message, *args, **kwargs):
    """Log a trace message (ultra-detailed, below DEBUG)"""
    if self.isEnabledFor(TRACE):
        self._log(TRACE, message, args, **kwargs)


logging.Logger.trace = trace

LOG_MODES = ("customer", "verbose", "debug")

# Global log mode (set by setup_logging)
_CURRENT_LOG_MODE = "customer"

_FORMATS = {
    "customer": "%(_when)s | %(message)s",
    "verbose": "%(_when)s | %(levelname)-7s | %(message)s",
    "debug": "%(_when)s | %(levelname)-7s | %(threadName)-14s | %(funcName)-20s | %(message)s",
}

_LEVELS = {
    "customer": logging.INFO,
    "verbose": logging.DEBUG,
    "debug": TRACE,
}


def get_log_mode() -> str:
    """Get the current logging mode"""
    return _CURRENT_LOG_MODE


class _ClockFormatter(logging.Formatter):
    """Formatter that stamps records with a local wall-clock string"""

    def __init__(self, fmt: str, clock_format: str):
        super().__init__(fmt)
        self.clock_format = clock_format

    def format(self, record):
        record._when = time.strftime(self.clock_format, time.localtime(record.created))
        return super().format(record)


class SafeStreamHandler(logging.StreamHandler):
    """A stream handler that tolerates missing or broken console streams"""

    def __init__(self, stream=None):
        if stream is None:
            import io
            stream = io.StringIO()
        super().__init__(stream)

    def emit(self, record):
        try:
            msg = self.format(record)
            self.stream.write(msg + self.terminator)
            self.stream.flush()
        except (BrokenPipeError, OSError, ValueError, AttributeError):
            pass


def _console_stream():
    if sys.stdout is not None and getattr(sys.stdout, "name", None) == os.devnull:
        return sys.stderr
    return sys.stdout if sys.stdout is not None else sys.stderr


def _create_file_handler(log_mode: str) -> Optional[logging.Handler]:
    from .paths import get_user_data_dir

    logs_dir = get_user_data_dir() / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)

    # dd-mm-yyyy_hh-mm-ss, no colons for Windows compatibility
    timestamp = datetime.now().strftime("%d-%m-%Y_%H-%M-%S")
    log_file = logs_dir / f"{LOG_FILE_PREFIX}_{timestamp}.log"

    handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=int(LOG_MAX_FILE_SIZE_MB_DEFAULT * 1024 * 1024),
        backupCount=LOG_BACKUP_COUNT_DEFAULT,
        encoding="utf-8",
    )
    handler.setFormatter(_ClockFormatter(_FORMATS[log_mode], "%Y-%m-%d %H:%M:%S"))
    handler.setLevel(_LEVELS[log_mode])
    return handler


def setup_logging(log_mode: str = "customer", *, write_logs: bool = True) -> Optional[Path]:
    """
    Setup logging configuration with three modes.

    Args:
        log_mode: 'customer' (clean logs), 'verbose' (developer), or 'debug' (ultra-detailed)
        write_logs: If False, skip creating log files.

    Returns:
        Path of the log file, or None when file logging is off.
    """
    global _CURRENT_LOG_MODE
    if log_mode not in LOG_MODES:
        log_mode = "customer"
    _CURRENT_LOG_MODE = log_mode

    console = SafeStreamHandler(_console_stream())
    console.setFormatter(_ClockFormatter(_FORMATS[log_mode], "%H:%M:%S"))
    console.setLevel(_LEVELS[log_mode])

    file_handler = None
    if write_logs:
        try:
            file_handler = _create_file_handler(log_mode)
        except OSError as e:
            print(f"Warning: Could not setup file logging: {e}", file=sys.stderr)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(console)
    if file_handler is not None:
        root.addHandler(file_handler)
    # Root stays at TRACE so every handler sees every record
    root.setLevel(TRACE)

    # Suppress HTTPS/HTTP logs
    for noisy in ("urllib3", "urllib3.connectionpool", "requests"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    # The local client serves a self-signed certificate
    urllib3.disable_warnings(InsecureRequestWarning)

    log_file = Path(file_handler.baseFilename) if file_handler is not None else None
    startup = logging.getLogger("startup")
    if log_mode == "customer":
        startup.info(f"✅ {APP_NAME} started ({'Log: ' + log_file.name if log_file else 'logs disabled'})")
    else:
        startup.info("=" * LOG_SEPARATOR_WIDTH)
        startup.info(f"{APP_NAME} - Starting... ({'Log file: ' + log_file.name if log_file else 'logs disabled'})")
        startup.info("=" * LOG_SEPARATOR_WIDTH)
        startup.info(f"{log_mode.capitalize()} mode: ON")
    return log_file


def get_logger(name: str = "party") -> logging.Logger:
    """Get a logger instance"""
    return logging.getLogger(name)


def cleanup_logs(max_age_seconds: int = 24 * 60 * 60) -> int:
    """Delete log files older than max_age_seconds, returns how many were removed"""
    from .paths import get_user_data_dir

    logs_dir = get_user_data_dir() / "logs"
    if not logs_dir.exists():
        return 0

    removed = 0
    now = time.time()
    for log_file in logs_dir.glob(f"{LOG_FILE_PREFIX}_*.log*"):
        try:
            if now - log_file.stat().st_mtime > max_age_seconds:
                log_file.unlink()
                removed += 1
        except OSError as e:
            print(f"Warning: Failed to remove {log_file.name}: {e}", file=sys.stderr)
    return removed


# ==================== Pretty Logging Helpers ====================

def log_section(logger: logging.Logger, title: str, icon: str = "📌", details: dict = None, mode: str = None):
    """
    Log a section with title and optional details

    Customer mode prints a single line, verbose/debug wrap it in separators.

    Example:
        log_section(log, "LCU Connected", "🔗", {"Port": 2999, "Status": "Ready"})
    """
    if mode is None:
        mode = get_log_mode()

    if mode == "customer":
        if details:
            detail_str = ", ".join(f"{k}: {v}" for k, v in details.items())
            logger.info(f"{icon} {title} ({detail_str})")
        else:
            logger.info(f"{icon} {title}")
        return

    logger.info("=" * LOG_SEPARATOR_WIDTH)
    logger.info(f"{icon} {title.upper()}")
    if details:
        for key, value in details.items():
            logger.info(f"   📋 {key}: {value}")
    logger.info("=" * LOG_SEPARATOR_WIDTH)


def log_event(logger: logging.Logger, event: str, icon: str = "✓", details: dict = None):
    """
    Log a single event with optional details

    Example:
        log_event(log, "Skin share received", "📥", {"Friend": "Ahri main", "Champion": 103})
    """
    logger.info(f"{icon} {event}")
    if details:
        for key, value in details.items():
            logger.info(f"   • {key}: {value}")


def log_action(logger: logging.Logger, action: str, icon: str = "⚡"):
    """Log an action being performed"""
    logger.info(f"{icon} {action}")


def log_success(logger: logging.Logger, message: str, icon: str = "✅"):
    """Log a success message"""
    logger.info(f"{icon} {message}")


def log_status(logger: logging.Logger, status: str, value, icon: str = "ℹ️"):
    """
    Log a status update

    Example:
        log_status(log, "Phase", "ChampSelect", "🎯")
    """
    logger.info(f"{icon} {status}: {value}")
