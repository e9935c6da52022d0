#!/usr/bin/env python3
"""
logging_manager.py
--------------------
Centralized logging for Quire builds.

Progress goes to the console. With a log directory, everything is also
written to a rotating ``<component>.log`` and errors (with tracebacks) to
``errors.log``. Without one, error details are dropped so a fatal CLI
error stays a single diagnostic line.

Library code takes an optional logger and goes through safe_logger() so it
never has to check for None.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
import logging
import sys
import traceback
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

# --- Third party imports ---
import click


CONSOLE_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(funcName)s:%(lineno)d] - %(message)s"


def _with_details(message: str, details: Optional[Dict[str, Any]]) -> str:
    if not details:
        return message
    return f"{message}: {json.dumps(details, default=str)}"


class QuireLogger:
    """
    Logging front-end for build operations.

    Attributes:
        log_dir: Directory for log files, or None for console only
        component_name: Logger namespace (e.g. 'build')
        main_logger: Progress and operation messages
        error_logger: Error reports with context and traceback
    """

    def __init__(
        self,
        log_dir: Optional[Path] = None,
        component_name: str = "quire",
        verbose: bool = False,
        max_bytes: int = 10 * 1024 * 1024,
        backup_count: int = 5,
    ) -> None:
        """
        Args:
            log_dir: Directory for log files; None disables file logging
            component_name: Logger namespace
            verbose: Show DEBUG messages on the console
            max_bytes: Log file size before rotation (default: 10MB)
            backup_count: Rotated files to keep (default: 5)
        """
        self.log_dir = Path(log_dir) if log_dir is not None else None
        self.component_name = component_name
        self.verbose = verbose
        self.max_bytes = max_bytes
        self.backup_count = backup_count

        self.main_logger = self._fresh_logger("operations", logging.DEBUG)
        self.error_logger = self._fresh_logger("errors", logging.ERROR)

        console = logging.StreamHandler(sys.stderr)
        console.setLevel(logging.DEBUG if verbose else logging.INFO)
        console.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt="%H:%M:%S"))
        self.main_logger.addHandler(console)

        if self.log_dir is None:
            # Swallow error reports instead of reaching logging's last resort
            self.error_logger.addHandler(logging.NullHandler())
            self.error_logger.propagate = False
            return

        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.main_logger.addHandler(
            self._rotating_handler(f"{component_name}.log", logging.DEBUG)
        )
        self.error_logger.addHandler(
            self._rotating_handler("errors.log", logging.ERROR)
        )

    def _fresh_logger(self, suffix: str, level: int) -> logging.Logger:
        logger = logging.getLogger(f"{self.component_name}.{suffix}")
        logger.setLevel(level)
        # Reset only this logger's handlers (not global logger state)
        logger.handlers = []
        logger.propagate = True
        return logger

    def _rotating_handler(self, file_name: str, level: int) -> RotatingFileHandler:
        assert self.log_dir is not None
        handler = RotatingFileHandler(
            self.log_dir / file_name,
            maxBytes=self.max_bytes,
            backupCount=self.backup_count,
            encoding="utf-8",
        )
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        return handler

    def log_operation(
        self, operation: str, details: Optional[Dict[str, Any]] = None
    ) -> None:
        """Record a completed operation and its counters."""
        self.main_logger.info(f"OPERATION - {operation}: {json.dumps(details or {}, default=str)}")

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self.main_logger.debug(_with_details(message, details))

    def log_info(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self.main_logger.info(_with_details(message, details))

    def log_error(
        self, error: Exception, context: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Report an error with its context and the current traceback.

        Args:
            error: Exception that occurred
            context: Extra key/value pairs (file, operation, ...)
        """
        lines = [f"ERROR - {type(error).__name__}: {error}"]
        if context:
            lines.append("Context: " + ", ".join(f"{k}={v}" for k, v in context.items()))
        lines.append(f"Traceback:\n{traceback.format_exc()}")
        self.error_logger.error("\n".join(lines))

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        """
        Report an error and return its one-line CLI form.

        Examples:
            >>> logger.log_cli_error(EmptyFileError("file is empty"))
            '❌ EmptyFileError: file is empty'
        """
        self.log_error(error, context or {"source": "cli"})
        return format_cli_error(error, show_traceback)


def format_cli_error(error: Exception, show_traceback: bool = False) -> str:
    """One-line diagnostic for an error, optionally followed by its traceback."""
    message = f"❌ {type(error).__name__}: {error}"
    if show_traceback:
        return f"{message}\n\n{traceback.format_exc()}"
    return message


def handle_cli_error(
    ctx: "click.Context",
    error: Exception,
    operation: str,
    additional_context: Optional[Dict[str, Any]] = None,
    exit_code: int = 1,
) -> None:
    """
    Report a fatal CLI error and exit.

    Logs the error through the context's logger, prints one diagnostic
    line to stderr (plus the traceback in verbose mode) and exits.

    Args:
        ctx: Click context holding 'logger' and 'verbose'
        error: Exception that occurred
        operation: Name of the failing operation (e.g. 'build')
        additional_context: Extra context (config path, file, ...)
        exit_code: Process exit code (default: 1)

    Note:
        This function never returns - it always calls sys.exit()
    """
    obj = ctx.obj or {}
    context = {"operation": operation, **(additional_context or {})}
    message = safe_logger(obj.get("logger")).log_cli_error(
        error, context, show_traceback=obj.get("verbose", False)
    )
    click.echo(message, err=True)
    sys.exit(exit_code)


class NullLogger:
    """QuireLogger stand-in that discards everything."""

    def log_operation(self, operation: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_info(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_error(self, error: Exception, context: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        return format_cli_error(error, show_traceback)


_null_logger = NullLogger()


def safe_logger(logger: Optional[QuireLogger]) -> QuireLogger:
    """
    Return the provided logger or the shared NullLogger.

    Use:
        safe_logger(logger).log_info("message")
    """
    return logger if logger is not None else _null_logger  # type: ignore[return-value]
