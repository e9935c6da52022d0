#!/usr/bin/env python3
"""
cli.py
------
Shared CLI utilities and statistics for Quire commands.

Functions:
    setup_logger: Initialize QuireLogger for CLI operations

Classes:
    BuildStats: Counters for a site build

Usage:
    from quire.core.cli import setup_logger, BuildStats

    logger = setup_logger(log_dir, "build")
    stats = BuildStats()
    stats.files_processed += 1
    print(stats.summary())
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

# --- Local imports ---
from quire.core.logging_manager import QuireLogger


# ═══════════════════════════════════════════════════════════════════════════
# LOGGER SETUP
# ═══════════════════════════════════════════════════════════════════════════

def setup_logger(
    log_dir: Optional[Path], component_name: str, verbose: bool = False
) -> QuireLogger:
    """
    Setup logging for CLI operations.

    Args:
        log_dir: Directory for log files, or None for console output only
        component_name: Component identifier for logging (e.g. 'build')
        verbose: Show debug messages on the console

    Returns:
        Configured QuireLogger instance
    """
    return QuireLogger(log_dir, component_name=component_name, verbose=verbose)


# ═══════════════════════════════════════════════════════════════════════════
# STATISTICS
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class BuildStats:
    """
    Statistics for a site build.

    Attributes:
        files_processed: Eligible documents attempted
        files_skipped: Directory entries that were not eligible
        pages_written: Pages rendered through the page template
        errors: Documents that failed
        start_time: Build start timestamp
    """
    files_processed: int = 0
    files_skipped: int = 0
    pages_written: int = 0
    errors: int = 0
    start_time: datetime = field(default_factory=datetime.now)

    def __post_init__(self) -> None:
        """Validate statistics on initialization."""
        for name in ("files_processed", "files_skipped", "pages_written", "errors"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")

    def duration(self) -> float:
        """Seconds elapsed since start_time."""
        return (datetime.now() - self.start_time).total_seconds()

    def summary(self) -> str:
        """Human-readable summary of the build."""
        return (
            f"{self.files_processed} files processed, "
            f"{self.pages_written} pages written, "
            f"{self.files_skipped} skipped, "
            f"{self.errors} errors, "
            f"{self.duration():.2f}s"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "files_processed": self.files_processed,
            "files_skipped": self.files_skipped,
            "pages_written": self.pages_written,
            "errors": self.errors,
            "duration": self.duration(),
        }
