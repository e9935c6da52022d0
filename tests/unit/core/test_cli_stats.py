"""Tests for BuildStats and setup_logger in quire.core.cli."""
import pytest

from quire.core.cli import BuildStats, setup_logger
from quire.core.logging_manager import QuireLogger


class TestBuildStats:
    """Test BuildStats dataclass."""

    def test_defaults(self):
        stats = BuildStats()
        assert stats.files_processed == 0
        assert stats.pages_written == 0
        assert stats.duration() >= 0

    def test_negative_rejected(self):
        with pytest.raises(ValueError, match="errors must be non-negative"):
            BuildStats(errors=-1)

    def test_summary(self):
        stats = BuildStats(files_processed=3, pages_written=2, files_skipped=1, errors=1)
        summary = stats.summary()
        assert "3 files processed" in summary
        assert "2 pages written" in summary
        assert "1 skipped" in summary
        assert "1 errors" in summary

    def test_to_dict(self):
        d = BuildStats(pages_written=4).to_dict()
        assert d["pages_written"] == 4
        assert set(d) == {
            "files_processed",
            "files_skipped",
            "pages_written",
            "errors",
            "duration",
        }


def test_setup_logger_console_only():
    """setup_logger without a directory returns a console logger."""
    logger = setup_logger(None, "test_setup")
    assert isinstance(logger, QuireLogger)
    assert logger.log_dir is None
