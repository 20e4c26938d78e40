"""
Unit tests for the directory validator.
"""

import io

from ultralightkit.core.signals import BuildSignals, RERUN_IF_CHANGED, WARNING
from ultralightkit.sdk.validate import is_materialized


def make_signals():
    return BuildSignals(stream=io.StringIO())


class TestIsMaterialized:
    """Tests for is_materialized."""

    def test_all_present(self, tmp_path):
        """Test True when every required path exists."""
        (tmp_path / "a").mkdir()
        (tmp_path / "a" / "x.h").write_text("")
        (tmp_path / "y.dat").write_text("")
        signals = make_signals()

        assert is_materialized(tmp_path, ["a/x.h", "y.dat"], signals)
        assert signals.values(RERUN_IF_CHANGED) == [
            str(tmp_path / "a/x.h"),
            str(tmp_path / "y.dat"),
        ]
        assert signals.values(WARNING) == []

    def test_empty_list(self, tmp_path):
        """Test an empty requirement list is trivially satisfied."""
        signals = make_signals()

        assert is_materialized(tmp_path / "missing", [], signals)
        assert signals.emitted == []

    def test_stops_at_first_missing(self, tmp_path):
        """Test checking stops and warns at the first missing path."""
        (tmp_path / "first.h").write_text("")
        signals = make_signals()

        assert not is_materialized(
            tmp_path, ["first.h", "second.h", "third.h"], signals
        )

        assert signals.values(RERUN_IF_CHANGED) == [
            str(tmp_path / "first.h"),
            str(tmp_path / "second.h"),
        ]
        assert signals.values(WARNING) == [
            f"{tmp_path / 'second.h'} does not exist, will redownload"
        ]

    def test_missing_directory(self, tmp_path):
        """Test a missing directory behaves like missing files."""
        signals = make_signals()

        assert not is_materialized(tmp_path / "nope", ["x.h"], signals)
        assert len(signals.values(WARNING)) == 1

    def test_directory_counts_as_present(self, tmp_path):
        """Test existence is all that is checked, not file type."""
        (tmp_path / "x.h").mkdir()

        assert is_materialized(tmp_path, ["x.h"], make_signals())
