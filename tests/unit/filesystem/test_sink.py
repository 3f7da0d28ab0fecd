"""Unit tests for deletion warnings and message sinks."""

import logging
from unittest.mock import patch

import pytest
from toolcommon.filesystem.sink import (
    CollectingSink,
    ConsoleSink,
    DeletionWarning,
    LoggingSink,
    WarningKind,
    access_denied_for_deletion,
    directory_in_use,
)


class TestDeletionWarning:
    """Tests for DeletionWarning."""

    def test_access_denied_message(self) -> None:
        """Access-denied warnings name the path."""
        warning = access_denied_for_deletion("/tmp/build")

        assert warning.kind == WarningKind.ACCESS_DENIED_FOR_DELETION
        assert warning.message == "Access denied; cannot delete '/tmp/build'."

    def test_directory_in_use_message(self) -> None:
        """In-use warnings name the path."""
        warning = directory_in_use("/tmp/build")

        assert warning.kind == WarningKind.DIRECTORY_IN_USE
        assert "'/tmp/build'" in warning.message
        assert "in use" in warning.message

    def test_immutable(self) -> None:
        """DeletionWarning is frozen."""
        warning = directory_in_use("/x")
        with pytest.raises(AttributeError):
            warning.path = "/y"  # type: ignore[misc]


class TestSinks:
    """Tests for sink implementations."""

    def test_collecting_sink(self) -> None:
        """CollectingSink keeps warnings in order."""
        sink = CollectingSink()
        sink.on_message(directory_in_use("/a"))
        sink.on_message(access_denied_for_deletion("/b"))

        assert sink.kinds() == [
            WarningKind.DIRECTORY_IN_USE,
            WarningKind.ACCESS_DENIED_FOR_DELETION,
        ]
        assert [m.path for m in sink.messages] == ["/a", "/b"]

    def test_logging_sink(self, caplog: pytest.LogCaptureFixture) -> None:
        """LoggingSink logs at WARNING level."""
        with caplog.at_level(logging.WARNING, logger="toolcommon.filesystem.sink"):
            LoggingSink().on_message(access_denied_for_deletion("/tmp/out"))

        assert len(caplog.records) == 1
        assert caplog.records[0].levelno == logging.WARNING
        assert "/tmp/out" in caplog.records[0].getMessage()

    def test_console_sink(self) -> None:
        """ConsoleSink prints the warning message."""
        with patch("toolcommon.filesystem.sink.print_warning") as mock_print:
            ConsoleSink().on_message(DeletionWarning(WarningKind.DIRECTORY_IN_USE, "/x"))

        mock_print.assert_called_once_with(directory_in_use("/x").message)

    def test_console_sink_prints_bracket_path_literally(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Paths containing markup-like text are printed verbatim."""
        ConsoleSink().on_message(directory_in_use("/tmp/build[/x]"))

        assert "/tmp/build[/x]" in capsys.readouterr().err
