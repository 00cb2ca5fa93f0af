"""Tests for the terminal clear helper."""

import io
from unittest.mock import Mock, patch

import pytest
from lifegrid.frontends.terminal import clear_sequence

curses = pytest.importorskip("curses")


class TestClearSequence:
    """Test cases for clear_sequence."""

    def test_returns_terminfo_sequence(self):
        """Test the terminfo 'clear' capability is decoded and returned."""
        stream = Mock()
        stream.fileno.return_value = 1

        with patch.object(curses, "setupterm") as mock_setup, patch.object(
            curses, "tigetstr", return_value=b"\x1b[H\x1b[2J"
        ) as mock_tigetstr:
            assert clear_sequence(stream) == "\x1b[H\x1b[2J"

        mock_setup.assert_called_once_with(fd=1)
        mock_tigetstr.assert_called_once_with("clear")

    def test_missing_capability(self, capsys):
        """Test a terminal without 'clear' gives an empty string and a warning."""
        stream = Mock()
        stream.fileno.return_value = 1

        with patch.object(curses, "setupterm"), patch.object(curses, "tigetstr", return_value=None):
            assert clear_sequence(stream) == ""

        assert "Warning:" in capsys.readouterr().err

    def test_unknown_terminal(self, capsys):
        """Test terminfo lookup failures are not fatal."""
        stream = Mock()
        stream.fileno.return_value = 1

        with patch.object(curses, "setupterm", side_effect=curses.error("unknown terminal")):
            assert clear_sequence(stream) == ""

        assert "Warning:" in capsys.readouterr().err

    def test_stream_without_descriptor(self, capsys):
        """Test streams that are not files, such as StringIO."""
        assert clear_sequence(io.StringIO()) == ""
        assert "Warning:" in capsys.readouterr().err
