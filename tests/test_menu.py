"""Tests for the terminal menu."""

import io
from pathlib import Path

import pytest

from browserselector.scanners.desktop_entries import Candidate
from browserselector.ui.menu import (
    InvalidSelectionError,
    SelectionAborted,
    choose,
    format_menu,
    parse_selection,
)

CANDIDATES = [
    Candidate("Brave", Path("/apps/brave.desktop")),
    Candidate("Firefox", Path("/apps/firefox.desktop")),
    Candidate("Vivaldi", Path("/apps/vivaldi.desktop")),
]


def scripted(*answers):
    """Fake input() returning answers in order, then EOF."""
    queue = list(answers)

    def _read(prompt):
        if not queue:
            raise EOFError
        return queue.pop(0)
    return _read


class TestParseSelection:

    @pytest.mark.parametrize("text,expected", [("1", 0), ("3", 2), (" 2 \n", 1)])
    def test_valid(self, text, expected):
        assert parse_selection(text, 3) == expected

    @pytest.mark.parametrize("text", ["", "abc", "-1", "1.5", "²", "one"])
    def test_not_a_number(self, text):
        with pytest.raises(InvalidSelectionError, match="valid number"):
            parse_selection(text, 3)

    @pytest.mark.parametrize("text", ["0", "4", "99"])
    def test_out_of_range(self, text):
        with pytest.raises(InvalidSelectionError, match="between 1 and 3"):
            parse_selection(text, 3)


class TestChoose:

    def test_menu_lists_browsers_in_order(self):
        text = format_menu("https://example.com", CANDIDATES)
        assert "URL to open: https://example.com" in text
        assert text.index("1) Brave") < text.index("2) Firefox") < text.index("3) Vivaldi")

    def test_returns_selected_candidate(self):
        out = io.StringIO()
        assert choose("https://x", CANDIDATES, read=scripted("2"), out=out) == CANDIDATES[1]

    def test_reprompts_on_invalid_input(self):
        out = io.StringIO()

        result = choose("https://x", CANDIDATES, read=scripted("abc", "7", "3"), out=out)

        assert result == CANDIDATES[2]
        assert "Error: Please enter a valid number." in out.getvalue()
        assert "Error: Please enter a number between 1 and 3." in out.getvalue()

    def test_eof_aborts(self):
        with pytest.raises(SelectionAborted):
            choose("https://x", CANDIDATES, read=scripted(), out=io.StringIO())

    def test_ctrl_c_aborts(self):
        def interrupted(prompt):
            raise KeyboardInterrupt

        with pytest.raises(SelectionAborted):
            choose("https://x", CANDIDATES, read=interrupted, out=io.StringIO())
