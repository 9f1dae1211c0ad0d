"""Tests for text helpers."""

import pytest

from chainlinked.text_utils import clip, escape_text_for_prompt, round_half_up


class TestEscapeTextForPrompt:
    """Tests for escape_text_for_prompt."""

    def test_quotes_and_newlines(self) -> None:
        assert escape_text_for_prompt('He said "go"\nnow') == 'He said \\"go\\"\\nnow'

    def test_non_ascii_kept(self) -> None:
        assert escape_text_for_prompt("café") == "café"


class TestClip:
    """Tests for clip."""

    def test_short_text_unchanged(self) -> None:
        assert clip("abc", 5) == "abc"

    def test_long_text_clipped(self) -> None:
        assert clip("abcdef", 3) == "abc..."


class TestRoundHalfUp:
    """Tests for round_half_up."""

    @pytest.mark.parametrize("value,expected", [(0.5, 1), (2.5, 3), (2.4, 2), (90.67, 91), (0, 0)])
    def test_rounding(self, value: float, expected: int) -> None:
        """Test halves round up unlike round()."""
        assert round_half_up(value) == expected
