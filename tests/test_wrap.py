"""
Unit tests for auto-wrapping and hard line break reconciliation.

Run with:
    pytest tests/test_wrap.py -v
"""

import pytest

from commit_composer.text import CursorMapping, auto_wrap_content, try_remove_hard_line_breaks


# ---------------------------------------------------------------------------
# auto_wrap_content
# ---------------------------------------------------------------------------

class TestAutoWrapContent:

    def test_breaks_after_last_space(self):
        wrapped, mappings = auto_wrap_content("hello world foo", 5)
        assert wrapped == "hello \nworld \nfoo"
        assert mappings == [CursorMapping(orig=6, wrapped=7), CursorMapping(orig=12, wrapped=14)]

    def test_mapping_points_at_same_character(self):
        content = "hello world foo"
        wrapped, mappings = auto_wrap_content(content, 5)
        for m in mappings:
            assert content[m.orig] == wrapped[m.wrapped]

    def test_short_line_untouched(self):
        assert auto_wrap_content("short", 72) == ("short", [])

    def test_word_longer_than_width_not_broken(self):
        assert auto_wrap_content("abcdefgh", 3) == ("abcdefgh", [])

    def test_hard_break_resets_line(self):
        wrapped, mappings = auto_wrap_content("ab\ncd ef", 3)
        assert wrapped == "ab\ncd \nef"
        assert mappings == [CursorMapping(orig=6, wrapped=7)]

    @pytest.mark.parametrize("width", [0, -1])
    def test_non_positive_width_disables_wrapping(self, width):
        assert auto_wrap_content("a b c d", width) == ("a b c d", [])

    def test_offsets_are_code_points(self):
        wrapped, mappings = auto_wrap_content("🐛 ab", 2)
        assert wrapped == "🐛 \nab"
        assert mappings == [CursorMapping(orig=2, wrapped=3)]

    def test_empty(self):
        assert auto_wrap_content("", 10) == ("", [])


# ---------------------------------------------------------------------------
# try_remove_hard_line_breaks
# ---------------------------------------------------------------------------

class TestTryRemoveHardLineBreaks:

    def test_break_reproduced_by_wrap_is_demoted(self):
        assert try_remove_hard_line_breaks("aaa\nbbb", 3) == "aaa bbb"

    def test_break_wrap_would_not_reproduce_is_kept(self):
        assert try_remove_hard_line_breaks("aaa\nbbb", 10) == "aaa\nbbb"

    def test_early_break_is_kept(self):
        assert try_remove_hard_line_breaks("one\ntwo three", 7) == "one\ntwo three"

    def test_paragraph_rejoined(self):
        assert try_remove_hard_line_breaks("one two\nthree", 7) == "one two three"

    def test_no_breaks_is_identity(self):
        text = "a long line without any hard break at all"
        assert try_remove_hard_line_breaks(text, 10) == text

    @pytest.mark.parametrize("width", range(1, 8))
    def test_blank_line_survives_any_width(self, width):
        assert try_remove_hard_line_breaks("aaa\n\nbbb", width) == "aaa\n\nbbb"

    @pytest.mark.parametrize("width", [1, 3, 72])
    def test_leading_break_kept(self, width):
        assert try_remove_hard_line_breaks("\nabc", width) == "\nabc"

    @pytest.mark.parametrize("width", [1, 3, 72])
    def test_trailing_break_kept(self, width):
        assert try_remove_hard_line_breaks("aaa\n", width) == "aaa\n"

    def test_offsets_are_code_points(self):
        assert try_remove_hard_line_breaks("🐛\nab", 2) == "🐛 ab"

    @pytest.mark.parametrize("message, width", [
        ("aaa\nbbb", 3),
        ("one two\nthree\n\nfour five\nsix", 7),
        ("x\ny\nz", 1),
        ("hello world\nfoo bar baz\nqux", 5),
        ("\n\nlead", 4),
    ])
    def test_idempotent(self, message, width):
        once = try_remove_hard_line_breaks(message, width)
        assert try_remove_hard_line_breaks(once, width) == once

    def test_rewrapping_result_restores_layout(self):
        # A message wrapped at 5 and flattened by an editor comes back as it was
        original = "hello world foo"
        wrapped, _ = auto_wrap_content(original, 5)
        flattened = wrapped.replace(" \n", "\n")
        assert try_remove_hard_line_breaks(flattened, 5) == original

    def test_empty(self):
        assert try_remove_hard_line_breaks("", 5) == ""
