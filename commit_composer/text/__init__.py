"""Text Handling Package"""

from commit_composer.text.filter import filter_strings
from commit_composer.text.graphemes import first_grapheme, grapheme_count
from commit_composer.text.wrap import CursorMapping, auto_wrap_content, try_remove_hard_line_breaks

__all__ = [
    "filter_strings",
    "first_grapheme",
    "grapheme_count",
    "CursorMapping",
    "auto_wrap_content",
    "try_remove_hard_line_breaks",
]
