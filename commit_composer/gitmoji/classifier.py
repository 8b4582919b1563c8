"""Gitmoji Classifier - decide whether a text cluster is a decoration glyph.

The catalog is the source of truth. For glyphs typed or pasted by the user
that are not in the catalog, a best-effort heuristic based on Unicode block
ranges is used. It does not cover every pictographic code point (e.g. the
Symbols and Pictographs Extended-A block, keycaps, or tag sequences); that is
a known limitation, not something to patch with guesses.
"""

from commit_composer.gitmoji.catalog import is_gitmoji
from commit_composer.text.graphemes import grapheme_count

# (first, last, name) - inclusive code point ranges
EMOJI_BLOCKS: tuple[tuple[int, int, str], ...] = (
    (0x1F600, 0x1F64F, "Emoticons"),
    (0x1F300, 0x1F5FF, "Miscellaneous Symbols and Pictographs"),
    (0x1F680, 0x1F6FF, "Transport and Map Symbols"),
    (0x1F900, 0x1F9FF, "Supplemental Symbols and Pictographs"),
    (0x2600, 0x26FF, "Miscellaneous Symbols"),
    (0x2700, 0x27BF, "Dingbats"),
    (0x1F1E6, 0x1F1FF, "Regional Indicator Symbols"),
    (0xFE00, 0xFE0F, "Variation Selectors"),
)


def in_emoji_block(code_point: int) -> bool:
    return any(first <= code_point <= last for first, last, _ in EMOJI_BLOCKS)


def is_emoji(text: str) -> bool:
    """Best-effort check that `text` is a decoration glyph.

    1. Exact catalog membership.
    2. A single grapheme cluster spanning several code points (ZWJ
       sequences, flags, glyphs with a variation selector).
    3. The first code point lies in one of EMOJI_BLOCKS.
    """
    if not text:
        return False
    if is_gitmoji(text):
        return True
    if len(text) > 1 and grapheme_count(text) == 1:
        return True
    return in_emoji_block(ord(text[0]))
