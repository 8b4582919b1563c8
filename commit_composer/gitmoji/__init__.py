"""Gitmoji Package"""

from commit_composer.gitmoji.catalog import (
    GITMOJIS,
    Gitmoji,
    get_gitmoji_actions,
    get_gitmoji_by_label,
    gitmoji_suggestions,
    is_gitmoji,
)
from commit_composer.gitmoji.classifier import EMOJI_BLOCKS, in_emoji_block, is_emoji

__all__ = [
    "GITMOJIS",
    "Gitmoji",
    "get_gitmoji_actions",
    "get_gitmoji_by_label",
    "gitmoji_suggestions",
    "is_gitmoji",
    "EMOJI_BLOCKS",
    "in_emoji_block",
    "is_emoji",
]
