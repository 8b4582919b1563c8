"""Foreground UI Package"""

from commit_composer.ui.context_stack import ContextStack
from commit_composer.ui.event_loop import UIThread
from commit_composer.ui.types import (
    ConfirmOpts,
    CreateMenuOptions,
    DisabledReason,
    MenuItem,
    Popups,
    PromptOpts,
    Suggestion,
    SuggestionsFunc,
    ViewStack,
)

__all__ = [
    "ContextStack",
    "UIThread",
    "ConfirmOpts",
    "CreateMenuOptions",
    "DisabledReason",
    "MenuItem",
    "Popups",
    "PromptOpts",
    "Suggestion",
    "SuggestionsFunc",
    "ViewStack",
]
