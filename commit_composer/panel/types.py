"""Commit panel value objects, state enums and errors."""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from commit_composer.os_utils import create_file_with_content, get_temp_dir, paste_from_clipboard
from commit_composer.ui.types import Popups, ViewStack

# No commit is selected in the message history
NO_COMMIT_INDEX = -1

COMMIT_WITHOUT_MESSAGE_ERR = "You cannot commit without a commit message"
COMMAND_DOES_NOT_SUPPORT_OPENING_IN_EDITOR = "This command doesn't support switching to the editor"
COMMIT_MENU_TITLE = "Commit Menu"
OPEN_IN_EDITOR = "Open in editor"
ADD_CO_AUTHOR = "Add co-author"
ADD_CO_AUTHOR_PROMPT_TITLE = "Add co-author"
ADD_GITMOJI = "Add gitmoji"
ADD_GITMOJI_PROMPT_TITLE = "Add gitmoji"
PASTE_COMMIT_MESSAGE_FROM_CLIPBOARD = "Paste commit message from clipboard"
SURE_PASTE_COMMIT_MESSAGE = (
    "Pasting will overwrite the current commit message, continue?"
)


class PanelState(Enum):
    CLOSED = "closed"
    OPEN = "open"


class PanelOutcome(Enum):
    """How the last editing session ended."""
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    SWITCHED_TO_EDITOR = "switched_to_editor"


class CommitPanelError(Exception):
    """Base class for errors reported by the commit panel."""
    pass


class MissingMessageError(CommitPanelError):
    """Confirm was requested with an empty summary."""

    def __init__(self, message: str = COMMIT_WITHOUT_MESSAGE_ERR):
        super().__init__(message)


class EditorNotSupportedError(CommitPanelError):
    """The panel was opened without a switch-to-editor callback."""

    def __init__(self, message: str = COMMAND_DOES_NOT_SUPPORT_OPENING_IN_EDITOR):
        super().__init__(message)


OnConfirm = Callable[[str, str], None]
OnSwitchToEditor = Callable[[str], None]


@dataclass
class OpenCommitMessagePanelOpts:
    """Everything needed to open the commit message panel once."""
    summary_title: str
    description_title: str
    on_confirm: OnConfirm
    commit_index: int = NO_COMMIT_INDEX
    preserve_message: bool = False
    on_switch_to_editor: Optional[OnSwitchToEditor] = None
    initial_message: str = ""


@dataclass
class HelperCommon:
    """Collaborators shared by the panel helpers."""
    contexts: ViewStack
    popups: Popups
    repo_name: str
    get_temp_dir: Callable[[], str] = get_temp_dir
    create_file_with_content: Callable[[str, str], None] = create_file_with_content
    paste_from_clipboard: Callable[[], str] = paste_from_clipboard
    get_commit_message_from_history: Optional[Callable[[int], str]] = None
    show_multi_character_gitmojis: bool = True
