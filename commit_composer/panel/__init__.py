"""Commit Message Panel Package"""

from commit_composer.panel.context import CommitMessageContext
from commit_composer.panel.draft import DRAFT_FILENAME, DraftStore
from commit_composer.panel.helper import CommitsHelper, editor_file_timestamp
from commit_composer.panel.text_area import CommitMessageViews, TextArea
from commit_composer.panel.types import (
    NO_COMMIT_INDEX,
    CommitPanelError,
    EditorNotSupportedError,
    HelperCommon,
    MissingMessageError,
    OpenCommitMessagePanelOpts,
    PanelOutcome,
    PanelState,
)

__all__ = [
    "CommitMessageContext",
    "DRAFT_FILENAME",
    "DraftStore",
    "CommitsHelper",
    "editor_file_timestamp",
    "CommitMessageViews",
    "TextArea",
    "NO_COMMIT_INDEX",
    "CommitPanelError",
    "EditorNotSupportedError",
    "HelperCommon",
    "MissingMessageError",
    "OpenCommitMessagePanelOpts",
    "PanelOutcome",
    "PanelState",
]
