"""Commit Message Context - state of the commit message panel."""

from typing import Optional

from commit_composer.panel.draft import DraftStore
from commit_composer.panel.text_area import CommitMessageViews
from commit_composer.panel.types import (
    NO_COMMIT_INDEX,
    EditorNotSupportedError,
    OnConfirm,
    OnSwitchToEditor,
    PanelOutcome,
    PanelState,
)
from commit_composer.text.graphemes import grapheme_count


class CommitMessageContext:
    """Owns the panel's views, its per-open settings and the preserved draft."""

    def __init__(self, views: CommitMessageViews, draft_store: DraftStore, max_subject_length: int = 50):
        self.views = views
        self._draft_store = draft_store
        self.max_subject_length = max_subject_length

        self.state = PanelState.CLOSED
        self.last_outcome: Optional[PanelOutcome] = None
        self.history_message = ""
        self.selected_index = NO_COMMIT_INDEX

        self.commit_index = NO_COMMIT_INDEX
        self.preserve_message = False
        self.initial_message = ""
        self._on_confirm: Optional[OnConfirm] = None
        self._on_switch_to_editor: Optional[OnSwitchToEditor] = None

    def set_panel_state(
        self,
        commit_index: int,
        summary_title: str,
        description_title: str,
        preserve_message: bool,
        initial_message: str,
        on_confirm: OnConfirm,
        on_switch_to_editor: Optional[OnSwitchToEditor],
    ) -> None:
        self.commit_index = commit_index
        self.selected_index = NO_COMMIT_INDEX
        self.views.summary_title = summary_title
        self.views.description_title = description_title
        self.preserve_message = preserve_message
        self.initial_message = initial_message
        self._on_confirm = on_confirm
        self._on_switch_to_editor = on_switch_to_editor

    def on_confirm(self, summary: str, description: str) -> None:
        self._on_confirm(summary, description)

    def can_switch_to_editor(self) -> bool:
        return self._on_switch_to_editor is not None

    def switch_to_editor(self, path: str) -> None:
        if self._on_switch_to_editor is None:
            raise EditorNotSupportedError()
        self._on_switch_to_editor(path)

    def get_preserved_message_and_log_error(self) -> str:
        return self._draft_store.get()

    def set_preserved_message_and_log_error(self, message: str) -> None:
        self._draft_store.set(message)

    def render_commit_length(self) -> None:
        length = grapheme_count(self.views.summary)
        self.views.summary_subtitle = f" {length} "
        self.views.summary_too_long = length > self.max_subject_length
