"""Commits Helper - open, edit, confirm and close the commit message panel.

All methods run on the UI thread.
"""

import logging
import time
from datetime import datetime
from pathlib import Path
from typing import Optional

from commit_composer.git.commands import add_co_author_to_description, build_commit_message
from commit_composer.gitmoji import get_gitmoji_by_label, gitmoji_suggestions, is_emoji
from commit_composer.panel.context import CommitMessageContext
from commit_composer.panel.types import (
    ADD_CO_AUTHOR,
    ADD_CO_AUTHOR_PROMPT_TITLE,
    ADD_GITMOJI,
    ADD_GITMOJI_PROMPT_TITLE,
    COMMAND_DOES_NOT_SUPPORT_OPENING_IN_EDITOR,
    COMMIT_MENU_TITLE,
    NO_COMMIT_INDEX,
    OPEN_IN_EDITOR,
    PASTE_COMMIT_MESSAGE_FROM_CLIPBOARD,
    SURE_PASTE_COMMIT_MESSAGE,
    EditorNotSupportedError,
    HelperCommon,
    MissingMessageError,
    OpenCommitMessagePanelOpts,
    PanelOutcome,
    PanelState,
)
from commit_composer.text.graphemes import first_grapheme
from commit_composer.ui.types import (
    ConfirmOpts,
    CreateMenuOptions,
    DisabledReason,
    MenuItem,
    PromptOpts,
    SuggestionsFunc,
)

logger = logging.getLogger(__name__)


def editor_file_timestamp(ns: Optional[int] = None) -> str:
    """Timestamp for editor handoff files: 'Jan _2 15.04.05.000000000'."""
    if ns is None:
        ns = time.time_ns()
    seconds, fraction = divmod(ns, 1_000_000_000)
    dt = datetime.fromtimestamp(seconds)
    return f"{dt:%b} {dt.day:>2} {dt:%H.%M.%S}.{fraction:09d}"


class CommitsHelper:
    """Operations of the commit message panel."""

    def __init__(self, c: HelperCommon, context: CommitMessageContext):
        self.c = c
        self.context = context
        self._gitmoji_suggestions = gitmoji_suggestions(c.show_multi_character_gitmojis)

    @property
    def views(self):
        return self.context.views

    @staticmethod
    def split_commit_message_and_description(message: str) -> tuple[str, str]:
        summary, _, description = message.partition('\n')
        return summary, description.strip()

    def set_message_and_description_in_view(self, message: str) -> None:
        summary, description = self.split_commit_message_and_description(message)
        self.views.set_summary(summary)
        self.views.set_description(description)
        self.context.render_commit_length()

    def join_commit_message_and_unwrapped_description(self) -> str:
        description = self.views.unwrapped_description
        if not description:
            return self.views.summary
        return f"{self.views.summary}\n{description}"

    def update_commit_panel_view(self, message: str) -> None:
        if message:
            self.set_message_and_description_in_view(message)
            return

        if self.context.preserve_message:
            preserved = self.context.get_preserved_message_and_log_error()
            self.set_message_and_description_in_view(preserved)
            return

        self.set_message_and_description_in_view("")

    def open_commit_message_panel(self, opts: OpenCommitMessagePanelOpts) -> None:
        if self.context.state is PanelState.OPEN:
            logger.warning("Commit message panel is already open")
            return

        def on_confirm(summary: str, description: str) -> None:
            self.close_commit_message_panel(PanelOutcome.CONFIRMED)
            opts.on_confirm(summary, description)

        self.context.set_panel_state(
            opts.commit_index,
            opts.summary_title,
            opts.description_title,
            opts.preserve_message,
            opts.initial_message,
            on_confirm,
            opts.on_switch_to_editor,
        )

        self.update_commit_panel_view(opts.initial_message)
        # Compare against what was shown, not the raw input, so reformatting
        # by split/wrap alone does not count as an edit
        self.context.initial_message = self.join_commit_message_and_unwrapped_description()

        self.views.show()
        self.context.state = PanelState.OPEN
        self.context.last_outcome = None
        self.c.contexts.push(self.context)

    def on_commit_success(self) -> None:
        # A successful commit consumes the preserved draft
        if self.context.preserve_message:
            self.context.set_preserved_message_and_log_error("")

    def handle_commit_confirm(self) -> None:
        """Confirm the panel. Raises MissingMessageError on an empty summary.

        The panel is closed before the confirm callback runs, so an error
        raised by the callback leaves the panel closed.
        """
        if self.context.state is PanelState.CLOSED:
            logger.warning("Commit message panel is not open")
            return

        summary, description = self.views.summary, self.views.description

        if not summary:
            raise MissingMessageError()

        self.context.on_confirm(summary, description)
        self.on_commit_success()

    def cancel(self) -> None:
        self.close_commit_message_panel(PanelOutcome.CANCELLED)

    def close_commit_message_panel(self, outcome: PanelOutcome = PanelOutcome.CANCELLED) -> None:
        if self.context.state is PanelState.CLOSED:
            logger.debug("Commit message panel already closed")
            return

        if self.context.preserve_message:
            message = self.join_commit_message_and_unwrapped_description()
            if message != self.context.initial_message:
                self.context.set_preserved_message_and_log_error(message)
        else:
            self.set_message_and_description_in_view("")

        self.context.history_message = ""

        self.views.hide()
        self.context.state = PanelState.CLOSED
        self.context.last_outcome = outcome
        self.c.contexts.pop()

    def editor_file_path(self) -> Path:
        return Path(self.c.get_temp_dir()) / self.c.repo_name / f"{editor_file_timestamp()}.msg"

    def switch_to_editor(self) -> None:
        if not self.context.can_switch_to_editor():
            raise EditorNotSupportedError()

        message = build_commit_message(self.views.summary, self.views.description)
        path = self.editor_file_path()
        # Fails before anything is closed, so the panel stays usable
        self.c.create_file_with_content(str(path), message)

        self.close_commit_message_panel(PanelOutcome.SWITCHED_TO_EDITOR)

        self.context.switch_to_editor(str(path))

    def browse_history(self, delta: int) -> bool:
        """Show an older (delta > 0) or newer (delta < 0) commit message.

        The message being written is parked in `history_message` while
        browsing and restored when coming back past the newest commit.
        Returns False when there is nothing further in that direction.
        """
        current = self.context.selected_index
        if delta < 0 and current == NO_COMMIT_INDEX:
            return False
        get_message = self.c.get_commit_message_from_history
        if get_message is None:
            return False

        new_index = max(current + delta, NO_COMMIT_INDEX)
        if new_index == NO_COMMIT_INDEX:
            self.context.selected_index = new_index
            self.set_message_and_description_in_view(self.context.history_message)
            return True

        message = get_message(new_index)
        if not message:
            return False
        if current == NO_COMMIT_INDEX:
            self.context.history_message = self.join_commit_message_and_unwrapped_description()
        self.context.selected_index = new_index
        self.set_message_and_description_in_view(message)
        return True

    def open_commit_menu(self, suggestion_func: SuggestionsFunc) -> None:
        disabled_reason_for_open_in_editor = None
        if not self.context.can_switch_to_editor():
            disabled_reason_for_open_in_editor = DisabledReason(COMMAND_DOES_NOT_SUPPORT_OPENING_IN_EDITOR)

        menu_items = [
            MenuItem(
                label=OPEN_IN_EDITOR,
                on_press=self.switch_to_editor,
                key='e',
                disabled_reason=disabled_reason_for_open_in_editor,
            ),
            MenuItem(
                label=ADD_CO_AUTHOR,
                on_press=lambda: self.add_co_author(suggestion_func),
                key='c',
            ),
            MenuItem(
                label=ADD_GITMOJI,
                on_press=self.add_gitmoji,
                key='g',
            ),
            MenuItem(
                label=PASTE_COMMIT_MESSAGE_FROM_CLIPBOARD,
                on_press=self.paste_commit_message_from_clipboard,
                key='p',
            ),
        ]
        self.c.popups.menu(CreateMenuOptions(title=COMMIT_MENU_TITLE, items=menu_items))

    def add_co_author(self, suggestion_func: SuggestionsFunc) -> None:
        def handle_confirm(value: str) -> None:
            value = value.strip()
            if not value:
                return
            description = add_co_author_to_description(self.views.description, value)
            self.views.set_description(description)

        self.c.popups.prompt(PromptOpts(
            title=ADD_CO_AUTHOR_PROMPT_TITLE,
            handle_confirm=handle_confirm,
            find_suggestions_func=suggestion_func,
        ))

    def _resolve_gitmoji(self, value: str) -> str:
        """Glyph for the prompt value: typed glyph, exact label, else top suggestion."""
        gitmoji, _ = first_grapheme(value)
        if is_emoji(gitmoji):
            return gitmoji
        by_label = get_gitmoji_by_label(value.strip())
        if by_label:
            return by_label
        suggestions = self._gitmoji_suggestions(value)
        if not suggestions:
            return ""
        gitmoji, _ = first_grapheme(suggestions[0].label)
        return gitmoji

    def insert_gitmoji(self, value: str) -> None:
        """Put the gitmoji chosen by `value` at the start of the summary.

        An existing leading gitmoji is replaced; anything else is kept
        after the new one.
        """
        if not value:
            return
        gitmoji = self._resolve_gitmoji(value)
        if not gitmoji:
            logger.debug(f"No gitmoji matches {value!r}")
            return

        summary = self.views.summary
        current, rest = first_grapheme(summary)
        if current and is_emoji(current):
            summary = gitmoji + rest
        else:
            summary = gitmoji + summary
        self.views.set_summary(summary)
        self.context.render_commit_length()

    def add_gitmoji(self) -> None:
        self.c.popups.prompt(PromptOpts(
            title=ADD_GITMOJI_PROMPT_TITLE,
            handle_confirm=self.insert_gitmoji,
            find_suggestions_func=self._gitmoji_suggestions,
        ))

    def paste_commit_message_from_clipboard(self) -> None:
        message = self.c.paste_from_clipboard()
        if message == "":
            return

        if self.join_commit_message_and_unwrapped_description() == "":
            self.set_message_and_description_in_view(message)
            return

        # Confirm before overwriting the commit message
        self.c.popups.confirm(ConfirmOpts(
            title=PASTE_COMMIT_MESSAGE_FROM_CLIPBOARD,
            prompt=SURE_PASTE_COMMIT_MESSAGE,
            handle_confirm=lambda: self.set_message_and_description_in_view(message),
        ))
