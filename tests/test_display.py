"""
Tests for terminal output formatting and the line-based popups.

Shows sample output for each scenario. Run with:
    pytest tests/test_display.py -v
    pytest tests/test_display.py -v -s   # see actual terminal output
"""

import re

import grapheme
import pytest

from commit_composer.cli.utils import render_panel
from commit_composer.output import CHECK, print_box, print_success
from commit_composer.panel import CommitMessageContext, CommitMessageViews, DraftStore
from commit_composer.ui import ConfirmOpts, CreateMenuOptions, DisabledReason, MenuItem, PromptOpts, Suggestion
from commit_composer.ui.terminal import TerminalPopups

ANSI_RE = re.compile(r'\033\[[0-9;]*m')


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def strip_ansi():
    """Return a function that removes ANSI escape codes."""
    def _strip(text: str) -> str:
        return ANSI_RE.sub('', text)
    return _strip


@pytest.fixture
def print_sample(capsys):
    """Return a function that replays captured output for -s viewing."""
    def _print(out: str):
        with capsys.disabled():
            try:
                print(out)
            except UnicodeEncodeError:
                # Windows cp1252 can't encode Unicode symbols (─, ✓, etc.)
                cleaned = ANSI_RE.sub('', out)
                print(cleaned.encode('ascii', errors='replace').decode('ascii'))
    return _print


@pytest.fixture
def answers():
    """Return a factory for an input() replacement fed from a list."""
    def _make(*lines):
        remaining = iter(lines)
        return lambda prompt="": next(remaining)
    return _make


# ---------------------------------------------------------------------------
# Boxes
# ---------------------------------------------------------------------------

class TestPrintBox:

    def test_lines_are_aligned(self, capsys, strip_ansi, print_sample):
        print_box("Commit summary", ["🐛 fix login", "plain text"], subtitle=" 11 ")
        out = capsys.readouterr().out
        print_sample(out)

        rows = strip_ansi(out).rstrip('\n').split('\n')
        widths = {grapheme.length(row) for row in rows}
        assert len(widths) == 1
        assert "Commit summary" in rows[0]
        assert rows[-1].endswith(" 11 ─┘") or rows[-1].endswith(" 11 -+")

    def test_empty_box_has_one_row(self, capsys, strip_ansi):
        print_box("Description", [])
        rows = strip_ansi(capsys.readouterr().out).rstrip('\n').split('\n')
        assert len(rows) == 3

    def test_print_success(self, capsys, strip_ansi):
        print_success("Committed")
        assert strip_ansi(capsys.readouterr().out) == f"{CHECK} Committed\n"


class TestRenderPanel:

    @pytest.fixture
    def context(self, tmp_path):
        views = CommitMessageViews(auto_wrap=True, auto_wrap_width=10)
        return CommitMessageContext(views, DraftStore(tmp_path / "draft"), max_subject_length=5)

    def test_shows_both_views(self, context, capsys, strip_ansi, print_sample):
        context.views.summary_title = "Commit summary"
        context.views.description_title = "Commit description"
        context.views.set_summary("fix login bug")
        context.views.set_description("first line of the body")
        context.render_commit_length()

        render_panel(context)
        out = strip_ansi(capsys.readouterr().out)
        print_sample(out)

        assert "Commit summary" in out
        assert " 13 " in out
        assert "longer than 5 characters" in out
        assert "first line" in out
        assert "of the " in out


# ---------------------------------------------------------------------------
# Popups
# ---------------------------------------------------------------------------

class TestTerminalPopups:

    def test_menu_runs_item_by_key(self, answers):
        pressed = []
        popups = TerminalPopups(answers("b"))
        popups.menu(CreateMenuOptions(title="Menu", items=[
            MenuItem(label="A", on_press=lambda: pressed.append("a"), key="a"),
            MenuItem(label="B", on_press=lambda: pressed.append("b"), key="b"),
        ]))
        assert pressed == ["b"]

    def test_menu_runs_item_by_number(self, answers):
        pressed = []
        popups = TerminalPopups(answers("2"))
        popups.menu(CreateMenuOptions(title="Menu", items=[
            MenuItem(label="A", on_press=lambda: pressed.append("a")),
            MenuItem(label="B", on_press=lambda: pressed.append("b")),
        ]))
        assert pressed == ["b"]

    def test_disabled_item_reports_reason(self, answers, capsys):
        pressed = []
        popups = TerminalPopups(answers("e"))
        popups.menu(CreateMenuOptions(title="Menu", items=[
            MenuItem(label="Edit", on_press=lambda: pressed.append("e"), key="e",
                     disabled_reason=DisabledReason("not here")),
        ]))
        assert pressed == []
        assert capsys.readouterr().out.count("not here") == 2

    def test_unknown_choice(self, answers, capsys):
        popups = TerminalPopups(answers("z"))
        popups.menu(CreateMenuOptions(title="Menu", items=[MenuItem(label="A", on_press=lambda: None, key="a")]))
        assert "No menu item 'z'" in capsys.readouterr().out

    def test_prompt_pick_suggestion(self, answers):
        got = []
        popups = TerminalPopups(answers("ja", "1"))
        popups.prompt(PromptOpts(
            title="Add co-author",
            handle_confirm=got.append,
            find_suggestions_func=lambda text: [Suggestion(label="Jane", value="Jane <j@example.com>")],
        ))
        assert got == ["Jane <j@example.com>"]

    def test_prompt_keeps_typed_value(self, answers):
        got = []
        popups = TerminalPopups(answers("ja", ""))
        popups.prompt(PromptOpts(
            title="Add co-author",
            handle_confirm=got.append,
            find_suggestions_func=lambda text: [Suggestion(label="Jane", value="Jane")],
        ))
        assert got == ["ja"]

    def test_prompt_interrupted(self):
        def interrupted(prompt):
            raise KeyboardInterrupt

        got = []
        TerminalPopups(interrupted).prompt(PromptOpts(title="Add gitmoji", handle_confirm=got.append))
        assert got == []

    @pytest.mark.parametrize("answer, expected", [("y", True), ("YES", True), ("", False), ("n", False)])
    def test_confirm(self, answers, answer, expected):
        confirmed = []
        TerminalPopups(answers(answer)).confirm(ConfirmOpts(
            title="Paste", prompt="Overwrite?", handle_confirm=lambda: confirmed.append(True),
        ))
        assert bool(confirmed) is expected
