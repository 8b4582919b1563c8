"""Gitmoji Catalog - static table of commit decorations."""

from dataclasses import dataclass

from commit_composer.text.graphemes import first_grapheme
from commit_composer.text.filter import filter_strings
from commit_composer.ui.types import Suggestion


@dataclass(frozen=True)
class Gitmoji:
    """A single decoration: the glyph and what it means."""
    emoji: str
    label: str

    @property
    def action(self) -> str:
        """Menu text shown in the gitmoji prompt, e.g. '🐛 Fix a bug'."""
        return f"{self.emoji} {self.label}"


GITMOJIS: tuple[Gitmoji, ...] = (
    Gitmoji("➕", "Add a dependency"),
    Gitmoji("🧪", "Add a failing test"),
    Gitmoji("👷", "Add or update CI build system"),
    Gitmoji("🙈", "Add or update a .gitignore file"),
    Gitmoji("🥚", "Add or update an easter egg"),
    Gitmoji("📈", "Add or update analytics or track code"),
    Gitmoji("💫", "Add or update animations and transitions"),
    Gitmoji("🍱", "Add or update assets"),
    Gitmoji("👔", "Add or update business logic"),
    Gitmoji("🧵", "Add or update code related to multithreading or concurrency"),
    Gitmoji("🦺", "Add or update code related to validation"),
    Gitmoji("💡", "Add or update comments in source code"),
    Gitmoji("📦️", "Add or update compiled files or packages"),
    Gitmoji("🔧", "Add or update configuration files"),
    Gitmoji("👥", "Add or update contributor(s)"),
    Gitmoji("🔨", "Add or update development scripts"),
    Gitmoji("📝", "Add or update documentation"),
    Gitmoji("🩺", "Add or update healthcheck"),
    Gitmoji("📄", "Add or update license"),
    Gitmoji("🔊", "Add or update logs"),
    Gitmoji("🔐", "Add or update secrets"),
    Gitmoji("🌱", "Add or update seed files"),
    Gitmoji("📸", "Add or update snapshots"),
    Gitmoji("💬", "Add or update text and literals"),
    Gitmoji("💄", "Add or update the UI and style files"),
    Gitmoji("🏷️", "Add or update types"),
    Gitmoji("💸", "Add sponsorships or money related infrastructure"),
    Gitmoji("✅", "Add, update, or pass tests"),
    Gitmoji("🚩", "Add, update, or remove feature flags"),
    Gitmoji("🎉", "Begin a project"),
    Gitmoji("🥅", "Catch errors"),
    Gitmoji("🚑️", "Critical hotfix"),
    Gitmoji("🧐", "Data exploration/inspection"),
    Gitmoji("🚀", "Deploy stuff"),
    Gitmoji("🗑️", "Deprecate code that needs to be cleaned up"),
    Gitmoji("⬇️", "Downgrade dependencies"),
    Gitmoji("💚", "Fix CI Build"),
    Gitmoji("🐛", "Fix a bug"),
    Gitmoji("🚨", "Fix compiler / linter warnings"),
    Gitmoji("🔒️", "Fix security or privacy issues"),
    Gitmoji("✏️", "Fix typos"),
    Gitmoji("🔍️", "Improve SEO"),
    Gitmoji("♿️", "Improve accessibility"),
    Gitmoji("🧑‍💻", "Improve developer experience"),
    Gitmoji("⚡️", "Improve performance"),
    Gitmoji("🎨", "Improve structure / format of the code"),
    Gitmoji("🚸", "Improve user experience / usability"),
    Gitmoji("🧱", "Infrastructure related changes"),
    Gitmoji("🌐", "Internationalization and localization"),
    Gitmoji("💥", "Introduce breaking changes"),
    Gitmoji("✨", "Introduce new features"),
    Gitmoji("🏗️", "Make architectural changes"),
    Gitmoji("🔀", "Merge branches"),
    Gitmoji("🤡", "Mock things"),
    Gitmoji("🚚", "Move or rename resources (e.g.: files, paths, routes)"),
    Gitmoji("🗃️", "Perform database related changes"),
    Gitmoji("⚗️", "Perform experiments"),
    Gitmoji("📌", "Pin dependencies to specific versions"),
    Gitmoji("♻️", "Refactor code"),
    Gitmoji("🔖", "Release / Version tags"),
    Gitmoji("➖", "Remove a dependency"),
    Gitmoji("🔥", "Remove code or files"),
    Gitmoji("⚰️", "Remove dead code"),
    Gitmoji("🔇", "Remove logs"),
    Gitmoji("⏪️", "Revert changes"),
    Gitmoji("🩹", "Simple fix for a non-critical issue"),
    Gitmoji("👽️", "Update code due to external API changes"),
    Gitmoji("⬆️", "Upgrade dependencies"),
    Gitmoji("🚧", "Work in progress"),
    Gitmoji("🛂", "Work on code related to authorization, roles and permissions"),
    Gitmoji("📱", "Work on responsive design"),
    Gitmoji("💩", "Write bad code that needs to be improved"),
    Gitmoji("🍻", "Write code drunkenly"),
)

_BY_LABEL = {g.label: g.emoji for g in reversed(GITMOJIS)}
_EMOJIS = frozenset(g.emoji for g in GITMOJIS)


def _is_single_code_point(gitmoji: Gitmoji) -> bool:
    cluster, _ = first_grapheme(gitmoji.emoji)
    return len(cluster) <= 1


def get_gitmoji_actions(show_multi_character_gitmojis: bool) -> list[str]:
    """Return catalog labels in table order.

    Glyphs built from more than one code point (variation selectors, ZWJ
    sequences) render badly on some terminals, so they can be left out.
    """
    return [
        g.label for g in GITMOJIS
        if show_multi_character_gitmojis or _is_single_code_point(g)
    ]


def get_gitmoji_by_label(label: str) -> str:
    """Exact label lookup. Returns '' when nothing matches."""
    return _BY_LABEL.get(label, "")


def is_gitmoji(grapheme: str) -> bool:
    return grapheme in _EMOJIS


def gitmoji_suggestions(show_multi_character_gitmojis: bool = True):
    """Build the suggestion provider used by the 'Add gitmoji' prompt."""
    actions = [
        f"{get_gitmoji_by_label(label)} {label}"
        for label in get_gitmoji_actions(show_multi_character_gitmojis)
    ]

    def find(filter_text: str) -> list[Suggestion]:
        matches = actions if not filter_text else filter_strings(filter_text, actions)
        return [Suggestion(label=m, value=m) for m in matches]

    return find
