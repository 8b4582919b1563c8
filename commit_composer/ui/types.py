"""Popup value objects and the protocols the panel talks to."""

from dataclasses import dataclass, field
from typing import Callable, Optional, Protocol


@dataclass
class Suggestion:
    """One entry offered by a prompt's suggestion provider."""
    label: str
    value: str


SuggestionsFunc = Callable[[str], list[Suggestion]]


@dataclass
class DisabledReason:
    text: str


@dataclass
class MenuItem:
    label: str
    on_press: Callable[[], None]
    key: str = ""
    disabled_reason: Optional[DisabledReason] = None


@dataclass
class CreateMenuOptions:
    title: str
    items: list[MenuItem] = field(default_factory=list)


@dataclass
class PromptOpts:
    title: str
    handle_confirm: Callable[[str], None]
    find_suggestions_func: Optional[SuggestionsFunc] = None


@dataclass
class ConfirmOpts:
    title: str
    prompt: str
    handle_confirm: Callable[[], None]


class Popups(Protocol):
    """Menu, prompt and confirmation dialogs."""

    def menu(self, opts: CreateMenuOptions) -> None: ...

    def prompt(self, opts: PromptOpts) -> None: ...

    def confirm(self, opts: ConfirmOpts) -> None: ...


class ViewStack(Protocol):
    def push(self, context: object) -> None: ...

    def pop(self) -> None: ...
