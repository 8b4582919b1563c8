"""Terminal popups: menus, prompts and confirmations on plain stdin/stdout."""

import getpass
from typing import Callable, Optional

from commit_composer.credentials import CredentialBridge
from commit_composer.output import bold, dim, info, print_warning
from commit_composer.ui.types import ConfirmOpts, CreateMenuOptions, MenuItem, PromptOpts


class TerminalPopups:
    """Line-based implementation of the menu/prompt/confirm dialogs."""

    MAX_SUGGESTIONS = 20

    def __init__(self, input_func: Optional[Callable[[str], str]] = None):
        self._input = input_func or input

    def _ask(self, prompt: str) -> str | None:
        """Read a line; None when the user aborts with Ctrl-C or Ctrl-D."""
        try:
            return self._input(prompt)
        except (KeyboardInterrupt, EOFError):
            print()
            return None

    def _find_item(self, items: list[MenuItem], choice: str) -> MenuItem | None:
        for item in items:
            if item.key and item.key == choice:
                return item
        if choice.isdigit() and 1 <= int(choice) <= len(items):
            return items[int(choice) - 1]
        return None

    def menu(self, opts: CreateMenuOptions) -> None:
        print(f"\n{bold(opts.title)}")
        for i, item in enumerate(opts.items, 1):
            key = item.key or str(i)
            if item.disabled_reason:
                print(dim(f"  {key}  {item.label} ({item.disabled_reason.text})"))
            else:
                print(f"  {info(key)}  {item.label}")

        choice = self._ask(dim("Select (Enter to close): "))
        if not choice or not choice.strip():
            return
        item = self._find_item(opts.items, choice.strip())
        if item is None:
            print_warning(f"No menu item '{choice.strip()}'")
            return
        if item.disabled_reason:
            print_warning(item.disabled_reason.text)
            return
        item.on_press()

    def prompt(self, opts: PromptOpts) -> None:
        value = self._ask(f"{opts.title}: ")
        if value is None:
            return

        if opts.find_suggestions_func is not None:
            suggestions = opts.find_suggestions_func(value.strip())[:self.MAX_SUGGESTIONS]
            if suggestions:
                for i, suggestion in enumerate(suggestions, 1):
                    print(f"  {info(str(i).rjust(2))}  {suggestion.label}")
                pick = self._ask(dim(f"Pick 1-{len(suggestions)}, or Enter to use what you typed: "))
                if pick is None:
                    return
                pick = pick.strip()
                if pick.isdigit() and 1 <= int(pick) <= len(suggestions):
                    value = suggestions[int(pick) - 1].value

        opts.handle_confirm(value)

    def confirm(self, opts: ConfirmOpts) -> None:
        print(f"\n{bold(opts.title)}")
        answer = self._ask(f"{opts.prompt} [y/N]: ")
        if answer is not None and answer.strip().lower() in ('y', 'yes'):
            opts.handle_confirm()


class TerminalCredentialsPrompt:
    """Answers the credential bridge's view from the terminal."""

    def __init__(
        self,
        bridge: CredentialBridge,
        input_func: Optional[Callable[[str], str]] = None,
        getpass_func: Optional[Callable[[str], str]] = None,
    ):
        self._bridge = bridge
        self._input = input_func or input
        self._getpass = getpass_func or getpass.getpass

    def ask(self) -> None:
        view = self._bridge.view
        read = self._getpass if view.masked else self._input
        try:
            view.text = read(f"{view.title}: ")
        except (KeyboardInterrupt, EOFError):
            print()
            self._bridge.handle_close_credentials_view()
            return
        self._bridge.handle_submit_credential()
