"""CLI Main Entry Point"""

import threading

from commit_composer.cli.args import parse_args
from commit_composer.cli.commands import display_config, run_setup, run_install_completion
from commit_composer.cli.utils import configure_logging, read_multiline, render_panel
from commit_composer.config import Config, load_config
from commit_composer.credentials import CredentialBridge
from commit_composer.git import GitCommands, GitError, authors_suggestions
from commit_composer.os_utils import ClipboardError
from commit_composer.output import Spinner, dim, print_error, print_success, print_warning
from commit_composer.panel import (
    NO_COMMIT_INDEX,
    CommitMessageContext,
    CommitMessageViews,
    CommitPanelError,
    CommitsHelper,
    DraftStore,
    HelperCommon,
    OpenCommitMessagePanelOpts,
    PanelOutcome,
    PanelState,
)
from commit_composer.ui import ContextStack, SuggestionsFunc, UIThread
from commit_composer.ui.terminal import TerminalCredentialsPrompt, TerminalPopups

PANEL_ACTIONS = "(s)ummary, (d)escription, (m)enu, (<) older, (>) newer, (c)onfirm, (q)uit: "


def _handle_subcommands(args):
    """Handle subcommands that exit early.

    Returns:
        tuple: (exit_code, should_exit) - exit_code if should_exit is True
    """
    if args.install_completion:
        return run_install_completion(), True
    if args.display_config:
        return display_config(), True
    if args.setup:
        return run_setup(), True
    return 0, False


def _build_helper(git: GitCommands, config: Config, contexts: ContextStack, popups: TerminalPopups) -> CommitsHelper:
    views = CommitMessageViews(
        auto_wrap=config.auto_wrap_commit_message,
        auto_wrap_width=config.auto_wrap_width,
    )
    context = CommitMessageContext(
        views,
        DraftStore.for_git_dir(git.git_dir),
        max_subject_length=config.max_subject_length,
    )
    common = HelperCommon(
        contexts=contexts,
        popups=popups,
        repo_name=git.repo_name,
        get_commit_message_from_history=git.get_commit_message,
        show_multi_character_gitmojis=config.show_multi_character_gitmojis,
    )
    return CommitsHelper(common, context)


def _panel_opts(args, config: Config, git: GitCommands, helper: CommitsHelper, result: dict) -> OpenCommitMessagePanelOpts:
    """Build the open request; the callbacks record whether a commit happened."""
    def on_confirm(summary: str, description: str) -> None:
        with Spinner("Committing..."):
            output = git.commit(summary, description, amend=args.amend)
        result['committed'] = True
        lines = output.strip().split('\n')
        print_success(lines[0] if lines[0] else "Committed")

    def on_switch_to_editor(path: str) -> None:
        git.run_attached(git.commit_editor_cmd(path, amend=args.amend))
        result['committed'] = True
        helper.on_commit_success()
        print_success("Committed from editor")

    initial_message = args.message or ""
    if args.amend and not initial_message:
        initial_message = git.get_commit_message(0)

    return OpenCommitMessagePanelOpts(
        summary_title="Amend last commit" if args.amend else "Commit summary",
        description_title="Commit description",
        on_confirm=on_confirm,
        commit_index=0 if args.amend else NO_COMMIT_INDEX,
        preserve_message=config.preserve_message and not args.no_preserve and not args.amend,
        on_switch_to_editor=on_switch_to_editor,
        initial_message=initial_message,
    )


def _dispatch(action: str, helper: CommitsHelper, co_author_suggestions: SuggestionsFunc) -> None:
    views = helper.views
    if action == 's':
        summary = input("Summary: ").strip()
        if summary:
            views.set_summary(summary)
            helper.context.render_commit_length()
    elif action == 'd':
        description = read_multiline("Description")
        if description is not None:
            views.set_description(description)
    elif action == 'm':
        helper.open_commit_menu(co_author_suggestions)
    elif action == '<':
        if not helper.browse_history(1):
            print(dim("No older commit message"))
    elif action == '>':
        if not helper.browse_history(-1):
            print(dim("Already at your message"))
    elif action == 'c':
        helper.handle_commit_confirm()
    elif action in ('q', 'quit'):
        helper.cancel()
    elif action:
        print_warning(f"Unknown action '{action}'")


def _run_panel(helper: CommitsHelper, co_author_suggestions: SuggestionsFunc) -> None:
    """Edit loop; returns once the panel is closed."""
    context = helper.context
    while context.state is PanelState.OPEN:
        render_panel(context)
        try:
            action = input(f"\n{dim(PANEL_ACTIONS)}").strip().lower()
        except (KeyboardInterrupt, EOFError):
            print()
            helper.cancel()
            break

        try:
            _dispatch(action, helper, co_author_suggestions)
        except (KeyboardInterrupt, EOFError):
            print()
        except (CommitPanelError, GitError, ClipboardError, OSError) as e:
            print_error(str(e))


def _push(git: GitCommands, ui: UIThread, contexts: ContextStack, bridge: CredentialBridge) -> int:
    """Push on a background thread; answer credential requests in the foreground."""
    credentials_prompt = TerminalCredentialsPrompt(bridge)
    done = threading.Event()
    outcome = {}

    def worker() -> None:
        try:
            outcome['output'] = git.push(bridge.prompt_user_for_credential)
        except GitError as e:
            outcome['error'] = e
        finally:
            done.set()

    print(dim("Pushing..."))
    threading.Thread(target=worker, daemon=True).start()

    while True:
        ui.run_until(lambda: done.is_set() or contexts.current() is bridge.view)
        if contexts.current() is bridge.view:
            credentials_prompt.ask()
            continue
        break

    if 'error' in outcome:
        print_error(str(outcome['error']))
        return 1
    print_success("Pushed")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)
    configure_logging(args.verbose)

    # Handle subcommands that exit early
    exit_code, should_exit = _handle_subcommands(args)
    if should_exit:
        return exit_code

    config = load_config()
    contexts = ContextStack()
    ui = UIThread(on_error=lambda e: print_error(str(e)))

    try:
        git = GitCommands()
        helper = _build_helper(git, config, contexts, TerminalPopups())
        result = {'committed': False}
        opts = _panel_opts(args, config, git, helper, result)
        co_author_suggestions = authors_suggestions(git.get_authors())
    except GitError as e:
        print_error(str(e))
        return 1

    helper.open_commit_message_panel(opts)
    _run_panel(helper, co_author_suggestions)

    if not result['committed']:
        if helper.context.last_outcome is not PanelOutcome.CANCELLED:
            return 1
        if opts.preserve_message and helper.context.get_preserved_message_and_log_error():
            print(dim("Cancelled. Your message was kept for next time."))
        else:
            print(dim("Cancelled."))
        return 0

    if args.push:
        return _push(git, ui, contexts, CredentialBridge(ui.on_ui_thread, contexts))
    return 0
