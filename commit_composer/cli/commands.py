"""CLI Commands"""

import os
import sys

from commit_composer.config import AUTO_WRAP_WIDTH_ENV, Config, load_config, save_config, get_config_path
from commit_composer.output import bold, dim, info, print_success


def display_config() -> int:
    """Display current configuration."""
    config = load_config()
    config_path = get_config_path()

    print(f"\n{bold('Current Configuration')}\n")

    if config_path:
        print(f"  {dim('Loaded from:')} {config_path}")
    else:
        print(f"  {dim('Loaded from:')} defaults (no .composerc found)")

    env_width = os.environ.get(AUTO_WRAP_WIDTH_ENV)
    if env_width:
        print(f"  {dim('Environment overrides:')}")
        print(f"    {AUTO_WRAP_WIDTH_ENV}={env_width}")

    print()
    print(f"  {bold('Settings:')}")
    print(f"    preserve_message:              {info(str(config.preserve_message).lower())}")
    print(f"    auto_wrap_commit_message:      {info(str(config.auto_wrap_commit_message).lower())}")
    print(f"    auto_wrap_width:               {info(str(config.auto_wrap_width))}")
    print(f"    max_subject_length:            {info(str(config.max_subject_length))}")
    print(f"    show_multi_character_gitmojis: {info(str(config.show_multi_character_gitmojis).lower())}")

    print(f"\n  {dim('Config locations:')}")
    print(f"    Local:  .composerc (in current directory)")
    print(f"    Global: ~/.composerc")
    print(f"\n  {dim('Run')} ccompose --setup {dim('to configure')}\n")

    return 0


def _ask_yes_no(question: str, default: bool) -> bool:
    hint = "[Y/n]" if default else "[y/N]"
    answer = input(f"{question} {hint}: ").strip().lower()
    if not answer:
        return default
    return answer in ('y', 'yes')


def _ask_int(question: str, default: int) -> int:
    answer = input(f"{question} (Enter for {default}): ").strip()
    return int(answer) if answer.isdigit() and int(answer) > 0 else default


def run_setup() -> int:
    """Quick setup wizard."""
    display_config()
    print(f"{bold('Setup Wizard')}\n")

    defaults = Config()
    try:
        preserve_message = _ask_yes_no("Keep a draft when the commit panel is cancelled?", defaults.preserve_message)
        auto_wrap = _ask_yes_no("Wrap long description lines?", defaults.auto_wrap_commit_message)
        auto_wrap_width = defaults.auto_wrap_width
        if auto_wrap:
            auto_wrap_width = _ask_int("Wrap width", defaults.auto_wrap_width)
        max_subject_length = _ask_int("Max summary length", defaults.max_subject_length)
        multi_char = _ask_yes_no(
            "Offer gitmojis made of several code points (may render badly in some terminals)?",
            defaults.show_multi_character_gitmojis,
        )
    except (KeyboardInterrupt, EOFError):
        print(dim("\nCancelled."))
        return 1

    config = Config(
        preserve_message=preserve_message,
        auto_wrap_commit_message=auto_wrap,
        auto_wrap_width=auto_wrap_width,
        max_subject_length=max_subject_length,
        show_multi_character_gitmojis=multi_char,
    )
    path = save_config(config, global_config=True)

    print_success(f"Saved to {path}")
    return 0


def run_install_completion() -> int:
    """Install shell tab completion."""
    shell = os.environ.get('SHELL', '')

    print(f"\n{bold('Tab Completion Setup')}\n")

    if 'zsh' in shell:
        rc_file = os.path.expanduser('~/.zshrc')
        line = 'eval "$(register-python-argcomplete ccompose)"'
        print(f"Add this line to {dim(rc_file)}:\n")
        print(f"  {line}\n")
        print(f"Then run: {dim('source ~/.zshrc')}")
    elif 'bash' in shell:
        rc_file = os.path.expanduser('~/.bashrc')
        line = 'eval "$(register-python-argcomplete ccompose)"'
        print(f"Add this line to {dim(rc_file)}:\n")
        print(f"  {line}\n")
        print(f"Then run: {dim('source ~/.bashrc')}")
    elif sys.platform == 'win32':
        print("For PowerShell, run:\n")
        print("  register-python-argcomplete --shell powershell ccompose | Out-String | Invoke-Expression\n")
        print("To make it permanent, add to your $PROFILE:\n")
        print("  register-python-argcomplete --shell powershell ccompose | Out-String | Invoke-Expression")
    else:
        print("Run one of these based on your shell:\n")
        print(f"  {dim('# Bash/Zsh')}")
        print('  eval "$(register-python-argcomplete ccompose)"\n')
        print(f"  {dim('# PowerShell')}")
        print("  register-python-argcomplete --shell powershell ccompose | Out-String | Invoke-Expression\n")
        print(f"  {dim('# Fish')}")
        print("  register-python-argcomplete --shell fish ccompose | source")

    print(f"\n{dim('After setup, press TAB to autocomplete flags.')}")
    return 0
