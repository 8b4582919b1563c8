"""CLI Argument Parsing"""

import argparse
import argcomplete

from commit_composer import __version__


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog='ccompose',
        description='Compose git commit messages in the terminal',
        epilog='Example: ccompose -m "Fix login redirect" --push'
    )

    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')

    # Message options
    parser.add_argument('-m', '--message', type=str, metavar='TEXT', help='Initial commit message')
    parser.add_argument('--amend', action='store_true', help='Reword the last commit')
    parser.add_argument('--no-preserve', action='store_true', help='Do not keep a draft when the panel is cancelled')

    # After committing
    parser.add_argument('--push', action='store_true', help='Push after a successful commit')

    # Output options
    parser.add_argument('--verbose', action='store_true', help='Show debug logging')

    # Setup/config
    parser.add_argument('--setup', action='store_true', help='Configure defaults')
    parser.add_argument('--display-config', action='store_true', help='Show current configuration')
    parser.add_argument('--install-completion', action='store_true', help='Install shell tab completion')

    argcomplete.autocomplete(parser)
    return parser.parse_args(argv)
