"""CLI Utility Functions"""

import logging
import sys
from typing import Callable, Optional

from commit_composer.output import dim, print_box, warning
from commit_composer.panel import CommitMessageContext

DESCRIPTION_END = "."


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def render_panel(context: CommitMessageContext) -> None:
    """Draw the summary and description views."""
    views = context.views
    print()
    print_box(views.summary_title, [views.summary], subtitle=views.summary_subtitle, active=True)
    if views.summary_too_long:
        print(warning(f"  Summary is longer than {context.max_subject_length} characters"))
    description = views.description
    print_box(views.description_title, description.split('\n') if description else [])


def read_multiline(prompt: str, input_func: Optional[Callable[[str], str]] = None) -> str | None:
    """Read lines until a lone '.' or EOF. Returns None if nothing was entered."""
    read = input_func or input
    print(dim(f"{prompt} (finish with a line containing only '{DESCRIPTION_END}')"))
    lines = []
    while True:
        try:
            line = read("")
        except EOFError:
            break
        if line == DESCRIPTION_END:
            break
        lines.append(line)
    if not lines:
        return None
    return '\n'.join(lines)
