"""Git Operations Package"""

from commit_composer.git.askpass import AskpassError, AskpassServer, classify_prompt
from commit_composer.git.commands import (
    GitCommands,
    GitError,
    add_co_author_to_description,
    build_commit_message,
)
from commit_composer.git.suggestions import authors_suggestions

__all__ = [
    "AskpassError",
    "AskpassServer",
    "classify_prompt",
    "GitCommands",
    "GitError",
    "add_co_author_to_description",
    "build_commit_message",
    "authors_suggestions",
]
