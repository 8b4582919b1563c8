"""Suggestion providers backed by repository data."""

from commit_composer.text.filter import filter_strings
from commit_composer.ui.types import Suggestion, SuggestionsFunc


def authors_suggestions(authors: list[str]) -> SuggestionsFunc:
    """Co-author prompt suggestions from 'Name <email>' strings."""
    def find(filter_text: str) -> list[Suggestion]:
        matches = filter_strings(filter_text, authors)
        return [Suggestion(label=a, value=a) for a in matches]

    return find
