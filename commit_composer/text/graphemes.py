"""Grapheme cluster helpers built on the `grapheme` package."""

import grapheme


def first_grapheme(text: str) -> tuple[str, str]:
    """Split off the first extended grapheme cluster.

    Returns (cluster, rest). Both are empty for empty input.
    """
    for cluster in grapheme.graphemes(text):
        return cluster, text[len(cluster):]
    return "", ""


def grapheme_count(text: str) -> int:
    return grapheme.length(text)
