"""Suggestion filtering shared by the gitmoji and co-author prompts."""


def _is_subsequence(needle: str, haystack: str) -> bool:
    it = iter(haystack)
    return all(ch in it for ch in needle)


def filter_strings(needle: str, haystack: list[str]) -> list[str]:
    """Return the entries of `haystack` matching `needle`, in their original order.

    Case-insensitive. An entry matches when it contains the needle, or when
    the needle's characters appear in it in order (fuzzy match). Plain
    substring hits are never outranked by fuzzy hits: the result keeps the
    order of `haystack` either way.
    """
    lowered = needle.lower().strip()
    if not lowered:
        return list(haystack)
    return [
        s for s in haystack
        if lowered in s.lower() or _is_subsequence(lowered, s.lower())
    ]
