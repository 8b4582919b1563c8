"""Auto-wrapping and hard/soft line break reconciliation.

The description view wraps long lines at a fixed width. A message that was
wrapped once (by us, or by someone's editor) comes back with hard line
breaks where the wrap used to be; re-inserting it verbatim would produce
ragged lines as soon as the width changes. `try_remove_hard_line_breaks`
turns those redundant hard breaks back into spaces.

All offsets are `str` indices, i.e. code points, never bytes.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CursorMapping:
    """Where a soft line break was inserted.

    `orig` is the offset in the unwrapped text of the first character after
    the break, `wrapped` the offset of that same character in the wrapped text.
    """
    orig: int
    wrapped: int


def auto_wrap_content(content: str, width: int) -> tuple[str, list[CursorMapping]]:
    """Greedy word wrap of `content` at `width` columns.

    Lines are only broken after a space; the space stays at the end of the
    line. A line without any space is left as long as it is.
    """
    if width <= 0:
        return content, []

    parts: list[str] = []
    wrapped_len = 0
    mappings: list[CursorMapping] = []
    start_of_line = 0
    last_whitespace = -1

    for pos, ch in enumerate(content):
        if ch == "\n":
            parts.append(content[start_of_line:pos + 1])
            wrapped_len += pos + 1 - start_of_line
            start_of_line = pos + 1
            last_whitespace = -1
        elif ch == " ":
            last_whitespace = pos + 1
        elif pos - start_of_line >= width and last_whitespace >= 0:
            wrap_at = last_whitespace
            parts.append(content[start_of_line:wrap_at])
            parts.append("\n")
            wrapped_len += wrap_at - start_of_line + 1
            mappings.append(CursorMapping(orig=wrap_at, wrapped=wrapped_len))
            start_of_line = wrap_at
            last_whitespace = -1

    parts.append(content[start_of_line:])
    return "".join(parts), mappings


def try_remove_hard_line_breaks(message: str, width: int) -> str:
    """Demote hard line breaks that wrapping at `width` would reproduce anyway.

    Scans left to right. Each `\\n` is tentatively replaced by a space and the
    text since the previous hard break is re-wrapped; if the first soft break
    lands right after that space, the space is kept, otherwise the `\\n` is
    restored. Later decisions see the already rewritten text.

    A break that starts its own segment (a blank line, or a leading break)
    is always kept.
    """
    chars = list(message)
    last_hard_line_start = 0

    for i, ch in enumerate(chars):
        if ch != "\n":
            continue
        if i > last_hard_line_start:
            chars[i] = " "
            segment = "".join(chars[last_hard_line_start:])
            _, mappings = auto_wrap_content(segment, width)
            if not mappings or mappings[0].orig != i - last_hard_line_start + 1:
                chars[i] = "\n"
        last_hard_line_start = i + 1

    return "".join(chars)
