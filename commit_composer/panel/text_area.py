"""Commit message views: a one-line summary and a wrapping description."""

from commit_composer.text.wrap import auto_wrap_content, try_remove_hard_line_breaks


class TextArea:
    """Multi-line text buffer that may soft-wrap at a fixed width.

    `unwrapped_content` is the text as typed; `content` is what the view
    shows, with soft breaks turned into real line breaks.
    """

    def __init__(self, auto_wrap: bool = False, auto_wrap_width: int = 72):
        self.auto_wrap = auto_wrap
        self.auto_wrap_width = auto_wrap_width
        self._content = ""

    def type_string(self, text: str) -> None:
        self._content += text

    def clear(self) -> None:
        self._content = ""

    @property
    def unwrapped_content(self) -> str:
        return self._content

    @property
    def content(self) -> str:
        if not self.auto_wrap:
            return self._content
        wrapped, _ = auto_wrap_content(self._content, self.auto_wrap_width)
        return wrapped


class CommitMessageViews:
    """The two view surfaces of the commit panel."""

    def __init__(self, auto_wrap: bool = False, auto_wrap_width: int = 72):
        self._summary = ""
        self.description_area = TextArea(auto_wrap, auto_wrap_width)
        self.summary_title = ""
        self.summary_subtitle = ""
        self.summary_too_long = False
        self.description_title = ""
        self.summary_visible = False
        self.description_visible = False

    @property
    def summary(self) -> str:
        return self._summary

    def set_summary(self, summary: str) -> None:
        # The summary view is a single line
        self._summary = summary.replace('\r', '').replace('\n', ' ')

    @property
    def description(self) -> str:
        return self.description_area.content.strip()

    @property
    def unwrapped_description(self) -> str:
        return self.description_area.unwrapped_content.strip()

    def set_description(self, description: str) -> None:
        area = self.description_area
        if area.auto_wrap:
            description = try_remove_hard_line_breaks(description, area.auto_wrap_width)
        area.clear()
        area.type_string(description)

    def show(self) -> None:
        self.summary_visible = True
        self.description_visible = True

    def hide(self) -> None:
        self.summary_visible = False
        self.description_visible = False
