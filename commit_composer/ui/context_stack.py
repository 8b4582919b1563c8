"""Context Stack - LIFO of focused views."""

import logging
from typing import Optional

logger = logging.getLogger(__name__)


class ContextStack:
    """Tracks which view has focus. The top of the stack is focused."""

    def __init__(self):
        self._stack: list[object] = []

    def push(self, context: object) -> None:
        logger.debug(f"Pushing context {context!r}")
        self._stack.append(context)

    def pop(self) -> None:
        if not self._stack:
            logger.warning("Pop on empty context stack ignored")
            return
        context = self._stack.pop()
        logger.debug(f"Popped context {context!r}")

    def current(self) -> Optional[object]:
        return self._stack[-1] if self._stack else None

    def contains(self, context: object) -> bool:
        return any(c is context for c in self._stack)

    @property
    def depth(self) -> int:
        return len(self._stack)
