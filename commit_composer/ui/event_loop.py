"""UI Thread - run callables one at a time on the foreground thread.

Background threads never touch panel state or views directly: they hand a
callable to `on_ui_thread` and the foreground runs it in order.
"""

import logging
import queue
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class UIThread:
    """Single-consumer queue of UI work. Producers may live on any thread."""

    POLL_INTERVAL = 0.05

    def __init__(self, on_error: Optional[Callable[[Exception], None]] = None):
        self._queue: "queue.Queue[Callable[[], None]]" = queue.Queue()
        self._on_error = on_error or self._log_error

    @staticmethod
    def _log_error(e: Exception) -> None:
        logger.error(f"UI callback failed: {e}", exc_info=True)

    def on_ui_thread(self, fn: Callable[[], None]) -> None:
        """Schedule `fn` on the foreground. Thread safe, never blocks."""
        self._queue.put(fn)

    def _run(self, fn: Callable[[], None]) -> None:
        try:
            fn()
        except Exception as e:
            self._on_error(e)

    def process_pending(self) -> int:
        """Run everything queued so far. Returns how many callables ran."""
        count = 0
        while True:
            try:
                fn = self._queue.get_nowait()
            except queue.Empty:
                return count
            self._run(fn)
            count += 1

    def run_until(self, done: Callable[[], bool], timeout: Optional[float] = None) -> bool:
        """Process work until `done()` is true. Returns False on timeout."""
        waited = 0.0
        while not done():
            if timeout is not None and waited >= timeout:
                return False
            try:
                fn = self._queue.get(timeout=self.POLL_INTERVAL)
            except queue.Empty:
                waited += self.POLL_INTERVAL
                continue
            self._run(fn)
        self.process_pending()
        return True
