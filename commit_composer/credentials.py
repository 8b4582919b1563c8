"""Credential Bridge - let a blocked background operation ask the user for a secret.

A background thread (e.g. a `git push` waiting on its askpass helper) calls
`prompt_user_for_credential` and blocks. The credentials view is set up and
shown on the UI thread; when the user submits or dismisses it, the foreground
writes exactly one value into the request's reply slot and the caller resumes.

Only one request may be in flight. A second concurrent request is rejected
with CredentialRequestInFlightError rather than queued or overwriting the
first; callers may retry once the pending request has been answered.
"""

import logging
import queue
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from commit_composer.ui.types import ViewStack

logger = logging.getLogger(__name__)


class CredentialType(Enum):
    USERNAME = "username"
    PASSWORD = "password"
    PASSPHRASE = "passphrase"

    @property
    def title(self) -> str:
        return {
            CredentialType.USERNAME: "Username",
            CredentialType.PASSWORD: "Password",
            CredentialType.PASSPHRASE: "Passphrase",
        }[self]

    @property
    def mask(self) -> str:
        """Character echoed instead of input; '' means echo as typed."""
        return "" if self is CredentialType.USERNAME else "*"


@dataclass
class CredentialsView:
    """State of the credential entry view."""
    title: str = ""
    mask: str = ""
    text: str = ""

    @property
    def masked(self) -> bool:
        return bool(self.mask)

    def clear_text_area(self) -> None:
        self.text = ""


class CredentialRequestInFlightError(Exception):
    """Raised when a credential is requested while another is still pending."""
    pass


class CredentialBridge:
    """Single-slot, single-use handoff between a background caller and the UI."""

    def __init__(
        self,
        on_ui_thread: Callable[[Callable[[], None]], None],
        contexts: ViewStack,
        view: Optional[CredentialsView] = None,
    ):
        self._on_ui_thread = on_ui_thread
        self._contexts = contexts
        self.view = view or CredentialsView()
        self._lock = threading.Lock()
        self._pending: Optional["queue.Queue[str]"] = None
        self._pending_kind: Optional[CredentialType] = None

    @property
    def in_flight(self) -> bool:
        with self._lock:
            return self._pending is not None

    @property
    def pending_kind(self) -> Optional[CredentialType]:
        with self._lock:
            return self._pending_kind

    def prompt_user_for_credential(self, kind: CredentialType) -> str:
        """Block until the user submits or dismisses the credentials view.

        Returns the trimmed input followed by a newline, or '' when the user
        dismissed the view. Must not be called from the UI thread.
        """
        reply: "queue.Queue[str]" = queue.Queue(maxsize=1)
        with self._lock:
            if self._pending is not None:
                raise CredentialRequestInFlightError(
                    f"A {self._pending_kind.value} request is already waiting for input"
                )
            self._pending = reply
            self._pending_kind = kind

        def show() -> None:
            try:
                self.view.title = kind.title
                self.view.mask = kind.mask
                self._contexts.push(self.view)
            except Exception:
                self._resolve("")
                raise

        logger.debug(f"Requesting {kind.value} from the user")
        self._on_ui_thread(show)
        return reply.get()

    def _resolve(self, value: str) -> bool:
        with self._lock:
            pending, self._pending = self._pending, None
            self._pending_kind = None
        if pending is None:
            logger.warning("Credential reply dropped: no request is waiting")
            return False
        pending.put_nowait(value)
        return True

    def handle_submit_credential(self) -> None:
        """UI thread: hand the entered text to the waiting caller."""
        message = self.view.text.strip()
        if not self._resolve(message + "\n"):
            return
        self.view.clear_text_area()
        self._contexts.pop()

    def handle_close_credentials_view(self) -> None:
        """UI thread: the user dismissed the view; the caller gets ''."""
        self.view.clear_text_area()
        if not self._resolve(""):
            return
        self._contexts.pop()


__all__ = [
    "CredentialType",
    "CredentialsView",
    "CredentialBridge",
    "CredentialRequestInFlightError",
]
