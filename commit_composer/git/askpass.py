"""Askpass IPC - route git/ssh credential prompts to the interactive UI.

git and ssh ask for secrets by running the program named in GIT_ASKPASS /
SSH_ASKPASS with the prompt as its only argument and reading the answer
from its stdout. We point both at `ccompose-askpass`, which forwards the
prompt over a local TCP socket to the `AskpassServer` running inside the
composer; the server asks the user through the credential bridge and sends
the answer back.

Wire format: 8-digit zero-padded length header, then a UTF-8 JSON object.
"""

import json
import logging
import os
import re
import secrets
import shutil
import socket
import sys
import threading
from typing import Callable, Optional

from commit_composer.credentials import CredentialRequestInFlightError, CredentialType

logger = logging.getLogger(__name__)

_HOST = "127.0.0.1"
_HEADER_SIZE = 8
_RECV_TIMEOUT = 5.0

HELPER_NAME = "ccompose-askpass"
PORT_ENV = "COMMIT_COMPOSER_ASKPASS_PORT"
TOKEN_ENV = "COMMIT_COMPOSER_ASKPASS_TOKEN"

_PASSPHRASE_RE = re.compile(r'passphrase', re.IGNORECASE)
_USERNAME_RE = re.compile(r'username', re.IGNORECASE)


class AskpassError(Exception):
    """Raised when the askpass helper cannot be wired up."""
    pass


def classify_prompt(prompt: str) -> CredentialType:
    """Map a git/ssh prompt to the kind of secret it asks for."""
    if _PASSPHRASE_RE.search(prompt):
        return CredentialType.PASSPHRASE
    if _USERNAME_RE.search(prompt):
        return CredentialType.USERNAME
    return CredentialType.PASSWORD


def _send_message(sock: socket.socket, payload: dict) -> None:
    data = json.dumps(payload).encode("utf-8")
    sock.sendall(f"{len(data):08d}".encode("utf-8") + data)


def _recv_exact(sock: socket.socket, size: int) -> bytes:
    data = b""
    while len(data) < size:
        chunk = sock.recv(min(4096, size - len(data)))
        if not chunk:
            raise ConnectionError("Connection closed mid-message")
        data += chunk
    return data


def _recv_message(sock: socket.socket) -> dict:
    header = _recv_exact(sock, _HEADER_SIZE)
    return json.loads(_recv_exact(sock, int(header.decode("utf-8"))).decode("utf-8"))


class AskpassServer:
    """Local listener answering askpass requests for one git invocation."""

    def __init__(self, request_credential: Callable[[CredentialType], str]):
        self._request_credential = request_credential
        self._token = secrets.token_hex(16)
        self._socket: Optional[socket.socket] = None
        self._thread: Optional[threading.Thread] = None
        self._running = False
        self._port = 0

    @property
    def port(self) -> int:
        return self._port

    @property
    def token(self) -> str:
        return self._token

    def start(self) -> int:
        """Start listening. Returns the bound port."""
        self._socket = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        self._socket.bind((_HOST, 0))
        self._port = self._socket.getsockname()[1]
        self._socket.listen(1)
        self._socket.settimeout(1.0)
        self._running = True

        self._thread = threading.Thread(target=self._accept_loop, daemon=True)
        self._thread.start()
        logger.debug(f"Askpass: listening on port {self._port}")
        return self._port

    def stop(self) -> None:
        self._running = False
        if self._socket:
            self._socket.close()
            self._socket = None
        if self._thread:
            self._thread.join(timeout=2.0)
            self._thread = None

    def __enter__(self) -> "AskpassServer":
        self.start()
        return self

    def __exit__(self, *args) -> None:
        self.stop()

    def child_env(self, base: Optional[dict] = None) -> dict:
        """Environment for a git child process that should use this server."""
        helper = shutil.which(HELPER_NAME)
        if helper is None:
            raise AskpassError(f"{HELPER_NAME} not found on PATH; reinstall commit-composer")
        env = dict(os.environ if base is None else base)
        env.update({
            PORT_ENV: str(self._port),
            TOKEN_ENV: self._token,
            "GIT_ASKPASS": helper,
            "SSH_ASKPASS": helper,
            "SSH_ASKPASS_REQUIRE": "force",
            "GIT_TERMINAL_PROMPT": "0",
        })
        return env

    def _accept_loop(self) -> None:
        listener = self._socket
        while self._running:
            try:
                conn, _ = listener.accept()
            except socket.timeout:
                continue
            except OSError:
                break
            self._handle_connection(conn)

    def _handle_connection(self, conn: socket.socket) -> None:
        """Answer one prompt. Requests are served one at a time."""
        try:
            conn.settimeout(_RECV_TIMEOUT)
            msg = _recv_message(conn)
            if not isinstance(msg, dict):
                raise ValueError("request is not a JSON object")
            token = msg.get("token")
            if not isinstance(token, str) or not secrets.compare_digest(token.encode("utf-8"), self._token.encode("utf-8")):
                logger.warning("Askpass: rejected request with a bad token")
                _send_message(conn, {"credential": ""})
                return
            prompt = str(msg.get("prompt", ""))
            kind = classify_prompt(prompt)
            logger.debug(f"Askpass: {prompt!r} -> {kind.value}")
            # The user may take as long as they like to answer
            conn.settimeout(None)
            try:
                credential = self._request_credential(kind)
            except CredentialRequestInFlightError as e:
                logger.warning(f"Askpass: {e}")
                credential = ""
            conn.settimeout(_RECV_TIMEOUT)
            _send_message(conn, {"credential": credential})
        except Exception as e:
            logger.warning(f"Askpass: connection handler error: {e}")
            self._reply_empty(conn)
        finally:
            conn.close()

    @staticmethod
    def _reply_empty(conn: socket.socket) -> None:
        try:
            _send_message(conn, {"credential": ""})
        except OSError as e:
            logger.debug(f"Askpass: could not answer client: {e}")


def request_from_server(port: int, token: str, prompt: str) -> str:
    """Client side: forward `prompt` and wait for the user's answer."""
    with socket.create_connection((_HOST, port)) as sock:
        _send_message(sock, {"token": token, "prompt": prompt})
        return str(_recv_message(sock).get("credential", ""))


def main() -> int:
    """Entry point of the askpass helper. Prints the credential on stdout."""
    prompt = sys.argv[1] if len(sys.argv) > 1 else ""
    port = os.environ.get(PORT_ENV)
    token = os.environ.get(TOKEN_ENV)
    if not port or not token:
        print(f"{HELPER_NAME}: must be run by ccompose", file=sys.stderr)
        return 1

    try:
        credential = request_from_server(int(port), token, prompt)
    except (OSError, ValueError) as e:
        print(f"{HELPER_NAME}: {e}", file=sys.stderr)
        return 1

    # An empty answer means the user dismissed the prompt
    if not credential:
        return 1
    sys.stdout.write(credential)
    sys.stdout.flush()
    return 0
