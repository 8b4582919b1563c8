"""Draft Store - the one unsent commit message kept across panel close."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

DRAFT_FILENAME = "COMMIT_COMPOSER_PENDING_COMMIT"


class DraftStore:
    """File-backed draft slot. Failures are logged, never raised."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    @classmethod
    def for_git_dir(cls, git_dir: str | Path) -> "DraftStore":
        return cls(Path(git_dir) / DRAFT_FILENAME)

    def get(self) -> str:
        try:
            return self.path.read_text(encoding='utf-8')
        except FileNotFoundError:
            return ""
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Could not read preserved commit message {self.path}: {e}")
            return ""

    def set(self, message: str) -> None:
        try:
            if not message:
                self.path.unlink(missing_ok=True)
                return
            self.path.write_text(message, encoding='utf-8')
        except OSError as e:
            logger.error(f"Could not save preserved commit message {self.path}: {e}")

