"""OS helpers: clipboard, temp files."""

import os
import subprocess
import sys
import tempfile
from pathlib import Path


class ClipboardError(Exception):
    """Raised when the system clipboard cannot be read."""
    pass


def get_temp_dir() -> str:
    return tempfile.gettempdir()


def create_file_with_content(path: str | Path, content: str) -> None:
    """Write `content` to `path`, creating parent directories as needed."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        f.write(content)


def _paste_commands() -> list[list[str]]:
    if sys.platform == 'win32':
        return [['powershell', '-NoProfile', '-Command', 'Get-Clipboard -Raw']]
    if sys.platform == 'darwin':
        return [['pbpaste']]
    commands = []
    if os.environ.get('WAYLAND_DISPLAY'):
        commands.append(['wl-paste', '--no-newline'])
    commands.append(['xclip', '-selection', 'clipboard', '-o'])
    commands.append(['xsel', '--clipboard', '--output'])
    return commands


def paste_from_clipboard() -> str:
    """Read the clipboard as text. Raises ClipboardError when no tool works."""
    last_error = "No clipboard tool found"
    for command in _paste_commands():
        try:
            result = subprocess.run(
                command,
                capture_output=True,
                check=True,
                encoding='utf-8',
                errors='replace',
            )
            return result.stdout
        except FileNotFoundError:
            continue
        except (subprocess.CalledProcessError, OSError) as e:
            last_error = f"Clipboard command failed: {e}"
    if last_error == "No clipboard tool found" and sys.platform == 'linux':
        last_error = "Install xclip or xsel: sudo apt install xclip"
    raise ClipboardError(last_error)

