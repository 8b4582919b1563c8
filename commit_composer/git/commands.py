"""Git Commands - the git operations the commit panel needs."""

import logging
import subprocess
from pathlib import Path
from typing import Callable, Optional

from commit_composer.credentials import CredentialType
from commit_composer.git.askpass import AskpassError, AskpassServer

logger = logging.getLogger(__name__)


class GitError(Exception):
    """Raised when git operations fail."""
    pass


def add_co_author_to_description(description: str, author: str) -> str:
    """Append a Co-authored-by trailer for `author` to the description.

    Consecutive trailers are kept together; otherwise the trailer is
    separated from the body by a blank line.
    """
    if description:
        last_line = description.split('\n')[-1]
        if last_line.startswith('Co-authored-by:'):
            description += '\n'
        else:
            description += '\n\n'
    return description + f"Co-authored-by: {author}"


def build_commit_message(summary: str, description: str) -> str:
    """Summary, then a blank line and the description when there is one."""
    if not description:
        return summary
    return f"{summary}\n\n{description}"


class GitCommands:
    """Runs git in the current repository."""

    def __init__(self, cwd: Optional[str | Path] = None):
        self._cwd = str(cwd) if cwd is not None else None
        self._verify_git_available()
        self._verify_in_repo()

    def _run_git(self, *args: str, input: Optional[str] = None) -> str:
        """Run a git command and return stdout."""
        try:
            result = subprocess.run(
                ['git', *args],
                capture_output=True,
                text=True,
                check=True,
                encoding='utf-8',
                errors='replace',
                input=input,
                cwd=self._cwd,
            )
            return result.stdout
        except subprocess.CalledProcessError as e:
            raise GitError(f"Git command failed: git {' '.join(args)}\n{e.stderr}")
        except FileNotFoundError:
            raise GitError("Git is not installed or not in PATH")

    def _verify_git_available(self) -> None:
        """Fail fast if git isn't available."""
        try:
            self._run_git('--version')
        except GitError:
            raise GitError("Git is not installed or not in PATH")

    def _verify_in_repo(self) -> None:
        """Fail fast if we're not in a git repository."""
        try:
            self._run_git('rev-parse', '--git-dir')
        except GitError:
            raise GitError("Not inside a git repository")

    @property
    def repo_root(self) -> Path:
        return Path(self._run_git('rev-parse', '--show-toplevel').strip())

    @property
    def repo_name(self) -> str:
        return self.repo_root.name

    @property
    def git_dir(self) -> Path:
        return Path(self._run_git('rev-parse', '--absolute-git-dir').strip())

    def commit(self, summary: str, description: str, amend: bool = False) -> str:
        """Create (or amend) a commit. The message is passed on stdin."""
        args = ['commit', '-F', '-']
        if amend:
            args.append('--amend')
        return self._run_git(*args, input=build_commit_message(summary, description))

    def commit_editor_cmd(self, path: str | Path, amend: bool = False) -> list[str]:
        """Command that commits using git's editor, seeded from `path`."""
        cmd = ['git', 'commit', '--edit', f'--file={path}']
        if amend:
            cmd.append('--amend')
        return cmd

    def run_attached(self, cmd: list[str]) -> None:
        """Run a command attached to the terminal (for interactive editors)."""
        try:
            subprocess.run(cmd, check=True, cwd=self._cwd)
        except subprocess.CalledProcessError as e:
            raise GitError(f"Command failed with exit code {e.returncode}: {' '.join(cmd)}")
        except FileNotFoundError:
            raise GitError(f"Command not found: {cmd[0]}")

    def get_commit_message(self, index: int) -> str:
        """Full message of the commit `index` steps back from HEAD."""
        return self._run_git('log', '-1', f'--skip={index}', '--format=%B').strip()

    def has_commits(self) -> bool:
        try:
            self._run_git('rev-parse', '--verify', 'HEAD')
            return True
        except GitError:
            return False

    def get_authors(self, limit: int = 500) -> list[str]:
        """Distinct 'Name <email>' of recent authors, most recent first."""
        if not self.has_commits():
            return []
        output = self._run_git('log', f'-{limit}', '--format=%an <%ae>')
        seen = set()
        authors = []
        for line in output.splitlines():
            if line and line not in seen:
                seen.add(line)
                authors.append(line)
        return authors

    def push(self, request_credential: Callable[[CredentialType], str]) -> str:
        """Push the current branch, routing credential prompts to `request_credential`.

        Blocks until git exits; call it from a background thread.
        """
        with AskpassServer(request_credential) as server:
            try:
                env = server.child_env()
            except AskpassError as e:
                raise GitError(str(e))
            try:
                result = subprocess.run(
                    ['git', 'push'],
                    capture_output=True,
                    text=True,
                    encoding='utf-8',
                    errors='replace',
                    cwd=self._cwd,
                    env=env,
                    stdin=subprocess.DEVNULL,
                )
            except FileNotFoundError:
                raise GitError("Git is not installed or not in PATH")
        if result.returncode != 0:
            raise GitError(f"Git command failed: git push\n{result.stderr}")
        return result.stderr or result.stdout
