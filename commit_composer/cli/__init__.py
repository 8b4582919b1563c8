"""Command Line Interface Package"""

from commit_composer.cli.main import main

__all__ = ["main"]
