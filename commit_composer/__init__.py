"""
Commit Composer

Compose, edit and preserve git commit messages from the terminal.
"""

__version__ = "1.0.0"
