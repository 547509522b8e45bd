"""Curses terminal front end."""

from jumpboi.terminal.runner import TerminalRunner, TerminalError

__all__ = ["TerminalRunner", "TerminalError"]
