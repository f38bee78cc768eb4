"""
Command-line interface for icpcboard.

This package parses the contest command protocol and runs it against a
local contest or a remote scoreboard server.
"""

from .protocol import Command, CommandRunner, iter_tokens, parse_commands

__all__ = ["Command", "CommandRunner", "iter_tokens", "parse_commands"]
