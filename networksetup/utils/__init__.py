"""
Utility functions for networksetup.

This module provides the subprocess runner used by every operation.
"""

from .commands import build_command_line, redact_command, run_command

__all__ = [
    "build_command_line",
    "redact_command",
    "run_command",
]
