"""Terminal detection for CLI output."""

import sys


def is_tty() -> bool:
    """Return True when stdout is an interactive terminal.

    The CLI colours its PASS/FAIL status only in that case, so piped output
    and CI logs stay plain.
    """
    return sys.stdout.isatty()
