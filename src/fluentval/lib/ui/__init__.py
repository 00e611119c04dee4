"""Terminal output helpers for the fluentval CLI."""

from fluentval.lib.ui.colors import ANSIColors, colorize, status_label
from fluentval.lib.ui.terminal import is_tty

__all__ = ["ANSIColors", "colorize", "status_label", "is_tty"]
