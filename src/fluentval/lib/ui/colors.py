"""ANSI colouring for validation results, disabled outside a TTY."""

from fluentval.lib.ui.terminal import is_tty


class ANSIColors:
    """ANSI escape codes used by the CLI.

    Attributes:
        GREEN: Valid result
        RED: Invalid result
        RESET: Restore the default colour
    """

    GREEN = "\033[92m"
    RED = "\033[91m"
    RESET = "\033[0m"


def colorize(text: str, color: str, force_tty: bool | None = None) -> str:
    """Wrap ``text`` in ``color`` when writing to a terminal.

    Args:
        text: Text to colour
        color: One of the ANSIColors codes
        force_tty: Override TTY detection (for tests)

    Returns:
        Coloured text on a TTY, ``text`` unchanged otherwise
    """
    use_colors = force_tty if force_tty is not None else is_tty()
    if not use_colors:
        return text
    return f"{color}{text}{ANSIColors.RESET}"


def status_label(valid: bool, force_tty: bool | None = None) -> str:
    """Return ``PASS`` in green or ``FAIL`` in red."""
    if valid:
        return colorize("PASS", ANSIColors.GREEN, force_tty)
    return colorize("FAIL", ANSIColors.RED, force_tty)
