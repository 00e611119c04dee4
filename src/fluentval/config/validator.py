"""Helpers for turning settings validation failures into readable text."""

from pydantic import ValidationError as PydanticValidationError


def flatten_settings_errors(exc: PydanticValidationError) -> list[str]:
    """Flatten a pydantic ValidationError into one line per offending field.

    Args:
        exc: Error raised while building ValidatorSettings

    Returns:
        Lines of the form ``"Field 'messages.min': <reason>"``
    """
    lines: list[str] = []

    for error in exc.errors():
        loc = error.get("loc", ())
        field_path = ".".join(str(part) for part in loc) if loc else "settings"
        reason = error.get("msg", "Unknown error")

        if error.get("type") == "extra_forbidden":
            lines.append(f"Field '{field_path}': unknown setting")
        elif "input" in error and error.get("type") == "value_error":
            lines.append(
                f"Field '{field_path}': {reason} (received: {error['input']!r})"
            )
        else:
            lines.append(f"Field '{field_path}': {reason}")

    return lines or ["Settings validation failed with unknown error"]
