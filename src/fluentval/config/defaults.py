"""Default settings for fluentval validators."""

# Label substituted for {1} when validate() is called without one
DEFAULT_LABEL = "field"

DEFAULT_SETTINGS: dict[str, object] = {
    "default_label": DEFAULT_LABEL,
    "messages": {},
}

# Settings field to environment variable mapping
ENV_VAR_MAP: dict[str, str] = {
    "default_label": "FLUENTVAL_DEFAULT_LABEL",
}
