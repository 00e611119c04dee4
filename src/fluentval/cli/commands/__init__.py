"""Click commands registered on the fluentval group."""
