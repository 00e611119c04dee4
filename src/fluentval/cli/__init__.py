"""Command line interface for fluentval."""
