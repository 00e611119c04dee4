"""Shared library code for fluentval: errors, patterns and terminal helpers."""
