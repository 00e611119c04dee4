"""Pydantic models for fluentval settings."""

from fluentval.models.config import ValidatorSettings

__all__ = ["ValidatorSettings"]
