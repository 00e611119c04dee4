"""Settings model for configuring Validator instances."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fluentval.checks import resolve_message_key


class ValidatorSettings(BaseModel):
    """Settings applied to a Validator at construction.

    Attributes:
        default_label: Label used in messages when validate() gets none
        messages: Template overrides keyed by message name
    """

    model_config = ConfigDict(extra="forbid")

    default_label: str = Field(
        "field", min_length=1, description="Label used when none is given"
    )
    messages: dict[str, str] = Field(
        default_factory=dict, description="Message template overrides"
    )

    @field_validator("default_label")
    @classmethod
    def validate_default_label(cls, v: str) -> str:
        """Reject labels made only of whitespace."""
        if not v.strip():
            raise ValueError("default_label cannot be blank")
        return v

    @field_validator("messages")
    @classmethod
    def validate_messages(cls, v: dict[str, str]) -> dict[str, str]:
        """Normalize message names to table keys and reject empty templates.

        Args:
            v: Mapping of message name to template

        Returns:
            Mapping keyed by message table names

        Raises:
            ValueError: If any template is empty
        """
        normalized: dict[str, str] = {}
        for name, template in v.items():
            if not template:
                raise ValueError(f"Message template for '{name}' cannot be empty")
            normalized[resolve_message_key(name)] = template
        return normalized
