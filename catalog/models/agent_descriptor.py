"""
Agent descriptor models for the catalog.

A descriptor is what the registry hands out for each hosted agent: a name,
the free-text prompt fields, and an open-ended property bag. Property values
are wrapped into a small closed set of variants so that readers can match on
them instead of inspecting raw Python types.
"""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field, field_validator


class StringProperty(BaseModel):
    """A property holding a string value."""

    model_config = {"frozen": True}

    kind: Literal["string"] = "string"
    value: str


class BoolProperty(BaseModel):
    """A property holding a boolean value."""

    model_config = {"frozen": True}

    kind: Literal["bool"] = "bool"
    value: bool


class OtherProperty(BaseModel):
    """Any property value that is neither a string nor a boolean."""

    model_config = {"frozen": True}

    kind: Literal["other"] = "other"
    value: Any = None


PropertyValue = Annotated[
    Union[StringProperty, BoolProperty, OtherProperty],
    Field(discriminator="kind"),
]

_VARIANTS = (StringProperty, BoolProperty, OtherProperty)

_VARIANT_BY_KIND = {"string": StringProperty, "bool": BoolProperty, "other": OtherProperty}


def _is_serialized_variant(value: Any) -> bool:
    return (
        isinstance(value, dict)
        and value.get("kind") in _VARIANT_BY_KIND
        and set(value) <= {"kind", "value"}
    )


def wrap_property(value: Any) -> StringProperty | BoolProperty | OtherProperty:
    """Wrap a raw value into its property variant.

    A dumped variant ({"kind": ..., "value": ...}) is loaded back as that
    variant. bool is tested before str since it is also an int.
    """
    if isinstance(value, _VARIANTS):
        return value
    if _is_serialized_variant(value):
        return _VARIANT_BY_KIND[value["kind"]].model_validate(value)
    if isinstance(value, bool):
        return BoolProperty(value=value)
    if isinstance(value, str):
        return StringProperty(value=value)
    return OtherProperty(value=value)


class AgentDescriptor(BaseModel):
    """A registered agent as seen by the catalog."""

    model_config = {"frozen": True}

    name: str | None = None
    instructions: str | None = None
    description: str | None = None

    # None means the agent was registered without any property bag
    properties: dict[str, PropertyValue] | None = None

    @field_validator("properties", mode="before")
    @classmethod
    def wrap_raw_values(cls, value: Any) -> Any:
        """Accept plain python values and wrap them into property variants."""
        if value is None:
            return None
        return {key: wrap_property(raw) for key, raw in dict(value).items()}
