"""Core data models for the agent catalog."""

from catalog.models.agent_descriptor import (
    AgentDescriptor,
    BoolProperty,
    OtherProperty,
    PropertyValue,
    StringProperty,
    wrap_property,
)
from catalog.models.agent_info import (
    AgentInfo,
    Visibility,
)

__all__ = [
    # Descriptors
    "AgentDescriptor",
    "BoolProperty",
    "OtherProperty",
    "PropertyValue",
    "StringProperty",
    "wrap_property",
    # Projection
    "AgentInfo",
    "Visibility",
]
