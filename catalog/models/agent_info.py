"""Output-facing projection of a registered agent."""

from enum import Enum

from pydantic import BaseModel


class Visibility(str, Enum):
    """Whether an agent is shown in catalog listings."""

    visible = "Visible"
    unlisted = "Unlisted"


class AgentInfo(BaseModel):
    """Display metadata for one agent, built fresh for every request.

    `icon` stays None when unset and is dropped from the JSON body.
    """

    name: str
    icon: str | None = None
    beta: bool = False
    visibility: Visibility = Visibility.visible
