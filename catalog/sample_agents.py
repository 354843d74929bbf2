"""The agents registered when the catalog server starts."""

from catalog.hosted_agent import AgentDefinition
from catalog.models.agent_descriptor import AgentDescriptor


def create_weather_agent(key: str) -> AgentDescriptor:
    return AgentDescriptor(
        name=key,
        instructions="You are a helpful weather assistant that provides weather information.",
        description="An agent that helps users with weather-related queries.",
        properties={
            "icon": "https://example.com/icons/weather.png",
            "beta": False,
            "visibility": "Visible",
        },
    )


def create_travel_agent(key: str) -> AgentDescriptor:
    return AgentDescriptor(
        name=key,
        instructions="You are a helpful travel assistant that helps plan trips.",
        description="An agent that helps users plan their travel and vacations.",
        properties={
            "icon": "https://example.com/icons/travel.png",
            "beta": True,
            "visibility": "Visible",
        },
    )


def create_experimental_agent(key: str) -> AgentDescriptor:
    # internal testing only, kept out of public listings
    return AgentDescriptor(
        name=key,
        instructions="You are an experimental assistant for testing new features.",
        description="An experimental agent for internal testing only.",
        properties={
            "icon": "https://example.com/icons/experimental.png",
            "beta": True,
            "visibility": "Unlisted",
        },
    )


SAMPLE_AGENTS = [
    AgentDefinition("weather-agent", create_weather_agent),
    AgentDefinition("travel-agent", create_travel_agent),
    AgentDefinition("experimental-agent", create_experimental_agent),
]
