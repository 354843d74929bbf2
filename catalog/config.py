"""Environment configuration for the agent catalog."""

import logging
import os

from dotenv import load_dotenv

# load environment variables from .env file
load_dotenv()

DEFAULT_DEPLOYMENT_NAME = "gpt-4o-mini"
DEFAULT_API_VERSION = "2024-10-21"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_chat_model_config() -> dict:
    """read Azure OpenAI settings for the chat model."""
    return {
        "endpoint": os.getenv("AZURE_OPENAI_ENDPOINT"),
        "deployment_name": os.getenv("AZURE_OPENAI_DEPLOYMENT_NAME", DEFAULT_DEPLOYMENT_NAME),
        "api_version": os.getenv("AZURE_OPENAI_API_VERSION", DEFAULT_API_VERSION),
        "api_key": os.getenv("AZURE_OPENAI_API_KEY"),
    }


def get_server_config() -> dict:
    """read CORS and log settings for the HTTP server."""
    return {
        # comma-separated values for multiple origins, or "*" for all (development only)
        "cors_origins": os.getenv("CORS_ORIGINS", "*").split(","),
        "log_level": os.getenv("CATALOG_LOG_LEVEL", "INFO"),
    }


def get_bind_address() -> tuple[str, int]:
    """read the host and port uvicorn binds to; only needed when serving."""
    return os.getenv("CATALOG_HOST", "0.0.0.0"), int(os.getenv("CATALOG_PORT", "8000"))


def configure_logging(level: str | None = None) -> None:
    """set up root logging once at application startup."""
    if level is None:
        level = get_server_config()["log_level"]
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
