"""Chat model client shared by all hosted agents.

The client is built lazily on first use so that the catalog can start and
serve listings without any model credentials configured.
"""

import logging

from langchain_openai import AzureChatOpenAI

from catalog.config import get_chat_model_config

logger = logging.getLogger(__name__)


class ChatModelConfigError(Exception):
    """Raised when the chat model cannot be built from the configuration."""
    pass


class ChatModelProvider:
    """Get or create the process-wide Azure OpenAI chat model."""

    def __init__(self, config: dict | None = None) -> None:
        """
        Args:
            config: settings as returned by get_chat_model_config();
                read from the environment when omitted
        """
        self.config = config if config is not None else get_chat_model_config()
        self._chat_model: AzureChatOpenAI | None = None

    def get(self) -> AzureChatOpenAI:
        """Return the cached chat model, creating it on first call."""
        if self._chat_model is None:
            self._chat_model = self._build()
        return self._chat_model

    def _build(self) -> AzureChatOpenAI:
        endpoint = self.config.get("endpoint")
        if not endpoint:
            raise ChatModelConfigError("AZURE_OPENAI_ENDPOINT is not set.")
        api_key = self.config.get("api_key")
        if not api_key:
            raise ChatModelConfigError("AZURE_OPENAI_API_KEY is not set.")

        deployment = self.config.get("deployment_name")
        logger.info("creating chat model for deployment %s", deployment)
        return AzureChatOpenAI(
            azure_endpoint=endpoint,
            azure_deployment=deployment,
            api_version=self.config.get("api_version"),
            api_key=api_key,
        )
