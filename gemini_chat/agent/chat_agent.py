"""Agno agent service for single-turn Gemini completions.

Wraps Agno's Agent with a Gemini model behind one coroutine,
``generate(prompt) -> str``, which the conversation controller awaits
once per user turn.

The agent is deliberately stateless: no storage is attached, so Agno sends
only the current prompt and keeps no history between turns.
"""

import logging

from agno.agent import Agent
from agno.models.google import Gemini
from agno.run.base import RunStatus

from gemini_chat.agent.config import AgentConfig, get_agent_config

logger = logging.getLogger(__name__)


class RemoteCallFailure(Exception):
    """The Gemini call failed for any reason (auth, quota, network, provider)."""


class ChatService:
    """Service for sending one prompt to Gemini and returning its text.

    Constructed once by the application entry point and injected into
    every conversation controller.
    """

    def __init__(self, config: AgentConfig | None = None) -> None:
        """Initialize the chat service.

        Args:
            config: Optional agent configuration.
                    Loads from environment if not provided.
        """
        self._config = config or get_agent_config()
        self._agent = self._create_agent()

    @property
    def config(self) -> AgentConfig:
        return self._config

    def _create_agent(self) -> Agent:
        """Create the Agno agent instance.

        Returns:
            Configured Agent with a Gemini model and no storage.
        """
        model = Gemini(
            id=self._config.model_name,
            api_key=self._config.api_key or None,
            temperature=self._config.temperature,
            max_output_tokens=self._config.max_tokens,
        )

        return Agent(
            model=model,
            description="A helpful chat assistant.",
            # Output as markdown for rich formatting in UI
            markdown=True,
        )

    async def generate(self, prompt: str) -> str:
        """Get the complete response for a prompt.

        Args:
            prompt: The user's message, sent verbatim.

        Returns:
            Response text, or an empty string if the model returned none.

        Raises:
            RemoteCallFailure: If the call fails or the run ends in error.
        """
        try:
            response = await self._agent.arun(prompt)
        except Exception as e:
            raise RemoteCallFailure(f"Gemini request failed: {e}") from e

        if response.status == RunStatus.error:
            raise RemoteCallFailure(f"Gemini run ended in error: {response.content}")

        return str(response.content or "")
