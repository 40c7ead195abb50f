"""Gemini credentials and sampling settings.

Read once from the process environment (GEMINI_API_KEY or GOOGLE_API_KEY,
GEMINI_MODEL) when the entry point builds the chat service.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# A local .env may hold the Gemini key during development
load_dotenv()


class AgentConfig(BaseModel):
    """Configuration for the Gemini chat agent.

    A missing API key is not a configuration error: the app still starts
    and every model call fails with the generic error reply.

    Attributes:
        api_key: Google AI API key.
        model_name: Gemini model identifier.
        temperature: Sampling temperature (0.0 = deterministic, 2.0 = creative).
        max_tokens: Maximum tokens in generated response.
    """

    api_key: str = Field(
        default_factory=lambda: os.getenv("GEMINI_API_KEY", os.getenv("GOOGLE_API_KEY", "")),
        description="API key for the Gemini API",
    )
    model_name: str = Field(
        default_factory=lambda: os.getenv("GEMINI_MODEL", "gemini-2.5-flash"),
        description="Model to use",
    )
    temperature: float = Field(
        default=0.7,
        ge=0.0,
        le=2.0,
        description="Sampling temperature for response generation",
    )
    max_tokens: int = Field(
        default=2048,
        ge=1,
        le=65536,
        description="Maximum tokens in generated response",
    )

    @field_validator("api_key")
    @classmethod
    def strip_api_key(cls, v: str) -> str:
        """Strip surrounding whitespace from the API key."""
        return v.strip()

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)


def get_agent_config() -> AgentConfig:
    """Create agent configuration from environment.

    Returns:
        Configured AgentConfig instance.
    """
    return AgentConfig()
