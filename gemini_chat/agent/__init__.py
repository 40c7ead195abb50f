"""Agno agent logic for Gemini completions.

Responsibilities:
    - Agent initialization with a Gemini model
    - Environment configuration for credentials and sampling
    - Collapsing every provider fault into RemoteCallFailure

One request per call; no sessions, memory, or retries.
"""

from gemini_chat.agent.chat_agent import ChatService, RemoteCallFailure
from gemini_chat.agent.config import AgentConfig, get_agent_config

__all__ = ["AgentConfig", "ChatService", "RemoteCallFailure", "get_agent_config"]
