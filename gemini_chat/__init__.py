"""Gemini Chatbot - a single-page chat interface for Google's Gemini API.

Combines NiceGUI for the chat page, FastAPI as the host application,
Agno for the model call, and Pydantic for data validation.

Components:
    - conversation: Message-state transitions and the turn controller
    - agent: Gemini model access and environment configuration
    - ui: Web interface for chat interactions
    - api: Host application and health endpoint
    - models: Message and conversation state schemas
"""

__version__ = "0.1.0"
