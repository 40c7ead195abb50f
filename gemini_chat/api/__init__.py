"""FastAPI host application for the chatbot.

NiceGUI mounts the chat page onto this application; the only route of its
own is the health check.

Endpoints:
    - GET /health: Service health status
"""

from gemini_chat.api.app import create_app

__all__ = ["create_app"]
