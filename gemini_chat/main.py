"""Main application entry point.

Runs FastAPI (port 8000) with NiceGUI mounted for the chat interface.
Environment variables are loaded from .env file.
"""

import logging
import os
import sys

from dotenv import load_dotenv

# Load environment variables before any other imports that might need them
load_dotenv()

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


def main() -> None:
    """Build the chat service and serve the chat page.

    The ChatService is created once here and shared by every page session.
    """
    import uvicorn
    from nicegui import ui

    from gemini_chat.agent import ChatService, get_agent_config
    from gemini_chat.api import create_app
    from gemini_chat.ui import register_chat_page

    config = get_agent_config()
    if not config.has_api_key:
        logger.warning(
            "No API key set (GEMINI_API_KEY or GOOGLE_API_KEY); every reply will be an error"
        )

    service = ChatService(config=config)
    register_chat_page(service.generate)

    app = create_app()
    ui.run_with(
        app,
        title="Gemini Chatbot",
        favicon="🤖",
        storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", "gemini-chatbot-secret"),
    )

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    logger.info(f"Using model {config.model_name}")
    logger.info(f"Chat UI available at http://localhost:{port}/")

    uvicorn.run(
        app,
        host=host,
        port=port,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


if __name__ == "__main__":
    main()
