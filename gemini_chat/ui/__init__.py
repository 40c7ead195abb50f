"""NiceGUI interface - thin visualization layer for chat interactions.

Responsibilities:
    - Chat message display (plain text for the user, markdown for the bot)
    - "Bot is typing..." indicator while a request is outstanding
    - Draft input with Enter to send and Shift+Enter for a newline

Contains no business logic. Delegates every state change to the
ConversationController and re-renders from the state it publishes.
"""

from gemini_chat.ui.chat_page import register_chat_page

__all__ = ["register_chat_page"]
