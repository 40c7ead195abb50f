"""Pydantic models for the conversation.

Messages and conversation state are immutable values; every change
produces a new instance.

Models:
    - Sender: Who wrote a message (user or bot)
    - Message: Individual message in the conversation
    - ConversationState: History, draft and busy flag for one chat page
"""

from gemini_chat.models.schemas import ConversationState, Message, Sender

__all__ = ["ConversationState", "Message", "Sender"]
