"""Conversation state management for the chat page.

Responsibilities:
    - Pure state transitions (draft edits, turn start, reply, error, finish)
    - Submission rules: non-blank draft, one outstanding call at a time
    - Key handling: Enter submits, Shift+Enter does not
    - Turn controller awaiting the injected model call

Contains no rendering code. The UI subscribes to state changes.
"""

from gemini_chat.conversation.controller import ConversationController
from gemini_chat.conversation.state import (
    ERROR_REPLY,
    append_error,
    append_reply,
    can_submit,
    finish_turn,
    is_submit_key,
    start_turn,
    update_draft,
)

__all__ = [
    "ERROR_REPLY",
    "ConversationController",
    "append_error",
    "append_reply",
    "can_submit",
    "finish_turn",
    "is_submit_key",
    "start_turn",
    "update_draft",
]
