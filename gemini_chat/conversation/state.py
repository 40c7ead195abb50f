"""State transitions for a conversation.

Each function takes a ConversationState and returns a new one. Nothing here
knows about NiceGUI or the model; the controller strings these together
around the remote call.
"""

from gemini_chat.models.schemas import ConversationState, Message, Sender

ERROR_REPLY = "Sorry, I encountered an error. Please try again."


def can_submit(state: ConversationState) -> bool:
    """Return True if the draft has text and no call is outstanding."""
    return bool(state.draft.strip()) and not state.busy


def update_draft(state: ConversationState, text: str) -> ConversationState:
    return state.model_copy(update={"draft": text})


def start_turn(state: ConversationState) -> ConversationState:
    """Append the draft as a user message, clear it, and mark busy.

    Raises:
        ValueError: If the draft is blank or a call is already outstanding.
    """
    if not can_submit(state):
        raise ValueError("Cannot start a turn while busy or with an empty draft")

    return state.model_copy(
        update={
            "messages": (*state.messages, Message(text=state.draft, sender=Sender.USER)),
            "draft": "",
            "busy": True,
        }
    )


def append_reply(state: ConversationState, text: str) -> ConversationState:
    return state.model_copy(
        update={"messages": (*state.messages, Message(text=text, sender=Sender.BOT))}
    )


def append_error(state: ConversationState) -> ConversationState:
    return append_reply(state, ERROR_REPLY)


def finish_turn(state: ConversationState) -> ConversationState:
    return state.model_copy(update={"busy": False})


def is_submit_key(key: str, shift: bool = False) -> bool:
    """Enter submits; Shift+Enter is left to the textarea as a newline."""
    return key == "Enter" and not shift
