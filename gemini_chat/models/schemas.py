from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Sender(str, Enum):
    """Author of a chat message."""

    USER = "user"
    BOT = "bot"


class Message(BaseModel):
    """A single chat message in the conversation.

    Attributes:
        text: The message text, kept verbatim.
        sender: Who wrote the message.
    """

    model_config = ConfigDict(frozen=True)

    text: str
    sender: Sender

    @property
    def is_user(self) -> bool:
        return self.sender is Sender.USER


class ConversationState(BaseModel):
    """Snapshot of one conversation.

    Attributes:
        messages: Append-only history in submit/completion order.
        draft: The unsent text in the input field.
        busy: True exactly while a model call is outstanding.
    """

    model_config = ConfigDict(frozen=True)

    messages: tuple[Message, ...] = Field(default_factory=tuple)
    draft: str = ""
    busy: bool = False
