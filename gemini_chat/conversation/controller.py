"""Turn controller driving one chat page.

Owns the current ConversationState and the injected model call. A turn is
Idle -> Awaiting (busy) -> Idle; the model call is the only await point, so
the busy check and the start of a turn cannot interleave with another submit.
"""

import logging
from collections.abc import Awaitable, Callable

from gemini_chat.conversation import state as transitions
from gemini_chat.models.schemas import ConversationState

logger = logging.getLogger(__name__)

GenerateFn = Callable[[str], Awaitable[str]]
StateListener = Callable[[ConversationState], None]


class ConversationController:
    """Manages chat state for a single page session."""

    def __init__(
        self,
        generate: GenerateFn,
        state: ConversationState | None = None,
    ) -> None:
        """Initialize the controller.

        Args:
            generate: Coroutine function sending a prompt to the model.
            state: Optional starting state. Defaults to an empty conversation.
        """
        self._generate = generate
        self._state = state or ConversationState()
        self._listeners: list[StateListener] = []

    @property
    def state(self) -> ConversationState:
        return self._state

    def subscribe(self, listener: StateListener) -> None:
        """Call ``listener`` with the new state after every visible change."""
        self._listeners.append(listener)

    def _set_state(self, state: ConversationState) -> None:
        self._state = state
        for listener in self._listeners:
            listener(state)

    def update_draft(self, text: str) -> None:
        if text == self._state.draft:
            return
        self._set_state(transitions.update_draft(self._state, text))

    async def submit(self, draft: str | None = None) -> bool:
        """Run one turn with the current draft.

        Args:
            draft: Replaces the current draft before submitting, if given.

        Returns:
            True if a turn ran, False if the submit was ignored.
        """
        candidate = self._state
        if draft is not None:
            candidate = transitions.update_draft(candidate, draft)

        # A rejected submit leaves the state untouched, draft argument included.
        if not transitions.can_submit(candidate):
            return False

        prompt = candidate.draft
        state = transitions.start_turn(candidate)
        try:
            self._set_state(state)
            logger.info(f"Sending prompt ({len(prompt)} chars)")
            try:
                reply = await self._generate(prompt)
            except Exception:
                logger.exception("Error calling Gemini API")
                state = transitions.append_error(state)
            else:
                state = transitions.append_reply(state, reply)
                logger.info(f"Received reply ({len(reply)} chars)")
        finally:
            # Draft edits made while the call was in flight are kept.
            state = transitions.update_draft(state, self._state.draft)
            self._set_state(transitions.finish_turn(state))

        return True

    async def handle_key(self, key: str, shift: bool = False) -> bool:
        """Submit on Enter; ignore Shift+Enter and every other key.

        Returns:
            True if the key started a turn.
        """
        if not transitions.is_submit_key(key, shift):
            return False
        return await self.submit()
