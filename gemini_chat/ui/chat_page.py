"""NiceGUI chat interface driven by a ConversationController."""

from nicegui import events, ui

from gemini_chat.conversation.controller import ConversationController, GenerateFn
from gemini_chat.models.schemas import ConversationState, Message

CUSTOM_CSS = """
<style>
    body { background: #f1f3f4; min-height: 100vh; }

    .app-container {
        background: white;
        border-radius: 12px;
        box-shadow: 0 2px 8px rgba(0, 0, 0, 0.1);
        overflow: hidden;
    }

    .header { background: linear-gradient(135deg, #4285f4 0%, #9b72cb 100%); }

    .message-user {
        background: #4285f4;
        color: white;
        border-radius: 18px 18px 4px 18px;
        white-space: pre-wrap;
    }

    .message-bot {
        background: #f3f4f6;
        color: #1f2937;
        border-radius: 18px 18px 18px 4px;
    }

    .avatar-user { background: #4285f4; }
    .avatar-bot { background: #9b72cb; }

    .typing-dot {
        width: 8px; height: 8px;
        background: #9b72cb;
        border-radius: 50%;
        animation: bounce 1.4s infinite ease-in-out;
    }
    .typing-dot:nth-child(2) { animation-delay: 0.2s; }
    .typing-dot:nth-child(3) { animation-delay: 0.4s; }

    @keyframes bounce {
        0%, 60%, 100% { transform: translateY(0); }
        30% { transform: translateY(-6px); }
    }

    .input-box {
        background: #f9fafb;
        border: 1px solid #e5e7eb;
        border-radius: 12px;
    }
    .input-box:focus-within { border-color: #4285f4; }
</style>
"""


def register_chat_page(generate: GenerateFn) -> None:
    """Register the chat page at ``/``.

    Every page load gets its own controller; all of them share ``generate``.

    Args:
        generate: Coroutine function sending one prompt to the model.
    """

    @ui.page("/")
    def chat_page() -> None:
        ui.add_head_html(CUSTOM_CSS)
        controller = ConversationController(generate)
        rendered_count: int | None = None

        messages_container: ui.column
        scroll_area: ui.scroll_area
        typing_row: ui.row
        input_field: ui.textarea
        send_btn: ui.button

        def render_avatar(is_user: bool) -> None:
            css = "avatar-user" if is_user else "avatar-bot"
            icon = "person" if is_user else "smart_toy"
            with ui.element("div").classes(
                f"w-9 h-9 rounded-full flex items-center justify-center {css}"
            ):
                ui.icon(icon).classes("text-white text-lg")

        def render_message(msg: Message) -> None:
            align = "justify-end" if msg.is_user else "justify-start"
            with ui.row().classes(f"w-full {align} gap-3 items-end"):
                if not msg.is_user:
                    render_avatar(False)
                if msg.is_user:
                    ui.label(msg.text).classes("message-user px-4 py-3 max-w-[70%] text-sm")
                else:
                    with ui.element("div").classes("message-bot px-4 py-3 max-w-[70%]"):
                        ui.markdown(msg.text).classes("text-sm")
                if msg.is_user:
                    render_avatar(True)

        def refresh_messages(state: ConversationState) -> None:
            nonlocal rendered_count
            if rendered_count == len(state.messages):
                return
            messages_container.clear()
            with messages_container:
                if not state.messages:
                    with ui.column().classes("w-full h-64 items-center justify-center gap-3"):
                        ui.icon("forum").classes("text-5xl text-gray-300")
                        ui.label("Start a conversation").classes("text-lg text-gray-400")
                for msg in state.messages:
                    render_message(msg)
            rendered_count = len(state.messages)
            scroll_area.scroll_to(percent=1.0)

        def on_state_change(state: ConversationState) -> None:
            refresh_messages(state)
            typing_row.set_visibility(state.busy)
            send_btn.set_enabled(not state.busy)
            if input_field.value != state.draft:
                input_field.value = state.draft

        async def send_message() -> None:
            await controller.submit()

        async def on_keydown(e: events.GenericEventArguments) -> None:
            # Only bound to plain Enter, so missing args mean Enter.
            args = e.args or {}
            await controller.handle_key(args.get("key", "Enter"), bool(args.get("shiftKey")))

        # === UI Layout ===
        with (
            ui.element("div").classes("w-full min-h-screen p-4 md:p-8"),
            ui.column().classes("w-full max-w-3xl mx-auto app-container").style(
                "height: calc(100vh - 4rem)"
            ),
        ):
            # Header
            with ui.row().classes("w-full header px-5 py-4 items-center gap-3"):
                ui.icon("smart_toy").classes("text-white text-3xl")
                ui.label("Gemini Chatbot").classes("text-lg font-semibold text-white")

            # Messages
            with ui.scroll_area().classes("flex-grow w-full bg-gray-50") as scroll_area:
                with ui.column().classes("w-full p-5 gap-4"):
                    messages_container = ui.column().classes("w-full gap-4")
                    with ui.row().classes("w-full justify-start gap-3 items-end") as typing_row:
                        render_avatar(False)
                        with ui.element("div").classes("message-bot px-4 py-3"):
                            with ui.row().classes("items-center gap-2"):
                                with ui.row().classes("gap-1"):
                                    for _ in range(3):
                                        ui.element("div").classes("typing-dot")
                                ui.label("Bot is typing...").classes(
                                    "text-sm text-gray-500 italic"
                                )

            # Input
            with ui.row().classes("w-full p-4 gap-3 items-end bg-white border-t"):
                with ui.element("div").classes("flex-grow input-box px-3 py-2"):
                    input_field = (
                        ui.textarea(
                            placeholder="Type your message...",
                            on_change=lambda e: controller.update_draft(e.value or ""),
                        )
                        .props("autogrow borderless dense rows=1")
                        .classes("w-full")
                        .on("keydown.enter.exact.prevent", on_keydown, ["key", "shiftKey"])
                    )
                send_btn = ui.button("Send", icon="send", on_click=send_message).props(
                    "rounded unelevated color=primary"
                )

        controller.subscribe(on_state_change)
        on_state_change(controller.state)
