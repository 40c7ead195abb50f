"""Test package for Gemini Chatbot.

Structure:
    - unit/: State transitions, controller, models and agent configuration
    - integration/: Host application and full turns through the chat service

The Gemini API is patched out everywhere except the live test, which is
skipped unless GEMINI_API_KEY is set.
"""
