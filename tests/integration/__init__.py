"""Integration tests wiring several components together.

Coverage:
    - api/: FastAPI host application via ASGITransport
    - Full turns: ConversationController driving ChatService
"""
