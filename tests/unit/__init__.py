"""Unit tests for individual components in isolation.

Coverage:
    - conversation/: State transitions and the turn controller
    - models/: Pydantic immutability and defaults
    - agent/: Agent configuration and service construction
"""
