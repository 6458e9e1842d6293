"""Conversation session storage."""

from talkthrough.boundary.session_store.memory_store import InMemorySessionStore

__all__ = ["InMemorySessionStore"]
