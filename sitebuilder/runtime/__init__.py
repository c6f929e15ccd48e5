"""Session lifecycle: cache location and state checkpointing."""

from __future__ import annotations

from .session import get_state, load_session, store_session

__all__ = [
    "get_state",
    "load_session",
    "store_session",
]
