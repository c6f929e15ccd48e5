"""Session cache: checkpoint and restore the whole application state.

The state is stored as a single pickle record. Loading never raises: a
missing, truncated, or foreign record reads as "no session". Storing never
raises either; failures are logged and the in-memory state is left as is.
"""

from __future__ import annotations

import logging
import os
import pickle
import tempfile

from ..content_model.types import AppState
from . import config

logger = logging.getLogger(__name__)


def load_session() -> AppState | None:
    """Return the cached ``AppState`` or ``None`` when unavailable."""
    path = config.load_cache_path()
    try:
        with path.open("rb") as handle:
            state = pickle.load(handle)
    except FileNotFoundError:
        return None
    except Exception as exc:
        logger.debug("ignoring unreadable session cache %s: %s", path, exc)
        return None
    if not isinstance(state, AppState):
        logger.debug("ignoring session cache %s holding %s", path, type(state).__name__)
        return None
    return state


def store_session(state: AppState) -> bool:
    """Checkpoint ``state`` to the cache location.

    The record is written to a temporary file beside the target and moved
    into place, so readers only ever see a complete record. Returns whether
    the checkpoint succeeded.
    """
    target = config.cache_path()
    try:
        payload = pickle.dumps(state, protocol=pickle.HIGHEST_PROTOCOL)
    except Exception as exc:
        logger.warning("cannot serialize session state: %s", exc)
        return False

    tmp_name: str | None = None
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=".cache-", dir=target.parent)
        with os.fdopen(fd, "wb") as handle:
            handle.write(payload)
        os.replace(tmp_name, target)
        tmp_name = None
    except OSError as exc:
        logger.warning("cannot write session cache %s: %s", target, exc)
        return False
    finally:
        if tmp_name is not None:
            try:
                os.unlink(tmp_name)
            except OSError:
                pass
    return True


def get_state() -> AppState:
    """Return the cached session state or a fresh default one."""
    state = load_session()
    if state is None:
        return AppState()
    return state


__all__ = [
    "load_session",
    "store_session",
    "get_state",
]
