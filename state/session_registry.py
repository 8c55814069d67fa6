#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Session Registry
Derives a session id from the gameflow session and invalidates per-session caches
"""

# Standard library imports
import threading
import time
from typing import Any, Callable, Optional

# Local imports
from config import SESSION_BUCKET_SECS_DEFAULT
from utils.core.logging import get_logger, log_event

from .sent_shares import SentShareDeduper
from .share_cache import ReceivedShareCache

log = get_logger()

GAME_PREFIX = "game:"
BUCKET_PREFIX = "bucket:"


def _positive_id(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)) and value > 0:
        return str(int(value))
    if isinstance(value, str) and value.strip().isdigit() and int(value) > 0:
        return str(int(value))
    return None


def extract_game_id(gameflow: Any) -> Optional[str]:
    """Game id from the top level or from gameData, None when the client has none yet"""
    if not isinstance(gameflow, dict):
        return None
    game_id = _positive_id(gameflow.get("gameId"))
    if game_id:
        return game_id
    game_data = gameflow.get("gameData")
    if isinstance(game_data, dict):
        return _positive_id(game_data.get("gameId"))
    return None


def derive_session_id(gameflow: Any, now: float, bucket_secs: int = SESSION_BUCKET_SECS_DEFAULT) -> str:
    game_id = extract_game_id(gameflow)
    if game_id:
        return f"{GAME_PREFIX}{game_id}"
    window_start = int(now // bucket_secs) * bucket_secs
    return f"{BUCKET_PREFIX}{window_start}"


class SessionRegistry:
    """
    Owns the current session id

    Any new id (including the first one) clears the received share cache and
    the sent share deduper in the same critical section that stores it. A
    bucket id is sticky: rolling over into the next time window keeps the
    stored bucket, so only a real game id (or a return from one) clears.
    """

    def __init__(self, received: ReceivedShareCache, sent: SentShareDeduper,
                 fetch_gameflow: Optional[Callable[[], Optional[dict]]] = None,
                 bucket_secs: int = SESSION_BUCKET_SECS_DEFAULT,
                 clock: Callable[[], float] = time.time):
        self._received = received
        self._sent = sent
        self._fetch_gameflow = fetch_gameflow
        self.bucket_secs = bucket_secs
        self._clock = clock
        self._session_id: Optional[str] = None
        self._lock = threading.Lock()

    @property
    def session_id(self) -> Optional[str]:
        return self._session_id

    def refresh(self) -> Optional[dict]:
        """
        Poll the gameflow session and apply it

        Returns the gameflow session for reuse within the same tick, or None
        when the poll failed (the stored id is then left untouched).
        """
        if self._fetch_gameflow is None:
            return None
        gameflow = self._fetch_gameflow()
        if not isinstance(gameflow, dict):
            return None
        self.observe(gameflow)
        return gameflow

    def observe(self, gameflow: Any) -> bool:
        """Apply an already fetched gameflow session, returns True when the session changed"""
        new_id = derive_session_id(gameflow, self._clock(), self.bucket_secs)
        with self._lock:
            current = self._session_id
            if current == new_id:
                return False
            if current is not None and current.startswith(BUCKET_PREFIX) and new_id.startswith(BUCKET_PREFIX):
                return False
            with self._received.lock, self._sent.lock:
                self._received.clear()
                self._sent.clear()
                self._session_id = new_id

        if current is None:
            log.debug(f"[Session] First session observed: {new_id}")
        else:
            log_event(log, "Session changed, share caches cleared", "🔄", {"From": current, "To": new_id})
        return True
