#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Received Share Cache
Session-scoped map of (friend, champion) to the latest skin a friend shared
"""

# Standard library imports
import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Set, Tuple

# Local imports
from config import MAX_SHARE_AGE_SECS_DEFAULT
from utils.core.logging import get_logger

log = get_logger()

# Anything above this is a millisecond timestamp (1e11 s is far in the future)
_MS_THRESHOLD = 1e11


def timestamp_to_seconds(ts: float) -> float:
    """Normalize a second or millisecond unix timestamp to seconds"""
    ts = float(ts)
    return ts / 1000.0 if ts > _MS_THRESHOLD else ts


def normalize_friend_id(friend) -> str:
    return str(friend).strip()


@dataclass(frozen=True)
class ReceivedShare:
    """A skin offer received from a friend for one champion"""
    from_summoner_id: str
    from_summoner_name: str
    champion_id: int
    skin_id: int
    chroma_id: Optional[int] = None
    file_path: Optional[str] = None
    received_at: float = 0.0  # unix time, seconds or milliseconds
    skin_name: str = ""

    @property
    def key(self) -> Tuple[str, int]:
        return (self.from_summoner_id, self.champion_id)

    def age_seconds(self, now: float) -> float:
        return timestamp_to_seconds(now) - timestamp_to_seconds(self.received_at)


class ReceivedShareCache:
    """
    Latest share per (friend, champion)

    A re-share for a held champion overwrites the previous entry, so the
    cache never holds more than one entry per key. All operations take one
    short lock; `lock` is exposed so a caller can group several caches into
    one atomic step.
    """

    def __init__(self, clock: Callable[[], float] = time.time):
        self._shares: Dict[Tuple[str, int], ReceivedShare] = {}
        self._clock = clock
        self.lock = threading.RLock()

    def put(self, friend, champion_id: int, skin_id: int, chroma_id: Optional[int] = None,
            file_path: Optional[str] = None, received_at: Optional[float] = None,
            *, friend_name: str = "", skin_name: str = "") -> ReceivedShare:
        """Store a share, replacing any earlier one for the same friend and champion"""
        share = ReceivedShare(
            from_summoner_id=normalize_friend_id(friend),
            from_summoner_name=friend_name,
            champion_id=int(champion_id),
            skin_id=int(skin_id),
            chroma_id=chroma_id,
            file_path=file_path,
            received_at=self._clock() if received_at is None else received_at,
            skin_name=skin_name,
        )
        with self.lock:
            replaced = self._shares.get(share.key)
            self._shares[share.key] = share
        if replaced is not None and replaced.skin_id != share.skin_id:
            log.debug(f"[ShareCache] {share.from_summoner_id} re-shared champion {share.champion_id}: "
                      f"skin {replaced.skin_id} -> {share.skin_id}")
        return share

    def get(self, friend, champion_id: int) -> Optional[ReceivedShare]:
        with self.lock:
            return self._shares.get((normalize_friend_id(friend), int(champion_id)))

    def prune(self, max_age_secs: float = MAX_SHARE_AGE_SECS_DEFAULT, now: Optional[float] = None) -> int:
        """Remove entries strictly older than max_age_secs, returns the number removed"""
        now = self._clock() if now is None else now
        with self.lock:
            expired = [key for key, share in self._shares.items() if share.age_seconds(now) > max_age_secs]
            for key in expired:
                del self._shares[key]
        if expired:
            log.debug(f"[ShareCache] Pruned {len(expired)} expired share(s)")
        return len(expired)

    def values(self, max_age_secs: Optional[float] = None, now: Optional[float] = None) -> List[ReceivedShare]:
        """Snapshot of cached shares, optionally limited to those within max_age_secs"""
        with self.lock:
            shares = list(self._shares.values())
        if max_age_secs is None:
            return shares
        now = self._clock() if now is None else now
        return [share for share in shares if share.age_seconds(now) <= max_age_secs]

    def friends_who_shared(self, max_age_secs: Optional[float] = None) -> Set[str]:
        return {share.from_summoner_id for share in self.values(max_age_secs)}

    def clear(self) -> None:
        with self.lock:
            self._shares.clear()

    def __len__(self) -> int:
        with self.lock:
            return len(self._shares)
