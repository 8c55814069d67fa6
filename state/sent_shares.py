#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Sent Share Deduper
Remembers which shares were already sent during the current phase
"""

import threading
from typing import Optional, Set


def share_signature(friend, champion_id: int, skin_id: int, chroma_id: Optional[int] = None) -> str:
    """Key for one concrete share sent to one friend"""
    return f"{str(friend).strip()}_{champion_id}_{skin_id}_{chroma_id or 0}"


class SentShareDeduper:
    """Membership set of share signatures, cleared at phase and session boundaries"""

    def __init__(self):
        self._sent: Set[str] = set()
        self.lock = threading.RLock()

    def was_sent(self, signature: str) -> bool:
        with self.lock:
            return signature in self._sent

    def mark_sent(self, signature: str) -> None:
        with self.lock:
            self._sent.add(signature)

    def clear(self) -> None:
        with self.lock:
            self._sent.clear()

    def __len__(self) -> int:
        with self.lock:
            return len(self._sent)
