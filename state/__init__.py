#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
State Package
Owned state objects shared by the party watcher and its handlers
"""

from .phase_tracker import Phase, PhaseChange, PhaseTracker
from .sent_shares import SentShareDeduper, share_signature
from .session_registry import SessionRegistry, derive_session_id, extract_game_id
from .share_cache import ReceivedShare, ReceivedShareCache, timestamp_to_seconds
from .shared_state import SharedState

__all__ = [
    'Phase',
    'PhaseChange',
    'PhaseTracker',
    'SentShareDeduper',
    'share_signature',
    'SessionRegistry',
    'derive_session_id',
    'extract_game_id',
    'ReceivedShare',
    'ReceivedShareCache',
    'timestamp_to_seconds',
    'SharedState',
]
