#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Shared state for the party watcher
"""

# Standard library imports
import threading
from dataclasses import dataclass, field
from typing import Dict, Optional

from .phase_tracker import PhaseTracker
from .sent_shares import SentShareDeduper
from .share_cache import ReceivedShareCache


@dataclass
class SharedState:
    """State owned by one watcher and injected into its handlers"""
    phase: PhaseTracker = field(default_factory=PhaseTracker)
    received_shares: ReceivedShareCache = field(default_factory=ReceivedShareCache)
    sent_shares: SentShareDeduper = field(default_factory=SentShareDeduper)

    champ_select_started_ms: int = 0  # Shares sent before this are stale
    locked_champ_id: Optional[int] = None
    share_times: Dict[int, float] = field(default_factory=dict)  # champion -> monotonic time of last share

    stop_event: threading.Event = field(default_factory=threading.Event)

    def reset_champ_select(self, started_ms: int) -> None:
        """Forget everything tied to the previous champ select"""
        self.champ_select_started_ms = started_ms
        self.locked_champ_id = None
        self.share_times.clear()
