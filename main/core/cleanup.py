#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Cleanup logic for application shutdown
"""

from config import THREAD_JOIN_TIMEOUT_S
from threads.party_watcher_thread import PartyWatcherThread
from utils.core.logging import get_logger, log_section, log_success

log = get_logger()


def perform_cleanup(watcher: PartyWatcherThread, timeout: float = THREAD_JOIN_TIMEOUT_S) -> bool:
    """Stop the watcher and wait for it, returns True when it stopped in time"""
    log_section(log, "Cleanup", "🧹")
    watcher.stop()
    watcher.join(timeout=timeout)
    if watcher.is_alive():
        log.warning(f"Party watcher did not stop within {timeout}s timeout")
        return False
    log_success(log, "Party watcher stopped", "✓")
    return True
