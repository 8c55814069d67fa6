#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Signal handlers for graceful shutdown
"""

import signal
import threading


def setup_signal_handlers(stop_event: threading.Event) -> None:
    """SIGINT/SIGTERM set the shared stop event; a second signal is ignored"""

    def signal_handler(signum, frame):
        if stop_event.is_set():
            return
        print(f"\nReceived signal {signum}, initiating graceful shutdown...")
        stop_event.set()

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)
