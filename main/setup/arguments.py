#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Command line argument parsing
"""

import argparse
from typing import List, Optional

from config import CHAT_POLL_INTERVAL_DEFAULT, PARTY_POLL_INTERVAL_DEFAULT


def setup_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse and return command line arguments"""
    ap = argparse.ArgumentParser(
        description="Rose Party Sync - share skins with friends over League client chat"
    )

    # Connection arguments
    ap.add_argument("--port", type=int, default=None, help="League client API port")
    ap.add_argument("--token", type=str, default=None, help="League client API auth token")
    ap.add_argument("--lockfile", type=str, default=None,
                    help="Read port/token from this lockfile instead of --port/--token")

    # General arguments
    ap.add_argument("--config", type=str, default=None, help="Path to config.ini")
    ap.add_argument("--verbose", action="store_true", default=False,
                    help="Enable verbose logging (developer mode - shows all technical details)")
    ap.add_argument("--debug", action="store_true", default=False,
                    help="Enable ultra-detailed debug logging (includes TRACE and thread names)")
    ap.add_argument("--no-log-file", action="store_true", default=False,
                    help="Log to the console only")

    # Polling arguments
    ap.add_argument("--poll-interval", type=float, default=PARTY_POLL_INTERVAL_DEFAULT,
                    help="Seconds between watcher ticks")
    ap.add_argument("--chat-interval", type=float, default=CHAT_POLL_INTERVAL_DEFAULT,
                    help="Seconds between chat polls")
    ap.add_argument("--max-share-age", type=int, default=None,
                    help="Seconds a received share stays valid (overrides config.ini)")

    args = ap.parse_args(argv)
    if not args.lockfile and not (args.port and args.token):
        ap.error("either --lockfile or both --port and --token are required")
    if args.poll_interval <= 0 or args.chat_interval <= 0:
        ap.error("intervals must be positive")
    return args
