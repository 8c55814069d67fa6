#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Threads Package
Main entry point for background thread functionality
"""

from .party_watcher_thread import PartyWatcherThread

__all__ = [
    'PartyWatcherThread',
]
