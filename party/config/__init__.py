#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Party Mode Config
"""

from .config_manager import ConfigManager, LocalSkinSelection, PairedFriend, PartyModeConfig, parse_config

__all__ = [
    'ConfigManager',
    'LocalSkinSelection',
    'PairedFriend',
    'PartyModeConfig',
    'parse_config',
]
