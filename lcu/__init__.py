#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
League Client API package
Main entry point for LCU functionality
"""

from .core.client import LCU
from .core.lockfile import Lockfile, parse_lockfile
from .data.champ_select import ChampSelectSessionReader, ChampSelectStatus
from .features.lcu_game_mode import GameModeKind
from .features.lcu_party_chat import ChatTransport

__all__ = [
    'LCU',
    'Lockfile',
    'parse_lockfile',
    'ChampSelectSessionReader',
    'ChampSelectStatus',
    'GameModeKind',
    'ChatTransport',
]
