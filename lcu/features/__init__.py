#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
LCU Features Package
Contains feature-specific handlers for properties, game modes and party chat
"""

from .lcu_properties import LCUProperties
from .lcu_game_mode import GameModeKind, LCUGameMode, detect_game_mode
from .lcu_party_chat import ChatTransport, InboundMessage, ProcessedMessageIds

__all__ = [
    'LCUProperties',
    'GameModeKind',
    'LCUGameMode',
    'detect_game_mode',
    'ChatTransport',
    'InboundMessage',
    'ProcessedMessageIds',
]
