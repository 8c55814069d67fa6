#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Party Mode Package
Chat-tunneled skin sharing protocol, errors and operator config
"""

from .errors import PartyModeError, TransportError, ParseError, ConfigError, ProtocolError

__all__ = [
    'PartyModeError',
    'TransportError',
    'ParseError',
    'ConfigError',
    'ProtocolError',
]
