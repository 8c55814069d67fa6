#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Party Mode Errors
Every failure in the party watcher degrades to "skip this tick/message"
"""


class PartyModeError(Exception):
    """Base class for recoverable party mode failures"""


class TransportError(PartyModeError):
    """The local client API could not be reached or answered with an error"""

    def __init__(self, message: str, status: int = None):
        super().__init__(message)
        self.status = status


class ParseError(PartyModeError):
    """A client response did not have the expected JSON shape"""


class ConfigError(PartyModeError):
    """The persisted config file is malformed"""


class ProtocolError(PartyModeError):
    """A tagged chat body could not be decoded into a party mode message"""
