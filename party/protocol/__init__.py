#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Party Mode Protocol
Message definitions and the tagged chat codec
"""

from .message_types import MessageType, PartyModeMessage, SkinShare
from .share_codec import ShareCodec, SequenceTracker

__all__ = [
    'MessageType',
    'PartyModeMessage',
    'SkinShare',
    'ShareCodec',
    'SequenceTracker',
]
