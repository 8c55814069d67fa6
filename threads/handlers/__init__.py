#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Party watcher handlers
"""

from .injection_decider import InjectionDecider
from .party_detection import PartyDetector, extract_party_member_ids
from .phase_handler import PhaseHandler
from .share_handler import LocalSummoner, ShareHandler

__all__ = [
    'InjectionDecider',
    'PartyDetector',
    'extract_party_member_ids',
    'PhaseHandler',
    'LocalSummoner',
    'ShareHandler',
]
