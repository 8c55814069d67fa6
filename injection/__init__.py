#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Injection Package
Hook interface between the party watcher and the skin injector
"""

from .party_injection_hook import InjectionRequest, LoggingInjectionHook, PartyInjectionHook

__all__ = [
    'InjectionRequest',
    'LoggingInjectionHook',
    'PartyInjectionHook',
]
