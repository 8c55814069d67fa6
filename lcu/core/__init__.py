#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
LCU Core Package
Contains core connection, API, and lockfile functionality
"""

from .client import LCU
from .lcu_connection import LCUConnection
from .lcu_api import LCUAPI
from .lockfile import Lockfile, parse_lockfile

__all__ = [
    'LCU',
    'LCUConnection',
    'LCUAPI',
    'Lockfile',
    'parse_lockfile',
]
