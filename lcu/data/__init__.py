#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
LCU Data Package
Readers that turn raw client JSON into typed values
"""

from .champ_select import ChampSelectSessionReader, ChampSelectStatus, SelectionKind
from .utils import collect_summoner_ids, map_cells

__all__ = [
    'ChampSelectSessionReader',
    'ChampSelectStatus',
    'SelectionKind',
    'collect_summoner_ids',
    'map_cells',
]
