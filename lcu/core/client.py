#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
League Client API client
Main orchestrator for LCU API interactions
"""

import threading
from typing import Optional

from .lcu_connection import LCUConnection
from .lcu_api import LCUAPI
from ..features.lcu_properties import LCUProperties
from ..features.lcu_game_mode import GameModeKind, LCUGameMode


class LCU:
    """League Client API client - main orchestrator"""

    def __init__(self, port: Optional[int] = None, token: Optional[str] = None,
                 lockfile_path: Optional[str] = None,
                 stop_event: Optional[threading.Event] = None):
        """Initialize LCU client

        Args:
            port: Client port (given together with token)
            token: Client auth token
            lockfile_path: Optional explicit path to lockfile instead of port/token
            stop_event: Cancellation token shared with the poll loop
        """
        self._connection = LCUConnection(port, token, lockfile_path)
        self._api = LCUAPI(self._connection, stop_event)
        self._properties = LCUProperties(self._api)
        self._game_mode = LCUGameMode(self._properties)

    @property
    def api(self) -> LCUAPI:
        return self._api

    # Properties (delegated to properties handler)
    def fetch_phase(self) -> str:
        """Current gameflow phase, raising TransportError/ParseError on failure"""
        return self._properties.fetch_phase()

    @property
    def champ_select_session(self) -> Optional[dict]:
        return self._properties.champ_select_session

    def get_gameflow_session(self) -> Optional[dict]:
        """Callable form of gameflow_session for the session registry"""
        return self._properties.gameflow_session

    @property
    def lobby(self) -> Optional[dict]:
        return self._properties.lobby

    @property
    def current_summoner(self) -> Optional[dict]:
        return self._properties.current_summoner

    # Game mode (delegated to game mode handler)
    def game_mode_kind(self, gameflow: Optional[dict] = None) -> GameModeKind:
        return self._game_mode.current(gameflow)
