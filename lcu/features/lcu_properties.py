#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
LCU Properties
Property-based accessors for the endpoints the party watcher polls
"""

from typing import Optional

from party.errors import ParseError

from ..types import ChampSelectSession, CurrentSummoner, GameflowSession, LobbySession


class LCUProperties:
    """Property-based accessors for LCU endpoints"""

    def __init__(self, api):
        """Initialize properties handler

        Args:
            api: LCUAPI instance
        """
        self.api = api

    def fetch_phase(self) -> str:
        """Current gameflow phase

        Raises:
            TransportError: client unreachable
            ParseError: response is not a phase string
        """
        phase = self.api.fetch_json("/lol-gameflow/v1/gameflow-phase")
        if not isinstance(phase, str):
            raise ParseError(f"gameflow phase is not a string: {phase!r}")
        return phase

    @property
    def champ_select_session(self) -> Optional[ChampSelectSession]:
        """Get the champion select session"""
        data = self.api.get("/lol-champ-select/v1/session")
        return data if isinstance(data, dict) else None

    @property
    def gameflow_session(self) -> Optional[GameflowSession]:
        """Get current gameflow session with queue, map and game id"""
        data = self.api.get("/lol-gameflow/v1/session")
        return data if isinstance(data, dict) else None

    @property
    def lobby(self) -> Optional[LobbySession]:
        """Get the current lobby"""
        data = self.api.get("/lol-lobby/v2/lobby")
        return data if isinstance(data, dict) else None

    @property
    def current_summoner(self) -> Optional[CurrentSummoner]:
        """Get current summoner info"""
        data = self.api.get("/lol-summoner/v1/current-summoner")
        return data if isinstance(data, dict) else None

