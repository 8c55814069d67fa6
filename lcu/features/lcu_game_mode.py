#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
LCU Game Mode Detection
Classifies the current queue from the gameflow session
"""

from enum import Enum
from typing import Any, Optional

from config import ARAM_QUEUE_IDS, SWIFTPLAY_MODES

from ..data.utils import dict_items, to_int


class GameModeKind(Enum):
    DRAFT = "draft"
    ARAM = "aram"
    SWIFT_PLAY = "swift_play"

    @property
    def is_shared_assignment(self) -> bool:
        """Champions are assigned rather than drafted, partial sharing is enough"""
        return self in (GameModeKind.ARAM, GameModeKind.SWIFT_PLAY)


def _game_data(gameflow: Any) -> dict:
    if isinstance(gameflow, dict) and isinstance(gameflow.get("gameData"), dict):
        return gameflow["gameData"]
    return {}


def queue_game_mode(gameflow: Any) -> Optional[str]:
    """gameMode of the current queue, e.g. 'ARAM', 'CLASSIC', 'SWIFTPLAY'"""
    game_data = _game_data(gameflow)
    queue = game_data.get("queue") if isinstance(game_data.get("queue"), dict) else {}
    mode = queue.get("gameMode") or game_data.get("gameMode")
    return mode.upper() if isinstance(mode, str) else None


def queue_id(gameflow: Any) -> int:
    game_data = _game_data(gameflow)
    queue = game_data.get("queue") if isinstance(game_data.get("queue"), dict) else {}
    return to_int(queue.get("id"))


def _has_multi_selection(game_data: dict) -> bool:
    for selection in dict_items(game_data.get("playerChampionSelections")):
        ids = selection.get("championIds")
        if isinstance(ids, list) and len(ids) >= 2:
            return True
    selected = game_data.get("selectedChampions")
    return isinstance(selected, list) and len(selected) >= 2


def detect_game_mode(gameflow: Any) -> GameModeKind:
    """ARAM by queue 450 or gameMode, Swift Play by gameMode or multi-champion selections, else draft"""
    mode = queue_game_mode(gameflow)
    if queue_id(gameflow) in ARAM_QUEUE_IDS or mode == "ARAM":
        return GameModeKind.ARAM
    if mode in SWIFTPLAY_MODES or _has_multi_selection(_game_data(gameflow)):
        return GameModeKind.SWIFT_PLAY
    return GameModeKind.DRAFT


class LCUGameMode:
    """Handles game mode detection"""

    def __init__(self, properties):
        """Initialize game mode handler

        Args:
            properties: LCUProperties instance
        """
        self.properties = properties

    def current(self, gameflow: Any = None) -> GameModeKind:
        """Classify the given gameflow session, fetching it when not provided"""
        if gameflow is None:
            gameflow = self.properties.gameflow_session
        return detect_game_mode(gameflow)
