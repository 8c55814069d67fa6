#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Champ Select Session Reader
Normalizes champ select / gameflow / lobby JSON into the local player's selection
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional

from party.errors import ParseError
from utils.core.logging import get_logger

from .utils import dict_items, map_cells, require_dict, summoner_id_str, to_int

log = get_logger()


class SelectionKind(Enum):
    NO_SELECTION = "no_selection"
    PICK_IN_PROGRESS = "pick_in_progress"
    LOCKED = "locked"


@dataclass(frozen=True)
class ChampSelectStatus:
    """Local selection state derived from one champ select snapshot"""
    kind: SelectionKind
    champion_id: int = 0

    @classmethod
    def no_selection(cls) -> "ChampSelectStatus":
        return cls(SelectionKind.NO_SELECTION)

    @classmethod
    def pick_in_progress(cls) -> "ChampSelectStatus":
        return cls(SelectionKind.PICK_IN_PROGRESS)

    @classmethod
    def locked(cls, champion_id: int) -> "ChampSelectStatus":
        return cls(SelectionKind.LOCKED, champion_id)

    @property
    def is_locked(self) -> bool:
        return self.kind is SelectionKind.LOCKED

    def __str__(self) -> str:
        if self.is_locked:
            return f"Locked({self.champion_id})"
        return self.kind.value


def _dedupe_positive(ids: Iterable[Any]) -> List[int]:
    result: List[int] = []
    for value in ids:
        cid = to_int(value)
        if cid > 0 and cid not in result:
            result.append(cid)
    return result


class ChampSelectSessionReader:
    """
    Reads the local player's pick across draft, ARAM and instant-assign

    The in-progress check always runs before any completed pick or team
    assignment is considered, so a stale championId left in myTeam or in an
    older action can never report a lock while the player is still picking.
    """

    def read_status(self, session: Any) -> ChampSelectStatus:
        """Status for the local player, NoSelection when the payload is unusable"""
        try:
            return self._read_status(session)
        except ParseError as e:
            log.debug(f"[ChampSelect] Ignoring session: {e}")
            return ChampSelectStatus.no_selection()

    def _read_status(self, session: Any) -> ChampSelectStatus:
        sess = require_dict(session, "champ select session")
        if sess.get("localPlayerCellId") is None:
            return ChampSelectStatus.no_selection()
        local_cell = to_int(sess.get("localPlayerCellId"), -1)

        own_picks = [
            action
            for group in (sess.get("actions") if isinstance(sess.get("actions"), list) else [])
            for action in dict_items(group)
            if to_int(action.get("actorCellId"), -2) == local_cell and action.get("type") == "pick"
        ]

        # Pass 1: an in-progress pick pre-empts everything else
        if any(action.get("isInProgress") is True for action in own_picks):
            return ChampSelectStatus.pick_in_progress()

        # Pass 2: first completed pick with a real champion
        for action in own_picks:
            champion_id = to_int(action.get("championId"))
            if action.get("completed") is True and champion_id > 0:
                return ChampSelectStatus.locked(champion_id)

        # Pass 3: ARAM / instant-assign, the champion only shows up in myTeam
        member = map_cells(sess).get(local_cell)
        if member is not None:
            champion_id = to_int(member.get("championId"))
            if champion_id > 0:
                return ChampSelectStatus.locked(champion_id)

        return ChampSelectStatus.no_selection()

    def swift_play_candidates(self, gameflow: Any = None, champ_select: Any = None,
                              lobby: Any = None, local_summoner_id: Any = None) -> List[int]:
        """
        Candidate champions assigned to the local player in Swift Play

        Sources are tried in priority order and the first non-empty result
        wins: per-summoner championIds, gameData.selectedChampions, the local
        myTeam entry (primary then secondary), lobby localMember.playerSlots.
        """
        gameflow = gameflow if isinstance(gameflow, dict) else {}
        game_data = gameflow.get("gameData") if isinstance(gameflow.get("gameData"), dict) else {}

        local_id = summoner_id_str(local_summoner_id)
        if local_id is None:
            local_selection = gameflow.get("localPlayerSelection")
            if isinstance(local_selection, dict):
                local_id = summoner_id_str(local_selection.get("summonerId"))

        for source in (
            lambda: self._from_player_selections(game_data, local_id),
            lambda: _dedupe_positive(entry.get("championId") for entry in dict_items(game_data.get("selectedChampions"))),
            lambda: self._from_my_team(champ_select, gameflow, local_id),
            lambda: self._from_player_slots(lobby),
        ):
            candidates = source()
            if candidates:
                return candidates
        return []

    @staticmethod
    def _from_player_selections(game_data: Dict[str, Any], local_id: Optional[str]) -> List[int]:
        if local_id is None:
            return []
        for selection in dict_items(game_data.get("playerChampionSelections")):
            if summoner_id_str(selection.get("summonerId")) == local_id:
                ids = selection.get("championIds")
                return _dedupe_positive(ids if isinstance(ids, list) else [])
        return []

    @staticmethod
    def _from_my_team(champ_select: Any, gameflow: Dict[str, Any], local_id: Optional[str]) -> List[int]:
        for payload in (champ_select, gameflow):
            if not isinstance(payload, dict):
                continue
            local_cell = payload.get("localPlayerCellId")
            player_name = payload.get("playerName")
            for member in dict_items(payload.get("myTeam")):
                is_local = (
                    (local_cell is not None and to_int(member.get("cellId"), -2) == to_int(local_cell, -1))
                    or (local_id is not None and summoner_id_str(member.get("summonerId")) == local_id)
                    or (bool(player_name) and member.get("summonerName") == player_name)
                )
                if is_local:
                    ids = _dedupe_positive([member.get("championId"), member.get("secondaryChampionId")])
                    if ids:
                        return ids
        return []

    @staticmethod
    def _from_player_slots(lobby: Any) -> List[int]:
        if not isinstance(lobby, dict) or not isinstance(lobby.get("localMember"), dict):
            return []
        slots = dict_items(lobby["localMember"].get("playerSlots"))
        return _dedupe_positive(slot.get("championId") for slot in slots)
