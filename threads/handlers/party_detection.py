#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Party Detection
Resolves the summoner ids of the local player's party
"""

from typing import Any, Optional, Set

from lcu.data.utils import collect_summoner_ids, dict_items, summoner_id_str
from utils.core.logging import get_logger

log = get_logger()


def _ids_from(members: Any) -> Set[str]:
    ids = set()
    for member in dict_items(members):
        sid = summoner_id_str(member.get("summonerId"))
        if sid:
            ids.add(sid)
    return ids


def extract_party_member_ids(champ_select: Any = None, lobby: Any = None, gameflow: Any = None) -> Set[str]:
    """
    Party summoner ids from the first source that has any

    Typed sources first: champ select myTeam, then lobby members. The
    gameflow session is walked generically only when both are empty.
    """
    if isinstance(champ_select, dict):
        ids = _ids_from(champ_select.get("myTeam"))
        if ids:
            return ids
    if isinstance(lobby, dict):
        ids = _ids_from(lobby.get("members"))
        if ids:
            return ids
    if isinstance(gameflow, dict):
        ids = collect_summoner_ids(gameflow.get("gameData"))
        if not ids:
            ids = collect_summoner_ids(gameflow)
        if ids:
            log.debug(f"[Party] Party members from gameflow fallback walk: {len(ids)}")
        return ids
    return set()


class PartyDetector:
    """Fetches the lobby only when champ select has no team data"""

    def __init__(self, lcu):
        self.lcu = lcu

    def member_ids(self, champ_select: Optional[dict] = None, gameflow: Optional[dict] = None) -> Set[str]:
        ids = extract_party_member_ids(champ_select=champ_select)
        if ids:
            return ids
        return extract_party_member_ids(lobby=self.lcu.lobby, gameflow=gameflow)
