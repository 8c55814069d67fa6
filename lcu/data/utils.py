#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
LCU utility functions
Shape checks and coercions shared by the response readers
"""

from typing import Any, Dict, List, Optional, Set

from party.errors import ParseError

_SUMMONER_ID_KEYS = ("summonerId",)
_SUMMONER_ID_LIST_KEYS = ("summonerIds", "teamOneSummonerIds", "teamTwoSummonerIds")


def require_dict(value: Any, what: str) -> Dict[str, Any]:
    """Return value if it is a JSON object, raise ParseError otherwise"""
    if not isinstance(value, dict):
        raise ParseError(f"{what}: expected object, got {type(value).__name__}")
    return value


def dict_items(value: Any) -> List[Dict[str, Any]]:
    """Objects of a JSON array, ignoring anything else"""
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


def to_int(value: Any, default: int = 0) -> int:
    if isinstance(value, bool) or value is None:
        return default
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        return default


def summoner_id_str(value: Any) -> Optional[str]:
    """Normalize a numeric or string summoner id, None when absent or zero"""
    if isinstance(value, bool) or value is None:
        return None
    text = str(value).strip()
    if not text or text == "0":
        return None
    return text


def map_cells(sess: Dict[str, Any]) -> Dict[int, Dict[str, Any]]:
    """Map cell IDs to player data"""
    idx: Dict[int, Dict[str, Any]] = {}
    for side in (sess.get("myTeam"), sess.get("theirTeam")):
        for p in dict_items(side):
            cid = p.get("cellId")
            if cid is not None:
                idx[to_int(cid, -1)] = p
    return idx


def collect_summoner_ids(node: Any, acc: Optional[Set[str]] = None, depth: int = 0) -> Set[str]:
    """
    Last-resort recursive walk collecting summoner ids from an unknown shape

    Only values under summonerId-like keys are taken. Prefer the typed
    readers; this exists for gameflow payloads whose layout varies by queue.
    """
    if acc is None:
        acc = set()
    if depth > 12:
        return acc
    if isinstance(node, list):
        for entry in node:
            collect_summoner_ids(entry, acc, depth + 1)
    elif isinstance(node, dict):
        for key in _SUMMONER_ID_KEYS:
            sid = summoner_id_str(node.get(key)) if not isinstance(node.get(key), (dict, list)) else None
            if sid:
                acc.add(sid)
        for key in _SUMMONER_ID_LIST_KEYS:
            ids = node.get(key)
            if isinstance(ids, list):
                for value in ids:
                    sid = summoner_id_str(value) if not isinstance(value, (dict, list)) else None
                    if sid:
                        acc.add(sid)
        for value in node.values():
            if isinstance(value, (dict, list)):
                collect_summoner_ids(value, acc, depth + 1)
    return acc
