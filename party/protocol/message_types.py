#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Party Mode Message Types
Envelope and payload definitions for the chat-tunneled protocol
"""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Dict, Optional

from config import PARTY_LEGACY_PROTOCOL_VERSION, PARTY_PROTOCOL_VERSION
from party.errors import ProtocolError


class MessageType(Enum):
    """Types of party mode messages"""

    SKIN_SHARE = "skin_share"


def _as_int(value: Any, name: str) -> int:
    if isinstance(value, bool):
        raise ProtocolError(f"{name} must be an integer, got bool")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise ProtocolError(f"{name} must be an integer, got {value!r}")


def _as_optional_int(value: Any, name: str) -> Optional[int]:
    if value is None:
        return None
    return _as_int(value, name)


def _as_summoner_id(value: Any, name: str) -> str:
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ProtocolError(f"{name} must be a string or integer, got {value!r}")
    text = str(value).strip()
    if not text:
        raise ProtocolError(f"{name} is empty")
    return text


@dataclass
class PartyModeMessage:
    """
    Wire envelope carried in a chat body

    Version 1 bodies only carry message_type and data. Version 2 adds a
    per-sender sequence number scoped to the sender's epoch (process start
    time in ms), which lets receivers drop replays.
    """

    message_type: str
    data: Any = None
    version: int = PARTY_PROTOCOL_VERSION
    sequence: Optional[int] = None
    epoch: Optional[int] = None

    @property
    def is_legacy(self) -> bool:
        return self.version <= PARTY_LEGACY_PROTOCOL_VERSION

    def to_dict(self) -> Dict[str, Any]:
        payload = {"message_type": self.message_type, "data": self.data}
        if not self.is_legacy:
            payload["version"] = self.version
            if self.sequence is not None:
                payload["sequence"] = self.sequence
            if self.epoch is not None:
                payload["epoch"] = self.epoch
        return payload

    @classmethod
    def from_dict(cls, parsed: Any) -> "PartyModeMessage":
        if not isinstance(parsed, dict):
            raise ProtocolError(f"envelope must be a JSON object, got {type(parsed).__name__}")
        message_type = parsed.get("message_type")
        if not isinstance(message_type, str) or not message_type:
            raise ProtocolError("envelope has no message_type")
        version = _as_int(parsed.get("version", PARTY_LEGACY_PROTOCOL_VERSION), "version")
        return cls(
            message_type=message_type,
            data=parsed.get("data"),
            version=version,
            sequence=_as_optional_int(parsed.get("sequence"), "sequence"),
            epoch=_as_optional_int(parsed.get("epoch"), "epoch"),
        )


@dataclass
class SkinShare:
    """Skin selection a friend shares for one champion"""

    from_summoner_id: str
    from_summoner_name: str
    champion_id: int
    skin_id: int
    skin_name: str = ""
    chroma_id: Optional[int] = None
    skin_file_path: Optional[str] = None
    timestamp: int = 0  # ms since epoch, set by the sender

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for the envelope data field"""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Any) -> "SkinShare":
        """Create from an envelope data field, raising ProtocolError on bad shape"""
        if not isinstance(data, dict):
            raise ProtocolError("skin_share data must be a JSON object")
        try:
            return cls(
                from_summoner_id=_as_summoner_id(data["from_summoner_id"], "from_summoner_id"),
                from_summoner_name=str(data.get("from_summoner_name") or "Unknown"),
                champion_id=_as_int(data["champion_id"], "champion_id"),
                skin_id=_as_int(data["skin_id"], "skin_id"),
                skin_name=str(data.get("skin_name") or ""),
                chroma_id=_as_optional_int(data.get("chroma_id"), "chroma_id"),
                skin_file_path=data.get("skin_file_path") or None,
                timestamp=_as_int(data.get("timestamp", 0), "timestamp"),
            )
        except KeyError as e:
            raise ProtocolError(f"skin_share is missing {e.args[0]}") from e
