#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
LCU Party Chat Transport
Sends and polls party mode messages tunneled through friend chat
"""

from collections import OrderedDict
from dataclasses import dataclass
from datetime import datetime
from typing import Any, List, Optional

from config import LCU_CHAT_TIMEOUT_S, PROCESSED_IDS_KEEP, PROCESSED_IDS_MAX
from party.errors import ProtocolError, TransportError
from party.protocol import PartyModeMessage, ShareCodec
from utils.core.logging import get_logger

from ..data.utils import dict_items, summoner_id_str
from ..types import ChatConversation, ChatMessage

log = get_logger()

_SENDER_KEYS = ("fromSummonerId", "fromId", "senderId")


def message_id(raw: dict) -> Optional[str]:
    """Provider id of a chat message, string or numeric, as a string"""
    value = raw.get("id")
    if value is None or isinstance(value, (bool, dict, list)):
        return None
    text = str(value).strip()
    return text or None


def message_sender(raw: dict) -> Optional[str]:
    for key in _SENDER_KEYS:
        sender = summoner_id_str(raw.get(key)) if not isinstance(raw.get(key), (dict, list)) else None
        if sender:
            return sender
    return None


def message_timestamp_ms(raw: dict) -> Optional[int]:
    """Chat timestamp (ISO-8601 string or unix ms) in ms, None when missing or unparseable"""
    value = raw.get("timestamp")
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        if text.isdigit():
            return int(text)
        try:
            return int(datetime.fromisoformat(text.replace("Z", "+00:00")).timestamp() * 1000)
        except ValueError:
            return None
    return None


class ProcessedMessageIds:
    """
    Bounded window of processed chat message ids

    Ids are kept in arrival order. Once more than `capacity` ids are held,
    only the `keep` most recently added survive.
    """

    def __init__(self, capacity: int = PROCESSED_IDS_MAX, keep: int = PROCESSED_IDS_KEEP):
        self.capacity = capacity
        self.keep = keep
        self._ids: "OrderedDict[str, None]" = OrderedDict()

    def __contains__(self, mid: str) -> bool:
        return mid in self._ids

    def __len__(self) -> int:
        return len(self._ids)

    def add(self, mid: str) -> None:
        if mid in self._ids:
            return
        self._ids[mid] = None
        if len(self._ids) > self.capacity:
            while len(self._ids) > self.keep:
                self._ids.popitem(last=False)
            log.trace(f"[PartyChat] Trimmed processed ids to {len(self._ids)}")

    def clear(self) -> None:
        self._ids.clear()


@dataclass(frozen=True)
class InboundMessage:
    """A decoded party mode message pulled from a conversation"""
    message_id: str
    conversation_id: str
    sender_id: Optional[str]
    timestamp_ms: Optional[int]
    message: PartyModeMessage


class ChatTransport:
    """Chat-backed transport for party mode envelopes"""

    def __init__(self, api, codec: Optional[ShareCodec] = None,
                 processed: Optional[ProcessedMessageIds] = None):
        """Initialize chat transport

        Args:
            api: LCUAPI instance
            codec: Envelope codec (tag + JSON)
            processed: Window of already handled message ids
        """
        self._api = api
        self.codec = codec or ShareCodec()
        self.processed = processed or ProcessedMessageIds()

    # ---------------------------------------------------------------- inbound

    def list_conversations(self) -> List[ChatConversation]:
        return dict_items(self._api.get("/lol-chat/v1/conversations"))

    def get_messages(self, conversation_id: str) -> List[ChatMessage]:
        return dict_items(self._api.get(f"/lol-chat/v1/conversations/{conversation_id}/messages"))

    def poll(self) -> List[InboundMessage]:
        """Collect new tagged messages from every open conversation

        Each id is handled once. Untagged bodies are ignored and malformed
        tagged bodies are dropped after being marked processed.
        """
        inbound: List[InboundMessage] = []
        for conversation in self.list_conversations():
            conversation_id = conversation.get("id")
            if not isinstance(conversation_id, str) or not conversation_id:
                continue
            for raw in self.get_messages(conversation_id):
                if not self.codec.is_candidate(raw.get("body")):
                    continue
                mid = message_id(raw)
                if mid is None or mid in self.processed:
                    continue
                self.processed.add(mid)
                try:
                    decoded = self.codec.decode(raw["body"])
                except ProtocolError as e:
                    log.debug(f"[PartyChat] Dropping malformed message {mid}: {e}")
                    continue
                inbound.append(InboundMessage(
                    message_id=mid,
                    conversation_id=conversation_id,
                    sender_id=message_sender(raw),
                    timestamp_ms=message_timestamp_ms(raw),
                    message=decoded,
                ))
        if inbound:
            log.debug(f"[PartyChat] {len(inbound)} new party message(s)")
        return inbound

    # --------------------------------------------------------------- outbound

    def _friend_pid(self, friend_summoner_id: str) -> str:
        for friend in dict_items(self._api.get("/lol-chat/v1/friends")):
            if summoner_id_str(friend.get("summonerId")) == friend_summoner_id:
                pid = friend.get("pid") or friend.get("id")
                if isinstance(pid, str) and pid:
                    return pid
        raise TransportError(f"friend {friend_summoner_id} not found in friends list")

    def resolve_conversation(self, friend_summoner_id: Any) -> str:
        """Conversation id with a friend, creating the conversation when none is open

        Raises:
            TransportError: friend unknown or the client refused to open a chat
        """
        friend_id = summoner_id_str(friend_summoner_id)
        if friend_id is None:
            raise TransportError(f"invalid friend id {friend_summoner_id!r}")
        pid = self._friend_pid(friend_id)

        for conversation in self.list_conversations():
            if pid in (conversation.get("pid"), conversation.get("id")):
                return conversation["id"]

        resp = self._api.post("/lol-chat/v1/conversations", {"type": "chat", "pid": pid},
                              timeout=LCU_CHAT_TIMEOUT_S)
        if resp is None or not 200 <= resp.status_code < 300:
            status = resp.status_code if resp is not None else None
            raise TransportError(f"could not open conversation with {friend_id}", status=status)
        try:
            created = resp.json()
        except ValueError:
            created = None
        conversation_id = created.get("id") if isinstance(created, dict) else None
        log.debug(f"[PartyChat] Opened conversation with {friend_id}")
        return conversation_id if isinstance(conversation_id, str) and conversation_id else pid

    def send_message(self, friend_summoner_id: Any, message: PartyModeMessage) -> None:
        """Encode and send an envelope to a friend

        Raises:
            TransportError: the message was not accepted by the client
        """
        conversation_id = self.resolve_conversation(friend_summoner_id)
        body = self.codec.encode(message)
        resp = self._api.post(
            f"/lol-chat/v1/conversations/{conversation_id}/messages",
            {"body": body, "type": "chat"},
            timeout=LCU_CHAT_TIMEOUT_S,
        )
        if resp is None or not 200 <= resp.status_code < 300:
            status = resp.status_code if resp is not None else None
            raise TransportError(f"chat send to {friend_summoner_id} failed", status=status)
        log.debug(f"[PartyChat] Sent {message.message_type} (seq={message.sequence}) to {friend_summoner_id}")
