#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Share Handler
Stores skin shares received from friends and shares the local selection back
"""

# Standard library imports
import time
from dataclasses import dataclass
from typing import Callable, Iterable, Optional

# Local imports
from config import SHARE_DEBOUNCE_S
from lcu.data.utils import summoner_id_str
from lcu.features.lcu_party_chat import ChatTransport, InboundMessage
from party.config import ConfigManager
from party.errors import ProtocolError, TransportError
from party.protocol import MessageType, SequenceTracker, SkinShare
from state import ReceivedShare, SharedState, share_signature
from utils.core.logging import get_logger, log_event, log_success

log = get_logger()


@dataclass(frozen=True)
class LocalSummoner:
    summoner_id: str
    display_name: str


def summoner_display_name(summoner: dict) -> str:
    """displayName, else gameName#tagLine, else summonerName"""
    if summoner.get("displayName"):
        return str(summoner["displayName"])
    game_name = summoner.get("gameName")
    if game_name:
        tag = summoner.get("tagLine") or summoner.get("gameTag")
        return f"{game_name}#{tag}" if tag else str(game_name)
    return str(summoner.get("summonerName") or "Unknown")


class ShareHandler:
    """Inbound and outbound skin sharing over party chat"""

    def __init__(self, lcu, chat: ChatTransport, state: SharedState, config_manager: ConfigManager,
                 sequences: Optional[SequenceTracker] = None,
                 max_share_age_secs: Optional[int] = None,
                 clock: Callable[[], float] = time.time,
                 monotonic: Callable[[], float] = time.monotonic):
        self.lcu = lcu
        self.chat = chat
        self.state = state
        self.config_manager = config_manager
        self.sequences = sequences or SequenceTracker()
        self.max_share_age_secs = max_share_age_secs  # overrides config.ini when set
        self._clock = clock
        self._monotonic = monotonic
        self._local: Optional[LocalSummoner] = None

    def local_summoner(self) -> Optional[LocalSummoner]:
        """Local summoner, fetched once per connection"""
        if self._local is None:
            summoner = self.lcu.current_summoner
            sid = summoner_id_str(summoner.get("summonerId")) if summoner else None
            if sid:
                self._local = LocalSummoner(sid, summoner_display_name(summoner))
        return self._local

    def forget_local_summoner(self) -> None:
        self._local = None

    # ---------------------------------------------------------------- inbound

    def poll_inbound(self) -> int:
        """Poll chat once and store every new valid share, returns how many were stored"""
        stored = 0
        for inbound in self.chat.poll():
            if self.handle_inbound(inbound) is not None:
                stored += 1
        return stored

    def _is_stale(self, share: SkinShare, inbound: InboundMessage, max_age_secs: int) -> bool:
        sent_ms = inbound.timestamp_ms or share.timestamp
        if not sent_ms:
            return False
        now_ms = int(self._clock() * 1000)
        if self.state.champ_select_started_ms and sent_ms < self.state.champ_select_started_ms:
            return True
        return now_ms - sent_ms > max_age_secs * 1000

    def handle_inbound(self, inbound: InboundMessage) -> Optional[ReceivedShare]:
        message = inbound.message
        if message.message_type != MessageType.SKIN_SHARE.value:
            log.debug(f"[Share] Ignoring message type {message.message_type}")
            return None
        try:
            share = SkinShare.from_dict(message.data)
        except ProtocolError as e:
            log.debug(f"[Share] Dropping skin_share {inbound.message_id}: {e}")
            return None

        local = self.local_summoner()
        if local is not None and share.from_summoner_id == local.summoner_id:
            log.trace("[Share] Ignoring own skin_share")
            return None

        cfg = self.config_manager.get()
        if cfg.paired_friends and cfg.friend(share.from_summoner_id) is None:
            log.debug(f"[Share] Ignoring share from unpaired summoner {share.from_summoner_id}")
            return None
        if not self.sequences.accept(share.from_summoner_id, message):
            return None
        if self._is_stale(share, inbound, self.max_share_age_secs or cfg.max_share_age_secs):
            log.debug(f"[Share] Skipping stale share from {share.from_summoner_name} (champion {share.champion_id})")
            return None

        stored = self.state.received_shares.put(
            share.from_summoner_id,
            share.champion_id,
            share.skin_id,
            share.chroma_id,
            share.skin_file_path,
            received_at=share.timestamp or int(self._clock() * 1000),
            friend_name=share.from_summoner_name,
            skin_name=share.skin_name,
        )
        if cfg.notifications:
            log_event(log, f"Skin share received from {share.from_summoner_name}", "📥", {
                "Champion": share.champion_id,
                "Skin": share.skin_name or share.skin_id,
            })
        else:
            log.debug(f"[Share] Stored share from {share.from_summoner_id} for champion {share.champion_id}")
        return stored

    # --------------------------------------------------------------- outbound

    def share_locked_champion(self, champion_id: int, party_member_ids: Optional[Iterable[str]] = None) -> int:
        """
        Share the local skin for a locked champion with paired friends in the party

        Each (friend, champion, skin, chroma) goes out once per phase; a
        failed send is not recorded so the next tick retries it.
        """
        cfg = self.config_manager.get()
        if not cfg.enabled:
            return 0
        selection = cfg.skin_for(champion_id)
        if selection is None:
            log.trace(f"[Share] No local skin selected for champion {champion_id}")
            return 0

        now = self._monotonic()
        last = self.state.share_times.get(champion_id)
        if last is not None and now - last < SHARE_DEBOUNCE_S:
            return 0

        targets = cfg.sharing_friend_ids()
        if party_member_ids is not None:
            targets &= {str(pid).strip() for pid in party_member_ids}
        pending = [
            friend_id for friend_id in sorted(targets)
            if not self.state.sent_shares.was_sent(
                share_signature(friend_id, champion_id, selection.skin_id, selection.chroma_id))
        ]
        if not pending:
            return 0

        local = self.local_summoner()
        if local is None:
            log.debug("[Share] Current summoner unknown, sharing postponed")
            return 0

        share = SkinShare(
            from_summoner_id=local.summoner_id,
            from_summoner_name=local.display_name,
            champion_id=champion_id,
            skin_id=selection.skin_id,
            skin_name=selection.skin_name,
            chroma_id=selection.chroma_id,
            skin_file_path=selection.skin_file_path,
            timestamp=int(self._clock() * 1000),
        )
        message = self.chat.codec.build(MessageType.SKIN_SHARE.value, share.to_dict())

        sent = 0
        for friend_id in pending:
            try:
                self.chat.send_message(friend_id, message)
            except TransportError as e:
                log.warning(f"[Share] Could not share with {friend_id}: {e}")
                continue
            self.state.sent_shares.mark_sent(
                share_signature(friend_id, champion_id, selection.skin_id, selection.chroma_id))
            sent += 1

        self.state.share_times[champion_id] = now
        if sent:
            log_success(log, f"Shared {selection.skin_name or selection.skin_id} with {sent} friend(s)", "📤")
        return sent
