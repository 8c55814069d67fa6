#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Injection Decider
Decides when the one-shot party injection fires during champ select
"""

# Standard library imports
import threading
import time
from typing import Callable, Iterable, Optional, Sequence

# Local imports
from config import INJECTION_MIN_INTERVAL_S, MAX_SHARE_AGE_SECS_DEFAULT
from injection.party_injection_hook import InjectionRequest
from lcu.features.lcu_game_mode import GameModeKind
from state.share_cache import ReceivedShareCache, normalize_friend_id
from utils.core.logging import get_logger

log = get_logger()


class InjectionDecider:
    """
    Level-triggered decision over the received share cache

    The signature summarizes the local champion and every valid share. The
    decider fires at most once per pick phase: `evaluate()` sets a latch
    that only `reset()` clears (champ select entry or exit, Matchmaking
    entry), and an unchanged signature never fires twice.
    """

    def __init__(self, received: ReceivedShareCache, config_manager=None,
                 max_share_age_secs: Optional[float] = None,
                 min_interval_s: float = INJECTION_MIN_INTERVAL_S,
                 clock: Callable[[], float] = time.monotonic):
        self._received = received
        self.config_manager = config_manager
        self.max_share_age_secs = max_share_age_secs  # overrides config.ini when set
        self.min_interval_s = min_interval_s
        self._clock = clock
        self._lock = threading.Lock()
        self._fired = False
        self._last_signature: Optional[str] = None
        self._last_fired_at: Optional[float] = None

    @property
    def fired(self) -> bool:
        return self._fired

    def share_ttl(self) -> float:
        """Max share age in seconds, read from the current config unless overridden"""
        if self.max_share_age_secs:
            return self.max_share_age_secs
        if self.config_manager is not None:
            return self.config_manager.get().max_share_age_secs
        return MAX_SHARE_AGE_SECS_DEFAULT

    def valid_shares(self):
        return self._received.values(self.share_ttl())

    def compute_signature(self, local_champion_id: int) -> str:
        """`champion:<id>` followed by the sorted friend:champion:skin:chroma tuples"""
        parts = sorted(
            f"{share.from_summoner_id}:{share.champion_id}:{share.skin_id}:{share.chroma_id or 0}"
            for share in self.valid_shares()
        )
        signature = f"champion:{local_champion_id}"
        if parts:
            signature += "|" + "|".join(parts)
        return signature

    def should_inject_now(self, local_champion_id: int, mode: GameModeKind,
                          party_friend_ids: Optional[Iterable] = None) -> bool:
        """
        Whether the party injection may run with what is cached right now

        party_friend_ids are the sharing-enabled paired friends currently in
        the party; None when party membership is unknown. Full participation
        is never required: one valid share is enough in every mode.
        """
        if not local_champion_id or local_champion_id <= 0:
            return False

        sharers = self._received.friends_who_shared(self.share_ttl())
        if party_friend_ids is not None:
            expected = {normalize_friend_id(f) for f in party_friend_ids}
            if not expected:
                log.debug("[Decider] No sharing friends in party, injecting local skins only")
                return True
            sharers &= expected
            if sharers == expected:
                log.debug(f"[Decider] All {len(expected)} party friend(s) shared")
                return True

        shared_count = len(sharers)
        if shared_count == 0:
            return False
        if mode.is_shared_assignment:
            log.debug(f"[Decider] {mode.value}: {shared_count} friend(s) shared, partial participation is enough")
        return True

    def evaluate(self, local_champion_id: int, mode: GameModeKind,
                 party_friend_ids: Optional[Iterable] = None,
                 champion_ids: Optional[Sequence[int]] = None,
                 force: bool = False) -> Optional[InjectionRequest]:
        """
        Run the decision once for this tick, returning a request when the injection should fire

        force skips the share check (Swift Play after its wait window) but
        never the latch, the interval or a missing local champion.
        """
        self._received.prune(self.share_ttl())
        signature = self.compute_signature(local_champion_id)

        with self._lock:
            if self._fired or signature == self._last_signature:
                return None
            now = self._clock()
            if self._last_fired_at is not None and now - self._last_fired_at < self.min_interval_s:
                return None
            if not local_champion_id or local_champion_id <= 0:
                return None
            if not force and not self.should_inject_now(local_champion_id, mode, party_friend_ids):
                return None
            self._fired = True
            self._last_signature = signature
            self._last_fired_at = now

        log.info(f"[Decider] Injection triggered for champion {local_champion_id} ({mode.value}"
                 f"{', forced' if force else ''})")
        return InjectionRequest(
            champion_id=local_champion_id,
            champion_ids=tuple(champion_ids) if champion_ids else (local_champion_id,),
            shares=tuple(self.valid_shares()),
            mode=mode.value,
            signature=signature,
        )

    def reset(self) -> None:
        """Re-arm the decider for a new pick phase"""
        with self._lock:
            self._fired = False
            self._last_signature = None
