#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Party watcher thread
Polls the client, tracks phase and session, exchanges shares and fires the injection
"""

import threading
import time
from typing import Callable, Optional, Set

from config import (
    CHAT_POLL_INTERVAL_DEFAULT,
    INSTANT_ASSIGN_WAIT_S,
    MATCHMAKING_PHASE,
    PARTY_POLL_INTERVAL_DEFAULT,
    POLL_BACKOFF_FACTOR,
    POLL_BACKOFF_MAX_FAILURES,
    POLL_BACKOFF_MAX_S,
)
from injection.party_injection_hook import InjectionRequest, PartyInjectionHook
from lcu import LCU
from lcu.data.champ_select import ChampSelectSessionReader, SelectionKind
from lcu.features.lcu_game_mode import GameModeKind
from party.config import ConfigManager
from party.errors import ParseError, PartyModeError, TransportError
from state import SessionRegistry, SharedState
from utils.core.logging import get_logger, log_action, log_event, log_success

from .handlers.injection_decider import InjectionDecider
from .handlers.party_detection import PartyDetector
from .handlers.phase_handler import PhaseHandler
from .handlers.share_handler import ShareHandler

log = get_logger()


class PartyWatcherThread(threading.Thread):
    """
    Control loop for party mode

    One tick runs, in order: phase and session refresh, chat poll (on its
    own cadence), champ select parsing, injection decision. Swift Play
    never reaches champ select, so during Matchmaking the assigned
    champions are read from the gameflow session or lobby instead. The loop sleeps
    on the shared stop event so stop() takes effect within one interval.
    """

    def __init__(
        self,
        lcu: LCU,
        state: SharedState,
        share_handler: ShareHandler,
        decider: InjectionDecider,
        injection_hook: PartyInjectionHook,
        config_manager: ConfigManager,
        session_registry: Optional[SessionRegistry] = None,
        reader: Optional[ChampSelectSessionReader] = None,
        party_detector: Optional[PartyDetector] = None,
        interval: float = PARTY_POLL_INTERVAL_DEFAULT,
        chat_interval: float = CHAT_POLL_INTERVAL_DEFAULT,
        clock: Callable[[], float] = time.monotonic,
    ):
        super().__init__(daemon=True, name="PartyWatcher")
        self.lcu = lcu
        self.state = state
        self.stop_event = state.stop_event
        self.share_handler = share_handler
        self.decider = decider
        self.injection_hook = injection_hook
        self.config_manager = config_manager
        self.session_registry = session_registry or SessionRegistry(
            state.received_shares, state.sent_shares, lcu.get_gameflow_session,
            bucket_secs=config_manager.get().session_bucket_secs,
        )
        self.reader = reader or ChampSelectSessionReader()
        self.party_detector = party_detector or PartyDetector(lcu)
        self.phase_handler = PhaseHandler(state, decider)
        self.interval = interval
        self.chat_interval = chat_interval
        self._clock = clock
        self._failures = 0
        self._next_chat_poll = 0.0
        self._matchmaking_since: Optional[float] = None

    @property
    def current_interval(self) -> float:
        """Tick interval, backed off exponentially while the client is unreachable"""
        if self._failures == 0:
            return self.interval
        exponent = min(self._failures, POLL_BACKOFF_MAX_FAILURES)
        return min(self.interval * (POLL_BACKOFF_FACTOR ** exponent), POLL_BACKOFF_MAX_S)

    def stop(self):
        self.stop_event.set()

    def run(self):
        """Main thread loop"""
        log_action(log, "Party watcher started", "👥")
        while not self.stop_event.is_set():
            try:
                self.tick()
            except PartyModeError as e:
                log.debug(f"[watcher] Tick skipped: {e}")
            self.stop_event.wait(self.current_interval)
        log.debug("[watcher] Stopped")

    def tick(self) -> bool:
        """Run one poll cycle, returns False when the client could not be reached"""
        try:
            raw_phase = self.lcu.fetch_phase()
        except (TransportError, ParseError) as e:
            self._failures = min(self._failures + 1, POLL_BACKOFF_MAX_FAILURES)
            if self._failures == 1:
                log.info(f"[watcher] Client unavailable, backing off ({e})")
            self.share_handler.forget_local_summoner()
            return False
        if self._failures:
            log_success(log, "Client reachable again", "🔗")
            self._failures = 0

        # 1. phase and session
        previous_raw = self.state.phase.raw_phase
        change = self.state.phase.update(raw_phase)
        if change is not None:
            self.phase_handler.handle_phase_change(change)
        if raw_phase == MATCHMAKING_PHASE and previous_raw != MATCHMAKING_PHASE:
            self._matchmaking_since = self._clock()
            self.phase_handler.handle_matchmaking_entry()
        elif raw_phase != MATCHMAKING_PHASE:
            self._matchmaking_since = None
        gameflow = self.session_registry.refresh()

        # 2. inbound shares
        now = self._clock()
        if now >= self._next_chat_poll:
            self.share_handler.poll_inbound()
            self._next_chat_poll = now + self.chat_interval

        if self._matchmaking_since is not None:
            self._instant_assign(gameflow, now)
            return True
        if not self.state.phase.is_champ_select():
            return True

        # 3. champ select
        session = self.lcu.champ_select_session
        mode = self.lcu.game_mode_kind(gameflow)
        champion_ids = self._local_champions(session, gameflow, mode)
        champion_id = champion_ids[0] if champion_ids else 0
        if champion_id and champion_id != self.state.locked_champ_id:
            self.state.locked_champ_id = champion_id
            log_event(log, "Champion locked", "🔒", {"Champion": champion_id, "Mode": mode.value})

        party_ids = self.party_detector.member_ids(session, gameflow)
        for cid in champion_ids:
            self.share_handler.share_locked_champion(cid, party_ids or None)

        # 4. decision
        request = self.decider.evaluate(champion_id, mode, self._expected_friends(party_ids))
        if request is not None:
            self._dispatch(request)
        return True

    def _instant_assign(self, gameflow: Optional[dict], now: float):
        """Share and decide for the champions Swift Play assigned before matchmaking"""
        mode = self.lcu.game_mode_kind(gameflow)
        if mode is not GameModeKind.SWIFT_PLAY:
            return
        local = self.share_handler.local_summoner()
        champion_ids = self.reader.swift_play_candidates(
            gameflow, None, self.lcu.lobby, local.summoner_id if local else None
        )
        if not champion_ids:
            log.debug("[watcher] Swift Play: no assigned champions resolved yet")
            return
        if champion_ids[0] != self.state.locked_champ_id:
            self.state.locked_champ_id = champion_ids[0]
            log_event(log, "Swift Play champions assigned", "🔒", {"Champions": champion_ids})

        party_ids = self.party_detector.member_ids(None, gameflow)
        for cid in champion_ids:
            self.share_handler.share_locked_champion(cid, party_ids or None)

        waited = now - self._matchmaking_since
        request = self.decider.evaluate(
            champion_ids[0], mode, self._expected_friends(party_ids),
            champion_ids=champion_ids, force=waited >= INSTANT_ASSIGN_WAIT_S,
        )
        if request is not None:
            self._dispatch(request)

    def _local_champions(self, session: Optional[dict], gameflow: Optional[dict], mode: GameModeKind):
        status = self.reader.read_status(session)
        if status.is_locked:
            return [status.champion_id]
        if status.kind is SelectionKind.NO_SELECTION and mode is GameModeKind.SWIFT_PLAY:
            local = self.share_handler.local_summoner()
            return self.reader.swift_play_candidates(
                gameflow, session, self.lcu.lobby, local.summoner_id if local else None
            )
        return []

    def _expected_friends(self, party_ids: Set[str]) -> Optional[Set[str]]:
        """Sharing friends present in the party, None when membership is unknown"""
        sharing = self.config_manager.get().sharing_friend_ids()
        if not sharing:
            return set()
        if not party_ids:
            return None
        return sharing & party_ids

    def _dispatch(self, request: InjectionRequest):
        threading.Thread(
            target=self._run_injection, args=(request,), daemon=True, name="PartyInjection"
        ).start()

    def _run_injection(self, request: InjectionRequest):
        try:
            self.injection_hook.inject(request)
        except Exception as e:
            log.error(f"[watcher] Injection hook failed for champion {request.champion_id}: {e}")
