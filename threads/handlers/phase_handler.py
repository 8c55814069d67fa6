#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Phase Handler
Resets per-phase party state when champ select starts or ends
"""

import time
from typing import Callable

from state import PhaseChange, SharedState
from utils.core.logging import get_logger, log_action, log_status

from .injection_decider import InjectionDecider

log = get_logger()


class PhaseHandler:
    """Handles phase-specific logic"""

    def __init__(self, state: SharedState, decider: InjectionDecider,
                 clock: Callable[[], float] = time.time):
        """Initialize phase handler

        Args:
            state: Shared party state
            decider: Injection decider whose latch is tied to the phase
        """
        self.state = state
        self.decider = decider
        self._clock = clock

    def handle_phase_change(self, change: PhaseChange):
        log_status(log, "Phase", change.raw_phase or change.current.name, "🎯")

        if change.left_champ_select:
            log.debug("[phase] Leaving champ select - resetting injection latch and sent shares")
            self.decider.reset()
            self.state.sent_shares.clear()
            self.state.locked_champ_id = None

        if change.entered_champ_select:
            log_action(log, "Champ select started, clearing party share state", "🧹")
            self.decider.reset()
            self.state.sent_shares.clear()
            self.state.received_shares.clear()
            self.state.reset_champ_select(int(self._clock() * 1000))

    def handle_matchmaking_entry(self):
        """Open a new instant-assign round; received shares from the lobby are kept"""
        log.debug("[phase] Entering matchmaking - re-arming injection for instant assign")
        self.decider.reset()
        self.state.sent_shares.clear()
        self.state.share_times.clear()
        self.state.locked_champ_id = None
