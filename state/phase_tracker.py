#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Phase Tracker
Coarse gameflow phase shared between the poll loop and its readers
"""

import threading
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from config import CHAMP_SELECT_PHASE


class Phase(IntEnum):
    UNKNOWN = 0
    CHAMP_SELECT = 1
    OTHER = 2

    @classmethod
    def from_gameflow(cls, phase: Optional[str]) -> "Phase":
        """Map a raw gameflow phase string to its coarse bucket"""
        if not isinstance(phase, str) or not phase.strip():
            return cls.UNKNOWN
        if phase.strip() == CHAMP_SELECT_PHASE:
            return cls.CHAMP_SELECT
        return cls.OTHER


@dataclass(frozen=True)
class PhaseChange:
    previous: Phase
    current: Phase
    raw_phase: Optional[str] = None

    @property
    def entered_champ_select(self) -> bool:
        return self.current == Phase.CHAMP_SELECT

    @property
    def left_champ_select(self) -> bool:
        return self.previous == Phase.CHAMP_SELECT


class PhaseTracker:
    """
    Single writer, many readers

    Only the poll loop calls update(). Readers use `current`, which is a
    plain attribute read and never blocks.
    """

    def __init__(self):
        self._phase = Phase.UNKNOWN
        self._raw_phase: Optional[str] = None
        self._write_lock = threading.Lock()

    @property
    def current(self) -> Phase:
        return self._phase

    @property
    def raw_phase(self) -> Optional[str]:
        return self._raw_phase

    def is_champ_select(self) -> bool:
        return self._phase == Phase.CHAMP_SELECT

    def update(self, raw_phase: Optional[str]) -> Optional[PhaseChange]:
        """Record a polled phase string, returns a PhaseChange when the coarse phase moved"""
        new_phase = Phase.from_gameflow(raw_phase)
        with self._write_lock:
            self._raw_phase = raw_phase
            previous = self._phase
            if new_phase == previous:
                return None
            self._phase = new_phase
        return PhaseChange(previous=previous, current=new_phase, raw_phase=raw_phase)
