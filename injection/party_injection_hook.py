#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Party Injection Hook
Boundary to the component that actually injects skins
"""

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Optional, Tuple

from config import LOGGED_INJECTION_REQUESTS_MAX
from state.share_cache import ReceivedShare
from utils.core.logging import get_logger, log_section

log = get_logger()


@dataclass(frozen=True)
class InjectionRequest:
    """Everything the injector needs for one party injection"""
    champion_id: int
    shares: Tuple[ReceivedShare, ...] = field(default_factory=tuple)
    mode: str = "draft"
    signature: str = ""
    champion_ids: Tuple[int, ...] = field(default_factory=tuple)  # Swift Play: every assigned champion

    @property
    def friend_ids(self) -> Tuple[str, ...]:
        return tuple(sorted({share.from_summoner_id for share in self.shares}))


class PartyInjectionHook:
    """Receives injection requests; implementations report their own failures"""

    def inject(self, request: InjectionRequest) -> None:
        raise NotImplementedError


class LoggingInjectionHook(PartyInjectionHook):
    """Default hook used when no injector is attached: records what would be injected"""

    def __init__(self, history: int = LOGGED_INJECTION_REQUESTS_MAX):
        self.requests: Deque[InjectionRequest] = deque(maxlen=history)

    @property
    def last_request(self) -> Optional[InjectionRequest]:
        return self.requests[-1] if self.requests else None

    def inject(self, request: InjectionRequest) -> None:
        self.requests.append(request)
        champions = ", ".join(str(cid) for cid in request.champion_ids) or request.champion_id
        details = {"Champion": champions, "Mode": request.mode, "Friend skins": len(request.shares)}
        for share in request.shares:
            chroma = f" chroma {share.chroma_id}" if share.chroma_id else ""
            details[share.from_summoner_name or share.from_summoner_id] = (
                f"champion {share.champion_id} skin {share.skin_id}{chroma}"
            )
        log_section(log, "Party injection ready", "💉", details)
