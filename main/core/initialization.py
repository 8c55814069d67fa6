#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Core component initialization
Wires the owned state objects into the party watcher
"""

import argparse
from typing import Optional

from injection import LoggingInjectionHook, PartyInjectionHook
from lcu import LCU, ChatTransport
from party.config import ConfigManager
from party.protocol import ShareCodec
from state import SessionRegistry, SharedState
from threads.handlers import InjectionDecider, ShareHandler
from threads.party_watcher_thread import PartyWatcherThread
from utils.core.logging import get_logger

log = get_logger()


def initialize_core_components(args: argparse.Namespace, config_manager: ConfigManager,
                               state: Optional[SharedState] = None,
                               injection_hook: Optional[PartyInjectionHook] = None) -> PartyWatcherThread:
    """Build the LCU client, handlers and watcher thread"""
    state = state or SharedState()
    cfg = config_manager.get()
    max_share_age = args.max_share_age or cfg.max_share_age_secs

    lcu = LCU(port=args.port, token=args.token, lockfile_path=args.lockfile, stop_event=state.stop_event)
    chat = ChatTransport(lcu.api, ShareCodec())
    share_handler = ShareHandler(lcu, chat, state, config_manager, max_share_age_secs=args.max_share_age)
    decider = InjectionDecider(state.received_shares, config_manager, max_share_age_secs=args.max_share_age)
    session_registry = SessionRegistry(
        state.received_shares, state.sent_shares, lcu.get_gameflow_session,
        bucket_secs=cfg.session_bucket_secs,
    )

    log.debug(f"[init] max share age {max_share_age}s, {len(cfg.paired_friends)} paired friend(s)")
    return PartyWatcherThread(
        lcu,
        state,
        share_handler,
        decider,
        injection_hook or LoggingInjectionHook(),
        config_manager,
        session_registry=session_registry,
        interval=args.poll_interval,
        chat_interval=args.chat_interval,
    )
