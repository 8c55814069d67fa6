#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Main entry point for Rose Party Sync
"""

import sys
from pathlib import Path
from typing import List, Optional

from config import APP_VERSION
from party.config import ConfigManager
from state import SharedState
from utils.core.logging import get_logger, log_success

from .core.cleanup import perform_cleanup
from .core.initialization import initialize_core_components
from .core.signals import setup_signal_handlers
from .setup.arguments import setup_arguments
from .setup.initialization import setup_logging_and_cleanup

log = get_logger()


def main(argv: Optional[List[str]] = None) -> int:
    """Run the party watcher until SIGINT/SIGTERM"""
    args = setup_arguments(argv)
    config_manager = ConfigManager(Path(args.config) if args.config else None)
    setup_logging_and_cleanup(args, verbose_config=config_manager.get().verbose_logging)

    state = SharedState()
    setup_signal_handlers(state.stop_event)

    watcher = initialize_core_components(args, config_manager, state)
    watcher.start()
    log_success(log, f"Party Sync {APP_VERSION} running", "✅")

    while watcher.is_alive() and not state.stop_event.is_set():
        state.stop_event.wait(0.5)

    return 0 if perform_cleanup(watcher) else 1


if __name__ == "__main__":
    sys.exit(main())
