#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Initialization setup (logging)
"""

import argparse

from utils.core.logging import cleanup_logs, get_logger, log_section, setup_logging

log = get_logger()


def resolve_log_mode(args: argparse.Namespace, verbose_config: bool = False) -> str:
    if args.debug:
        return "debug"
    if args.verbose or verbose_config:
        return "verbose"
    return "customer"


def setup_logging_and_cleanup(args: argparse.Namespace, verbose_config: bool = False) -> str:
    """Setup logging and clean up old logs, returns the log mode in use"""
    write_logs = not args.no_log_file
    if write_logs:
        cleanup_logs()

    log_mode = resolve_log_mode(args, verbose_config)
    setup_logging(log_mode, write_logs=write_logs)

    if log_mode != "customer":
        log_section(log, "Party Sync Starting", "🚀", {
            "Connection": f"lockfile {args.lockfile}" if args.lockfile else f"port {args.port}",
            "Poll interval": f"{args.poll_interval}s",
            "Chat interval": f"{args.chat_interval}s",
        })
    return log_mode
