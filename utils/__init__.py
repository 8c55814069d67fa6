#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Utils Package - Utility functions and helpers

- core: logging and per-user paths
"""

from utils.core.paths import get_config_file_path, get_user_data_dir


# Lazy imports for modules that depend on config (to avoid circular imports)
def __getattr__(name):
    """Lazy import for the logging helpers"""
    if name in {
        'get_logger', 'setup_logging', 'log_section', 'log_success',
        'log_status', 'get_log_mode', 'log_event', 'log_action'
    }:
        from utils.core import logging as _logging
        return getattr(_logging, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    'get_config_file_path',
    'get_user_data_dir',
    'get_logger',
    'setup_logging',
    'log_section',
    'log_success',
    'log_status',
    'get_log_mode',
    'log_event',
    'log_action',
]
