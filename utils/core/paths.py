#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Path utilities for Rose Party Sync
Resolves the per-user data directory that holds logs and config.ini
"""

import os
from pathlib import Path

from config import APP_NAME, CONFIG_FILE_NAME


def get_user_data_dir() -> Path:
    """
    Get the user data directory where the application can write files.
    This ensures proper permissions regardless of where the app is installed.
    """
    if os.name == "nt":  # Windows
        localappdata = os.environ.get("LOCALAPPDATA")
        if localappdata:
            return Path(localappdata) / APP_NAME
        userprofile = os.environ.get("USERPROFILE")
        if userprofile:
            return Path(userprofile) / "AppData" / "Local" / APP_NAME
        return Path.cwd() / APP_NAME

    # Linux/macOS
    xdg_data_home = os.environ.get("XDG_DATA_HOME")
    if xdg_data_home:
        return Path(xdg_data_home) / APP_NAME
    return Path.home() / ".local" / "share" / APP_NAME


def get_config_file_path() -> Path:
    """Default location of the party mode config.ini"""
    return get_user_data_dir() / CONFIG_FILE_NAME
