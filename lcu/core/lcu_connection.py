#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
LCU Connection Management
Holds the port/token pair and the authenticated requests session
"""

from pathlib import Path
from typing import Optional

import requests

from config import APP_USER_AGENT, LCU_HOST, LCU_USERNAME
from utils.core.logging import get_logger, log_section, log_success

from .lockfile import parse_lockfile

log = get_logger()


class LCUConnection:
    """
    Manages LCU connection lifecycle

    Credentials are either given directly (port + token) or read from an
    explicit lockfile path. With a lockfile, refresh_if_needed() re-reads it
    whenever its mtime changes, which covers client restarts.
    """

    def __init__(self, port: Optional[int] = None, token: Optional[str] = None,
                 lockfile_path: Optional[str] = None):
        self.ok = False
        self.port: Optional[int] = None
        self.pw: Optional[str] = None
        self.base: Optional[str] = None
        self.session: requests.Session = self._new_session()
        self._lockfile_path = lockfile_path
        self.lf_mtime = 0.0

        if port and token:
            self._connect(int(port), token)
        elif lockfile_path:
            self._init_from_lockfile()
        else:
            self._disable("no port/token or lockfile given")

    @staticmethod
    def _new_session() -> requests.Session:
        session = requests.Session()
        # The client serves a self-signed certificate on loopback
        session.verify = False
        session.headers.update({"Content-Type": "application/json", "User-Agent": APP_USER_AGENT})
        return session

    def _connect(self, port: int, token: str):
        old = (self.port, self.pw)
        self.port = port
        self.pw = token
        self.base = f"https://{LCU_HOST}:{port}"
        self.session = self._new_session()
        self.session.auth = (LCU_USERNAME, token)
        self.ok = True
        if old == (None, None):
            log_section(log, "LCU Connected", "🔗", {"Port": port, "Status": "Ready"})
        elif old != (port, token):
            log_success(log, f"LCU reloaded (port={port})", "🔄")

    def _init_from_lockfile(self):
        path = Path(self._lockfile_path)
        lockfile = parse_lockfile(str(path))
        if lockfile is None:
            self._disable("LCU lockfile not found or unreadable")
            return
        try:
            self.lf_mtime = path.stat().st_mtime
        except OSError as e:
            log.debug(f"Failed to get lockfile mtime: {e}")
        self._connect(lockfile.port, lockfile.password)

    def _disable(self, reason: str):
        if self.ok:
            log.debug(f"LCU disabled: {reason}")
        self.ok = False
        self.base = None

    def refresh_if_needed(self, force: bool = False):
        """Re-read the lockfile when it changed; fixed credentials are never rediscovered"""
        if not self._lockfile_path:
            return
        path = Path(self._lockfile_path)
        try:
            mtime = path.stat().st_mtime
        except OSError:
            self._disable("lockfile disappeared")
            self.lf_mtime = 0.0
            return
        if force or not self.ok or mtime != self.lf_mtime:
            self._init_from_lockfile()
