#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Lockfile Parsing
Reads port and token from an explicitly given League Client lockfile
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from utils.core.logging import get_logger

log = get_logger()


@dataclass
class Lockfile:
    """Parsed lockfile data"""
    name: str
    pid: int
    port: int
    password: str
    protocol: str


def parse_lockfile(lockfile_path: str) -> Optional[Lockfile]:
    """Parse `name:pid:port:password:protocol`, returns None when missing or malformed"""
    path = Path(lockfile_path)
    if not path.is_file():
        return None

    try:
        content = path.read_text(encoding="utf-8").strip()
        name, pid, port, pw, proto = content.split(":")[:5]
        return Lockfile(name=name, pid=int(pid), port=int(port), password=pw, protocol=proto)
    except (OSError, ValueError) as e:
        log.debug(f"Failed to parse lockfile {path}: {e}")
        return None
