#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Configuration Manager
Loads party mode settings, paired friends and local skin selections from config.ini
"""

import configparser
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Set

from config import (
    CONFIG_SECTION_FRIEND_PREFIX,
    CONFIG_SECTION_PARTY,
    CONFIG_SECTION_SKIN_PREFIX,
    MAX_SHARE_AGE_SECS_DEFAULT,
    SESSION_BUCKET_SECS_DEFAULT,
)
from party.errors import ConfigError
from utils.core.logging import get_logger
from utils.core.paths import get_config_file_path

log = get_logger()


@dataclass
class PairedFriend:
    """A friend this client exchanges skins with"""
    summoner_id: str
    summoner_name: str = ""
    display_name: str = ""
    paired_at: int = 0
    share_enabled: bool = True

    @property
    def label(self) -> str:
        return self.display_name or self.summoner_name or self.summoner_id


@dataclass
class LocalSkinSelection:
    """Skin the local player wants to show for a champion"""
    champion_id: int
    skin_id: int
    skin_name: str = ""
    chroma_id: Optional[int] = None
    skin_file_path: Optional[str] = None


@dataclass
class PartyModeConfig:
    enabled: bool = True
    max_share_age_secs: int = MAX_SHARE_AGE_SECS_DEFAULT
    verbose_logging: bool = False
    notifications: bool = True
    session_bucket_secs: int = SESSION_BUCKET_SECS_DEFAULT
    paired_friends: List[PairedFriend] = field(default_factory=list)
    skins: Dict[int, LocalSkinSelection] = field(default_factory=dict)

    def friend(self, summoner_id: str) -> Optional[PairedFriend]:
        for friend in self.paired_friends:
            if friend.summoner_id == str(summoner_id).strip():
                return friend
        return None

    def sharing_friend_ids(self) -> Set[str]:
        return {f.summoner_id for f in self.paired_friends if f.share_enabled}

    def skin_for(self, champion_id: int) -> Optional[LocalSkinSelection]:
        return self.skins.get(int(champion_id))


def _optional_int(section: configparser.SectionProxy, key: str) -> Optional[int]:
    raw = section.get(key, fallback="").strip()
    return int(raw) if raw else None


def parse_config(parser: configparser.ConfigParser) -> PartyModeConfig:
    """Build a PartyModeConfig from a parsed INI file

    Raises:
        ConfigError: a value has the wrong type or a section name is malformed
    """
    cfg = PartyModeConfig()
    try:
        if parser.has_section(CONFIG_SECTION_PARTY):
            party = parser[CONFIG_SECTION_PARTY]
            cfg.enabled = party.getboolean("enabled", fallback=cfg.enabled)
            cfg.max_share_age_secs = party.getint("max_share_age_secs", fallback=cfg.max_share_age_secs)
            cfg.verbose_logging = party.getboolean("verbose_logging", fallback=cfg.verbose_logging)
            cfg.notifications = party.getboolean("notifications", fallback=cfg.notifications)
            cfg.session_bucket_secs = party.getint("session_bucket_secs", fallback=cfg.session_bucket_secs)

        for name in parser.sections():
            section = parser[name]
            if name.startswith(CONFIG_SECTION_FRIEND_PREFIX):
                summoner_id = name[len(CONFIG_SECTION_FRIEND_PREFIX):].strip()
                if not summoner_id:
                    raise ConfigError(f"section [{name}] has no summoner id")
                cfg.paired_friends.append(PairedFriend(
                    summoner_id=summoner_id,
                    summoner_name=section.get("summoner_name", fallback=""),
                    display_name=section.get("display_name", fallback=""),
                    paired_at=section.getint("paired_at", fallback=0),
                    share_enabled=section.getboolean("share_enabled", fallback=True),
                ))
            elif name.startswith(CONFIG_SECTION_SKIN_PREFIX):
                champion_id = int(name[len(CONFIG_SECTION_SKIN_PREFIX):].strip())
                cfg.skins[champion_id] = LocalSkinSelection(
                    champion_id=champion_id,
                    skin_id=int(section["skin_id"]),
                    skin_name=section.get("skin_name", fallback=""),
                    chroma_id=_optional_int(section, "chroma_id"),
                    skin_file_path=section.get("skin_file_path", fallback="").strip() or None,
                )
    except (KeyError, ValueError, TypeError, configparser.Error) as e:
        raise ConfigError(f"invalid config value: {e}") from e

    if cfg.max_share_age_secs <= 0 or cfg.session_bucket_secs <= 0:
        raise ConfigError("max_share_age_secs and session_bucket_secs must be positive")
    return cfg


class ConfigManager:
    """Reads config.ini, re-reading it whenever the file changes"""

    def __init__(self, config_path: Optional[Path] = None):
        self._config_path = Path(config_path) if config_path else None
        self._cached: Optional[PartyModeConfig] = None
        self._mtime: Optional[float] = None

    def _get_config_path(self) -> Path:
        """Get the path to the config.ini file"""
        if self._config_path is None:
            self._config_path = get_config_file_path()
        return self._config_path

    def load(self) -> PartyModeConfig:
        """Load the config, falling back to defaults when it is missing or malformed"""
        config_path = self._get_config_path()
        if not config_path.exists():
            log.debug(f"Config file not found at {config_path}, using defaults")
            return PartyModeConfig()

        try:
            parser = configparser.ConfigParser()
            try:
                parser.read(config_path, encoding="utf-8")
            except configparser.Error as e:
                raise ConfigError(f"cannot parse {config_path.name}: {e}") from e
            cfg = parse_config(parser)
        except ConfigError as e:
            log.warning(f"Failed to read config file, using defaults: {e}")
            return PartyModeConfig()

        log.debug(f"Loaded config: {len(cfg.paired_friends)} paired friend(s), {len(cfg.skins)} skin(s)")
        return cfg

    def get(self) -> PartyModeConfig:
        """Cached config, reloaded when the file mtime changes"""
        config_path = self._get_config_path()
        try:
            mtime = config_path.stat().st_mtime
        except OSError:
            mtime = None
        if self._cached is None or mtime != self._mtime:
            self._cached = self.load()
            self._mtime = mtime
        return self._cached
