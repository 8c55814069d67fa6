#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Global constants for Rose Party Sync
All arbitrary values are centralized here for easy tracking and modification
"""

# =============================================================================
# APPLICATION METADATA
# =============================================================================

APP_NAME = "RosePartySync"
APP_VERSION = "1.0.0"
APP_USER_AGENT = f"{APP_NAME}/{APP_VERSION}"  # User-Agent header for LCU requests


# =============================================================================
# THREAD POLLING INTERVALS
# =============================================================================

# Party watcher main tick
PARTY_POLL_INTERVAL_DEFAULT = 1.0   # Seconds between watcher ticks
CHAT_POLL_INTERVAL_DEFAULT = 1.5    # Seconds between chat polls (own cadence)

# Backoff while the client is unreachable
POLL_BACKOFF_FACTOR = 2.0           # Multiplier per consecutive failed tick
POLL_BACKOFF_MAX_S = 15.0           # Upper bound for the backed-off interval
POLL_BACKOFF_MAX_FAILURES = 16      # Failure count stops growing here

THREAD_JOIN_TIMEOUT_S = 5.0         # Timeout when joining the watcher on shutdown


# =============================================================================
# LCU API CONSTANTS
# =============================================================================

LCU_API_TIMEOUT_S = 2.0             # Default timeout for LCU GET requests
LCU_CHAT_TIMEOUT_S = 3.0            # Timeout for chat send / conversation create
LCU_USERNAME = "riot"               # Fixed basic-auth user of the local client
LCU_HOST = "127.0.0.1"


# =============================================================================
# PARTY MODE PROTOCOL
# =============================================================================

PARTY_MODE_MESSAGE_PREFIX = "OSS:"  # Tag that marks party-mode chat bodies
PARTY_PROTOCOL_VERSION = 2          # Envelope version written by this client
PARTY_LEGACY_PROTOCOL_VERSION = 1   # Assumed when a body has no version field


# Processed chat message id window
PROCESSED_IDS_MAX = 100             # Retention bound
PROCESSED_IDS_KEEP = 50             # Ids kept after an overflow trim


# =============================================================================
# SHARE / SESSION LIFETIMES
# =============================================================================

MAX_SHARE_AGE_SECS_DEFAULT = 300    # Received shares older than this are pruned
SESSION_BUCKET_SECS_DEFAULT = 600   # Fallback session window without a game id
SHARE_DEBOUNCE_S = 2.0              # Minimum delay between shares of one champion
INJECTION_MIN_INTERVAL_S = 5.0      # Minimum delay between two injections
INSTANT_ASSIGN_WAIT_S = 8.0         # Swift Play: wait this long for friend shares before forcing
LOGGED_INJECTION_REQUESTS_MAX = 20  # Requests kept by the logging injection hook


# =============================================================================
# GAME MODES
# =============================================================================

ARAM_QUEUE_IDS = frozenset({450})
SWIFTPLAY_MODES = frozenset({"SWIFTPLAY", "BRAWL"})
CHAMP_SELECT_PHASE = "ChampSelect"
MATCHMAKING_PHASE = "Matchmaking"


# =============================================================================
# LOGGING CONSTANTS
# =============================================================================

LOG_SEPARATOR_WIDTH = 80            # Width of separator lines in logs
LOG_MAX_FILE_SIZE_MB_DEFAULT = 5    # Rotate the log file past this size
LOG_BACKUP_COUNT_DEFAULT = 3        # Rotated files to keep
LOG_FILE_PREFIX = "party_sync"


# =============================================================================
# CONFIG FILE
# =============================================================================

CONFIG_FILE_NAME = "config.ini"
CONFIG_SECTION_PARTY = "PartyMode"
CONFIG_SECTION_FRIEND_PREFIX = "Friend "
CONFIG_SECTION_SKIN_PREFIX = "Skin "
