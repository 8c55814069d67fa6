#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Share Codec
Encodes party mode envelopes into tagged chat bodies and back
"""

import json
import threading
import time
from typing import Any, Dict, Optional, Tuple

from config import PARTY_MODE_MESSAGE_PREFIX, PARTY_PROTOCOL_VERSION
from party.errors import ProtocolError
from utils.core.logging import get_logger

from .message_types import PartyModeMessage

log = get_logger()


class ShareCodec:
    """
    Tagged JSON codec for chat bodies

    A body is `<prefix><compact JSON envelope>`. Outbound envelopes are
    stamped with this sender's epoch and a monotonically increasing sequence.
    """

    def __init__(self, prefix: str = PARTY_MODE_MESSAGE_PREFIX, epoch: Optional[int] = None):
        self.prefix = prefix
        self.epoch = epoch if epoch is not None else int(time.time() * 1000)
        self._sequence = 0
        self._lock = threading.Lock()

    def is_candidate(self, body: Any) -> bool:
        """Only bodies starting with the tag are party mode traffic"""
        return isinstance(body, str) and body.startswith(self.prefix)

    def next_sequence(self) -> int:
        with self._lock:
            self._sequence += 1
            return self._sequence

    def build(self, message_type: str, data: Any) -> PartyModeMessage:
        """Create an outbound envelope stamped with version, epoch and sequence"""
        return PartyModeMessage(
            message_type=message_type,
            data=data,
            version=PARTY_PROTOCOL_VERSION,
            sequence=self.next_sequence(),
            epoch=self.epoch,
        )

    def encode(self, message: PartyModeMessage) -> str:
        return self.prefix + json.dumps(message.to_dict(), separators=(",", ":"), ensure_ascii=False)

    def decode(self, body: Any) -> PartyModeMessage:
        """Strip the tag and parse the envelope, raising ProtocolError when malformed"""
        if not self.is_candidate(body):
            raise ProtocolError("body does not carry the party mode tag")
        raw = body[len(self.prefix):]
        try:
            parsed = json.loads(raw)
        except ValueError as e:
            raise ProtocolError(f"invalid JSON after tag: {e}") from e
        return PartyModeMessage.from_dict(parsed)


class SequenceTracker:
    """
    Remembers the last accepted sequence per sender

    A message is accepted only if its sequence is greater than the last one
    seen for the same (sender, epoch). A newer epoch means the sender
    restarted and resets its window; an older epoch is a replay. Legacy
    messages without a sequence are always accepted.
    """

    def __init__(self):
        self._last: Dict[str, Tuple[int, int]] = {}
        self._lock = threading.Lock()

    def accept(self, sender_id: str, message: PartyModeMessage) -> bool:
        if message.sequence is None:
            return True
        epoch = message.epoch or 0
        with self._lock:
            known = self._last.get(sender_id)
            if known is not None:
                last_epoch, last_sequence = known
                if epoch < last_epoch or (epoch == last_epoch and message.sequence <= last_sequence):
                    log.debug(f"[Codec] Dropping replay from {sender_id} "
                              f"(epoch={epoch}, seq={message.sequence}, last={known})")
                    return False
            self._last[sender_id] = (epoch, message.sequence)
            return True
