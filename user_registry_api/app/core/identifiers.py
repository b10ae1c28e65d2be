"""
Time-ordered identifiers.

User ids are version 7 UUIDs: a 48-bit Unix timestamp in milliseconds
followed by the version nibble, a 12-bit sequence, the RFC 4122
variant and 62 random bits.  Sorting ids therefore sorts records by
creation time.  Within one process ids are strictly increasing: when
several ids are requested in the same millisecond (or the clock steps
backwards) the 12-bit sequence is incremented instead of drawn at
random.
"""

import os
import threading
import time
import uuid
from typing import Optional

_SEQUENCE_MAX = 0xFFF
_RANDOM_B_MASK = (1 << 62) - 1


class TimeOrderedIdGenerator:
    """Generate monotonically increasing version 7 UUIDs."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._last_ms = -1
        self._sequence = 0

    def __call__(self, now_ms: Optional[int] = None) -> uuid.UUID:
        if now_ms is None:
            now_ms = time.time_ns() // 1_000_000
        random_bits = int.from_bytes(os.urandom(10), "big")
        with self._lock:
            if now_ms > self._last_ms:
                self._last_ms = now_ms
                # Start low in the sequence space so same-millisecond
                # increments rarely overflow.
                self._sequence = (random_bits >> 62) & 0x7FF
            else:
                self._sequence += 1
                if self._sequence > _SEQUENCE_MAX:
                    self._last_ms += 1
                    self._sequence = 0
            timestamp = self._last_ms & 0xFFFFFFFFFFFF
            sequence = self._sequence

        value = (
            (timestamp << 80)
            | (0x7 << 76)
            | (sequence << 64)
            | (0b10 << 62)
            | (random_bits & _RANDOM_B_MASK)
        )
        return uuid.UUID(int=value)


uuid7 = TimeOrderedIdGenerator()
