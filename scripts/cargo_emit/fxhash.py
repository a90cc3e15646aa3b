#!/usr/bin/env python3
# Copyright (c) 2026 The Khronos Group Inc.
#
# SPDX-License-Identifier: Apache-2.0
"""Streaming 64-bit Fx hash.

Fx is the small multiply-rotate hash used by rustc for its internal tables:
fast, deterministic and not cryptographic. Each 64-bit word is mixed in as

    h = (rotl(h, 5) ^ word) * SEED

Input is consumed as little-endian 8-byte words; whatever does not fill a
whole word is held back until finish(), where it is mixed in as one 4-byte
word (if there are at least 4 bytes left) followed by single bytes. Holding
the tail back means the digest only depends on the concatenated input, not
on how it was split across write() calls.
"""

import struct

SEED = 0x517cc1b727220a95
MASK = 0xffffffffffffffff
DIGEST_SIZE = 8

_WORD = struct.Struct('<Q')
_HALF_WORD = struct.Struct('<I')


def _mix(h, word):
    h = ((h << 5) | (h >> 59)) & MASK
    return ((h ^ word) * SEED) & MASK


class FxHasher64:
    def __init__(self, data=None):
        self._state = 0
        self._pending = b''
        if data:
            self.write(data)

    def write(self, data):
        """Feed bytes to the hasher. May be called any number of times."""
        buf = self._pending + bytes(data)
        whole = len(buf) - len(buf) % DIGEST_SIZE
        h = self._state
        for (word,) in _WORD.iter_unpack(buf[:whole]):
            h = _mix(h, word)
        self._state = h
        self._pending = buf[whole:]

    update = write

    def finish(self):
        """Return the digest as an unsigned 64-bit integer.

        Does not modify the hasher; more data may be written afterwards.
        """
        h = self._state
        tail = self._pending
        if len(tail) >= 4:
            (word,) = _HALF_WORD.unpack(tail[:4])
            h = _mix(h, word)
            tail = tail[4:]
        for byte in tail:
            h = _mix(h, byte)
        return h

    def digest(self, byteorder='little'):
        return self.finish().to_bytes(DIGEST_SIZE, byteorder)

    def hexdigest(self):
        return '{:016x}'.format(self.finish())


def fxhash64(data):
    """Hash a single bytes-like object (str is encoded as UTF-8)."""
    if isinstance(data, str):
        data = data.encode('utf-8')
    return FxHasher64(data).finish()
