# Copyright (c) 2026 Signer — MIT License

"""SM3 hash (GB/T 32905-2016) — Pure Python, zero dependencies.

256-bit Merkle-Damgard hash over 64-byte blocks. Input is absorbed in a
streaming fashion: any number of write() calls is equivalent to a single
write() of the concatenated data.

The hasher always returns to its initial state after sum(), whichever
output format was requested.

Sizes:
    Block:   64 bytes
    Digest:  32 bytes (64 hex characters)
"""

import struct

# ── Constants ────────────────────────────────────────────────────

DIGEST_SIZE = 32
BLOCK_SIZE = 64
ROUNDS = 64
MASK32 = 0xFFFFFFFF

_IV = (
    0x7380166F, 0x4914B2B9, 0x172442D7, 0xDA8A0600,
    0xA96F30BC, 0x163138AA, 0xE38DEE4D, 0xB0FB0E4E,
)

_T_LOW = 0x79CC4519   # rounds 0..15
_T_HIGH = 0x7A879D8A  # rounds 16..63


def _rotl(x, n):
    n %= 32
    x &= MASK32
    return ((x << n) | (x >> (32 - n))) & MASK32


# ── Round functions ──────────────────────────────────────────────

def _t(j):
    """Round constant T_j."""
    if 0 <= j < 16:
        return _T_LOW
    if 16 <= j < ROUNDS:
        return _T_HIGH
    raise ValueError(f"invalid round index {j} for constant T")


def _ff(j, x, y, z):
    if 0 <= j < 16:
        return x ^ y ^ z
    if 16 <= j < ROUNDS:
        return (x & y) | (x & z) | (y & z)
    raise ValueError(f"invalid round index {j} for bool function FF")


def _gg(j, x, y, z):
    if 0 <= j < 16:
        return x ^ y ^ z
    if 16 <= j < ROUNDS:
        return (x & y) | (~x & z & MASK32)
    raise ValueError(f"invalid round index {j} for bool function GG")


def _p0(x):
    return x ^ _rotl(x, 9) ^ _rotl(x, 17)


def _p1(x):
    return x ^ _rotl(x, 15) ^ _rotl(x, 23)


# T_j <<< j for every round, computed once.
_T_ROT = tuple(_rotl(_t(j), j) for j in range(ROUNDS))


# ── Compression ──────────────────────────────────────────────────

def _expand(block, off):
    """Message expansion: 68 W words followed by 64 W' words."""
    w = list(struct.unpack_from(">16I", block, off))
    for j in range(16, 68):
        w.append(_p1(w[j - 16] ^ w[j - 9] ^ _rotl(w[j - 3], 15))
                 ^ _rotl(w[j - 13], 7) ^ w[j - 6])
    w1 = [w[j] ^ w[j + 4] for j in range(ROUNDS)]
    return w, w1


def _compress(reg, block, off=0):
    """Absorb the 64-byte block at block[off:] into the 8 registers."""
    if len(block) - off < BLOCK_SIZE:
        raise ValueError(
            f"compress needs {BLOCK_SIZE} bytes, got {max(len(block) - off, 0)}"
        )
    w, w1 = _expand(block, off)
    a, b, c, d, e, f, g, h = reg

    for j in range(ROUNDS):
        a12 = _rotl(a, 12)
        ss1 = _rotl((a12 + e + _T_ROT[j]) & MASK32, 7)
        ss2 = ss1 ^ a12
        tt1 = (_ff(j, a, b, c) + d + ss2 + w1[j]) & MASK32
        tt2 = (_gg(j, e, f, g) + h + ss1 + w[j]) & MASK32
        d = c
        c = _rotl(b, 9)
        b = a
        a = tt1
        h = g
        g = _rotl(f, 19)
        f = e
        e = _p0(tt2)

    for i, v in enumerate((a, b, c, d, e, f, g, h)):
        reg[i] ^= v


def _as_bytes(data):
    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, int):
        raise TypeError("SM3 input must be str, bytes-like or a sequence of byte values")
    return bytes(data)


# ── Streaming hasher ─────────────────────────────────────────────

class SM3:
    """Incremental SM3 hasher.

    write() accepts text (hashed as UTF-8), any bytes-like object, or a
    sequence of ints in 0..255. sum() pads, finishes and resets.
    """

    digest_size = DIGEST_SIZE
    block_size = BLOCK_SIZE

    def __init__(self, data=None):
        self.reset()
        if data is not None:
            self.write(data)

    def reset(self):
        self._reg = list(_IV)
        self._buf = bytearray()
        self._size = 0

    def write(self, data):
        data = _as_bytes(data)
        self._size += len(data)
        self._buf += data
        full = len(self._buf) - len(self._buf) % BLOCK_SIZE
        for off in range(0, full, BLOCK_SIZE):
            _compress(self._reg, self._buf, off)
        del self._buf[:full]

    def _pad(self):
        bit_len = self._size * 8
        zeros = (55 - len(self._buf)) % BLOCK_SIZE
        return (bytes(self._buf) + b"\x80" + bytes(zeros)
                + struct.pack(">II", (bit_len >> 32) & MASK32, bit_len & MASK32))

    def sum(self, data=None, output_format=None):
        """Finish the hash and return the digest.

        If data is given the hasher is reset first, so the result is the
        digest of data alone. output_format is None/"bytes" for the 32 raw
        bytes or "hex" for 64 lowercase hex characters.
        """
        if output_format not in (None, "bytes", "hex"):
            raise ValueError(f"unknown output format {output_format!r}")
        if data is not None:
            self.reset()
            self.write(data)

        tail = self._pad()
        reg = self._reg
        for off in range(0, len(tail), BLOCK_SIZE):
            _compress(reg, tail, off)
        digest = struct.pack(">8I", *reg)
        self.reset()

        if output_format == "hex":
            return digest.hex()
        return digest


def sm3_hash(data, output_format=None):
    """One-shot SM3 of data."""
    return SM3().sum(data, output_format)
