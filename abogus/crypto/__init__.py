# Copyright (c) 2026 Signer — MIT License

"""Primitives used by the a_bogus signer.

Hash:
    SM3 (GB/T 32905-2016) — 256-bit hash, streaming, pure Python.

Cipher:
    RC4 — byte-oriented stream cipher; encrypt and decrypt are the same call.

Encoding:
    Base64-style 6-bit packing over five substituted alphabets (s0..s4).
"""

from .sm3 import SM3, sm3_hash, DIGEST_SIZE, BLOCK_SIZE
from .rc4 import RC4, rc4
from .encoding import ENCODING_TABLES, encode, encoded_length

__all__ = [
    # Hash
    "SM3", "sm3_hash", "DIGEST_SIZE", "BLOCK_SIZE",
    # Cipher
    "RC4", "rc4",
    # Encoding
    "ENCODING_TABLES", "encode", "encoded_length",
]
