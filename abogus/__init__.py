# Copyright (c) 2026 Signer — MIT License

"""a_bogus signer — SM3 + RC4 + substituted-alphabet encoding, pure Python.

Computes the a_bogus query parameter required by the live-room web API.
The caller supplies the encoded query string and User-Agent; the package
does no I/O.
"""

from .signer import (
    sign,
    sign_url,
    rc4_bb,
    random_prefix,
    ua_digest,
    SUFFIX,
    UA_KEY,
    BB_KEY,
    DEFAULT_USER_AGENT,
)
from .layout import (
    Fields,
    build_fields,
    checksum,
    serialize,
    WINDOW_ENV,
    DEFAULT_ARGS,
)
from .crypto import SM3, sm3_hash, RC4, rc4, encode, ENCODING_TABLES

__all__ = [
    "sign",
    "sign_url",
    "rc4_bb",
    "random_prefix",
    "ua_digest",
    "SUFFIX",
    "UA_KEY",
    "BB_KEY",
    "DEFAULT_USER_AGENT",
    "Fields",
    "build_fields",
    "checksum",
    "serialize",
    "WINDOW_ENV",
    "DEFAULT_ARGS",
    "SM3",
    "sm3_hash",
    "RC4",
    "rc4",
    "encode",
    "ENCODING_TABLES",
]
