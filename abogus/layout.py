# Copyright (c) 2026 Signer — MIT License

"""Byte layout of the a_bogus plaintext.

The plaintext is 44 single-byte fields in a fixed, interleaved order,
followed by the raw window-environment string and one XOR checksum byte:

    fields (44) || window_env || checksum (1)

Multi-byte values are split big-endian unless noted. The two "hi" bytes of
each timestamp are (t // 2**32) & 0xFF and (t // 2**40) & 0xFF.
"""

from typing import NamedTuple

from .crypto.sm3 import DIGEST_SIZE

# ── Constants ────────────────────────────────────────────────────

HEADER = 44
PROTOCOL_VERSION = 3
PAGE_ID = 110624
AID = 6383
END_TIME_OFFSET = 100  # ms
DEFAULT_ARGS = (0, 1, 14)
WINDOW_ENV = "1920|1080|1920|1040|0|30|0|0|1872|92|1920|1040|1857|92|1|24|Win32"


class Fields(NamedTuple):
    """One byte per field, declared in wire-offset order."""
    header: int
    start_0: int
    start_1: int
    start_2: int
    start_3: int
    start_hi32: int
    start_hi40: int
    arg0_0: int
    arg0_1: int
    arg0_2: int
    arg0_3: int
    arg1_hi: int
    arg1_lo: int
    arg1_0: int
    arg1_1: int
    arg2_0: int
    arg2_1: int
    arg2_2: int
    arg2_3: int
    params_21: int
    params_22: int
    suffix_21: int
    suffix_22: int
    ua_23: int
    ua_24: int
    end_0: int
    end_1: int
    end_2: int
    end_3: int
    version: int
    end_hi32: int
    end_hi40: int
    page_id_0: int
    page_id_1: int
    page_id_2: int
    page_id_3: int
    aid_0: int  # aid is little-endian
    aid_1: int
    aid_2: int
    aid_3: int
    env_len_lo: int
    env_len_hi: int
    pad_0: int
    pad_1: int


# Serialization order.
FIELD_ORDER = (
    "header", "start_0", "page_id_0", "arg0_0", "arg1_hi", "arg2_0",
    "aid_1", "params_21", "suffix_21", "page_id_1", "ua_23", "start_1",
    "arg0_1", "page_id_2", "page_id_3", "arg1_lo", "arg2_1", "aid_0",
    "params_22", "suffix_22", "ua_24", "start_2", "arg0_2", "arg1_0",
    "aid_3", "arg2_2", "start_3", "arg0_3", "arg1_1", "arg2_3",
    "end_0", "end_1", "aid_2", "end_2", "end_3", "version",
    "end_hi32", "end_hi40", "start_hi32", "start_hi40",
    "env_len_lo", "env_len_hi", "pad_0", "pad_1",
)

# Checksum operands, in the order they are folded. arg2_0 is not covered.
CHECKSUM_FIELDS = (
    "header", "start_0", "arg0_0", "arg1_hi", "params_21", "suffix_21",
    "ua_23", "start_1", "arg0_1", "arg1_lo", "arg2_1", "params_22",
    "suffix_22", "ua_24", "start_2", "arg0_2", "arg1_0", "arg2_2",
    "start_3", "arg0_3", "arg1_1", "arg2_3",
    "end_0", "end_1", "end_2", "end_3", "version", "end_hi32", "end_hi40",
    "start_hi32", "start_hi40",
    "page_id_0", "page_id_1", "page_id_2", "page_id_3",
    "aid_0", "aid_1", "aid_2", "aid_3",
    "env_len_lo", "env_len_hi", "pad_0", "pad_1",
)


def _be32(n):
    return ((n >> 24) & 0xFF, (n >> 16) & 0xFF, (n >> 8) & 0xFF, n & 0xFF)


def _hi(n):
    return (n >> 32) & 0xFF, (n >> 40) & 0xFF


def env_bytes(window_env):
    """Character codes of the environment string (must be Latin-1)."""
    return window_env.encode("latin-1")


def build_fields(params_digest, suffix_digest, ua_digest, start_time,
                 window_env=WINDOW_ENV, args=DEFAULT_ARGS):
    """Lay out every field for one signing call.

    start_time is the request time in epoch milliseconds; the end time is
    END_TIME_OFFSET later. Only bytes 21/22 of the query and suffix digests
    and bytes 23/24 of the user-agent digest are used.
    """
    for name, digest in (("params", params_digest), ("suffix", suffix_digest),
                         ("ua", ua_digest)):
        if len(digest) != DIGEST_SIZE:
            raise ValueError(
                f"{name} digest must be {DIGEST_SIZE} bytes, got {len(digest)}"
            )
    if len(args) != 3:
        raise ValueError(f"args must have 3 entries, got {len(args)}")
    if start_time < 0:
        raise ValueError("start_time must be non-negative")

    end_time = start_time + END_TIME_OFFSET
    arg0, arg1, arg2 = args
    env_len = len(env_bytes(window_env))

    return Fields(
        HEADER,
        *_be32(start_time),
        *_hi(start_time),
        *_be32(arg0),
        (arg1 >> 8) & 0xFF,
        arg1 & 0xFF,
        *_be32(arg1)[:2],
        *_be32(arg2),
        params_digest[21], params_digest[22],
        suffix_digest[21], suffix_digest[22],
        ua_digest[23], ua_digest[24],
        *_be32(end_time),
        PROTOCOL_VERSION,
        *_hi(end_time),
        *_be32(PAGE_ID),
        *reversed(_be32(AID)),
        env_len & 0xFF,
        (env_len >> 8) & 0xFF,
        0, 0,
    )


def checksum(fields):
    x = 0
    for name in CHECKSUM_FIELDS:
        x ^= getattr(fields, name)
    return x


def serialize(fields, window_env=WINDOW_ENV):
    """Fields in wire order, then the environment string, then the checksum."""
    head = bytes(getattr(fields, name) for name in FIELD_ORDER)
    return head + env_bytes(window_env) + bytes((checksum(fields),))
