# Copyright (c) 2026 Signer — MIT License

"""a_bogus request signing.

    token = encode_s4(prefix || RC4_121(layout)) || "="

where layout is the byte structure from layout.py, built from three SM3
digests:

    params = SM3(SM3(query || suffix))
    suffix = SM3(SM3(suffix))
    ua     = SM3(encode_s3(RC4_{00 01 0e}(user_agent)))

Both encodings here are cut to ceil(4n / 3) characters: the zero-filled
tail of a short final window is not emitted.

The 12-byte prefix is derived from fixed constants, not from a random
source; the server-side check expects exactly these bytes.

The only non-deterministic input is the request time. Pass clock= (a
callable returning epoch milliseconds) to pin it.
"""

import logging
import time
from urllib.parse import quote_plus, urlencode

from .crypto.encoding import encode
from .crypto.rc4 import rc4
from .crypto.sm3 import sm3_hash
from .layout import DEFAULT_ARGS, WINDOW_ENV, build_fields, serialize

logger = logging.getLogger(__name__)

# ── Constants ────────────────────────────────────────────────────

SUFFIX = "cus"
UA_KEY = bytes((0, 1, 14))
BB_KEY = bytes((121,))
UA_TABLE = "s3"
TOKEN_TABLE = "s4"
TOKEN_PARAM = "a_bogus"

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/121.0.0.0 Safari/537.36"
)

# (value, option pair) for each 4-byte prefix group.
_PREFIX_SEEDS = (
    (0.123456789, (3, 45)),
    (0.987654321, (1, 0)),
    (0.555555555, (1, 5)),
)


def _packed(data, table):
    """encode() cut to ceil(4n / 3) characters, dropping the zero-fill tail."""
    return encode(data, table)[:(len(data) * 4 + 2) // 3]


def _form_quote(string, safe="", encoding=None, errors=None):
    """Form-encode like a browser URLSearchParams: keep "*", escape "~"."""
    return quote_plus(string, "*", encoding, errors).replace("~", "%7E")


def _now_ms():
    return int(time.time() * 1000)


# ── Prefix ───────────────────────────────────────────────────────

def _interleave(value, option):
    """Merge the low two bytes of value with option, alternating bit lanes."""
    lo = value & 0xFF
    hi = (value >> 8) & 0xFF
    return (
        (lo & 0xAA) | (option[0] & 0x55),
        (lo & 0x55) | (option[0] & 0xAA),
        (hi & 0xAA) | (option[1] & 0x55),
        (hi & 0x55) | (option[1] & 0xAA),
    )


def random_prefix():
    out = bytearray()
    for value, option in _PREFIX_SEEDS:
        out += bytes(_interleave(int(value * 10000), option))
    return bytes(out)


# ── Digests ──────────────────────────────────────────────────────

def _double_sm3(data):
    return sm3_hash(sm3_hash(data))


def ua_digest(user_agent):
    ct = rc4(user_agent.encode("utf-8"), UA_KEY)
    return sm3_hash(_packed(ct, UA_TABLE))


def rc4_bb(query, user_agent, start_time, suffix=SUFFIX, args=None,
           window_env=WINDOW_ENV):
    """Encrypted byte layout for one request (the part after the prefix)."""
    if args is None:
        args = DEFAULT_ARGS
    fields = build_fields(
        _double_sm3(query + suffix),
        _double_sm3(suffix),
        ua_digest(user_agent),
        start_time,
        window_env=window_env,
        args=args,
    )
    return rc4(serialize(fields, window_env), BB_KEY)


# ── Public API ───────────────────────────────────────────────────

def sign(query, user_agent, suffix=SUFFIX, args=None, window_env=WINDOW_ENV,
         clock=None):
    """Compute the a_bogus token for an encoded query string.

    query must be the exact, already URL-encoded query that will be sent
    (parameter order matters). user_agent must be the exact User-Agent
    header of the request. The token is used as-is, without further
    percent-encoding.
    """
    if not isinstance(query, str) or not isinstance(user_agent, str):
        raise TypeError("query and user_agent must be str")
    start_time = int((clock or _now_ms)())
    body = rc4_bb(query, user_agent, start_time, suffix=suffix, args=args,
                  window_env=window_env)
    token = _packed(random_prefix() + body, TOKEN_TABLE) + "="
    logger.debug("signed query (%d chars) at %d ms, token length %d",
                 len(query), start_time, len(token))
    return token


def sign_url(base_url, params, user_agent=DEFAULT_USER_AGENT, **kwargs):
    """Build base_url?query&a_bogus=token for a mapping of parameters.

    Parameters are form-encoded in iteration order with the browser's
    character set (space as "+", "*" literal, "~" escaped). Extra keyword
    arguments go to sign().
    """
    query = urlencode(params, quote_via=_form_quote)
    token = sign(query, user_agent, **kwargs)
    return f"{base_url}?{query}&{TOKEN_PARAM}={token}"
