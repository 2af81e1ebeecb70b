# Copyright (c) 2026 Signer — MIT License

"""Base64-style packing over substituted alphabets.

Every 3-byte window becomes four 6-bit indices (bit offsets 18, 12, 6, 0
of the big-endian 24-bit value). A short final window is zero-filled, so
the output is always ceil(n / 3) * 4 characters and never carries an
explicit padding symbol. Encode-only; nothing in the protocol decodes.
"""

import math

# s0..s2 carry "=" as index 64; the packing never reaches it. s3 and s4
# have only the 64 data symbols.
ENCODING_TABLES = {
    "s0": "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/=",
    "s1": "Dkdpgh4ZKsQB80/Mfvw36XI1R25+WUAlEi7NLboqYTOPuzmFjJnryx9HVGcaStCe=",
    "s2": "Dkdpgh4ZKsQB80/Mfvw36XI1R25-WUAlEi7NLboqYTOPuzmFjJnryx9HVGcaStCe=",
    "s3": "ckdp1h4ZKsUB80/Mfvw36XIgR25+WQAlEi7NLboqYTOPuzmFjJnryx9HVGDaStCe",
    "s4": "Dkdpgh2ZmsQB80/MfvV36XI1R45-WUAlEixNLwoqYTOPuzKFjJnry79HbGcaStCe",
}

_SHIFTS = (18, 12, 6, 0)


def encoded_length(n):
    return math.ceil(n / 3) * 4


def encode(data, table="s0"):
    """Encode bytes with the named alphabet ("s0" .. "s4")."""
    try:
        alphabet = ENCODING_TABLES[table]
    except KeyError:
        raise ValueError(f"unknown encoding table {table!r}") from None

    data = bytes(data)
    out = []
    for off in range(0, len(data), 3):
        word = int.from_bytes(data[off:off + 3].ljust(3, b"\x00"), "big")
        for shift in _SHIFTS:
            out.append(alphabet[(word >> shift) & 0x3F])
    return "".join(out)
