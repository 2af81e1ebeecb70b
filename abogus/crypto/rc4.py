# Copyright (c) 2026 Signer — MIT License

"""RC4 stream cipher — Pure Python.

Encryption and decryption are the same operation: the keystream is XORed
into the data. Keys are byte strings of length 1..256; an empty key is
rejected since the key schedule is undefined for it.
"""


class RC4:
    """Keyed RC4 state: a permutation of 0..255 plus the two PRGA indices.

    Successive apply() calls continue the same keystream.
    """

    def __init__(self, key):
        key = bytes(key)
        if not key:
            raise ValueError("RC4 key must not be empty")
        s = list(range(256))
        j = 0
        klen = len(key)
        for i in range(256):
            j = (j + s[i] + key[i % klen]) & 0xFF
            s[i], s[j] = s[j], s[i]
        self._s = s
        self._i = 0
        self._j = 0

    def apply(self, data):
        s = self._s
        i, j = self._i, self._j
        out = bytearray(len(data))
        for n, byte in enumerate(bytes(data)):
            i = (i + 1) & 0xFF
            j = (j + s[i]) & 0xFF
            s[i], s[j] = s[j], s[i]
            out[n] = byte ^ s[(s[i] + s[j]) & 0xFF]
        self._i, self._j = i, j
        return bytes(out)

    @property
    def state(self):
        """Copy of the current permutation table."""
        return list(self._s)


def rc4(data, key):
    """One-shot RC4 of data under key, starting from a fresh key schedule."""
    return RC4(key).apply(data)
