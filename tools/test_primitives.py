# Copyright (c) 2026 Signer — MIT License

"""Test suite for RC4 and the substituted-alphabet encoder.

Covers:
    - RC4 published test vectors
    - RC4 involution and permutation invariant
    - Streaming keystream continuation
    - Encoder length law over every table and lengths 0..120
    - Encoder agreement with standard Base64 on whole windows

Run from the repository root:
    python -m tools.test_primitives
"""

import base64
import os
import random
import sys
import time
import unittest

# Ensure project root is on the import path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from abogus.crypto.rc4 import RC4, rc4
from abogus.crypto.encoding import ENCODING_TABLES, encode, encoded_length


class TestRC4Vectors(unittest.TestCase):

    def test_vectors(self):
        vectors = [
            (b"Key", b"Plaintext", "bbf316e8d940af0ad3"),
            (b"Wiki", b"pedia", "1021bf0420"),
            (b"Secret", b"Attack at dawn", "45a01f645fc35b383552544b9bf5"),
        ]
        for key, pt, ct in vectors:
            self.assertEqual(rc4(pt, key).hex(), ct, f"key={key!r}")

    def test_empty_plaintext(self):
        self.assertEqual(rc4(b"", b"k"), b"")

    def test_empty_key_rejected(self):
        with self.assertRaises(ValueError):
            RC4(b"")


class TestRC4Properties(unittest.TestCase):

    def test_involution(self):
        rng = random.Random(1234)
        for _ in range(50):
            key = bytes(rng.getrandbits(8) for _ in range(rng.randint(1, 32)))
            pt = bytes(rng.getrandbits(8) for _ in range(rng.randint(0, 300)))
            self.assertEqual(rc4(rc4(pt, key), key), pt)

    def test_permutation_invariant(self):
        cipher = RC4(bytes((0, 1, 14)))
        self.assertEqual(sorted(cipher.state), list(range(256)))
        for _ in range(10):
            cipher.apply(bytes(37))
            self.assertEqual(sorted(cipher.state), list(range(256)))

    def test_streaming_continues_keystream(self):
        key = b"\x79"
        data = bytes(range(200))
        cipher = RC4(key)
        chunked = cipher.apply(data[:77]) + cipher.apply(data[77:])
        self.assertEqual(chunked, rc4(data, key))

    def test_accepts_key_sequence(self):
        self.assertEqual(rc4(b"abc", [0, 1, 14]), rc4(b"abc", b"\x00\x01\x0e"))


class TestEncoding(unittest.TestCase):

    def test_tables(self):
        self.assertEqual(sorted(ENCODING_TABLES), ["s0", "s1", "s2", "s3", "s4"])
        for name in ("s0", "s1", "s2"):
            self.assertEqual(len(ENCODING_TABLES[name]), 65, name)
            self.assertEqual(ENCODING_TABLES[name][64], "=", name)
        for name in ("s3", "s4"):
            self.assertEqual(len(ENCODING_TABLES[name]), 64, name)
        for name, alphabet in ENCODING_TABLES.items():
            self.assertEqual(len(set(alphabet[:64])), 64, name)

    def test_length_law(self):
        rng = random.Random(99)
        for name in ENCODING_TABLES:
            for n in range(121):
                data = bytes(rng.getrandbits(8) for _ in range(n))
                out = encode(data, name)
                self.assertEqual(len(out), (n + 2) // 3 * 4, f"{name} n={n}")
                self.assertEqual(len(out), encoded_length(n))

    def test_matches_base64_on_whole_windows(self):
        data = bytes(range(255))
        self.assertEqual(encode(data, "s0"), base64.b64encode(data).decode())

    def test_short_window_zero_filled(self):
        self.assertEqual(encode(b"a", "s0"), "YQAA")
        self.assertEqual(encode(b"Ma", "s0"), "TWEA")
        self.assertEqual(encode(b"Man", "s0"), "TWFu")

    def test_padding_symbol_never_emitted(self):
        data = bytes(range(256)) * 2
        for name, alphabet in ENCODING_TABLES.items():
            self.assertTrue(set(encode(data, name)) <= set(alphabet[:64]), name)

    def test_substitution(self):
        data = bytes(range(0, 255, 3))
        std = encode(data, "s0")
        for name, alphabet in ENCODING_TABLES.items():
            trans = str.maketrans(ENCODING_TABLES["s0"][:64], alphabet[:64])
            self.assertEqual(encode(data, name), std.translate(trans), name)

    def test_default_table(self):
        self.assertEqual(encode(b"xyz"), encode(b"xyz", "s0"))

    def test_unknown_table(self):
        with self.assertRaises(ValueError):
            encode(b"abc", "s5")


# ── Runner ──────────────────────────────────────────────────────

if __name__ == "__main__":
    print("=" * 68)
    print("RC4 / Encoding Test Suite")
    print("=" * 68)
    t0 = time.time()

    loader = unittest.TestLoader()
    suite = loader.loadTestsFromModule(sys.modules[__name__])
    runner = unittest.TextTestRunner(verbosity=2)
    result = runner.run(suite)

    elapsed = time.time() - t0
    print(f"\nCompleted in {elapsed:.1f}s")
    sys.exit(0 if result.wasSuccessful() else 1)
