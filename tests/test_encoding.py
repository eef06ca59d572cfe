import unittest

import base58

from ecsig import ChecksumError, OutOfRange
from ecsig.encoding import base58check_decode, base58check_encode, hash256


class Base58CheckTests(unittest.TestCase):
    def test_check(self):
        payload = b"\x80" + bytes(31) + b"\x01"
        encoded = base58check_encode(payload)
        self.assertEqual(encoded, "5HpHagT65TZzG1PH3CSu63k8DbpvD8s5ip4nEB3kEsreAnchuDf")
        self.assertEqual(base58check_decode(encoded), payload)

    def test_leading_zero_bytes(self):
        payload = b"\x00\x00payload"
        encoded = base58check_encode(payload)
        self.assertTrue(encoded.startswith("11"))
        self.assertEqual(base58check_decode(encoded), payload)

    def test_invalid_characters(self):
        for bad in ("0", "O", "I", "l", "abc+"):
            with self.assertRaises(OutOfRange):
                base58check_decode(bad)

    def test_too_short(self):
        with self.assertRaises(OutOfRange):
            base58check_decode("11")

    def test_checksum_mismatch(self):
        corrupted = base58.b58encode(b"\x00payload" + b"\x00\x00\x00\x00").decode("ascii")
        with self.assertRaises(ChecksumError):
            base58check_decode(corrupted)

    def test_hash256(self):
        self.assertEqual(
            hash256(b"").hex(),
            "5df6e0e2761359d30a8275058e299fcc0381534545f55cf43e41983f5d4c9456",
        )


if __name__ == "__main__":
    unittest.main()
