"""SHA-1 digest helpers used for session-server authentication."""

from __future__ import annotations

import base64
import binascii
import hashlib
import sys

SHA1_DIGEST_LENGTH = 20

_KNOWN_DIGESTS = (
    ("Notch", "4ed1f46bbe04bc756bcb17c0c7ce3e4632f06a48"),
    ("jeb_", "-7c9d5b0044c130109a5d7b5fb5c317c02b4e28c1"),
    ("simon", "88e16a1019277b15d58faf0541e11910eb756f6"),
)


def base64_decode(message: str | bytes) -> bytes:
    """Decode single-line base64 text into raw bytes."""
    try:
        return base64.b64decode(message, validate=True)
    except binascii.Error as exc:
        raise ValueError(f"invalid base64 data: {exc}") from exc


def _as_digest(digest: bytes | bytearray) -> bytes:
    digest = bytes(digest)
    if len(digest) != SHA1_DIGEST_LENGTH:
        raise ValueError(
            f"expected a {SHA1_DIGEST_LENGTH}-byte digest, got {len(digest)} bytes"
        )
    return digest


def sha1_twos_complement(digest: bytes | bytearray) -> bytes:
    """Return the two's complement of a 20-byte SHA-1 digest."""
    digest = _as_digest(digest)
    modulus = 1 << (8 * SHA1_DIGEST_LENGTH)
    value = int.from_bytes(digest, "big")
    return ((-value) % modulus).to_bytes(SHA1_DIGEST_LENGTH, "big")


def sha1_hex_digest(digest: bytes | bytearray) -> str:
    """Return the signed, leading-zero-stripped hex form of a SHA-1 digest."""
    digest = _as_digest(digest)
    value = int.from_bytes(digest, "big", signed=True)
    text = format(abs(value), f"0{2 * SHA1_DIGEST_LENGTH}x").lstrip("0")
    return "-" + text if value < 0 else text


def sha1_digest_test() -> bool:
    """Check the hex digest against well-known reference values."""
    passed = True
    for name, expected in _KNOWN_DIGESTS:
        result = sha1_hex_digest(hashlib.sha1(name.encode()).digest())
        if result != expected:
            print(
                f"Hex digest not a match. Expected {expected} got {result}",
                file=sys.stderr,
            )
            passed = False
    return passed