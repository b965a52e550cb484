import base64
import hashlib

import pytest

from craftclient.hashing import (
    SHA1_DIGEST_LENGTH,
    base64_decode,
    sha1_digest_test,
    sha1_hex_digest,
    sha1_twos_complement,
)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Notch", "4ed1f46bbe04bc756bcb17c0c7ce3e4632f06a48"),
        ("jeb_", "-7c9d5b0044c130109a5d7b5fb5c317c02b4e28c1"),
        ("simon", "88e16a1019277b15d58faf0541e11910eb756f6"),
    ],
)
def test_hex_digest_reference_values(name, expected):
    assert sha1_hex_digest(hashlib.sha1(name.encode()).digest()) == expected


def test_digest_self_test_passes():
    assert sha1_digest_test() is True


def test_hex_digest_of_zero_is_empty():
    assert sha1_hex_digest(bytes(SHA1_DIGEST_LENGTH)) == ""


def test_hex_digest_positive_has_no_leading_zero():
    digest = hashlib.sha1(b"simon").digest()
    result = sha1_hex_digest(digest)
    assert not result.startswith("0")
    assert int(result, 16) == int.from_bytes(digest, "big")


def test_twos_complement_is_involution():
    digest = hashlib.sha1(b"jeb_").digest()
    assert sha1_twos_complement(sha1_twos_complement(digest)) == digest


def test_twos_complement_sums_to_modulus():
    digest = hashlib.sha1(b"Notch").digest()
    complement = sha1_twos_complement(digest)
    total = int.from_bytes(digest, "big") + int.from_bytes(complement, "big")
    assert total % (1 << 160) == 0
    assert len(complement) == SHA1_DIGEST_LENGTH


def test_negative_digest_uses_complement():
    digest = hashlib.sha1(b"jeb_").digest()
    result = sha1_hex_digest(digest)
    assert result.startswith("-")
    assert int(result[1:], 16) == int.from_bytes(sha1_twos_complement(digest), "big")


def test_wrong_digest_length_rejected():
    with pytest.raises(ValueError):
        sha1_hex_digest(b"short")
    with pytest.raises(ValueError):
        sha1_twos_complement(bytes(21))


def test_base64_round_trip():
    payload = bytes(range(256))
    assert base64_decode(base64.b64encode(payload).decode()) == payload


def test_base64_accepts_bytes():
    assert base64_decode(base64.b64encode(b"textures")) == b"textures"


def test_base64_invalid_raises():
    with pytest.raises(ValueError):
        base64_decode("not*base64!")