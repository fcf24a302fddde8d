"""Tests for the rational text-secret scheme."""

import random
from fractions import Fraction

import pytest

from polyshare import config
from polyshare.crypto import secret_codec
from polyshare.crypto.point import Point
from polyshare.errors import DecodeMismatch, InvalidCharacterCode, InvalidInput, SecretTooLong


def test_encode_decode():
    secret = "Hello!"
    encoded = secret_codec.encode(secret)
    assert secret_codec.decode(encoded) == secret


def test_round_trip_every_length(rng):
    for length in range(config.MAX_SECRET_LENGTH + 1):
        secret = "".join(chr(rng.randint(32, 126)) for _ in range(length))
        points = secret_codec.encode(secret, rng)
        assert len(points) == length
        assert secret_codec.decode(points) == secret


def test_round_trip_with_nul_characters(rng):
    for secret in ("\0", "a\0b", "ab\0\0", "\0\0x"):
        assert secret_codec.decode(secret_codec.encode(secret, rng)) == secret


def test_round_trip_non_ascii(rng):
    secret = "héllo✓"
    assert secret_codec.decode(secret_codec.encode(secret, rng)) == secret


def test_empty_secret():
    assert secret_codec.encode("") == []
    assert secret_codec.decode([]) == ""


def test_shares_have_distinct_x(rng):
    for _ in range(20):
        points = secret_codec.encode("abcdef", rng)
        xs = [p.x for p in points]
        assert len(set(xs)) == len(xs)
        assert all(1 <= x < config.SAMPLE_X_BOUND for x in xs)


def test_points_lie_on_secret_polynomial(rng):
    points = secret_codec.encode("AB", rng)
    for x, y in points:
        assert y == 65 + 66 * x


def test_order_of_points_irrelevant(rng):
    points = secret_codec.encode("Shamir", rng)
    shuffled = list(points)
    random.Random(3).shuffle(shuffled)
    assert secret_codec.decode(shuffled) == "Shamir"


def test_deterministic_with_seeded_rng():
    a = secret_codec.encode("seed", random.Random(5))
    b = secret_codec.encode("seed", random.Random(5))
    assert a == b


def test_too_long():
    with pytest.raises(SecretTooLong):
        secret_codec.encode("TooLongSecret")
    with pytest.raises(InvalidInput):
        secret_codec.encode("x" * (config.MAX_SECRET_LENGTH + 1))


def test_length_limit_is_configurable(monkeypatch, rng):
    monkeypatch.setattr(config, "MAX_SECRET_LENGTH", 10)
    secret = "TenChars!!"
    assert secret_codec.decode(secret_codec.encode(secret, rng)) == secret


def test_not_enough_distinct_abscissas(monkeypatch):
    monkeypatch.setattr(config, "SAMPLE_X_BOUND", 4)
    with pytest.raises(InvalidInput):
        secret_codec.encode("abcd")


def test_missing_share_does_not_decode_secret(rng):
    points = secret_codec.encode("abc", rng)
    try:
        recovered = secret_codec.decode(points[:2])
    except DecodeMismatch:
        return
    assert recovered != "abc"


def test_decode_non_integral_coefficient():
    # 1/2 x through (1, 1/2) and (2, 1)
    points = [Point(Fraction(1), Fraction(1, 2)), Point(Fraction(2), Fraction(1))]
    with pytest.raises(InvalidCharacterCode):
        secret_codec.decode(points)


def test_decode_negative_coefficient():
    with pytest.raises(DecodeMismatch):
        secret_codec.decode([Point(Fraction(3), Fraction(-1))])


def test_decode_code_point_too_large():
    with pytest.raises(InvalidCharacterCode):
        secret_codec.decode([Point(Fraction(1), Fraction(config.MAX_CODE_POINT + 1))])
