import random

import pytest

from cryptoprims.curves import jubjub
from cryptoprims.errors import NotPrimeOrder
from cryptoprims.injective_map import (
    PedersenCRHCompressor,
    PedersenTwoToOneCRHCompressor,
    TECompressor,
)
from cryptoprims.pedersen import PedersenCRH, PedersenTwoToOneCRH, Window

WINDOW = Window(128, 4)


@pytest.fixture(scope="module")
def params():
    return PedersenCRH(jubjub(), WINDOW).setup(random.Random(5))


def test_compressor_returns_x():
    point = jubjub().random_point(random.Random(2))
    assert TECompressor().injective_map(point) == point.x


def test_compressor_identity():
    assert TECompressor().injective_map(jubjub().identity()) == 0


def test_compressor_rejects_small_order_point():
    curve = jubjub()
    small = curve.point(0, -1)
    with pytest.raises(NotPrimeOrder):
        TECompressor().injective_map(small)


def test_crh_compressor_matches_pedersen(params):
    curve = jubjub()
    data = b"compress me"
    expected = PedersenCRH(curve, WINDOW).evaluate(params, data).x
    assert PedersenCRHCompressor(curve, WINDOW).evaluate(params, data) == expected


def test_crh_compressor_setup_shape():
    p = PedersenCRHCompressor(jubjub(), Window(4, 3)).setup(random.Random(0))
    assert len(p.generators) == 3
    assert all(len(g) == 4 for g in p.generators)


def test_two_to_one_compressor_matches_pedersen(params):
    curve = jubjub()
    left, right = b"\x01" * 16, b"\x02" * 16
    expected = PedersenTwoToOneCRH(curve, WINDOW).evaluate(params, left, right).x
    result = PedersenTwoToOneCRHCompressor(curve, WINDOW).evaluate(params, left, right)
    assert result == expected


def test_two_to_one_compressor_compress(params):
    two = PedersenTwoToOneCRHCompressor(jubjub(), WINDOW)
    a = two.evaluate(params, b"\x05" * 8, b"\x06" * 8)
    b = two.evaluate(params, b"\x07" * 8, b"\x08" * 8)
    expected = two.evaluate(params, a.to_bytes(32, "little"), b.to_bytes(32, "little"))
    assert two.compress(params, a, b) == expected


def test_two_to_one_compressor_unequal_lengths(params):
    two = PedersenTwoToOneCRHCompressor(jubjub(), WINDOW)
    with pytest.raises(ValueError):
        two.evaluate(params, b"\x01", b"\x01\x02")