import random

import pytest

from cryptoprims.curves import jubjub
from cryptoprims.errors import IncorrectInputLength
from cryptoprims.pedersen import (
    Parameters,
    PedersenCRH,
    PedersenTwoToOneCRH,
    Window,
    bytes_to_bits,
)

SMALL = Window(window_size=4, num_windows=9)
LARGE = Window(window_size=127, num_windows=9)


@pytest.fixture(scope="module")
def small_crh():
    crh = PedersenCRH(jubjub(), SMALL)
    return crh, crh.setup(random.Random(11))


def test_bytes_to_bits_little_endian():
    assert bytes_to_bits(b"\x01") == [True] + [False] * 7
    assert bytes_to_bits(b"\x80\x00") == [False] * 7 + [True] + [False] * 8


def test_window_rejects_non_positive():
    with pytest.raises(ValueError):
        Window(0, 3)


def test_generator_shapes(small_crh):
    crh, params = small_crh
    assert len(params.generators) == SMALL.num_windows
    assert all(len(g) == SMALL.window_size for g in params.generators)
    first = params.generators[0]
    assert first[1] == first[0].double()


def test_evaluate_deterministic_and_on_curve(small_crh):
    crh, params = small_crh
    out = crh.evaluate(params, b"\x01\x01\x01\x01")
    assert out == crh.evaluate(params, b"\x01\x01\x01\x01")
    assert crh.curve.is_on_curve(out.x, out.y)


def test_single_bit_selects_first_generator(small_crh):
    crh, params = small_crh
    assert crh.evaluate(params, b"\x01") == params.generators[0][0]
    assert crh.evaluate(params, b"").is_identity()


def test_padding_does_not_change_hash(small_crh):
    crh, params = small_crh
    assert crh.evaluate(params, b"\x05") == crh.evaluate(params, b"\x05\x00\x00")


def test_disjoint_bits_add(small_crh):
    crh, params = small_crh
    combined = crh.evaluate(params, b"\x03\x10")
    assert combined == crh.evaluate(params, b"\x01\x10") + crh.evaluate(params, b"\x02")


def test_too_long_input_raises(small_crh):
    crh, params = small_crh
    with pytest.raises(IncorrectInputLength):
        crh.evaluate(params, bytes(5))


def test_wrong_parameter_count_raises(small_crh):
    crh, params = small_crh
    with pytest.raises(ValueError):
        crh.evaluate(Parameters(params.generators[:-1]), b"\x01")


def test_parameters_str(small_crh):
    _, params = small_crh
    text = str(params)
    assert text.startswith("Pedersen Hash Parameters {\n")
    assert text.count("Generator") == SMALL.num_windows


def test_two_to_one_matches_concatenation(small_crh):
    crh, params = small_crh
    two = PedersenTwoToOneCRH(jubjub(), SMALL)
    assert two.evaluate(params, b"\x12\x34", b"\x56\x78") == crh.evaluate(params, b"\x12\x34\x56\x78")


def test_two_to_one_unequal_lengths(small_crh):
    _, params = small_crh
    two = PedersenTwoToOneCRH(jubjub(), SMALL)
    with pytest.raises(ValueError):
        two.evaluate(params, b"\x01", b"\x01\x02")


def test_two_to_one_half_overflow(small_crh):
    _, params = small_crh
    two = PedersenTwoToOneCRH(jubjub(), SMALL)
    with pytest.raises(IncorrectInputLength):
        two.evaluate(params, b"\x01\x02\x03", b"\x01\x02\x03")


def test_two_to_one_compress():
    rng = random.Random(5)
    curve = jubjub()
    two = PedersenTwoToOneCRH(curve, LARGE)
    params = two.setup(rng)
    left, right = curve.random_point(rng), curve.random_point(rng)
    out = two.compress(params, left, right)
    expected = PedersenCRH(curve, LARGE).evaluate(
        params, left.to_uncompressed_bytes() + right.to_uncompressed_bytes()
    )
    assert out == expected
    assert two.compress(params, right, left) != out