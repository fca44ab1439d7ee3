from __future__ import annotations

import copy

import pytest

from parkmiller.rand import MAX_SEED, MODULUS, InvalidSeedError, ParkMiller, is_valid_seed, normalize_seed


def test_seed1_known_vectors() -> None:
    rng = ParkMiller(1)
    assert rng.next_raw() == 16807
    assert rng.next_raw() == 282475249
    assert rng.next_raw() == 1622650073
    assert rng.seed == 1622650073


def test_seed1_step_10000() -> None:
    rng = ParkMiller(1)
    for _ in range(10_000):
        rng.next_raw()
    assert rng.seed == 1043618065


def test_same_seed_same_sequence() -> None:
    a = ParkMiller(123456789)
    b = ParkMiller(123456789)
    assert [a.next_raw() for _ in range(1000)] == [b.next_raw() for _ in range(1000)]
    assert a == b


def test_seed123456789_first_draws() -> None:
    rng = ParkMiller(123456789)
    assert list(rng.iter_raw(3)) == [469049721, 2053676357, 1781357515]


def test_max_seed_is_kept_and_steps() -> None:
    rng = ParkMiller(MAX_SEED)
    assert rng.seed == 2147483646
    assert rng.next_raw() == 2147466840


@pytest.mark.parametrize("seed", [0, -1, -2147483647, 2147483647, 2147483648, 4294967295, 2**64])
def test_out_of_range_seed_clamps_to_one(seed: int) -> None:
    rng = ParkMiller(seed)
    assert rng.seed == 1
    assert rng.next_raw() == 16807


def test_seed_setter_clamps() -> None:
    rng = ParkMiller(99)
    rng.seed = 0
    assert rng.seed == 1
    rng.seed = 4294967295
    assert rng.seed == 1
    rng.seed = 500
    assert rng.seed == 500
    assert rng.set_seed(-7) == 1
    assert rng.set_seed(77) == 77


def test_normalize_seed_bounds() -> None:
    assert normalize_seed(1) == 1
    assert normalize_seed(MAX_SEED) == MAX_SEED
    assert normalize_seed(MODULUS) == 1
    assert is_valid_seed(MAX_SEED)
    assert not is_valid_seed(0)
    assert not is_valid_seed(MODULUS)


def test_strict_constructor_rejects_invalid_seed() -> None:
    assert ParkMiller.strict(5).seed == 5
    with pytest.raises(InvalidSeedError):
        ParkMiller.strict(0)
    with pytest.raises(InvalidSeedError):
        ParkMiller.strict(MODULUS)
    with pytest.raises(ValueError):
        ParkMiller.strict(4294967295)


def test_raw_and_uniform_ranges() -> None:
    rng = ParkMiller(2024)
    for _ in range(50_000):
        raw = rng.next_raw()
        assert 1 <= raw <= MAX_SEED
    for _ in range(50_000):
        u = rng.next_uniform()
        assert 0.0 < u <= 1.0


def test_uniform_is_raw_over_modulus() -> None:
    rng = ParkMiller(1)
    assert rng.next_uniform() == 16807 / 2147483647


def test_every_draw_advances_state_once() -> None:
    reference = ParkMiller(42)
    expected = list(reference.iter_raw(8))

    rng = ParkMiller(42)
    rng.next_uniform()
    assert rng.seed == expected[0]
    rng.next_int(1, 6)
    assert rng.seed == expected[1]
    rng.next_int_range(6, 1)
    assert rng.seed == expected[2]
    rng.next_float(0.0, 1.0)
    assert rng.seed == expected[3]
    rng.next_float_range(1.0, 0.0)
    assert rng.seed == expected[4]
    rng.next_bool()
    assert rng.seed == expected[5]
    rng.next_int_bounded(10)
    assert rng.seed == expected[6]
    rng.next_int_bounded(0)
    assert rng.seed == expected[7]


def test_seed42_next_int_dice() -> None:
    rng = ParkMiller(42)
    assert [rng.next_int(1, 6) for _ in range(5)] == [1, 4, 5, 2, 3]


def test_seed42_next_bool() -> None:
    rng = ParkMiller(42)
    assert [rng.next_bool() for _ in range(5)] == [True, False, False, True, True]


def test_seed42_next_int_bounded() -> None:
    rng = ParkMiller(42)
    assert [rng.next_int_bounded(10) for _ in range(5)] == [0, 5, 7, 2, 3]


def test_seed42_next_float() -> None:
    rng = ParkMiller(42)
    assert rng.next_float(10.0, 20.0) == pytest.approx(10.003287075088959, abs=1e-12)
    assert rng.next_float(10.0, 20.0) == pytest.approx(15.245871020129822, abs=1e-12)


def test_int_range_swap_symmetry() -> None:
    a = ParkMiller(31337)
    b = ParkMiller(31337)
    for _ in range(1000):
        assert a.next_int_range(6, 1) == b.next_int_range(1, 6)
    assert a == b


def test_float_range_swap_symmetry() -> None:
    a = ParkMiller(31337)
    b = ParkMiller(31337)
    for _ in range(1000):
        assert a.next_float_range(5.0, -3.0) == b.next_float_range(-3.0, 5.0)


def test_float_draws_stay_in_bounds() -> None:
    rng = ParkMiller(8)
    for _ in range(10_000):
        value = rng.next_float(-2.5, 7.25)
        assert -2.5 <= value <= 7.25


def test_degenerate_int_range_returns_bound() -> None:
    rng = ParkMiller(5)
    assert {rng.next_int(3, 3) for _ in range(1000)} == {3}
    assert {rng.next_int_bounded(1) for _ in range(1000)} == {0}


def test_negative_int_range() -> None:
    rng = ParkMiller(17)
    values = {rng.next_int_range(-3, -8) for _ in range(20_000)}
    assert values == set(range(-8, -2))


def test_advance_matches_repeated_raw() -> None:
    a = ParkMiller(99991)
    b = ParkMiller(99991)
    for _ in range(12_345):
        a.next_raw()
    assert b.advance(12_345) == a.seed
    assert b.advance(0) == a.seed


def test_advance_rejects_negative_steps() -> None:
    with pytest.raises(ValueError):
        ParkMiller(1).advance(-1)


def test_copy_is_independent() -> None:
    rng = ParkMiller(1000)
    clone = rng.copy()
    assert clone == rng
    clone.next_raw()
    assert clone != rng
    assert copy.copy(rng) == rng


def test_repr() -> None:
    assert repr(ParkMiller(0)) == "ParkMiller(seed=1)"
