from __future__ import annotations

from dataclasses import dataclass

from .rand import MIN_SEED, MODULUS, MULTIPLIER, ParkMiller

__all__ = [
    "MODULUS_MINUS_ONE_FACTORS",
    "PeriodReport",
    "multiplicative_order_is_full",
    "period_check",
]

# 2**31 - 2 == 2 * 3**2 * 7 * 11 * 31 * 151 * 331
MODULUS_MINUS_ONE_FACTORS: tuple[int, ...] = (2, 3, 7, 11, 31, 151, 331)


@dataclass(frozen=True, slots=True)
class PeriodReport:
    multiplier: int
    modulus: int
    period: int
    residues: tuple[tuple[int, int], ...]
    full: bool
    returns_to_start: bool


def multiplicative_order_is_full(
    multiplier: int,
    modulus: int = MODULUS,
    factors: tuple[int, ...] = MODULUS_MINUS_ONE_FACTORS,
) -> bool:
    """True when `multiplier` generates every nonzero residue mod the prime `modulus`."""
    order = modulus - 1
    return all(pow(multiplier, order // p, modulus) != 1 for p in factors)


def period_check(start_seed: int = MIN_SEED) -> PeriodReport:
    order = MODULUS - 1
    residues = tuple((p, pow(MULTIPLIER, order // p, MODULUS)) for p in MODULUS_MINUS_ONE_FACTORS)
    rng = ParkMiller(start_seed)
    start = rng.seed
    rng.advance(order)
    return PeriodReport(
        multiplier=MULTIPLIER,
        modulus=MODULUS,
        period=order,
        residues=residues,
        full=all(residue != 1 for _, residue in residues),
        returns_to_start=rng.seed == start,
    )
