from __future__ import annotations

from collections.abc import Iterator

__all__ = [
    "EPSILON",
    "MAX_SEED",
    "MIN_SEED",
    "MODULUS",
    "MULTIPLIER",
    "InvalidSeedError",
    "ParkMiller",
    "is_valid_seed",
    "normalize_seed",
]

MULTIPLIER = 16807
MODULUS = 0x7FFFFFFF
MIN_SEED = 1
MAX_SEED = MODULUS - 1

# Pads integer bounds before rounding a uniform draw onto them; also the
# `next_bool` threshold.
EPSILON = 0.4999


class InvalidSeedError(ValueError):
    pass


def is_valid_seed(value: int) -> bool:
    return MIN_SEED <= int(value) <= MAX_SEED


def normalize_seed(value: int) -> int:
    """Map any integer onto the generator domain; out-of-range values become 1."""
    value = int(value)
    if not is_valid_seed(value):
        return MIN_SEED
    return value


class ParkMiller:
    """Park-Miller "minimal standard" LCG.

    Matches:
      seed = (seed * 16807) % (2**31 - 1)
      return seed

    Seeds outside [1, 2**31 - 2] are silently replaced by 1. Instances are not
    safe for concurrent mutation; see `parkmiller.host.SharedParkMiller`.
    """

    __slots__ = ("_seed",)

    def __init__(self, seed: int = MIN_SEED) -> None:
        self._seed = normalize_seed(seed)

    @classmethod
    def strict(cls, seed: int) -> ParkMiller:
        """Construct without clamping; raise `InvalidSeedError` for out-of-domain seeds."""
        if not is_valid_seed(seed):
            raise InvalidSeedError(f"seed must be in [{MIN_SEED}, {MAX_SEED}], got {seed}")
        return cls(seed)

    @property
    def seed(self) -> int:
        return self._seed

    @seed.setter
    def seed(self, value: int) -> None:
        self._seed = normalize_seed(value)

    def set_seed(self, value: int) -> int:
        self._seed = normalize_seed(value)
        return self._seed

    def copy(self) -> ParkMiller:
        return type(self)(self._seed)

    __copy__ = copy

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParkMiller):
            return NotImplemented
        return self._seed == other._seed

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"{type(self).__name__}(seed={self._seed})"

    def _step(self) -> int:
        self._seed = (self._seed * MULTIPLIER) % MODULUS
        return self._seed

    def advance(self, steps: int) -> int:
        """Jump `steps` transitions ahead; same resulting seed as `steps` raw draws."""
        steps = int(steps)
        if steps < 0:
            raise ValueError(f"steps must be non-negative, got {steps}")
        self._seed = (self._seed * pow(MULTIPLIER, steps, MODULUS)) % MODULUS
        return self._seed

    def next_raw(self) -> int:
        return self._step()

    def iter_raw(self, count: int) -> Iterator[int]:
        for _ in range(int(count)):
            yield self._step()

    def next_uniform(self) -> float:
        # raw is in [1, MODULUS - 1], so the result never hits 0.0 or 1.0.
        return self._step() / MODULUS

    def next_int(self, min_value: int, max_value: int) -> int:
        low = float(min_value) - EPSILON
        high = float(max_value) + EPSILON
        return round(low + (high - low) * self.next_uniform())

    def next_int_range(self, lo: int, hi: int) -> int:
        if lo > hi:
            lo, hi = hi, lo
        return self.next_int(lo, hi)

    def next_float(self, min_value: float, max_value: float) -> float:
        return float(min_value) + (float(max_value) - float(min_value)) * self.next_uniform()

    def next_float_range(self, lo: float, hi: float) -> float:
        if lo > hi:
            lo, hi = hi, lo
        return self.next_float(lo, hi)

    def next_bool(self) -> bool:
        return self.next_uniform() <= EPSILON

    def next_int_bounded(self, upper: int) -> int:
        """Draw from [0, upper); `upper <= 1` yields 0 but still advances the state."""
        return self.next_int(0, max(int(upper) - 1, 0))
