"""Adapters exposing `ParkMiller` through host random-source interfaces."""

from __future__ import annotations

import hashlib
import random
import secrets
from threading import Lock
from typing import Any, Protocol, runtime_checkable

from .rand import MAX_SEED, ParkMiller, normalize_seed

__all__ = [
    "BoundedRandomAdapter",
    "ParkMillerRandom",
    "RandomSource",
    "SharedParkMiller",
]


def _seed_from(a: Any) -> int:
    """Reduce anything `random.Random.seed` accepts to a generator seed."""
    if a is None:
        return secrets.randbelow(MAX_SEED) + 1
    if isinstance(a, int):
        return normalize_seed(a)
    if isinstance(a, str):
        a = a.encode("utf-8")
    if isinstance(a, (bytes, bytearray)):
        digest = hashlib.sha512(a).digest()
        return int.from_bytes(digest, "big") % MAX_SEED + 1
    if isinstance(a, float):
        if a.is_integer():
            return normalize_seed(int(a))
        return hash(a) % MAX_SEED + 1
    raise TypeError(f"unsupported seed type: {type(a).__name__}")


@runtime_checkable
class RandomSource(Protocol):
    def next_raw(self) -> int: ...

    def next_uniform(self) -> float: ...

    def next_bounded(self, upper_bound: int) -> int: ...


class BoundedRandomAdapter:
    """Next value / next value below a bound / uniform float, backed by one generator."""

    __slots__ = ("_rng",)

    def __init__(self, rng: ParkMiller) -> None:
        self._rng = rng

    @property
    def rng(self) -> ParkMiller:
        return self._rng

    def next_raw(self) -> int:
        return self._rng.next_raw()

    def next_int(self) -> int:
        return self._rng.next_raw()

    def next_int_with_upper_bound(self, upper_bound: int) -> int:
        return self._rng.next_int_bounded(upper_bound)

    def next_bounded(self, upper_bound: int) -> int:
        return self._rng.next_int_bounded(upper_bound)

    def next_uniform(self) -> float:
        return self._rng.next_uniform()

    def next_bool(self) -> bool:
        return self._rng.next_bool()


class SharedParkMiller:
    """`ParkMiller` guarded by a lock, for a single generator passed across threads.

    Each call is atomic, but interleaving between threads is still scheduler
    dependent. Give each logical stream its own `ParkMiller` when the sequence
    has to be reproducible.
    """

    __slots__ = ("_lock", "_rng")

    def __init__(self, seed: int = 1) -> None:
        self._lock = Lock()
        self._rng = ParkMiller(seed)

    @property
    def seed(self) -> int:
        with self._lock:
            return self._rng.seed

    @seed.setter
    def seed(self, value: int) -> None:
        with self._lock:
            self._rng.seed = value

    def snapshot(self) -> ParkMiller:
        with self._lock:
            return self._rng.copy()

    def next_raw(self) -> int:
        with self._lock:
            return self._rng.next_raw()

    def next_uniform(self) -> float:
        with self._lock:
            return self._rng.next_uniform()

    def next_bounded(self, upper_bound: int) -> int:
        with self._lock:
            return self._rng.next_int_bounded(upper_bound)

    def next_int(self, min_value: int, max_value: int) -> int:
        with self._lock:
            return self._rng.next_int(min_value, max_value)

    def next_int_range(self, lo: int, hi: int) -> int:
        with self._lock:
            return self._rng.next_int_range(lo, hi)

    def next_float(self, min_value: float, max_value: float) -> float:
        with self._lock:
            return self._rng.next_float(min_value, max_value)

    def next_float_range(self, lo: float, hi: float) -> float:
        with self._lock:
            return self._rng.next_float_range(lo, hi)

    def next_bool(self) -> bool:
        with self._lock:
            return self._rng.next_bool()


class ParkMillerRandom(random.Random):
    """`random.Random` running on the Park-Miller stream.

    Only `random()` is overridden for drawing, so `randrange`, `choice`,
    `shuffle` and friends each consume one or more Park-Miller steps.
    `getrandbits` is not provided: raw outputs are not uniform over whole bits.
    """

    VERSION = 1

    def __init__(self, x: Any = None) -> None:
        self._rng = ParkMiller()
        super().__init__(x)

    def seed(self, a: Any = None, version: int = 2) -> None:  # noqa: ARG002
        self._rng.seed = _seed_from(a)
        self.gauss_next = None

    def random(self) -> float:
        return self._rng.next_uniform()

    def getstate(self) -> tuple[int, int, float | None]:
        return (self.VERSION, self._rng.seed, self.gauss_next)

    def setstate(self, state: tuple[int, int, float | None]) -> None:
        version, seed, gauss_next = state
        if version != self.VERSION:
            raise ValueError(f"state with version {version} passed to ParkMillerRandom (expected {self.VERSION})")
        self._rng.seed = seed
        self.gauss_next = gauss_next

    @property
    def generator(self) -> ParkMiller:
        return self._rng

    def raw(self) -> int:
        return self._rng.next_raw()
