from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from .host import BoundedRandomAdapter, ParkMillerRandom, RandomSource, SharedParkMiller
from .rand import EPSILON, MAX_SEED, MIN_SEED, MODULUS, MULTIPLIER, InvalidSeedError, ParkMiller, normalize_seed

try:
    __version__ = version("parkmiller")
except PackageNotFoundError:  # pragma: no cover
    # Allow running from source (e.g. `PYTHONPATH=src`) without installed package metadata.
    __version__ = "0.0.0+dev"

__all__ = [
    "BoundedRandomAdapter",
    "EPSILON",
    "InvalidSeedError",
    "MAX_SEED",
    "MIN_SEED",
    "MODULUS",
    "MULTIPLIER",
    "ParkMiller",
    "ParkMillerRandom",
    "RandomSource",
    "SharedParkMiller",
    "normalize_seed",
]
