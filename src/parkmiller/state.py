from __future__ import annotations

from pathlib import Path

import msgspec

from .rand import ParkMiller, normalize_seed

__all__ = [
    "ALGORITHM",
    "GeneratorState",
    "StateCodecError",
    "decode_state",
    "encode_state",
    "load_state",
    "restore",
    "save_state",
    "snapshot",
]

ALGORITHM = "park-miller-16807"


class StateCodecError(ValueError):
    pass


class GeneratorState(msgspec.Struct, forbid_unknown_fields=True):
    seed: int
    algorithm: str = ALGORITHM


def snapshot(rng: ParkMiller) -> GeneratorState:
    return GeneratorState(seed=rng.seed)


def restore(state: GeneratorState) -> ParkMiller:
    return ParkMiller(state.seed)


def encode_state(state: GeneratorState) -> bytes:
    return msgspec.json.encode(state)


def decode_state(data: bytes | str) -> GeneratorState:
    try:
        state = msgspec.json.decode(data, type=GeneratorState)
    except msgspec.DecodeError as exc:
        raise StateCodecError(f"invalid generator state: {exc}") from exc
    if state.algorithm != ALGORITHM:
        raise StateCodecError(f"unsupported generator algorithm: {state.algorithm!r}")
    state.seed = normalize_seed(state.seed)
    return state


def load_state(path: Path) -> GeneratorState:
    try:
        data = path.read_bytes()
    except FileNotFoundError as exc:
        raise StateCodecError(f"state file not found: {path}") from exc
    return decode_state(data)


def save_state(path: Path, rng: ParkMiller) -> GeneratorState:
    state = snapshot(rng)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(encode_state(state) + b"\n")
    return state
