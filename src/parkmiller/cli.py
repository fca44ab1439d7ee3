from __future__ import annotations

from collections import Counter
from collections.abc import Callable
from pathlib import Path

import typer

from .config import DRAW_KINDS, ConfigError, DrawConfig, default_state_path, load_config
from .debug_log import DrawTrace
from .period import period_check
from .rand import EPSILON, MIN_SEED, InvalidSeedError, ParkMiller, normalize_seed
from .state import StateCodecError, load_state, save_state


app = typer.Typer(add_completion=False)

# (start seed, steps, expected seed) from Park & Miller (1988).
KNOWN_VECTORS: tuple[tuple[int, int, int], ...] = (
    (1, 1, 16807),
    (1, 2, 282475249),
    (1, 3, 1622650073),
    (1, 10000, 1043618065),
)


def _fail(message: str) -> typer.Exit:
    typer.echo(message, err=True)
    return typer.Exit(code=1)


def _as_int(name: str, value: float) -> int:
    if not float(value).is_integer():
        raise _fail(f"--{name} must be an integer for this kind, got {value}")
    return int(value)


def _format_value(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return repr(value)
    return str(value)


def _drawer(rng: ParkMiller, kind: str, low: float, high: float) -> Callable[[], object]:
    if kind == "raw":
        return rng.next_raw
    if kind == "uniform":
        return rng.next_uniform
    if kind == "int":
        lo = _as_int("low", low)
        hi = _as_int("high", high)
        return lambda: rng.next_int_range(lo, hi)
    if kind == "float":
        return lambda: rng.next_float_range(low, high)
    if kind == "bool":
        return rng.next_bool
    if kind == "bounded":
        upper = _as_int("high", high)
        return lambda: rng.next_int_bounded(upper)
    raise _fail(f"unknown kind: {kind!r}. Choose from: {', '.join(DRAW_KINDS)}")


def _load_defaults(config_path: Path | None) -> DrawConfig:
    if config_path is not None and not config_path.is_file():
        raise _fail(f"config not found: {config_path}")
    try:
        return load_config(config_path)
    except ConfigError as exc:
        raise _fail(str(exc)) from exc


@app.command("draw")
def cmd_draw(
    seed: int | None = typer.Option(None, help="initial seed (out-of-range seeds become 1)"),
    count: int | None = typer.Option(None, min=0, help="number of draws"),
    kind: str | None = typer.Option(None, help="raw|uniform|int|float|bool|bounded"),
    low: float | None = typer.Option(None, help="lower bound for int/float draws"),
    high: float | None = typer.Option(None, help="upper bound for int/float draws, exclusive bound for bounded"),
    config: Path | None = typer.Option(None, "--config", help="TOML file with a [draw] table (default: ./parkmiller.toml)"),
    state: Path | None = typer.Option(None, "--state", help="save the final seed to this file"),
    resume: bool = typer.Option(False, "--resume", help="start from the seed saved in --state (or the default state file)"),
    trace: Path | None = typer.Option(None, "--trace", help="write a draw trace log into this directory"),
) -> None:
    """Print draws from a seeded generator, one per line."""
    defaults = _load_defaults(config)
    kind = defaults.kind if kind is None else kind
    count = defaults.count if count is None else count
    low = defaults.low if low is None else low
    high = defaults.high if high is None else high

    if resume:
        if state is None:
            state = default_state_path()
        if seed is not None:
            raise _fail("--seed and --resume are mutually exclusive")
        try:
            seed = load_state(state).seed
        except StateCodecError as exc:
            raise _fail(str(exc)) from exc
    elif seed is None:
        seed = defaults.seed

    rng = ParkMiller(seed)
    draw = _drawer(rng, kind, low, high)

    with DrawTrace.in_dir(trace, "draw") as log:
        log.header(command="draw", seed=rng.seed, kind=kind, count=count)
        for idx in range(count):
            text = _format_value(draw())
            log.draw(idx, text, rng.seed)
            typer.echo(text)
        if state is not None:
            saved = save_state(state, rng)
            log.saved(state, saved.seed)


@app.command("seed", context_settings={"ignore_unknown_options": True})
def cmd_seed(
    value: int = typer.Argument(..., help="seed to normalize; negative values need no `--`"),
    strict: bool = typer.Option(False, "--strict", help="reject out-of-range seeds instead of clamping"),
) -> None:
    """Print the seed a generator would actually use."""
    if strict:
        try:
            rng = ParkMiller.strict(value)
        except InvalidSeedError as exc:
            raise _fail(str(exc)) from exc
        typer.echo(str(rng.seed))
        return
    typer.echo(str(normalize_seed(value)))


@app.command("vectors")
def cmd_vectors() -> None:
    """Check the standard Park-Miller test vectors."""
    failures = 0
    for start, steps, expected in KNOWN_VECTORS:
        rng = ParkMiller(start)
        for _ in range(steps):
            rng.next_raw()
        ok = rng.seed == expected
        failures += 0 if ok else 1
        status = "ok" if ok else "FAIL"
        typer.echo(f"{status:4s}  seed={start} step={steps:5d}  expected={expected:10d}  got={rng.seed:10d}")
    if failures:
        raise _fail(f"{failures} vector(s) failed")


@app.command("period")
def cmd_period(
    seed: int = typer.Option(MIN_SEED, help="start seed for the return-to-start check"),
) -> None:
    """Check that the multiplier has full period m - 1."""
    report = period_check(seed)
    typer.echo(f"multiplier={report.multiplier} modulus={report.modulus} period={report.period}")
    for factor, residue in report.residues:
        typer.echo(f"  a^((m-1)/{factor:3d}) mod m = {residue}")
    typer.echo(f"full_period={'yes' if report.full else 'no'}")
    typer.echo(f"returns_to_start={'yes' if report.returns_to_start else 'no'}")
    if not (report.full and report.returns_to_start):
        raise typer.Exit(code=1)


@app.command("stats")
def cmd_stats(
    low: int = typer.Option(1, help="lowest value (int mode)"),
    high: int = typer.Option(6, help="highest value (int mode)"),
    samples: int = typer.Option(100_000, min=1, help="number of draws"),
    seed: int = typer.Option(MIN_SEED, help="generator seed (out-of-range seeds become 1)"),
    bool_mode: bool = typer.Option(False, "--bool", help="measure next_bool bias instead"),
) -> None:
    """Histogram and chi-square statistic for a run of draws."""
    rng = ParkMiller(seed)
    if bool_mode:
        hits = sum(1 for _ in range(samples) if rng.next_bool())
        typer.echo(f"samples={samples} true={hits} fraction={hits / samples:.6f} expected={EPSILON}")
        return

    lo, hi = min(low, high), max(low, high)
    counts = Counter(rng.next_int_range(low, high) for _ in range(samples))
    buckets = hi - lo + 1
    expected = samples / buckets
    chi2 = 0.0
    for value in range(lo, hi + 1):
        observed = counts.get(value, 0)
        chi2 += (observed - expected) ** 2 / expected
        typer.echo(f"{value:6d}  {observed}")
    outside = sum(n for value, n in counts.items() if not lo <= value <= hi)
    typer.echo(f"chi2={chi2:.4f} dof={buckets - 1} out_of_range={outside}")


def main(argv: list[str] | None = None) -> None:
    app(prog_name="parkmiller", args=argv)


if __name__ == "__main__":
    main()
