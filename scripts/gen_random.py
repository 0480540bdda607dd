"""Command line harness for seeded constrained random generation."""

import argparse
import json
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_LOG_PATH = PROJECT_ROOT / "generation_logs" / "latest_run.json"

if PROJECT_ROOT.as_posix() not in sys.path:
    sys.path.insert(0, PROJECT_ROOT.as_posix())

from constrained_random import GenerationConfig, run_generation
from constrained_random.real_random import MIN_UNBIASED_EXPONENT


def _parse_int(value: str) -> int:
    """Accept decimal or 0x-prefixed integers."""

    try:
        return int(value, 0)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Expected an integer, received '{value}'.") from exc


def _parse_real(value: str) -> float:
    """Accept decimal reals or float.hex() notation such as 0x1.8p+0."""

    try:
        return float(value)
    except ValueError:
        pass
    try:
        return float.fromhex(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Expected a real number, received '{value}'.") from exc


def _parse_bool(value: str) -> bool:
    """Accept a variety of truthy / falsy CLI inputs."""

    if isinstance(value, bool):  # argparse may pass in already parsed bools
        return value

    normalized = value.strip().lower()
    if normalized in {"1", "true", "t", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "f", "no", "n", "off"}:
        return False
    raise argparse.ArgumentTypeError(
        "Expected a boolean value (true/false). Received: %s" % value
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate seeded range-constrained random values")
    parser.add_argument(
        "--kind",
        choices=("int", "real"),
        default="int",
        help="Wide unsigned integers or IEEE-754 binary64 reals",
    )
    parser.add_argument("--count", type=int, default=16, help="Number of values to generate")
    parser.add_argument("--width", type=int, default=64, help="Bit width for --kind int")
    parser.add_argument(
        "--min",
        dest="min_value",
        type=str,
        default=None,
        help="Inclusive lower bound (int: decimal or 0x hex, real: decimal or float.hex form)",
    )
    parser.add_argument(
        "--max",
        dest="max_value",
        type=str,
        default=None,
        help="Inclusive upper bound; ints default to the full width, reals to 1.0",
    )
    parser.add_argument(
        "--min_exponent",
        "--min-exponent",
        dest="min_exponent",
        type=_parse_int,
        default=MIN_UNBIASED_EXPONENT,
        help="Unbiased exponent floor for --kind real (default permits zero and denormals)",
    )
    parser.add_argument(
        "--legacy_bounds",
        "--legacy-bounds",
        dest="legacy_bounds",
        type=_parse_bool,
        default=False,
        help="Reproduce the historical bound handling (min ignored, loose lower chunks)",
    )
    parser.add_argument(
        "--seed",
        type=_parse_int,
        default=0xA2B94D10,
        help="PRNG seed (accepts decimal or 0x-prefixed hex)",
    )
    parser.add_argument(
        "--log",
        nargs="?",
        type=Path,
        const=DEFAULT_LOG_PATH,
        help=(
            "Persist the JSON report to disk. Provide a path or pass the flag alone to use "
            "generation_logs/latest_run.json under the repository root."
        ),
    )
    parser.add_argument("--verbose", action="store_true", help="Emit debug logging on stderr")
    return parser


def build_config(args: argparse.Namespace) -> GenerationConfig:
    cfg = GenerationConfig(
        seed=args.seed,
        kind=args.kind,
        count=args.count,
        width=args.width,
        min_exponent=args.min_exponent,
        legacy_bounds=args.legacy_bounds,
    )
    if args.kind == "int":
        if args.min_value is not None:
            cfg.int_min = _parse_int(args.min_value)
        if args.max_value is not None:
            cfg.int_max = _parse_int(args.max_value)
    else:
        if args.min_value is not None:
            cfg.real_min = _parse_real(args.min_value)
        if args.max_value is not None:
            cfg.real_max = _parse_real(args.max_value)
    return cfg


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        cfg = build_config(args)
        result = run_generation(cfg)
    except (argparse.ArgumentTypeError, ValueError) as exc:
        parser.error(str(exc))

    log_path: Path | None = args.log
    if log_path is not None:
        if not log_path.is_absolute():
            log_path = (PROJECT_ROOT / log_path).resolve()

        log_path.parent.mkdir(parents=True, exist_ok=True)
        log_path.write_text(json.dumps(result, indent=2))

    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
