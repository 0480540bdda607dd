"""Seeded batch generation producing JSON-ready reports."""

import logging
from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional

from .prng import PCG32
from .real_random import MIN_UNBIASED_EXPONENT, ConstrainedRealRandom
from .wide_int import WideRandomInt

logger = logging.getLogger(__name__)

KINDS = ("int", "real")


@dataclass
class GenerationConfig:
    """Configuration for a seeded generation run."""

    seed: int = 0xA2B94D10
    kind: str = "int"
    count: int = 16
    width: int = 64
    int_min: int = 0
    int_max: Optional[int] = None  # None selects the full width
    real_min: float = 0.0
    real_max: float = 1.0
    min_exponent: int = MIN_UNBIASED_EXPONENT
    legacy_bounds: bool = False


def _format_wide(value: int, width: int) -> str:
    digits = max(1, (width + 3) // 4)
    return f"0x{value:0{digits}x}"


def _run_ints(cfg: GenerationConfig, rng: PCG32) -> Dict[str, Any]:
    generator = WideRandomInt(cfg.width, rng, legacy_bounds=cfg.legacy_bounds)
    upper = generator.limit if cfg.int_max is None else cfg.int_max
    values = generator.generate(cfg.count, upper, cfg.int_min)

    return {
        "values": [_format_wide(value, cfg.width) for value in values],
        "summary": {
            "count": len(values),
            "min_seen": _format_wide(min(values), cfg.width) if values else None,
            "max_seen": _format_wide(max(values), cfg.width) if values else None,
            "in_range": all(cfg.int_min <= value <= upper for value in values),
        },
    }


def _run_reals(cfg: GenerationConfig, rng: PCG32) -> Dict[str, Any]:
    generator = ConstrainedRealRandom(rng, legacy_bounds=cfg.legacy_bounds)
    values: List[float] = generator.generate(
        cfg.count, cfg.real_min, cfg.real_max, cfg.min_exponent
    )

    return {
        "values": [value.hex() for value in values],
        "decimal": [repr(value) for value in values],
        "summary": {
            "count": len(values),
            "min_seen": min(values).hex() if values else None,
            "max_seen": max(values).hex() if values else None,
            "in_range": all(cfg.real_min <= value <= cfg.real_max for value in values),
        },
    }


def run_generation(cfg: GenerationConfig) -> Dict[str, Any]:
    """Generate ``cfg.count`` values, fully driven by the seed."""

    if cfg.kind not in KINDS:
        raise ValueError(f"Unknown kind '{cfg.kind}', expected one of {', '.join(KINDS)}")
    if cfg.count < 0:
        raise ValueError("count must not be negative")

    rng = PCG32(cfg.seed)
    if cfg.kind == "int":
        report = _run_ints(cfg, rng)
    else:
        report = _run_reals(cfg, rng)

    logger.info(
        "generated %d %s values (seed=%#x, in_range=%s)",
        report["summary"]["count"],
        cfg.kind,
        cfg.seed,
        report["summary"]["in_range"],
    )
    config = asdict(cfg)
    # float.hex keeps infinite bounds valid JSON
    config["real_min"] = float(cfg.real_min).hex()
    config["real_max"] = float(cfg.real_max).hex()
    return {"config": config, **report}
