"""Utility helpers for the catalog backend."""
from __future__ import annotations

import random
import re
from typing import Optional

from . import config

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_id(raw: Optional[str]) -> Optional[int]:
    """Parse a path segment the way ``parseInt(raw, 10)`` would.

    Leading whitespace and a sign are accepted, trailing junk is ignored
    (``"12abc"`` is 12). Input without leading digits yields ``None``, which
    never matches a catalog ID.
    """

    if raw is None:
        return None
    match = _LEADING_INT.match(raw)
    if not match:
        return None
    return int(match.group(1))


def image_seed(rng: random.Random) -> float:
    # rounding can reach 1.0; the seed stays in [0, 1)
    return min(round(rng.random(), config.IMAGE_SEED_DECIMALS), 0.999999)


def randint_inclusive(rng: random.Random, bounds) -> int:
    lower, upper = bounds
    return rng.randint(lower, upper)
