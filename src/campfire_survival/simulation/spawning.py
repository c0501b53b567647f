"""Random placement and respawn helpers."""

from __future__ import annotations

import random

from ..config import SpawnRule


def random_position(
    rng: random.Random, width: float, height: float, inset: float
) -> tuple[float, float]:
    """
    Draw a uniform position inside the world, `inset` away from every edge.

    A world too small for the inset collapses to its centre line on that axis.
    """
    x_lo, x_hi = inset, width - inset
    y_lo, y_hi = inset, height - inset
    if x_hi < x_lo:
        x_lo = x_hi = width / 2
    if y_hi < y_lo:
        y_lo = y_hi = height / 2
    return (rng.uniform(x_lo, x_hi), rng.uniform(y_lo, y_hi))


def jitter(rng: random.Random, x: float, y: float, amount: float) -> tuple[float, float]:
    """Offset a position by up to `amount` on each axis."""
    return (x + rng.uniform(-amount, amount), y + rng.uniform(-amount, amount))


def should_respawn(rng: random.Random, rule: SpawnRule, live_count: int, dt: float) -> bool:
    """
    Decide whether a depleted population gains one entity this tick.

    The chance is `dt * rate`, i.e. `rate` is a per-second probability and a
    long frame is as likely to spawn as several short ones.
    """
    if live_count >= rule.threshold or dt <= 0:
        return False
    return rng.random() < dt * rule.rate
