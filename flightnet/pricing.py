"""Demand-based pricing tiers.

The price of a flight depends only on its load factor (booked seats divided by
capacity). Tiers are inclusive on their lower bound, so a flight at exactly 50%
load is already in the 1.2 tier and one at exactly 80% is in the 1.5 tier.
"""
from __future__ import annotations

from typing import Sequence, Tuple

from .errors import InvalidArgumentError

# (minimum load factor, multiplier), highest threshold first.
PRICE_TIERS: Sequence[Tuple[float, float]] = (
    (0.8, 1.5),
    (0.5, 1.2),
)
BASE_MULTIPLIER = 1.0


def load_factor(booked_seats: int, total_capacity: int) -> float:
    if total_capacity <= 0:
        raise InvalidArgumentError("Capacity must be positive")
    return booked_seats / total_capacity


def price_multiplier(factor: float) -> float:
    """Return the multiplier applied to the base price for ``factor``."""

    for threshold, multiplier in PRICE_TIERS:
        if factor >= threshold:
            return multiplier
    return BASE_MULTIPLIER


def dynamic_price(base_price: float, booked_seats: int, total_capacity: int) -> float:
    """Recompute a flight price from scratch for the given occupancy."""

    return base_price * price_multiplier(load_factor(booked_seats, total_capacity))


__all__ = ["PRICE_TIERS", "BASE_MULTIPLIER", "load_factor", "price_multiplier", "dynamic_price"]
