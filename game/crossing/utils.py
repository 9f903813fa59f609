"""
Utility functions for game mechanics
"""

from __future__ import annotations
import random

from .config import (
    LANE_YS,
    COLUMN_XS,
    TOKEN_KINDS,
    HIT_WIDTH,
    HIT_HEIGHT_A,
    HIT_HEIGHT_B,
    MAX_ENEMY_SPEED,
)


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def _partition(rng, choices):
    """Pick from choices by splitting [0, 1) into equal slices"""
    roll = rng.random()
    idx = int(roll * len(choices))
    # guard against a source that returns exactly 1.0
    return choices[min(idx, len(choices) - 1)]


def random_lane_y(rng=random) -> int:
    """Random enemy lane: 50, 150 or 240"""
    return _partition(rng, LANE_YS)


def random_lane_x(rng=random) -> int:
    """Random column: 0, 101, 202, 303 or 403"""
    return _partition(rng, COLUMN_XS)


def random_token_kind(rng=random) -> str:
    """Random token kind, every kind equally likely"""
    return TOKEN_KINDS[rng.randrange(len(TOKEN_KINDS))]


def random_enemy_speed(rng=random) -> int:
    """Random integer speed in [1, MAX_ENEMY_SPEED]"""
    return rng.randint(1, MAX_ENEMY_SPEED)


def boxes_overlap(ax: float, ay: float, bx: float, by: float) -> bool:
    """Check if the hit box at (ax, ay) overlaps the one at (bx, by)"""
    return (ax < bx + HIT_WIDTH and
            ax + HIT_WIDTH > bx and
            ay < by + HIT_HEIGHT_B and
            ay + HIT_HEIGHT_A > by)
