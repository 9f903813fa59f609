"""
Per-tick game rules: movement, collisions, token effects and level progression.

All routines take the state and entity lists they touch explicitly; nothing
here keeps state of its own.
"""

from __future__ import annotations

import random
from typing import List

from .config import GEM_KINDS, TOKEN_POINTS, HEART_LIVES
from .entities import Enemy, Player, Token
from .events import EventQueue, PlaySound, SetOverlay
from .state import GameState
from .utils import (
    boxes_overlap,
    random_lane_x,
    random_lane_y,
    random_enemy_speed,
)

# Key tokens only remove enemies above this many
MIN_ENEMIES_FOR_KEY = 3


# ----------------------------
# Movement
# ----------------------------

def update_enemies(enemies: List[Enemy], dt: float, rng=random):
    for enemy in enemies:
        enemy.update(dt, rng)


def spawn_enemy(rng=random) -> Enemy:
    """New enemy at a random column and lane with a random speed"""
    x = random_lane_x(rng)
    y = random_lane_y(rng)
    return Enemy(x=x, y=y, speed=random_enemy_speed(rng))


def update_player(
    player: Player,
    state: GameState,
    enemies: List[Enemy],
    events: EventQueue,
    rng=random,
    level_up_every: int = 5,
) -> bool:
    """
    Score a crossing when the player reaches the water.

    Every level_up_every points reached this way add an enemy and raise the
    level.

    Returns:
        True if the player crossed this tick
    """
    if not player.at_goal():
        return False

    events.emit(PlaySound("cheer"))
    player.reset()
    state.add_score(1)

    if state.score > 0 and state.score % level_up_every == 0:
        enemies.append(spawn_enemy(rng))
        state.level_up()
    return True


# ----------------------------
# Collisions
# ----------------------------

def end_game(state: GameState, events: EventQueue):
    if state.end_game():
        events.emit(SetOverlay("game-over", True))


def check_enemy_collisions(
    player: Player,
    enemies: List[Enemy],
    state: GameState,
    events: EventQueue,
) -> int:
    """
    Bite the player for every enemy touching it.

    Each overlapping enemy costs a life, even within the same tick. The
    player is sent back to the start on the first bite, so later enemies are
    tested against the start position.

    Returns:
        Number of bites
    """
    bites = 0
    for enemy in enemies:
        if boxes_overlap(player.x, player.y, enemy.x, enemy.y):
            events.emit(PlaySound("bite"))
            player.reset()
            state.lose_life()
            bites += 1

    if state.lives <= 0:
        end_game(state, events)
    return bites


def remove_newest_enemy(enemies: List[Enemy]):
    if enemies:
        enemies.pop()


def apply_token_effect(kind: str, state: GameState, enemies: List[Enemy]):
    """Apply what collecting a token of this kind does"""
    # Kept as independent checks rather than an elif chain
    if kind in GEM_KINDS:
        state.add_score(TOKEN_POINTS["gem"])
    if kind == "heart":
        state.gain_life(HEART_LIVES)
    if kind == "rock":
        state.add_score(TOKEN_POINTS["rock"])
    if kind == "key":
        if len(enemies) > MIN_ENEMIES_FOR_KEY and len(enemies) >= state.level:
            remove_newest_enemy(enemies)
        state.add_score(TOKEN_POINTS["key"])
    if kind == "star":
        state.add_score(TOKEN_POINTS["star"])


def check_token_collisions(
    player: Player,
    tokens: List[Token],
    state: GameState,
    enemies: List[Enemy],
    events: EventQueue,
    rng=random,
) -> List[str]:
    """
    Collect every token the player touches and replace it with a new one.

    Replacement tokens are not tested until the next tick.

    Returns:
        Kinds collected this tick
    """
    collected = []
    for token in list(tokens):
        if boxes_overlap(player.x, player.y, token.x, token.y):
            apply_token_effect(token.kind, state, enemies)
            tokens.remove(token)
            events.emit(PlaySound("blip"))
            tokens.append(Token.spawn(random_lane_x(rng), random_lane_y(rng), rng))
            collected.append(token.kind)
    return collected
