"""
Game entity dataclasses
"""

import random
from dataclasses import dataclass
from typing import Callable

from .config import (
    ENEMY_SPRITE,
    PLAYER_SPRITE,
    TOKEN_SPRITES,
    START_X,
    START_Y,
    GOAL_Y,
    STEP_X,
    STEP_Y,
    LIMIT_UP,
    LIMIT_DOWN,
    LIMIT_LEFT,
    LIMIT_RIGHT,
    WRAP_X,
    WRAP_RESET_X,
)
from .state import GameState
from .utils import random_token_kind

# draw(sprite, x, y)
DrawFn = Callable[[str, float, float], None]


@dataclass
class Enemy:
    """Bug racing along a lane"""
    x: float
    y: float
    speed: float
    sprite: str = ENEMY_SPRITE

    def update(self, dt: float, rng=random):
        # Speed is jittered by a fresh draw every tick
        self.x += self.speed * rng.random() * 4 * dt
        if self.x > WRAP_X:
            self.x = WRAP_RESET_X

    def render(self, draw: DrawFn, game_over: bool = False):
        if not game_over:
            draw(self.sprite, self.x, self.y)


@dataclass
class Player:
    """The character crossing the road"""
    x: float = START_X
    y: float = START_Y
    sprite: str = PLAYER_SPRITE

    def reset(self):
        self.x = START_X
        self.y = START_Y

    def at_goal(self) -> bool:
        return self.y < GOAL_Y

    def handle_input(self, direction, state: GameState):
        """Move one tile in direction; ignored once the game is over"""
        if state.game_over:
            return
        if direction == "up" and self.y > LIMIT_UP:
            self.y -= STEP_Y
        if direction == "down" and self.y < LIMIT_DOWN:
            self.y += STEP_Y
        if direction == "left" and self.x > LIMIT_LEFT:
            self.x -= STEP_X
        if direction == "right" and self.x < LIMIT_RIGHT:
            self.x += STEP_X

    def render(self, draw: DrawFn):
        draw(self.sprite, self.x, self.y)


@dataclass
class Token:
    """Collectible bonus token"""
    x: float
    y: float
    kind: str

    @classmethod
    def spawn(cls, x: float, y: float, rng=random) -> "Token":
        return cls(x=x, y=y, kind=random_token_kind(rng))

    @property
    def sprite(self) -> str:
        return TOKEN_SPRITES[self.kind]

    def render(self, draw: DrawFn):
        draw(self.sprite, self.x, self.y)
