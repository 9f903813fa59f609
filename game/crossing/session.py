"""
GameSession - one play-through of the road-crossing game
--------------------------------------------------------
Owns the game state, the player, the enemy and token lists, the random
source and the event queue. A driver calls tick(dt) then render(draw) once
per frame and forwards input through handle_input().
"""

from __future__ import annotations

import random
from typing import Any, Dict, List, Optional

from .config import GAME_CONFIG
from .entities import DrawFn, Enemy, Player, Token
from .events import EventQueue, SetOverlay
from . import rules
from .state import GameState


class GameSession:
    """Aggregate holding everything a running game needs"""

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
        config: Optional[Dict[str, Any]] = None,
        verbose: int = 0,
    ):
        self.config = dict(GAME_CONFIG)
        if config:
            self.config.update(config)
        assert self.config["level_up_every"] > 0, "level_up_every must be positive"

        self.rng = rng if rng is not None else random.Random(seed)
        self.verbose = verbose
        self.events = EventQueue()

        self.state = GameState(lives=self.config["lives"], level=self.config["level"])
        self.player = Player()
        self.enemies: List[Enemy] = [
            Enemy(x=x, y=y, speed=speed)
            for (x, y, speed) in self.config["initial_enemies"]
        ]
        tx, ty = self.config["initial_token"]
        self.tokens: List[Token] = [Token.spawn(tx, ty, self.rng)]

        self.instructions_visible = False
        self.frame = 0

    # ----------------------------
    # Frame phases
    # ----------------------------

    def tick(self, dt: float):
        """
        Run one update phase.

        Keeps running after game over; only input and enemy drawing stop.
        """
        level = self.state.level
        was_over = self.state.game_over

        rules.update_enemies(self.enemies, dt, self.rng)
        rules.update_player(
            self.player, self.state, self.enemies, self.events, self.rng,
            level_up_every=self.config["level_up_every"],
        )
        rules.check_enemy_collisions(self.player, self.enemies, self.state, self.events)
        rules.check_token_collisions(
            self.player, self.tokens, self.state, self.enemies, self.events, self.rng
        )
        self.frame += 1

        if self.verbose > 0:
            if self.state.level != level:
                print(f"[GameSession] Level {self.state.level} "
                      f"({len(self.enemies)} enemies, score {self.state.score})")
            if self.state.game_over and not was_over:
                print(f"[GameSession] Game over at frame {self.frame}: "
                      f"score {self.state.score}, level {self.state.level}")

    def render(self, draw: DrawFn):
        """Run one render phase through the draw(sprite, x, y) callable"""
        for token in self.tokens:
            token.render(draw)
        for enemy in self.enemies:
            enemy.render(draw, self.state.game_over)
        self.player.render(draw)

    # ----------------------------
    # Input
    # ----------------------------

    def handle_input(self, direction: Optional[str]):
        self.player.handle_input(direction, self.state)

    def move_up(self):
        self.handle_input("up")

    def move_down(self):
        self.handle_input("down")

    def move_left(self):
        self.handle_input("left")

    def move_right(self):
        self.handle_input("right")

    # ----------------------------
    # Presentation
    # ----------------------------

    def hud(self) -> Dict[str, int]:
        return self.state.as_dict()

    def toggle_instructions(self) -> bool:
        self.instructions_visible = not self.instructions_visible
        self.events.emit(SetOverlay("instructions", self.instructions_visible))
        return self.instructions_visible

    def end_game(self):
        rules.end_game(self.state, self.events)

    @property
    def game_over(self) -> bool:
        return self.state.game_over
