"""
Arcade window: draws a GameSession, plays its sounds and shows its overlays.

Used by CrossingEnv for "human" rendering, or on its own via play() for an
interactive game.
"""

from __future__ import annotations

import os
import warnings
from typing import Dict, Optional

import arcade

from .config import (
    BOARD_WIDTH,
    BOARD_HEIGHT,
    ENEMY_SPRITE,
    PLAYER_SPRITE,
    TOKEN_SPRITES,
    SOUNDS,
    LANE_YS,
)
from .controls import Controls
from .events import PlaySound, SetOverlay
from .session import GameSession

# Visible part of a 101x171 tile, relative to the entity position (canvas coords)
ART_LEFT, ART_RIGHT = 10, 91
ART_TOP, ART_BOTTOM = 75, 145

SPRITE_COLORS = {
    ENEMY_SPRITE: (220, 80, 80),
    PLAYER_SPRITE: (80, 200, 120),
    TOKEN_SPRITES["gem-green"]: (60, 200, 90),
    TOKEN_SPRITES["gem-orange"]: (250, 150, 60),
    TOKEN_SPRITES["gem-blue"]: (80, 140, 240),
    TOKEN_SPRITES["rock"]: (130, 130, 130),
    TOKEN_SPRITES["key"]: (240, 210, 80),
    TOKEN_SPRITES["heart"]: (230, 90, 160),
    TOKEN_SPRITES["star"]: (255, 240, 140),
}

ARROW_KEYS = {
    arcade.key.LEFT: "left",
    arcade.key.UP: "up",
    arcade.key.RIGHT: "right",
    arcade.key.DOWN: "down",
}


class CrossingWindow(arcade.Window):
    """Arcade window for the road-crossing game"""

    def __init__(self, session: GameSession, asset_root: str = ".",
                 interactive: bool = False):
        super().__init__(BOARD_WIDTH, BOARD_HEIGHT, "Crossing - Arcade")
        self.asset_root = asset_root
        self.interactive = interactive

        self.BG = (18, 18, 22)
        self.WATER_C = (60, 110, 200)
        self.ROAD_C = (70, 70, 74)
        self.GRASS_C = (60, 140, 70)
        self.HUD_C = (220, 220, 220)

        self.overlays: Dict[str, bool] = {}
        self._sounds: Dict[str, Optional[arcade.Sound]] = {}

        self.session: GameSession = None  # type: ignore
        self.controls: Controls = None  # type: ignore
        self.attach(session)

    def attach(self, session: GameSession):
        """Switch to a new session (e.g. after an environment reset)"""
        self.session = session
        self.controls = Controls(session, key_map=ARROW_KEYS)
        self.overlays = {"instructions": False, "game-over": session.game_over}
        session.events.subscribe(self.on_game_event)

    # ----------------------------
    # Audio / presentation collaborators
    # ----------------------------

    def on_game_event(self, event):
        if isinstance(event, PlaySound):
            self.play_sound(event.sound)
        elif isinstance(event, SetOverlay):
            self.overlays[event.name] = event.visible

    def play_sound(self, name: str):
        """Fire and forget; missing files are skipped"""
        if name not in self._sounds:
            path = os.path.join(self.asset_root, SOUNDS[name])
            if os.path.exists(path):
                self._sounds[name] = arcade.load_sound(path)
            else:
                warnings.warn(f"Sound file not found: {path}")
                self._sounds[name] = None
        sound = self._sounds[name]
        if sound is not None:
            arcade.play_sound(sound)

    # ----------------------------
    # Drawing
    # ----------------------------

    def draw_sprite(self, sprite: str, x: float, y: float):
        # Canvas y grows downwards, arcade y grows upwards
        color = SPRITE_COLORS.get(sprite, (255, 255, 255))
        arcade.draw_lrbt_rectangle_filled(
            x + ART_LEFT, x + ART_RIGHT,
            BOARD_HEIGHT - (y + ART_BOTTOM), BOARD_HEIGHT - (y + ART_TOP),
            color,
        )

    def draw_board(self):
        # Water row, three road lanes, grass rows
        h = BOARD_HEIGHT
        arcade.draw_lrbt_rectangle_filled(0, BOARD_WIDTH, h - 130, h - 50, self.WATER_C)
        for lane_y in LANE_YS:
            arcade.draw_lrbt_rectangle_filled(
                0, BOARD_WIDTH, h - (lane_y + 155), h - (lane_y + 70), self.ROAD_C
            )
        arcade.draw_lrbt_rectangle_filled(0, BOARD_WIDTH, 30, h - 410, self.GRASS_C)

    def on_draw(self):
        """Draw the current game state"""
        self.clear()
        arcade.set_background_color(self.BG)

        self.draw_board()
        self.session.render(self.draw_sprite)

        hud = self.session.hud()
        txt = (f"Score: {hud['score']}  "
               f"Lives: {hud['lives']}  "
               f"Level: {hud['level']}")
        arcade.draw_text(txt, 12, self.height - 24, self.HUD_C, 14)

        if self.overlays.get("instructions"):
            arcade.draw_lrbt_rectangle_filled(40, BOARD_WIDTH - 40, 180, 420, (0, 0, 0, 200))
            lines = [
                "Arrow keys move the player.",
                "Reach the water to score a point.",
                "Every 5 points adds a bug and a level.",
                "Gems +2, Rock +1, Key +5, Star +10.",
                "Hearts give a life. Keys may remove a bug.",
                "Press H to close.",
            ]
            for i, line in enumerate(lines):
                arcade.draw_text(line, 60, 390 - i * 32, self.HUD_C, 13)

        if self.overlays.get("game-over"):
            arcade.draw_lrbt_rectangle_filled(0, BOARD_WIDTH, 240, 360, (0, 0, 0, 200))
            arcade.draw_text("GAME OVER", BOARD_WIDTH / 2, 300, (235, 80, 80), 32,
                             anchor_x="center", anchor_y="center")

    # ----------------------------
    # Interactive play
    # ----------------------------

    def on_update(self, delta_time: float):
        if self.interactive:
            self.session.tick(delta_time)
            # Subscribers already saw these events
            self.session.events.drain()

    def on_key_release(self, key: int, modifiers: int):
        if not self.interactive:
            return
        if key == arcade.key.H:
            self.session.toggle_instructions()
        elif key == arcade.key.ESCAPE:
            self.close()
        else:
            self.controls.on_key_release(key)


def play(seed: Optional[int] = None, asset_root: str = ".", verbose: int = 1):
    """Open a window and play with the arrow keys"""
    session = GameSession(seed=seed, verbose=verbose)
    CrossingWindow(session, asset_root=asset_root, interactive=True)
    arcade.run()
    return session
