"""
Input collaborator: maps key releases and on-screen buttons to directions
"""

from typing import Dict, Optional

from .session import GameSession

# Browser key codes for the arrow keys
KEY_CODES: Dict[int, str] = {
    37: "left",
    38: "up",
    39: "right",
    40: "down",
}


class Controls:
    """Forwards input straight to the session, no buffering"""

    def __init__(self, session: GameSession, key_map: Optional[Dict[int, str]] = None):
        self.session = session
        self.key_map = dict(key_map if key_map is not None else KEY_CODES)

    def on_key_release(self, key: int):
        # Unmapped keys resolve to None, which the player ignores
        self.session.handle_input(self.key_map.get(key))

    # Touch / click buttons
    def up(self):
        self.session.move_up()

    def down(self):
        self.session.move_down()

    def left(self):
        self.session.move_left()

    def right(self):
        self.session.move_right()
