"""
Game state: score, lives, level and the game-over latch
"""

from dataclasses import dataclass


@dataclass
class GameState:
    """Counters shown on the HUD"""
    score: int = 0
    lives: int = 3
    level: int = 1
    game_over: bool = False

    def add_score(self, points: int):
        self.score += points

    def lose_life(self):
        self.lives -= 1

    def gain_life(self, n: int = 1):
        self.lives += n

    def level_up(self):
        self.level += 1

    def end_game(self) -> bool:
        """
        Latch game over.

        Returns:
            True if this call made the transition, False if already over
        """
        if self.game_over:
            return False
        self.game_over = True
        return True

    def as_dict(self) -> dict:
        return {"score": self.score, "lives": self.lives, "level": self.level}
