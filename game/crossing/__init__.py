"""Road-crossing arcade game - gameplay logic and Gymnasium environment"""

from .session import GameSession
from .state import GameState
from .entities import Enemy, Player, Token
from .crossing_env import CrossingEnv, run_random_episode

__all__ = ['GameSession', 'GameState', 'Enemy', 'Player', 'Token',
           'CrossingEnv', 'run_random_episode']
