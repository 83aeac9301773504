from .core import Game
from .logic import GameLogic
from .narrative import EventGenerator
from .rooms import Room, TreasureRoom, MonsterRoom
from .state import GameState, GameWorld

__all__ = ['Game', 'GameLogic', 'EventGenerator', 'Room', 'TreasureRoom', 'MonsterRoom', 'GameState', 'GameWorld']
