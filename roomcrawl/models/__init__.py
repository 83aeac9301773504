from .config import Config
from .data_model import Character, Player, Enemy
from .events import GameEvent, RandomEvent, Observer
from .items import Item, HealthPotion, ItemFactory, HealthPotionFactory

__all__ = [
    'Config',
    'Character', 'Player', 'Enemy',
    'GameEvent', 'RandomEvent', 'Observer',
    'Item', 'HealthPotion', 'ItemFactory', 'HealthPotionFactory',
]
