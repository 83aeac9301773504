import logging
from typing import List

from ..models import Enemy, ItemFactory, HealthPotionFactory, Player


logger = logging.getLogger(__name__)


class Room:
    title = "ROOM"
    panel = "room"

    def __init__(self, description: str):
        self._description = description

    @property
    def description(self) -> str:
        return self._description

    def enter(self, player: Player) -> List[str]:
        raise NotImplementedError


class TreasureRoom(Room):
    title = "TREASURE ROOM"

    def __init__(self, factory: ItemFactory = None):
        super().__init__("A room filled with treasure!")
        self.factory = factory or HealthPotionFactory()

    def enter(self, player: Player) -> List[str]:
        lines = [f"You enter {self.description}"]
        lines.append(player.add_item(self.factory.create_item()))
        logger.debug("%s looted %s, inventory size %d", player.name, self.title, len(player.inventory))
        return lines


class MonsterRoom(Room):
    title = "MONSTER ROOM"
    panel = "combat"

    def __init__(self, enemy_name: str = "Goblin", enemy_health: int = 30, enemy_damage: int = 5):
        super().__init__("A dark room with a lurking monster.")
        self.enemy_name = enemy_name
        self.enemy_health = enemy_health
        self.enemy_damage = enemy_damage

    def spawn_enemy(self) -> Enemy:
        return Enemy(self.enemy_name, self.enemy_health, self.enemy_damage)

    def enter(self, player: Player) -> List[str]:
        lines = [f"You enter {self.description}"]
        enemy = self.spawn_enemy()
        # player always strikes first each round
        while player.is_alive() and enemy.is_alive():
            if player.damage == 0 and enemy.damage == 0:
                lines.append(f"The {enemy.name} loses interest and wanders off.")
                logger.debug("stalemate against %s", enemy.name)
                return lines
            lines.append(player.attack(enemy))
            if enemy.is_alive():
                lines.append(enemy.attack(player))
        if player.is_alive():
            lines.append(f"You defeated the {enemy.name}!")
        logger.debug("combat against %s over, player alive: %s", enemy.name, player.is_alive())
        return lines
