import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from .events import GameEvent
from .items import Item


logger = logging.getLogger(__name__)


@dataclass
class Character:
    """A combatant with bounded health.

    ``max_health`` defaults to the starting ``health``. Health is kept in
    ``[0, max_health]`` by ``take_damage`` and ``heal``.
    """

    name: str
    health: int
    damage: int
    max_health: Optional[int] = None

    def __post_init__(self):
        if self.max_health is None:
            self.max_health = self.health
        if self.max_health <= 0:
            raise ValueError(f"{self.name}: max_health must be positive, got {self.max_health}")
        if not 0 <= self.health <= self.max_health:
            raise ValueError(f"{self.name}: health {self.health} outside [0, {self.max_health}]")
        if self.damage < 0:
            raise ValueError(f"{self.name}: damage must be non-negative, got {self.damage}")

    def attack(self, target: "Character") -> str:
        target.take_damage(self.damage)
        return f"{self.name} attacks {target.name} for {self.damage} damage!"

    def take_damage(self, amount: int) -> None:
        if amount < 0:
            raise ValueError("Damage amount must be non-negative")
        self.health = max(0, self.health - amount)

    def heal(self, amount: int) -> None:
        if amount < 0:
            raise ValueError("Heal amount must be non-negative")
        self.health = min(self.health + amount, self.max_health)

    def is_alive(self) -> bool:
        return self.health > 0


@dataclass
class Enemy(Character):
    pass


@dataclass
class Player(Character):
    inventory: List[Item] = field(default_factory=list)
    notify: Optional[Callable[[str], None]] = field(default=None, repr=False, compare=False)

    def add_item(self, item: Item) -> str:
        self.inventory.append(item)
        return f"You picked up {item.name}!"

    def show_inventory(self) -> List[str]:
        lines = ["Inventory:"]
        lines.extend(f"{i}. {item.name}: {item.description}" for i, item in enumerate(self.inventory, start=1))
        return lines

    def use_item(self, index: int) -> str:
        if not 0 <= index < len(self.inventory):
            return "Invalid item index."
        item = self.inventory[index]
        message = item.use(self)
        del self.inventory[index]
        logger.debug("%s used %s, %d items left", self.name, item.name, len(self.inventory))
        return message

    def on_notify(self, event: GameEvent) -> None:
        message = f"Player {self.name} observed: {event.description}"
        if self.notify is not None:
            self.notify(message)
        else:
            logger.info(message)
