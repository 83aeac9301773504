import logging
from dataclasses import dataclass, field


logger = logging.getLogger(__name__)


@dataclass
class Item:
    name: str
    description: str

    def use(self, character) -> str:
        raise NotImplementedError


@dataclass
class HealthPotion(Item):
    name: str = "Health Potion"
    description: str = field(init=False)
    heal_amount: int = 20

    def __post_init__(self):
        if self.heal_amount < 0:
            raise ValueError(f"heal_amount must be non-negative, got {self.heal_amount}")
        self.description = f"Restores {self.heal_amount} HP"

    def use(self, character) -> str:
        character.heal(self.heal_amount)
        logger.debug("%s healed %s by %d", self.name, character.name, self.heal_amount)
        return f"{character.name} uses a {self.name} and restores {self.heal_amount} HP!"


class ItemFactory:
    def create_item(self) -> Item:
        raise NotImplementedError


class HealthPotionFactory(ItemFactory):
    def __init__(self, heal_amount: int = 20):
        self.heal_amount = heal_amount

    def create_item(self) -> Item:
        return HealthPotion(heal_amount=self.heal_amount)
