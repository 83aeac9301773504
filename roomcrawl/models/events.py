from dataclasses import dataclass
from typing import Protocol


DEFAULT_EVENT_DESCRIPTION = "A random event occurred in the game world!"


@dataclass(frozen=True)
class GameEvent:
    description: str


@dataclass(frozen=True)
class RandomEvent(GameEvent):
    description: str = DEFAULT_EVENT_DESCRIPTION


class Observer(Protocol):
    def on_notify(self, event: GameEvent) -> None:
        ...
