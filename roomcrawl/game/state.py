import logging
import random
import threading
from typing import List, Optional, Tuple

from ..models import GameEvent, Observer, Player


logger = logging.getLogger(__name__)


class GameWorld:
    """Registry of the rooms and event observers for one session.

    Built explicitly and handed to whoever needs it. Observer registration is
    guarded by a lock and broadcasts iterate over a snapshot, so the event
    thread can notify while the game thread registers or removes observers.
    """

    def __init__(self, rng: random.Random = None):
        self.rng = rng or random.Random()
        self._lock = threading.Lock()
        self._observers: List[Observer] = []
        self._rooms: list = []

    def add_observer(self, observer: Observer) -> None:
        with self._lock:
            self._observers.append(observer)

    def remove_observer(self, observer: Observer) -> None:
        with self._lock:
            self._observers = [o for o in self._observers if o is not observer]

    @property
    def observers(self) -> Tuple[Observer, ...]:
        with self._lock:
            return tuple(self._observers)

    def notify_observers(self, event: GameEvent) -> None:
        observers = self.observers
        logger.debug("broadcasting %r to %d observers", event.description, len(observers))
        for observer in observers:
            observer.on_notify(event)

    def add_room(self, room) -> None:
        self._rooms.append(room)

    @property
    def rooms(self) -> tuple:
        return tuple(self._rooms)

    def random_room(self):
        if not self._rooms:
            return None
        return self._rooms[self.rng.randrange(len(self._rooms))]


class GameState:
    def __init__(self, config, player: Player, world: Optional[GameWorld] = None):
        self.config = config
        self.player = player
        self.world = world or GameWorld()
        self.turn = 0

    def increment_turn(self):
        self.turn += 1

    def check_player_status(self):
        return self.player.is_alive()
