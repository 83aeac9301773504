import logging
import random
import threading
from typing import Optional, Sequence

from ..models import RandomEvent
from ..models.events import DEFAULT_EVENT_DESCRIPTION


logger = logging.getLogger(__name__)


class EventGenerator:
    """Background thread that now and then broadcasts a random narrative event.

    Every ``interval`` seconds one ``randint(1, chance)`` draw is made; a 1
    triggers a broadcast through the world. ``stop()`` ends the thread.
    """

    def __init__(self, world, interval: float = 5.0, chance: int = 10, descriptions: Sequence[str] = None, rng: random.Random = None):
        self.world = world
        self.interval = interval
        self.chance = chance
        self.descriptions = list(descriptions or [DEFAULT_EVENT_DESCRIPTION])
        self.rng = rng or random.Random()
        self._stop_event = None
        self.thread = None

    @property
    def running(self) -> bool:
        return self.thread is not None and self.thread.is_alive()

    def tick(self) -> Optional[RandomEvent]:
        if self.rng.randint(1, self.chance) != 1:
            return None
        event = RandomEvent(self.rng.choice(self.descriptions))
        self.world.notify_observers(event)
        return event

    def _run(self, stop_event: threading.Event):
        while not stop_event.wait(self.interval):
            try:
                self.tick()
            except Exception:
                logger.exception("Random event broadcast failed")

    def start(self):
        if self.running:
            return False
        # each run owns its stop token
        self._stop_event = threading.Event()
        self.thread = threading.Thread(target=self._run, args=(self._stop_event,), name="event-generator")
        self.thread.daemon = True
        self.thread.start()
        logger.debug("event generator started, interval %.1fs, chance 1/%d", self.interval, self.chance)
        return True

    def stop(self, timeout: float = None):
        if self._stop_event is not None:
            self._stop_event.set()
        if self.thread is not None:
            self.thread.join(timeout)
            if self.thread.is_alive():
                logger.warning("event generator did not stop within %ss", timeout)
                return False
            self.thread = None
            logger.debug("event generator stopped")
        return True
