import logging
import random
from typing import Optional

from rich.console import Console

from ..models import Config, Player, HealthPotionFactory
from ..ui import Panels
from .logic import GameLogic, MENU
from .narrative import EventGenerator
from .rooms import TreasureRoom, MonsterRoom
from .state import GameState, GameWorld


logger = logging.getLogger(__name__)

DEFAULT_PLAYER_NAME = "Adventurer"


class Game:
    def __init__(self, game_settings_path: str = None, seed: int = None, random_events: bool = True, console: Console = None) -> None:
        self.config = Config(game_settings_path)
        self.random_events = random_events

        self.console = console or Console()
        self.panels = Panels(self.config)

        self.world = GameWorld(random.Random(seed))
        self.world.add_room(TreasureRoom(HealthPotionFactory(self.config.potion_heal)))
        self.world.add_room(MonsterRoom(self.config.enemy_name, self.config.enemy_health, self.config.enemy_damage))

        self.event_generator = EventGenerator(
            self.world,
            interval=self.config.event_interval,
            chance=self.config.event_chance,
            descriptions=self.config.event_descriptions,
        )
        self.state: Optional[GameState] = None
        self.logic: Optional[GameLogic] = None

    def read_input(self, prompt: str) -> Optional[str]:
        try:
            return self.console.input(prompt)
        except (EOFError, KeyboardInterrupt):
            return None

    def create_player(self, name: str) -> Player:
        return Player(
            name.strip() or DEFAULT_PLAYER_NAME,
            self.config.player_health,
            self.config.player_damage,
            notify=self.show_event,
        )

    def show_event(self, message: str) -> None:
        self.console.print(self.panels.render_event_panel("EVENT", message))

    def start(self) -> int:
        self.console.print(self.panels.render_info_panel("ROOM CRAWL", "Welcome to the Room Crawl Text Adventure!"))
        name = self.read_input("What's your name, adventurer? ")
        if name is None:
            self.console.print(self.panels.render_info_panel("ROOM CRAWL", "Thanks for playing!"))
            return 0

        player = self.create_player(name)
        self.state = GameState(self.config, player, self.world)
        self.logic = GameLogic(self.state)
        self.world.add_observer(player)
        if self.random_events:
            self.event_generator.start()

        self.console.print(self.panels.render_info_panel("ROOM CRAWL", f"Welcome, {player.name}! Your adventure begins..."))
        character_info = f"{player.name} | {player.health} HP | {player.damage} DMG"
        self.console.print(self.panels.render_char_panel("CHARACTER", character_info))

        try:
            while self.state.check_player_status():
                self.console.print(self.panels.render_menu_panel("What would you like to do?", MENU))
                action = self.read_input("> ")
                self.state.increment_turn()
                if not self.logic.play_turn(action, self.read_input, self.console, self.panels):
                    return 0
            self.console.print(self.panels.render_end_panel("ROOM CRAWL", "Game Over! You died."))
            logger.debug("%s died on turn %d", player.name, self.state.turn)
            return 0
        finally:
            self.event_generator.stop()
            self.world.remove_observer(player)
