import yaml
from rich.errors import StyleSyntaxError
from rich.style import Style

from .events import DEFAULT_EVENT_DESCRIPTION


def _section(game_parameters: dict, name: str) -> dict:
    section = game_parameters.get(name)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ValueError(f"'{name}' settings must be a mapping, got {section!r}")
    return section


class Config:
    def __init__(self, game_settings_path: str = None) -> None:
        self.game_settings_path = game_settings_path

        if game_settings_path:
            with open(game_settings_path) as game_file:
                game_parameters = yaml.safe_load(game_file) or {}
        else:
            game_parameters = {}
        if not isinstance(game_parameters, dict):
            raise ValueError(f"game settings must be a mapping, got {game_parameters!r}")

        player = _section(game_parameters, "player")
        self.player_health = player.get("health", 100)
        self.player_damage = player.get("damage", 10)

        enemy = _section(game_parameters, "enemy")
        self.enemy_name = enemy.get("name", "Goblin")
        self.enemy_health = enemy.get("health", 30)
        self.enemy_damage = enemy.get("damage", 5)

        items = _section(game_parameters, "items")
        self.potion_heal = items.get("potion_heal", 20)

        events = _section(game_parameters, "events")
        self.event_interval = events.get("interval", 5.0)
        self.event_chance = events.get("chance", 10)
        self.event_descriptions = events.get("descriptions") or [DEFAULT_EVENT_DESCRIPTION]

        game_settings = _section(game_parameters, "game_settings")
        self.character_panel_color = game_settings.get("character_panel_color", "white")
        self.status_panel_color = game_settings.get("status_panel_color", "white")
        self.event_panel_color = game_settings.get("event_panel_color", "magenta")
        self.combat_panel_color = game_settings.get("combat_panel_color", "red")

        self.validate()

    def validate(self) -> None:
        for key in ("player_health", "enemy_health", "event_chance"):
            value = getattr(self, key)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ValueError(f"{key} must be a positive integer, got {value!r}")
        for key in ("player_damage", "enemy_damage", "potion_heal"):
            value = getattr(self, key)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError(f"{key} must be a non-negative integer, got {value!r}")

        if isinstance(self.event_interval, bool) or not isinstance(self.event_interval, (int, float)):
            raise ValueError(f"event_interval must be a number, got {self.event_interval!r}")
        self.event_interval = float(self.event_interval)
        if self.event_interval <= 0:
            raise ValueError(f"event_interval must be positive, got {self.event_interval}")

        if not isinstance(self.enemy_name, str) or not self.enemy_name.strip():
            raise ValueError(f"enemy name must be a non-empty string, got {self.enemy_name!r}")
        if not isinstance(self.event_descriptions, list) or not all(isinstance(d, str) for d in self.event_descriptions):
            raise ValueError("events.descriptions must be a list of strings")

        for key in ("character_panel_color", "status_panel_color", "event_panel_color", "combat_panel_color"):
            value = getattr(self, key)
            try:
                Style.parse(value)
            except (StyleSyntaxError, TypeError, AttributeError) as error:
                raise ValueError(f"{key} is not a valid rich style: {value!r}") from error
