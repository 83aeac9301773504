from typing import Iterable, Union

from rich.panel import Panel
from rich.text import Text


def _join(message: Union[str, Iterable[str]]) -> str:
    if isinstance(message, str):
        return message
    return "\n".join(message)


class Panels:
    def __init__(self, config):
        self.config = config

    def render_info_panel(self, title: str, message) -> Panel:
        return Panel(Text(_join(message), justify="center"), title=f"{title}", border_style="bright_black")

    def render_menu_panel(self, title: str, message) -> Panel:
        return Panel(Text(_join(message), justify="left"), title=f"{title}", border_style="bright_black")

    def render_status_panel(self, title: str, message) -> Panel:
        return Panel(Text(_join(message), justify="left"), title=f"{title}", border_style=self.config.status_panel_color)

    def render_char_panel(self, title: str, message) -> Panel:
        return Panel(Text(_join(message), justify="center"), title=f"{title}", border_style=self.config.character_panel_color)

    def render_room_panel(self, title: str, message) -> Panel:
        return Panel(Text(_join(message), justify="left"), title=f"{title}", border_style="green")

    def render_combat_panel(self, title: str, message) -> Panel:
        return Panel(Text(_join(message), justify="left"), title=f"{title}", border_style=self.config.combat_panel_color)

    def render_event_panel(self, title: str, message) -> Panel:
        return Panel(Text(_join(message), justify="left"), title=f"{title}", border_style=self.config.event_panel_color)

    def render_end_panel(self, title: str, message) -> Panel:
        return Panel(Text(_join(message), justify="center"), title=f"{title}", border_style="red")
