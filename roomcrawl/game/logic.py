import logging
from typing import Callable, Optional


logger = logging.getLogger(__name__)

MENU = [
    "1. Explore the next room",
    "2. Check inventory",
    "3. Use item",
    "4. Quit",
]

EXPLORE, INVENTORY, USE_ITEM, QUIT = 1, 2, 3, 4


def parse_number(input: Optional[str]) -> Optional[int]:
    if input is None:
        return None
    try:
        return int(input.strip())
    except ValueError:
        return None


class GameLogic:
    def __init__(self, game_state):
        self.game_state = game_state

    def explore(self, console, panels) -> None:
        room = self.game_state.world.random_room()
        if room is None:
            console.print(panels.render_info_panel("EXPLORE", "There is nowhere left to explore."))
            return
        logger.debug("turn %d: entering %s", self.game_state.turn, room.title)
        lines = room.enter(self.game_state.player)
        if room.panel == "combat":
            console.print(panels.render_combat_panel(room.title, lines))
        else:
            console.print(panels.render_room_panel(room.title, lines))

    def check_inventory(self, console, panels) -> None:
        console.print(panels.render_status_panel("INVENTORY", self.game_state.player.show_inventory()))

    def use_item(self, read_input: Callable[[str], Optional[str]], console, panels) -> bool:
        """Prompt for a 1-based item number and use that item.

        0 cancels silently. Negative and non-numeric answers are reported as
        "Invalid item index." rather than ignored, same as out-of-range
        numbers. Returns False only when input has ended.
        """
        self.check_inventory(console, panels)
        raw = read_input("Enter the item number to use (or 0 to cancel): ")
        if raw is None:
            return False
        index = parse_number(raw)
        if index == 0:
            return True
        if index is None or index < 0:
            message = "Invalid item index."
        else:
            message = self.game_state.player.use_item(index - 1)
        console.print(panels.render_status_panel("INVENTORY", message))
        return True

    def quit(self, console, panels) -> None:
        console.print(panels.render_info_panel("ROOM CRAWL", "Thanks for playing!"))

    def play_turn(self, input: Optional[str], read_input, console, panels) -> bool:
        """Run one menu action. Returns False once the player has quit."""
        if input is None:
            self.quit(console, panels)
            return False

        choice = parse_number(input)
        if choice == EXPLORE:
            self.explore(console, panels)
        elif choice == INVENTORY:
            self.check_inventory(console, panels)
        elif choice == USE_ITEM:
            if not self.use_item(read_input, console, panels):
                self.quit(console, panels)
                return False
        elif choice == QUIT:
            self.quit(console, panels)
            return False
        else:
            logger.debug("invalid menu choice %r", input)
            console.print(panels.render_info_panel("ROOM CRAWL", "Invalid choice. Try again."))

        player = self.game_state.player
        console.print(panels.render_char_panel(f"TURN {self.game_state.turn}", f"Your health: {player.health}"))
        return True
