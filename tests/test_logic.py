"""Tests for menu handling."""

import pytest

from roomcrawl.game import GameLogic, GameState, GameWorld, MonsterRoom, TreasureRoom
from roomcrawl.game.logic import parse_number
from roomcrawl.models import HealthPotion


def reader(*answers):
    remaining = list(answers)

    def read(prompt):
        return remaining.pop(0) if remaining else None

    return read


@pytest.fixture
def logic(config, player, fixed_rng):
    world = GameWorld(fixed_rng(randrange_value=0))
    world.add_room(TreasureRoom())
    world.add_room(MonsterRoom())
    return GameLogic(GameState(config, player, world))


@pytest.mark.parametrize("raw,expected", [("1", 1), (" 3 \n", 3), ("-2", -2), ("abc", None), ("", None), (None, None), ("1.5", None)])
def test_parse_number(raw, expected):
    assert parse_number(raw) == expected


def test_explore_enters_selected_room(logic, console, panels, player):
    assert logic.play_turn("1", reader(), console, panels)
    assert len(player.inventory) == 1
    text = console.file.getvalue()
    assert "TREASURE ROOM" in text
    assert "Your health: 100" in text


def test_explore_monster_room(logic, console, panels, player):
    logic.game_state.world.rng.randrange_value = 1
    logic.play_turn("1", reader(), console, panels)
    assert player.health == 90
    assert "You defeated the Goblin!" in console.file.getvalue()


def test_check_inventory_has_no_side_effects(logic, console, panels, player):
    player.add_item(HealthPotion())
    assert logic.play_turn("2", reader(), console, panels)
    assert len(player.inventory) == 1
    assert "1. Health Potion: Restores 20 HP" in console.file.getvalue()


def test_use_item_with_one_based_index(logic, console, panels, player):
    player.take_damage(50)
    player.add_item(HealthPotion())
    assert logic.play_turn("3", reader("1"), console, panels)
    assert player.health == 70
    assert player.inventory == []


def test_use_item_cancel(logic, console, panels, player):
    player.add_item(HealthPotion())
    assert logic.play_turn("3", reader("0"), console, panels)
    assert len(player.inventory) == 1


@pytest.mark.parametrize("answer", ["5", "-1", "potion"])
def test_use_item_invalid_index(logic, console, panels, player, answer):
    player.add_item(HealthPotion())
    player.add_item(HealthPotion())
    assert logic.play_turn("3", reader(answer), console, panels)
    assert len(player.inventory) == 2
    assert "Invalid item index." in console.file.getvalue()


def test_use_item_end_of_input_quits(logic, console, panels):
    assert not logic.play_turn("3", reader(), console, panels)
    assert "Thanks for playing!" in console.file.getvalue()


def test_quit(logic, console, panels):
    assert not logic.play_turn("4", reader(), console, panels)
    assert "Thanks for playing!" in console.file.getvalue()


def test_end_of_input_quits(logic, console, panels):
    assert not logic.play_turn(None, reader(), console, panels)


@pytest.mark.parametrize("choice", ["0", "5", "explore", ""])
def test_invalid_choice_reprompts(logic, console, panels, player, choice):
    assert logic.play_turn(choice, reader(), console, panels)
    text = console.file.getvalue()
    assert "Invalid choice. Try again." in text
    assert "Your health: 100" in text
    assert player.inventory == []


def test_explore_with_no_rooms(config, player, console, panels):
    logic = GameLogic(GameState(config, player, GameWorld()))
    assert logic.play_turn("1", reader(), console, panels)
    assert "There is nowhere left to explore." in console.file.getvalue()
