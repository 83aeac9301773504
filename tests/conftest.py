import io

import pytest
from rich.console import Console

from roomcrawl.models import Config, Player
from roomcrawl.ui import Panels


class FixedRng:
    """Stand-in for random.Random returning scripted values."""

    def __init__(self, randint_values=(1,), randrange_value=0):
        self.randint_values = list(randint_values)
        self.randrange_value = randrange_value

    def randint(self, a, b):
        value = self.randint_values.pop(0) if len(self.randint_values) > 1 else self.randint_values[0]
        assert a <= value <= b
        return value

    def randrange(self, n):
        return self.randrange_value

    def choice(self, seq):
        return seq[0]


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=200)


@pytest.fixture
def config():
    return Config()


@pytest.fixture
def panels(config):
    return Panels(config)


@pytest.fixture
def player():
    return Player("Ada", 100, 10)


@pytest.fixture
def scripted_input(monkeypatch):
    """Feed console input from a list; raises EOFError once exhausted."""

    def install(lines):
        remaining = iter(lines)

        def fake_input(prompt=""):
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError

        monkeypatch.setattr("builtins.input", fake_input)

    return install


@pytest.fixture
def fixed_rng():
    return FixedRng
