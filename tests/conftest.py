import pytest

from zoogame import config as C
from zoogame.animals import Animal
from zoogame.enclosure import Enclosure


class LowRandom:
    """Always draws the lowest value: every 1-in-N roll succeeds."""

    def randrange(self, start, stop=None):
        return 0 if stop is None else start

    def randint(self, a, b):
        return a

    def choice(self, seq):
        return seq[0]


class HighRandom:
    """Always draws the highest value: no 1-in-N roll ever succeeds."""

    def randrange(self, start, stop=None):
        return start - 1 if stop is None else stop - 1

    def randint(self, a, b):
        return b

    def choice(self, seq):
        return seq[-1]


@pytest.fixture
def low_rng():
    return LowRandom()


@pytest.fixture
def high_rng():
    return HighRandom()


@pytest.fixture
def make_animal():
    def _make(species='Lion', climate=C.TROPIC, sex='M', age=10, weight=100, **kwargs):
        return Animal(species, climate=climate, sex=sex, age=age, weight=weight, **kwargs)
    return _make


@pytest.fixture
def make_enclosure():
    def _make(category='Felines', climate=C.TROPIC, capacity=4, predator_only=True, **kwargs):
        return Enclosure("Test", capacity, climate, category, predator_only=predator_only, **kwargs)
    return _make
