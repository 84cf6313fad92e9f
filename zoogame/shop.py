import random
from typing import List

from . import config as C
from .animals import Animal, AnimalFactory
from .exceptions import InvalidSelectionError


class AnimalShop:
    """
    Pool of animals for sale. Stock is replaced wholesale on refresh.
    """

    def __init__(self, rng: random.Random):
        self.rng = rng
        self.factory = AnimalFactory(rng)
        self.available: List[Animal] = []
        self.days_until_refresh = 0

    def refresh(self):
        count = self.rng.randint(C.SHOP_MIN_OFFERS, C.SHOP_MAX_OFFERS)
        self.available = self.factory.create_batch(count)
        self.days_until_refresh = self.rng.randint(C.SHOP_MIN_REFRESH_DAYS, C.SHOP_MAX_REFRESH_DAYS)

    def tick(self) -> bool:
        """Count down one day; returns True when the stock was refreshed."""
        self.days_until_refresh -= 1
        if self.days_until_refresh <= 0:
            self.refresh()
            return True
        return False

    def get(self, index: int) -> Animal:
        if index < 0 or index >= len(self.available):
            raise InvalidSelectionError("Invalid animal number.")
        return self.available[index]

    def take(self, index: int) -> Animal:
        animal = self.get(index)
        del self.available[index]
        return animal
