from abc import ABC, abstractmethod
from typing import List, Optional

from . import config as C
from .animals import Animal
from .exceptions import (ClimateMismatchError, HabitatCapacityExceededError,
                         IncompatibleSpeciesError, MaxLevelError)


class ICleanable(ABC):
    @abstractmethod
    def clean(self):
        pass


class Enclosure(ICleanable):
    """
    Enclosure holds a bounded group of animals sharing one climate and one diet.
    """

    def __init__(self, name: str, capacity: int, climate: str, category: str,
                 predator_only: bool = False, species: Optional[str] = None,
                 breeding: bool = False, daily_cost: int = C.STANDARD_DAILY_COST,
                 upgrade_level: int = 1):
        self.name = name
        self.capacity = capacity
        self.climate = climate
        self.category = category
        self.species = species  # locked species, breeding enclosures only
        self.predator_only = predator_only
        self.breeding = breeding
        self.daily_cost = daily_cost
        self.upgrade_level = upgrade_level
        self.dirtiness = 0
        self.animals: List[Animal] = []

    def __repr__(self):
        return f"Enclosure {self.name} ({len(self.animals)}/{self.capacity}, {self.climate})"

    def is_full(self):
        return len(self.animals) >= self.capacity

    def add_animal(self, animal: Animal):
        if self.is_full():
            raise HabitatCapacityExceededError("Enclosure is full.")
        if self.animals and animal.diet != self.animals[0].diet:
            raise IncompatibleSpeciesError(
                f"A {animal.diet} can't share an enclosure with {self.animals[0].diet}s.")
        if animal.climate != self.climate:
            raise ClimateMismatchError(
                f"{animal.name} needs a {animal.climate} climate, this enclosure is {self.climate}.")
        self.animals.append(animal)

    def remove_animal(self, animal: Animal):
        if animal in self.animals:
            self.animals.remove(animal)

    def live_animals(self) -> List[Animal]:
        return [a for a in self.animals if a.is_alive()]

    def live_count(self):
        return sum(1 for a in self.animals if a.is_alive())

    def sick_count(self):
        return sum(1 for a in self.animals if a.is_sick())

    @property
    def is_dirty(self):
        return self.needs_cleaning()

    def needs_cleaning(self):
        return self.dirtiness > C.DIRT_THRESHOLD

    def clean(self):
        self.dirtiness = 0

    def daily_maintenance(self) -> List[Animal]:
        """
        Dirt builds up, and any sickness present spreads to the first
        healthy animals. Returns the newly infected animals.
        """
        self.dirtiness += C.DIRT_PER_DAY
        infected = []
        if self.sick_count():
            for a in self.animals:
                if len(infected) >= C.DISEASE_SPREAD_PER_DAY:
                    break
                if a.state == C.HEALTHY:
                    a.state = C.SICK
                    infected.append(a)
        return infected

    def upgrade_cost(self):
        return C.UPGRADE_COST_PER_LEVEL * self.upgrade_level

    def capacity_step(self):
        return C.BREEDING_UPGRADE_CAPACITY_STEP if self.breeding else C.UPGRADE_CAPACITY_STEP

    def upgrade(self):
        if self.upgrade_level >= C.MAX_UPGRADE_LEVEL:
            raise MaxLevelError("This enclosure is already fully upgraded.")
        self.upgrade_level += 1
        self.capacity += self.capacity_step()
        self.daily_cost += C.UPGRADE_DAILY_COST_STEP

    def sell_value(self):
        value = C.ENCLOSURE_SELL_BASE + (self.upgrade_level - 1) * C.ENCLOSURE_SELL_PER_LEVEL
        if self.breeding:
            value += C.BREEDING_ENCLOSURE_SELL_BONUS
        return value
