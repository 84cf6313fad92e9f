"""
Animals, breeding and pricing.

An ``Animal`` is a plain mutable record. Its ``state`` and ``happiness``
are guarded by properties so observers hear about sickness and death,
and happiness never leaves [0, 100].
"""

import random
from typing import List, Optional, Tuple

from . import config as C
from .exceptions import InvalidSelectionError, SameGenderError, TooYoungError


def animal_price(age: int, weight: int) -> int:
    """Shop price of an animal: younger and lighter animals cost more."""
    age_factor = max(0.0, 1.0 - age / C.MAX_AGE)
    weight_factor = max(0.0, 1.0 - weight / C.PRICE_WEIGHT_SCALE)
    return max(C.MIN_ANIMAL_PRICE, round(C.BASE_ANIMAL_PRICE * age_factor * weight_factor))


def category_of(species: str) -> str:
    for category, members in C.SPECIES.items():
        if species in members:
            return category
    raise InvalidSelectionError(f"Unknown species: {species}")


def is_predator_species(species: str) -> bool:
    return C.SPECIES[category_of(species)][species]


class Animal:
    """
    A single zoo animal.
    """
    _id_counter = 1

    def __init__(self, species: str, name: Optional[str] = None, age: int = 0, weight: int = 10,
                 climate: str = C.CONTINENTAL, sex: str = 'M', happiness: int = 100,
                 price: Optional[int] = None, animal_id: Optional[int] = None):
        if animal_id is None:
            animal_id = Animal._id_counter
            Animal._id_counter += 1
        self.id = animal_id
        self.species = species
        self.category = category_of(species)
        self.is_predator = C.SPECIES[self.category][species]
        self.name = name or f"{species}-{self.id}"
        self.age = age
        self.weight = weight
        self.climate = climate
        self.sex = sex
        self._state = C.HEALTHY
        self._happiness = happiness
        self.hungry = False
        self.unhappy = False
        self.price = animal_price(age, weight) if price is None else price
        self.parents: Optional[Tuple["Animal", "Animal"]] = None
        self._observers = []

    def __repr__(self):
        return f"Animal {self.id} {self.name} ({self.species}, {self.sex}, {self.state})"

    @property
    def diet(self):
        return C.PREDATOR if self.is_predator else C.HERBIVORE

    @property
    def born_in_zoo(self):
        return self.parents is not None

    @property
    def state(self):
        return self._state

    @state.setter
    def state(self, value):
        old = self._state
        self._state = value
        if value == old:
            return
        if value == C.SICK:
            message = "Fell sick."
        elif value == C.DEAD:
            message = "This animal has died."
        else:
            message = "Recovered and is healthy again."
        for obs in self._observers:
            obs.notify(self, message)

    @property
    def happiness(self):
        return self._happiness

    @happiness.setter
    def happiness(self, value):
        self._happiness = max(0, min(100, value))

    def is_alive(self):
        return self._state != C.DEAD

    def is_sick(self):
        return self._state == C.SICK

    def snapshot(self) -> "Animal":
        """
        Detached copy of this animal, lineage included. Snapshots carry no
        observers, so later changes to either side never leak across.
        """
        copy = Animal(self.species, name=self.name, age=self.age, weight=self.weight,
                      climate=self.climate, sex=self.sex, happiness=self.happiness,
                      price=self.price, animal_id=self.id)
        copy._state = self._state
        copy.hungry = self.hungry
        copy.unhappy = self.unhappy
        if self.parents is not None:
            copy.parents = (self.parents[0].snapshot(), self.parents[1].snapshot())
        return copy

    def breed_with(self, partner: "Animal", rng: random.Random) -> "Animal":
        """
        Produce an offspring with ``partner``. Species and enclosure room are
        the caller's business; this only checks gender and maturity.
        """
        if self.sex == partner.sex:
            raise SameGenderError("Parents must be of different genders.")
        if self.age <= C.MIN_BREEDING_AGE or partner.age <= C.MIN_BREEDING_AGE:
            raise TooYoungError(f"Both parents must be older than {C.MIN_BREEDING_AGE} days.")

        baby = Animal(self.species,
                      name=f"{rng.choice(C.BABY_NAMES)} {self.name} & {partner.name}",
                      age=0,
                      weight=(self.weight + partner.weight) // 4,
                      climate=self.climate,
                      sex=rng.choice(C.GENDERS),
                      happiness=100)
        baby.is_predator = self.is_predator
        baby.parents = (self.snapshot(), partner.snapshot())
        return baby


class AnimalFactory:
    """
    Factory for shop stock: random animals drawn from the species tables.
    """

    def __init__(self, rng: random.Random):
        self.rng = rng

    def create(self, species: str, **kwargs) -> Animal:
        return Animal(species, **kwargs)

    def create_random(self) -> Animal:
        rng = self.rng
        category = rng.choice(C.CATEGORIES)
        species = rng.choice(list(C.SPECIES[category]))
        name = f"{rng.choice(C.ANIMAL_NAMES[category])} {rng.randrange(1000)}"
        climate = rng.choice(C.CLIMATES)
        age = rng.randint(1, C.MAX_AGE)
        weight = rng.randrange(10, 410)
        happiness = rng.randint(70, 100)
        sex = rng.choice(C.GENDERS)
        return self.create(species, name=name, age=age, weight=weight, climate=climate,
                           sex=sex, happiness=happiness)

    def create_batch(self, count: int) -> List[Animal]:
        return [self.create_random() for _ in range(count)]
