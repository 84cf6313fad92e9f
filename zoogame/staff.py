import random

from . import config as C
from .exceptions import InvalidSelectionError


class Employee:
    def __init__(self, name: str, role: str, wage: int, efficiency: int = 0):
        self.name = name
        self.role = role
        self.wage = wage
        self.efficiency = efficiency
        self.tired = False

    def __repr__(self):
        return f"Employee {self.name} ({self.role}, wage {self.wage})"

    def new_day(self):
        self.tired = False

    def is_available(self):
        return not self.tired


def hire(role: str, rng: random.Random) -> Employee:
    """Create a new employee with a wage and efficiency rolled for the role."""
    if role not in C.HIRING_RANGES:
        raise InvalidSelectionError(f"Cannot hire for role: {role}")
    (wage_low, wage_high), (eff_low, eff_high) = C.HIRING_RANGES[role]
    name = rng.choice(C.STAFF_NAMES)
    return Employee(name, role, rng.randint(wage_low, wage_high), rng.randint(eff_low, eff_high))
