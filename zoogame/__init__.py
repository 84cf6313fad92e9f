"""
Zoo Manager: a turn-based text simulation of running a zoo.

Modules:
    config - tuning constants
    exceptions - ZooError hierarchy
    animals - Animal record, breeding, pricing, AnimalFactory
    enclosure - Enclosure and its insertion rules
    staff - Employee and hiring
    finance - FinanceManager
    shop - AnimalShop
    zoo - Zoo aggregate and the day turn engine
    app - console menus
"""

from .animals import Animal, AnimalFactory, animal_price
from .enclosure import Enclosure
from .exceptions import ZooError
from .shop import AnimalShop
from .staff import Employee
from .zoo import DayReport, Zoo

__all__ = [
    'Animal',
    'AnimalFactory',
    'AnimalShop',
    'DayReport',
    'Employee',
    'Enclosure',
    'Zoo',
    'ZooError',
    'animal_price',
]
