"""
Console front end.

A small state machine over the game's menus. Each menu is a dispatch table
of numbered actions; an action returns the next menu (or ``None`` to stay).
Domain errors raised by the zoo are shown to the player and the menu is
redrawn, so nothing below this layer ever deals with bad input.
"""

from typing import Callable, List, Optional, Sequence

from . import config as C
from .animals import Animal
from .exceptions import InvalidSelectionError, MaxLevelError, ZooError
from .zoo import DayReport, Zoo, clean_name

MAIN = 'main'
ANIMALS = 'animals'
PURCHASES = 'purchases'
ENCLOSURES = 'enclosures'
STAFF = 'staff'
EXIT = 'exit'

CLIMATE_LABELS = {C.TROPIC: "Tropic", C.CONTINENTAL: "Continental", C.ARCTIC: "Arctic"}
ROLE_LABELS = {
    C.DIRECTOR: "Director",
    C.VETERINARIAN: "Veterinarian",
    C.CLEANER: "Cleaner",
    C.CARETAKER: "Caretaker",
}
HIRABLE_ROLES = [
    (C.VETERINARIAN, "Veterinarian (treats animals)"),
    (C.CLEANER, "Cleaner (keeps enclosures clean)"),
    (C.CARETAKER, "Caretaker (looks after animals)"),
]


class ZooApp:
    def __init__(self, zoo: Zoo, input_func: Callable[[str], str] = input):
        self.zoo = zoo
        self.input = input_func
        self.state = MAIN
        self.menus = {
            MAIN: ("Main menu", [
                ("Manage animals", lambda: ANIMALS),
                ("Manage purchases", lambda: PURCHASES),
                ("Manage enclosures", lambda: ENCLOSURES),
                ("Manage staff", lambda: STAFF),
                ("Next day", self.next_day),
                ("Exit", lambda: EXIT),
            ]),
            ANIMALS: ("Animal management", [
                ("Buy an animal", self.buy_animal),
                ("Sell an animal", self.sell_animal),
                ("View all animals", self.view_all_animals),
                ("Move an animal", self.move_animal),
                ("Animal shop", self.shop_menu),
                ("Rename an animal", self.rename_animal),
                ("Breed animals", self.breed_animals),
                ("Inspect an enclosure", self.inspect_enclosure),
                ("Treat sick animals", self.treat_animals),
                ("Remove dead animals", self.remove_dead),
                ("Back", lambda: MAIN),
            ]),
            PURCHASES: ("Purchases", [
                (f"Buy food ({C.BASE_FOOD_COST} per unit)", self.buy_food),
                (f"Order advertising ({C.ADVERTISEMENT_COST})", self.advertise),
                ("Back", lambda: MAIN),
            ]),
            ENCLOSURES: ("Enclosure management", [
                (f"Build a standard enclosure ({C.BASE_ENCLOSURE_COST})", self.build_enclosure),
                (f"Build a breeding enclosure ({C.BREEDING_ENCLOSURE_COST})", self.build_breeding_enclosure),
                ("Upgrade an enclosure", self.upgrade_enclosure),
                ("Sell an enclosure", self.sell_enclosure),
                ("Inspect an enclosure", self.inspect_enclosure),
                ("Back", lambda: MAIN),
            ]),
            STAFF: ("Staff management", [
                ("Hire an employee", self.hire_employee),
                ("View employees", self.list_employees),
                ("Fire an employee", self.fire_employee),
                ("Back", lambda: MAIN),
            ]),
        }

    # -----------------------
    # Main loop
    # -----------------------
    def run(self) -> str:
        """Play until the player exits or the game ends; returns the zoo's outcome."""
        while self.state != EXIT:
            if self.state == MAIN:
                self.show_status()
            title, actions = self.menus[self.state]
            print(f"\n=== {title} ===")
            for number, (label, _) in enumerate(actions, start=1):
                print(f"{number}. {label}")
            choice = self.ask_integer("Choose an action: ")
            if choice < 1 or choice > len(actions):
                print("Invalid choice.")
                continue
            try:
                next_state = actions[choice - 1][1]()
            except ZooError as e:
                print(f"Error: {e}")
                continue
            if next_state is not None:
                self.state = next_state
        return self.zoo.outcome

    # -----------------------
    # Input helpers
    # -----------------------
    def ask_integer(self, prompt: str, minvalue: Optional[int] = None,
                    maxvalue: Optional[int] = None) -> int:
        while True:
            raw = self.input(prompt)
            try:
                value = int(raw.strip())
            except ValueError:
                print("Error: enter a number.")
                continue
            if (minvalue is not None and value < minvalue) or (maxvalue is not None and value > maxvalue):
                print(f"Error: enter a number between {minvalue} and {maxvalue}.")
                continue
            return value

    def ask_string(self, prompt: str) -> str:
        return clean_name(self.input(prompt))

    def ask_confirm(self, prompt: str) -> bool:
        return self.ask_integer(f"{prompt} (1 - yes, 0 - no): ", 0, 1) == 1

    def ask_option(self, title: str, options: Sequence[str]) -> int:
        """Numbered 1-based pick from ``options``; returns a 0-based index."""
        print(f"\n{title}")
        for number, label in enumerate(options, start=1):
            print(f"{number}. {label}")
        return self.ask_integer("Your choice: ", 1, len(options)) - 1

    def ask_enclosure(self, prompt: str) -> int:
        if not self.zoo.enclosures:
            raise InvalidSelectionError("There are no enclosures.")
        self.list_enclosures()
        return self.ask_integer(f"{prompt} (0-{len(self.zoo.enclosures) - 1}): ")

    def ask_animal(self, enclosure_index: int, prompt: str) -> int:
        enclosure = self.zoo.get_enclosure(enclosure_index)
        if not enclosure.animals:
            raise InvalidSelectionError("There are no animals in this enclosure.")
        for i, a in enumerate(enclosure.animals):
            print(f"{i}. {a.name} ({a.species}, {a.sex}, {a.state})")
        return self.ask_integer(f"{prompt} (0-{len(enclosure.animals) - 1}): ")

    def ask_climate(self) -> str:
        return C.CLIMATES[self.ask_option("Choose a climate:", [CLIMATE_LABELS[c] for c in C.CLIMATES])]

    def ask_category(self) -> str:
        return C.CATEGORIES[self.ask_option("Choose an animal type:", C.CATEGORIES)]

    def ask_species(self, category: str) -> str:
        species = list(C.SPECIES[category])
        return species[self.ask_option("Choose a specific animal:", species)]

    # -----------------------
    # Rendering
    # -----------------------
    def show_status(self):
        zoo = self.zoo
        print("\n=== Zoo status ===")
        print(f"Name: {zoo.name}")
        print(f"Food: {zoo.food}")
        print(f"Money: {zoo.money}")
        print(f"Popularity: {zoo.popularity}/{C.POPULARITY_MAX}")
        print(f"Visitors: {zoo.visitors}")
        print(f"Animals: {zoo.live_animal_count()}")
        print(f"Enclosures: {len(zoo.enclosures)}")
        print(f"Employees: {len(zoo.employees)}/{C.MAX_EMPLOYEES}")
        print(f"Days survived: {zoo.days_survived}")
        print(f"Shop refresh in: {zoo.shop.days_until_refresh} days")
        print(f"TOI-1452 b delegation satisfied? {'Yes' if zoo.delegation_satisfied else 'No'}")
        if zoo.days_survived >= C.PURCHASE_LIMIT_AFTER_DAY:
            print(f"Animals bought today: {zoo.animals_bought_today}/{C.DAILY_PURCHASE_LIMIT}")

    def list_animals(self, animals: List[Animal]):
        print("\n=== Animals ===")
        if not animals:
            print("No animals.")
            return
        for i, a in enumerate(animals):
            print(f"{i}. {a.name} ({a.species})")
            print(f"   Type: {a.category}, Sex: {a.sex}")
            print(f"   Age: {a.age}d, Weight: {a.weight}kg, Price: {a.price}")
            print(f"   Climate: {CLIMATE_LABELS[a.climate]}, Predator: {'Yes' if a.is_predator else 'No'}")
            print(f"   State: {a.state}, {'Hungry' if a.hungry else 'Fed'}, Happiness: {a.happiness}/100")

    def list_enclosures(self):
        print("\n=== Enclosures ===")
        if not self.zoo.enclosures:
            print("No enclosures.")
            return
        for i, enc in enumerate(self.zoo.enclosures):
            print(f"{i}. {enc.name}")
            print(f"   Occupancy: {len(enc.animals)}/{enc.capacity}")
            print(f"   Climate: {CLIMATE_LABELS[enc.climate]}, Type: {enc.category}"
                  f"{', only ' + enc.species if enc.species else ''}")
            print(f"   For predators: {'Yes' if enc.predator_only else 'No'}, "
                  f"Breeding: {'Yes' if enc.breeding else 'No'}, Level: {enc.upgrade_level}")

    def show_enclosure(self, index: int):
        enc = self.zoo.get_enclosure(index)
        print("\n=== Enclosure details ===")
        print(f"Name: {enc.name}")
        print(f"Occupancy: {len(enc.animals)}/{enc.capacity}")
        print(f"Climate: {CLIMATE_LABELS[enc.climate]}")
        print(f"Animal type: {enc.category} ({enc.species or 'any species'})")
        print(f"For predators: {'Yes' if enc.predator_only else 'No'}")
        print(f"Breeding: {'Yes' if enc.breeding else 'No'}")
        print(f"Level: {enc.upgrade_level}, Daily upkeep: {enc.daily_cost}")
        print(f"Condition: {'Dirty' if enc.is_dirty else 'Clean'} (dirt {enc.dirtiness})")
        print("\nAnimals:")
        if not enc.animals:
            print("No animals.")
        for a in enc.animals:
            print(f"- {a.name} ({a.species}, {a.diet}) {a.state}")

    def show_report(self, report: DayReport):
        print(f"\n=== Day {report.day} summary ===")
        print(f"Expenses: {report.wage_cost}")
        if report.feeding_failed:
            print("Feeding: not enough food!")
        else:
            print(f"Food consumed: {report.food_consumed}")
        print(f"Zoo dirtiness: {report.dirtiness}")
        print(f"Profit: {report.profit}")
        for animal in report.deaths:
            print(f"{animal.name} ({animal.species}) died.")
        if report.outcome == C.BANKRUPT:
            print("\n!!! YOU ARE BANKRUPT !!!")
            print(f"Game over. You lasted {report.day} days.")
        elif report.outcome == C.WON:
            print("\n=== VICTORY! ===")
            print(f"You successfully ran the zoo for {C.WIN_DAY} days!")

    # -----------------------
    # Actions: main
    # -----------------------
    def next_day(self):
        report = self.zoo.advance_day()
        self.show_report(report)
        if report.outcome != C.ONGOING:
            return EXIT
        return None

    # -----------------------
    # Actions: animals
    # -----------------------
    def buy_animal(self):
        shop = self.zoo.shop
        print(f"\nShop refreshes in {shop.days_until_refresh} days")
        if not shop.available:
            print("No animals for sale.")
            return None
        self.list_animals(shop.available)
        offer = self.ask_integer("\nAnimal number to buy (-1 to cancel): ")
        if offer == -1:
            return None
        shop.get(offer)
        enclosure_index = self.ask_enclosure("Enclosure for the animal")
        animal = self.zoo.buy_animal(offer, enclosure_index)
        print(f"{animal.species} \"{animal.name}\" bought.")
        return None

    def sell_animal(self):
        enclosure_index = self.ask_enclosure("Enclosure to sell from")
        enclosure = self.zoo.get_enclosure(enclosure_index)
        animal_index = self.ask_animal(enclosure_index, "Animal to sell")
        animal = self.zoo.get_animal(enclosure, animal_index)
        if self.ask_confirm(f"Sell {animal.name} for {animal.price // 2}?"):
            self.zoo.sell_animal(enclosure_index, animal_index)
            print("Animal sold.")
        else:
            print("Sale cancelled.")
        return None

    def view_all_animals(self):
        if not self.zoo.enclosures:
            print("No enclosures with animals.")
            return None
        for i, enc in enumerate(self.zoo.enclosures):
            print(f"\nEnclosure {i}: {enc.name}")
            for a in enc.animals:
                print(f"- {a.name} ({a.species}, {a.diet}) {a.state}, happiness {a.happiness}")
        return None

    def move_animal(self):
        source = self.ask_enclosure("Enclosure to move from")
        animal_index = self.ask_animal(source, "Animal to move")
        destination = self.ask_enclosure("Enclosure to move to")
        self.zoo.move_animal(source, animal_index, destination)
        print("Animal moved.")
        return None

    def shop_menu(self):
        print(f"\nShop refreshes in {self.zoo.shop.days_until_refresh} days")
        choice = self.ask_option("Animal shop:", ["View animals",
                                                  f"Refresh the shop ({C.SHOP_REFRESH_COST})",
                                                  "Back"])
        if choice == 0:
            self.list_animals(self.zoo.shop.available)
        elif choice == 1:
            self.zoo.refresh_shop()
            print("The animal shop has been refreshed!")
        return None

    def rename_animal(self):
        enclosure_index = self.ask_enclosure("Enclosure")
        animal_index = self.ask_animal(enclosure_index, "Animal to rename")
        animal = self.zoo.rename_animal(enclosure_index, animal_index, self.ask_string("New name: "))
        print(f"Renamed to {animal.name}.")
        return None

    def breed_animals(self):
        enclosure_index = self.ask_enclosure("Enclosure")
        first = self.ask_animal(enclosure_index, "First animal")
        second = self.ask_animal(enclosure_index, "Second animal")
        baby = self.zoo.breed_animals(enclosure_index, first, second)
        print(f"A new {baby.species} named {baby.name} was born!")
        print(f"Sex: {baby.sex}, weight: {baby.weight}kg")
        return None

    def inspect_enclosure(self):
        self.show_enclosure(self.ask_enclosure("Enclosure to inspect"))
        return None

    def treat_animals(self):
        healed = self.zoo.treat_sick_animals()
        for animal in healed:
            print(f"{animal.name} was healed.")
        if not healed:
            print("No veterinarian was available.")
        return None

    def remove_dead(self):
        removed = self.zoo.remove_dead_animals()
        print(f"Removed {len(removed)} dead animals.")
        return None

    # -----------------------
    # Actions: purchases
    # -----------------------
    def buy_food(self):
        amount = self.ask_integer(f"How much food? (1 food = {C.BASE_FOOD_COST}): ")
        self.zoo.buy_food(amount)
        print(f"Bought {amount} food.")
        return None

    def advertise(self):
        self.zoo.advertise()
        print("Advertising campaign launched.")
        return None

    # -----------------------
    # Actions: enclosures
    # -----------------------
    def build_enclosure(self):
        name = self.ask_string("Enclosure name: ") or "Enclosure"
        climate = self.ask_climate()
        category = self.ask_category()
        enclosure = self.zoo.build_enclosure(name, climate, category)
        print(f"Enclosure \"{enclosure.name}\" built, "
              f"{'for' if enclosure.predator_only else 'not for'} predators.")
        return None

    def build_breeding_enclosure(self):
        name = self.ask_string("Enclosure name: ") or "Breeding enclosure"
        climate = self.ask_climate()
        species = self.ask_species(self.ask_category())
        enclosure = self.zoo.build_breeding_enclosure(name, climate, species)
        print(f"Breeding enclosure \"{enclosure.name}\" built for {species}.")
        return None

    def upgrade_enclosure(self):
        index = self.ask_enclosure("Enclosure to upgrade")
        enclosure = self.zoo.get_enclosure(index)
        if enclosure.upgrade_level >= C.MAX_UPGRADE_LEVEL:
            raise MaxLevelError("This enclosure is already fully upgraded.")
        print(f"Upgrade cost: {enclosure.upgrade_cost()}")
        print(f"Capacity: {enclosure.capacity} -> {enclosure.capacity + enclosure.capacity_step()}")
        self.zoo.upgrade_enclosure(index)
        print(f"Upgraded to level {enclosure.upgrade_level}.")
        return None

    def sell_enclosure(self):
        index = self.ask_enclosure("Enclosure to sell")
        enclosure = self.zoo.get_enclosure(index)
        print(f"You will get {enclosure.sell_value()} for this enclosure.")
        if self.ask_confirm(f"Sell \"{enclosure.name}\"?"):
            self.zoo.sell_enclosure(index)
            print("Enclosure sold.")
        else:
            print("Sale cancelled.")
        return None

    # -----------------------
    # Actions: staff
    # -----------------------
    def hire_employee(self):
        role = HIRABLE_ROLES[self.ask_option("Choose a position:", [label for _, label in HIRABLE_ROLES])][0]
        employee = self.zoo.hire_employee(role)
        print(f"Hired {employee.name} ({ROLE_LABELS[role]})")
        print(f"Wage: {employee.wage}, Efficiency: {employee.efficiency}")
        return None

    def list_employees(self):
        print("\n=== Employees ===")
        if not self.zoo.employees:
            print("No employees.")
            return None
        for i, e in enumerate(self.zoo.employees):
            print(f"{i}. {e.name} | Wage: {e.wage} | Role: {ROLE_LABELS[e.role]}")
        return None

    def fire_employee(self):
        if not self.zoo.employees:
            raise InvalidSelectionError("There are no employees to fire.")
        self.list_employees()
        index = self.ask_integer(f"Employee to fire (0-{len(self.zoo.employees) - 1}): ")
        employee = self.zoo.get_employee(index)
        if self.ask_confirm(f"Fire {employee.name}?"):
            self.zoo.fire_employee(index)
            print(f"{employee.name} was fired.")
        else:
            print("Firing cancelled.")
        return None
