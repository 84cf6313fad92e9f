"""
The zoo aggregate and its turn engine.

``Zoo`` owns money, food, popularity, enclosures, staff and the animal
shop. Player actions are methods that either succeed or raise a
``ZooError`` without changing anything. ``advance_day`` resolves one full
turn and reports the outcome instead of ending the process.
"""

import random
from typing import List, Optional

from . import config as C
from .animals import Animal, category_of, is_predator_species
from .enclosure import Enclosure
from .exceptions import (DailyPurchaseLimitError, EnclosureNotEmptyError, GameOverError,
                         HabitatCapacityExceededError, InsufficientFoodError,
                         InsufficientFundsError, InvalidSelectionError, MaxLevelError,
                         NoSickAnimalsError, PlacementError, SpeciesMismatchError,
                         StaffLimitError)
from .finance import FinanceManager
from .observer import HealthObserver
from .shop import AnimalShop
from .staff import Employee, hire


def clean_name(text: str) -> str:
    """Collapse runs of whitespace and trim the ends."""
    return " ".join(text.split())


class DayReport:
    """Summary of one resolved day."""

    def __init__(self, day: int):
        self.day = day
        self.wage_cost = 0
        self.food_consumed = 0
        self.feeding_failed = False
        self.dirtiness = 0
        self.revenue = 0
        self.deaths: List[Animal] = []
        self.outcome = C.ONGOING

    @property
    def profit(self):
        return self.revenue - self.wage_cost

    def __repr__(self):
        return (f"DayReport(day={self.day}, cost={self.wage_cost}, food={self.food_consumed}, "
                f"dirtiness={self.dirtiness}, profit={self.profit}, outcome={self.outcome})")


class Zoo:
    """
    Main zoo class representing the whole zoo.
    """

    def __init__(self, name: str = "My Zoo", rng: Optional[random.Random] = None,
                 starting_money: int = C.STARTING_MONEY):
        self.name = name
        self.rng = rng if rng is not None else random.Random()
        self.finance_manager = FinanceManager(starting_balance=starting_money)
        self.food = C.STARTING_FOOD
        self.popularity = C.STARTING_POPULARITY
        self.visitors = 0
        self.day = 0
        self.days_survived = 0
        self.animals_bought_today = 0
        self.delegation_satisfied = False
        self.outcome = C.ONGOING
        self.enclosures: List[Enclosure] = []
        self.employees: List[Employee] = [Employee(C.DIRECTOR_NAME, C.DIRECTOR, C.DIRECTOR_WAGE)]
        self.event_log: List[str] = []
        self.observer = HealthObserver(sink=self.log_event)
        self.shop = AnimalShop(self.rng)
        self.shop.refresh()

    @property
    def money(self):
        return self.finance_manager.balance

    @money.setter
    def money(self, value):
        self.finance_manager.balance = value

    def log_event(self, text: str):
        print(f"[Day {self.day}] {text}")
        self.event_log.append(f"Day {self.day}: {text}")

    # -----------------------
    # Queries
    # -----------------------
    def all_animals(self) -> List[Animal]:
        return [a for enc in self.enclosures for a in enc.animals]

    def live_animal_count(self):
        return sum(enc.live_count() for enc in self.enclosures)

    def sick_animal_count(self):
        return sum(enc.sick_count() for enc in self.enclosures)

    def get_enclosure(self, index: int) -> Enclosure:
        if index < 0 or index >= len(self.enclosures):
            raise InvalidSelectionError("Invalid enclosure number.")
        return self.enclosures[index]

    def get_animal(self, enclosure: Enclosure, index: int) -> Animal:
        if index < 0 or index >= len(enclosure.animals):
            raise InvalidSelectionError("Invalid animal number.")
        return enclosure.animals[index]

    def get_employee(self, index: int) -> Employee:
        if index < 0 or index >= len(self.employees):
            raise InvalidSelectionError("Invalid employee number.")
        return self.employees[index]

    def employees_with_role(self, role: str) -> List[Employee]:
        return [e for e in self.employees if e.role == role]

    # -----------------------
    # Animals
    # -----------------------
    def check_placement(self, animal: Animal, enclosure: Enclosure):
        """Category, species-lock and predator checks made before insertion."""
        if enclosure.category != animal.category:
            raise PlacementError(f"{enclosure.name} is for {enclosure.category}, not {animal.category}.")
        if enclosure.species and enclosure.species != animal.species:
            raise PlacementError(f"{enclosure.name} is reserved for: {enclosure.species}")
        if enclosure.predator_only != animal.is_predator:
            kind = "for predators" if enclosure.predator_only else "not for predators"
            what = "a predator" if animal.is_predator else "not a predator"
            raise PlacementError(f"{enclosure.name} is {kind}, and {animal.name} is {what}.")

    def buy_animal(self, offer_index: int, enclosure_index: int) -> Animal:
        if (self.days_survived >= C.PURCHASE_LIMIT_AFTER_DAY
                and self.animals_bought_today >= C.DAILY_PURCHASE_LIMIT):
            raise DailyPurchaseLimitError(
                f"After day {C.PURCHASE_LIMIT_AFTER_DAY} you can buy at most "
                f"{C.DAILY_PURCHASE_LIMIT} animal per day.")
        animal = self.shop.get(offer_index)
        if not self.finance_manager.can_afford(animal.price):
            raise InsufficientFundsError("Not enough money to buy this animal.")
        if self.food < 1:
            raise InsufficientFoodError("Not enough food for a new animal.")
        enclosure = self.get_enclosure(enclosure_index)
        self.check_placement(animal, enclosure)
        enclosure.add_animal(animal)

        self.shop.take(offer_index)
        self.finance_manager.add_expense(animal.price, f"Bought animal {animal.name} ({animal.species})")
        self.food -= 1
        self.animals_bought_today += 1
        self.observer.subscribe(animal)
        self.log_event(f"Bought {animal.name} the {animal.species} for ${animal.price} "
                       f"and placed it in {enclosure.name}")
        self.check_delegation()
        return animal

    def sell_animal(self, enclosure_index: int, animal_index: int) -> int:
        enclosure = self.get_enclosure(enclosure_index)
        animal = self.get_animal(enclosure, animal_index)
        refund = animal.price // 2
        enclosure.remove_animal(animal)
        self.observer.unsubscribe(animal)
        self.finance_manager.add_income(refund, f"Sold animal {animal.name}")
        self.log_event(f"Sold {animal.name} the {animal.species} for ${refund}")
        self.check_delegation()
        return refund

    def move_animal(self, source_index: int, animal_index: int, destination_index: int) -> Animal:
        if len(self.enclosures) < 2:
            raise InvalidSelectionError("You need at least two enclosures to move animals.")
        source = self.get_enclosure(source_index)
        animal = self.get_animal(source, animal_index)
        destination = self.get_enclosure(destination_index)
        if source is destination:
            raise InvalidSelectionError("Cannot move an animal into the same enclosure.")
        self.check_placement(animal, destination)
        destination.add_animal(animal)
        source.remove_animal(animal)
        self.log_event(f"Moved {animal.name} from {source.name} to {destination.name}")
        self.check_delegation()
        return animal

    def rename_animal(self, enclosure_index: int, animal_index: int, new_name: str) -> Animal:
        enclosure = self.get_enclosure(enclosure_index)
        animal = self.get_animal(enclosure, animal_index)
        new_name = clean_name(new_name)
        if not new_name:
            raise InvalidSelectionError("Name cannot be empty.")
        old_name, animal.name = animal.name, new_name
        self.log_event(f"{old_name} is now called {new_name}")
        return animal

    def breed_animals(self, enclosure_index: int, first_index: int, second_index: int) -> Animal:
        enclosure = self.get_enclosure(enclosure_index)
        if len(enclosure.animals) < 2:
            raise InvalidSelectionError("An enclosure needs at least two animals for breeding.")
        if enclosure.breeding and enclosure.species:
            if any(a.species != enclosure.species for a in enclosure.animals):
                raise SpeciesMismatchError(f"Only {enclosure.species} can breed in this enclosure.")
        first = self.get_animal(enclosure, first_index)
        second = self.get_animal(enclosure, second_index)
        if first is second:
            raise InvalidSelectionError("An animal cannot breed with itself.")
        if not first.is_alive() or not second.is_alive():
            raise InvalidSelectionError("Dead animals cannot breed.")
        if first.species != second.species:
            raise SpeciesMismatchError("Both animals must be of the same species.")

        baby = first.breed_with(second, self.rng)
        if enclosure.is_full():
            raise HabitatCapacityExceededError("No room in the enclosure for the offspring.")
        enclosure.add_animal(baby)
        self.observer.subscribe(baby)
        self.observer.notify(baby, f"Born in {enclosure.name} ({baby.sex}, {baby.weight}kg).")
        return baby

    def treat_sick_animals(self) -> List[Animal]:
        """
        Every rested veterinarian heals up to a day's worth of sick animals.
        A vet facing a big caseload is tired for the rest of the day.
        """
        sick_total = self.sick_animal_count()
        if sick_total == 0:
            raise NoSickAnimalsError("There are no sick animals.")

        healed = []
        for vet in self.employees_with_role(C.VETERINARIAN):
            if not vet.is_available():
                continue
            if sick_total >= C.VET_DAILY_TREATMENTS:
                vet.tired = True
            self.log_event(f"Veterinarian {vet.name} started treating animals")
            treated = 0
            for animal in self.all_animals():
                if treated >= C.VET_DAILY_TREATMENTS:
                    break
                if animal.is_sick():
                    animal.state = C.HEALTHY
                    healed.append(animal)
                    treated += 1
            sick_total = self.sick_animal_count()
            if sick_total == 0:
                self.log_event("All animals are healthy!")
                return healed

        self.log_event(f"{sick_total} animals are still sick")
        return healed

    def remove_dead_animals(self) -> List[Animal]:
        removed = []
        for enclosure in self.enclosures:
            for animal in [a for a in enclosure.animals if not a.is_alive()]:
                enclosure.remove_animal(animal)
                self.observer.unsubscribe(animal)
                removed.append(animal)
        if removed:
            self.log_event(f"Removed {len(removed)} dead animals")
            self.check_delegation()
        return removed

    # -----------------------
    # Purchases
    # -----------------------
    def buy_food(self, amount: int) -> int:
        if amount <= 0:
            raise InvalidSelectionError("Amount must be positive.")
        cost = amount * C.BASE_FOOD_COST
        self.finance_manager.add_expense(cost, f"Bought {amount} food")
        self.food += amount
        self.log_event(f"Purchased {amount} food for ${cost}")
        return cost

    def advertise(self):
        self.finance_manager.add_expense(C.ADVERTISEMENT_COST, "Advertising campaign")
        self.popularity = min(C.POPULARITY_MAX, self.popularity + C.ADVERTISEMENT_POPULARITY_BOOST)
        self.visitors += C.ADVERTISEMENT_VISITOR_BOOST
        self.log_event(f"Advertising campaign: popularity +{C.ADVERTISEMENT_POPULARITY_BOOST}, "
                       f"visitors +{C.ADVERTISEMENT_VISITOR_BOOST}")

    def refresh_shop(self):
        self.finance_manager.add_expense(C.SHOP_REFRESH_COST, "Animal shop refresh")
        self.shop.refresh()
        self.log_event("The animal shop has new stock!")

    # -----------------------
    # Enclosures
    # -----------------------
    def build_enclosure(self, name: str, climate: str, category: str) -> Enclosure:
        if category not in C.SPECIES or climate not in C.CLIMATES:
            raise InvalidSelectionError("Unknown climate or animal category.")
        self.finance_manager.add_expense(C.BASE_ENCLOSURE_COST, f"Built enclosure {name}")
        chance, out_of = C.PREDATOR_ENCLOSURE_ODDS[category]
        predator_only = self.rng.randrange(out_of) < chance
        enclosure = Enclosure(name, C.STANDARD_CAPACITY, climate, category,
                              predator_only=predator_only, daily_cost=C.STANDARD_DAILY_COST)
        self.enclosures.append(enclosure)
        self.log_event(f"Enclosure {name} built ({'for' if predator_only else 'not for'} predators)")
        self.check_delegation()
        return enclosure

    def build_breeding_enclosure(self, name: str, climate: str, species: str) -> Enclosure:
        if climate not in C.CLIMATES:
            raise InvalidSelectionError("Unknown climate.")
        category = category_of(species)
        self.finance_manager.add_expense(C.BREEDING_ENCLOSURE_COST, f"Built breeding enclosure {name}")
        enclosure = Enclosure(name, C.BREEDING_CAPACITY, climate, category,
                              predator_only=is_predator_species(species), species=species,
                              breeding=True, daily_cost=C.BREEDING_DAILY_COST)
        self.enclosures.append(enclosure)
        self.log_event(f"Breeding enclosure {name} built for {species}")
        self.check_delegation()
        return enclosure

    def upgrade_enclosure(self, index: int) -> int:
        enclosure = self.get_enclosure(index)
        if enclosure.upgrade_level >= C.MAX_UPGRADE_LEVEL:
            raise MaxLevelError("This enclosure is already fully upgraded.")
        cost = enclosure.upgrade_cost()
        self.finance_manager.add_expense(cost, f"Upgraded enclosure {enclosure.name}")
        enclosure.upgrade()
        self.log_event(f"{enclosure.name} upgraded to level {enclosure.upgrade_level}, "
                       f"capacity {enclosure.capacity}")
        return cost

    def sell_enclosure(self, index: int) -> int:
        enclosure = self.get_enclosure(index)
        if enclosure.animals:
            raise EnclosureNotEmptyError(
                "Cannot sell an enclosure with animals in it. Move or sell them first.")
        payout = enclosure.sell_value()
        self.enclosures.remove(enclosure)
        self.finance_manager.add_income(payout, f"Sold enclosure {enclosure.name}")
        self.log_event(f"Sold enclosure {enclosure.name} for ${payout}")
        self.check_delegation()
        return payout

    # -----------------------
    # Staff
    # -----------------------
    def hire_employee(self, role: str) -> Employee:
        if len(self.employees) >= C.MAX_EMPLOYEES:
            raise StaffLimitError(f"Maximum number of employees reached ({C.MAX_EMPLOYEES}).")
        employee = hire(role, self.rng)
        self.employees.append(employee)
        self.log_event(f"Hired {employee.name} as {role} "
                       f"(wage {employee.wage}, efficiency {employee.efficiency})")
        return employee

    def fire_employee(self, index: int) -> Employee:
        employee = self.get_employee(index)
        self.employees.remove(employee)
        self.log_event(f"{employee.name} was fired")
        return employee

    def check_delegation(self):
        has_marine_enclosure = any(enc.category == C.MARINE for enc in self.enclosures)
        has_marine_animals = any(a.category == C.MARINE and a.is_alive() for a in self.all_animals())
        satisfied = has_marine_enclosure and has_marine_animals
        if satisfied and not self.delegation_satisfied:
            self.log_event("The TOI-1452 b delegation is taking an interest in your zoo: "
                           "they see you care for marine species.")
        self.delegation_satisfied = satisfied
        return satisfied

    # -----------------------
    # Turn engine
    # -----------------------
    def advance_day(self) -> DayReport:
        if self.outcome != C.ONGOING:
            raise GameOverError(f"The game is over ({self.outcome}).")

        self.day += 1
        self.days_survived += 1
        self.animals_bought_today = 0
        report = DayReport(self.day)

        for employee in self.employees:
            employee.new_day()

        report.wage_cost = sum(e.wage for e in self.employees)
        self.finance_manager.force_expense(report.wage_cost, "Wages")
        self.log_event(f"Wages paid: {report.wage_cost}")

        total_animals = self.live_animal_count()
        total_sick = self.sick_animal_count()

        self._feed_animals(total_animals, report)

        for enclosure in self.enclosures:
            enclosure.daily_maintenance()

        report.dirtiness = self._clean_enclosures()
        self.log_event(f"Zoo dirtiness: {report.dirtiness}")

        self._sickness_tick()
        report.deaths.extend(self._epidemic_deaths())

        self.visitors = C.VISITORS_PER_POPULARITY * self.popularity
        report.revenue = self.visitors * total_animals - report.dirtiness * C.DIRT_REVENUE_PENALTY
        if report.revenue >= 0:
            self.finance_manager.add_income(report.revenue, "Daily visitors")
        else:
            self.finance_manager.force_expense(-report.revenue, "Dirty zoo penalty")
        self.log_event(f"Profit = {report.profit}")

        self.popularity += self.rng.randint(-C.POPULARITY_SWING, C.POPULARITY_SWING)
        self.popularity -= total_sick
        self.popularity = max(C.POPULARITY_MIN, min(C.POPULARITY_MAX, self.popularity))

        report.deaths.extend(self._age_animals())
        self._update_happiness()
        if self.shop.tick():
            self.log_event("The animal shop has new stock!")
        self.check_delegation()

        if self.money < 0:
            self.outcome = C.BANKRUPT
            self.log_event(f"!!! YOU ARE BANKRUPT !!! You lasted {self.day} days.")
        elif self.day >= C.WIN_DAY:
            self.outcome = C.WON
            self.log_event(f"=== VICTORY! === You ran the zoo for {C.WIN_DAY} days!")
        report.outcome = self.outcome
        return report

    def _feed_animals(self, total_animals: int, report: DayReport):
        needed = total_animals * C.FOOD_PER_ANIMAL
        live = [a for a in self.all_animals() if a.is_alive()]
        if self.food >= needed:
            self.food -= needed
            report.food_consumed = needed
            for animal in live:
                animal.hungry = False
            self.log_event(f"Animals fed: {needed} food")
            return

        report.feeding_failed = True
        self.log_event("Not enough food for the animals!")
        for animal in live:
            animal.hungry = True
            if self.rng.randrange(10) == 0:
                animal.state = C.DEAD
                report.deaths.append(animal)

    def _clean_enclosures(self) -> int:
        cleaners = len(self.employees_with_role(C.CLEANER))
        total_dirt = 0
        for enclosure in self.enclosures:
            if enclosure.needs_cleaning() and cleaners > 0:
                enclosure.clean()
                cleaners -= 1
            total_dirt += enclosure.dirtiness
        return total_dirt

    def _sickness_tick(self):
        for animal in self.all_animals():
            if animal.is_alive() and self.rng.randrange(10) == 0:
                animal.state = C.SICK

    def _epidemic_deaths(self) -> List[Animal]:
        deaths = []
        for enclosure in self.enclosures:
            live = enclosure.live_count()
            sick = enclosure.sick_count()
            if live - sick < sick:
                for animal in enclosure.animals:
                    if animal.is_sick() and self.rng.randrange(2) == 0:
                        animal.state = C.DEAD
                        deaths.append(animal)
        return deaths

    def _age_animals(self) -> List[Animal]:
        deaths = []
        for animal in self.all_animals():
            if not animal.is_alive():
                continue
            animal.age += 1
            if animal.age > C.OLD_AGE_THRESHOLD:
                chance = min(99, (animal.age - C.OLD_AGE_THRESHOLD) // 10)
                if self.rng.randrange(100) < chance:
                    animal.state = C.DEAD
                    deaths.append(animal)
                    self.log_event(f"{animal.name} ({animal.species}) died of old age "
                                   f"at {animal.age} days.")
        return deaths

    def _update_happiness(self):
        for enclosure in self.enclosures:
            for animal in enclosure.live_animals():
                content = True
                if animal.hungry:
                    animal.happiness -= C.HUNGER_HAPPINESS_PENALTY
                    content = False
                if animal.is_sick():
                    animal.happiness -= C.SICKNESS_HAPPINESS_PENALTY
                    content = False
                if enclosure.is_dirty:
                    animal.happiness -= C.DIRT_HAPPINESS_PENALTY
                    content = False
                if content:
                    animal.happiness += C.CONTENT_HAPPINESS_GAIN
                animal.unhappy = animal.happiness < C.UNHAPPY_THRESHOLD
