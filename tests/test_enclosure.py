import pytest

from zoogame import config as C
from zoogame.enclosure import Enclosure
from zoogame.exceptions import (ClimateMismatchError, HabitatCapacityExceededError,
                                IncompatibleSpeciesError, MaxLevelError)


def test_insertion_rules(make_animal):
    enclosure = Enclosure("Tropic house", 2, C.TROPIC, 'Canines')
    enclosure.add_animal(make_animal('Dog', climate=C.TROPIC))

    with pytest.raises(IncompatibleSpeciesError):
        enclosure.add_animal(make_animal('Wolf', climate=C.TROPIC))
    with pytest.raises(ClimateMismatchError):
        enclosure.add_animal(make_animal('Dog', climate=C.ARCTIC))
    assert len(enclosure.animals) == 1

    enclosure.add_animal(make_animal('Dog', climate=C.TROPIC))
    assert len(enclosure.animals) == 2

    with pytest.raises(HabitatCapacityExceededError):
        enclosure.add_animal(make_animal('Dog', climate=C.TROPIC))
    assert len(enclosure.animals) == 2


def test_empty_enclosure_accepts_any_diet(make_animal):
    enclosure = Enclosure("Pen", 2, C.ARCTIC, 'Birds')
    enclosure.add_animal(make_animal('Penguin', climate=C.ARCTIC))
    assert enclosure.animals[0].diet == C.PREDATOR


def test_occupants_share_diet_and_climate(make_animal):
    enclosure = Enclosure("Mixed", 10, C.CONTINENTAL, 'Reptiles')
    candidates = [make_animal(species, climate=climate)
                  for species in ('Snake', 'Turtle', 'Crocodile', 'Lizard')
                  for climate in C.CLIMATES]
    for animal in candidates:
        try:
            enclosure.add_animal(animal)
        except (IncompatibleSpeciesError, ClimateMismatchError):
            pass
    assert len(enclosure.animals) == 2
    assert {a.diet for a in enclosure.animals} == {C.PREDATOR}
    assert {a.climate for a in enclosure.animals} == {C.CONTINENTAL}


def test_disease_spreads_to_at_most_two(make_animal, make_enclosure):
    enclosure = make_enclosure(capacity=6)
    for _ in range(6):
        enclosure.add_animal(make_animal())
    enclosure.animals[3].state = C.SICK

    infected = enclosure.daily_maintenance()

    assert infected == enclosure.animals[:2]
    assert enclosure.sick_count() == 3
    assert enclosure.dirtiness == C.DIRT_PER_DAY


def test_no_spread_without_sickness(make_animal, make_enclosure):
    enclosure = make_enclosure()
    enclosure.add_animal(make_animal())
    enclosure.add_animal(make_animal())
    assert enclosure.daily_maintenance() == []
    assert enclosure.sick_count() == 0


def test_spread_skips_dead_animals(make_animal, make_enclosure):
    enclosure = make_enclosure()
    for _ in range(3):
        enclosure.add_animal(make_animal())
    enclosure.animals[0].state = C.DEAD
    enclosure.animals[1].state = C.SICK
    enclosure.daily_maintenance()
    assert enclosure.animals[0].state == C.DEAD
    assert enclosure.animals[2].state == C.SICK


def test_counts_ignore_dead(make_animal, make_enclosure):
    enclosure = make_enclosure()
    for state in (C.HEALTHY, C.SICK, C.DEAD):
        animal = make_animal()
        animal.state = state
        enclosure.add_animal(animal)
    assert enclosure.live_count() == 2
    assert enclosure.sick_count() == 1


def test_cleaning(make_enclosure):
    enclosure = make_enclosure()
    enclosure.dirtiness = C.DIRT_THRESHOLD
    assert not enclosure.needs_cleaning()
    enclosure.dirtiness += 1
    assert enclosure.is_dirty
    enclosure.clean()
    assert enclosure.dirtiness == 0
    assert not enclosure.is_dirty


def test_upgrade_standard(make_enclosure):
    enclosure = make_enclosure(capacity=2)
    assert enclosure.upgrade_cost() == 200
    enclosure.upgrade()
    assert enclosure.upgrade_level == 2
    assert enclosure.capacity == 4
    assert enclosure.daily_cost == C.STANDARD_DAILY_COST + 20
    assert enclosure.upgrade_cost() == 400


def test_upgrade_breeding_and_max_level(make_enclosure):
    enclosure = make_enclosure(capacity=3, breeding=True, species='Lion')
    for _ in range(4):
        enclosure.upgrade()
    assert enclosure.upgrade_level == C.MAX_UPGRADE_LEVEL
    assert enclosure.capacity == 3 + 4 * 3
    with pytest.raises(MaxLevelError):
        enclosure.upgrade()


def test_sell_value(make_enclosure):
    assert make_enclosure().sell_value() == 300
    enclosure = make_enclosure(breeding=True, upgrade_level=3)
    assert enclosure.sell_value() == 300 + 200 + 200
