from zoogame import config as C
from zoogame.app import ZooApp
from zoogame.zoo import Zoo


def scripted(*answers):
    replies = iter(answers)
    return lambda prompt: next(replies)


def test_non_numeric_input_reprompts(high_rng, capsys):
    zoo = Zoo(rng=high_rng)
    outcome = ZooApp(zoo, scripted("abc", "9", "6")).run()

    out = capsys.readouterr().out
    assert "Error: enter a number." in out
    assert "Invalid choice." in out
    assert outcome == C.ONGOING


def test_next_day_to_victory(high_rng, capsys):
    zoo = Zoo(rng=high_rng)
    zoo.employees = []
    zoo.day = 29

    outcome = ZooApp(zoo, scripted("5")).run()

    assert outcome == C.WON
    out = capsys.readouterr().out
    assert "=== Day 30 summary ===" in out
    assert "=== VICTORY! ===" in out


def test_next_day_to_bankruptcy(high_rng, capsys):
    zoo = Zoo(rng=high_rng)
    zoo.money = 5

    assert ZooApp(zoo, scripted("5")).run() == C.BANKRUPT
    assert "!!! YOU ARE BANKRUPT !!!" in capsys.readouterr().out


def test_domain_errors_are_reported(high_rng, capsys):
    zoo = Zoo(rng=high_rng)
    zoo.money = 10

    ZooApp(zoo, scripted("2", "2", "3", "6")).run()

    assert "Error: Not enough money" in capsys.readouterr().out
    assert zoo.money == 10
    assert zoo.popularity == C.STARTING_POPULARITY


def test_actions_without_enclosures(high_rng, capsys):
    zoo = Zoo(rng=high_rng)
    ZooApp(zoo, scripted("1", "2", "11", "6")).run()
    assert "Error: There are no enclosures." in capsys.readouterr().out


def test_build_enclosure_from_menu(high_rng, capsys):
    zoo = Zoo(rng=high_rng)

    ZooApp(zoo, scripted("3", "1", "Savanna", "7", "1", "1", "6", "6")).run()

    out = capsys.readouterr().out
    assert "Error: enter a number between 1 and 3." in out
    assert len(zoo.enclosures) == 1
    enclosure = zoo.enclosures[0]
    assert enclosure.name == "Savanna"
    assert enclosure.climate == C.TROPIC
    assert enclosure.category == 'Felines'
    assert zoo.money == C.STARTING_MONEY - C.BASE_ENCLOSURE_COST


def test_buy_animal_from_menu(low_rng, capsys):
    zoo = Zoo(rng=low_rng)
    script = scripted("3", "1", "Cats", "1", "1", "6",
                      "1", "1", "0", "0", "11", "6")

    ZooApp(zoo, script).run()

    assert len(zoo.enclosures[0].animals) == 1
    assert 'Lion "Ginger 0" bought.' in capsys.readouterr().out


def test_buy_animal_can_be_cancelled(low_rng):
    zoo = Zoo(rng=low_rng)
    ZooApp(zoo, scripted("1", "1", "-1", "11", "6")).run()
    assert len(zoo.shop.available) == 5
    assert zoo.money == C.STARTING_MONEY


def test_hire_from_menu(low_rng, capsys):
    zoo = Zoo(rng=low_rng)

    ZooApp(zoo, scripted("4", "1", "1", "2", "4", "6")).run()

    out = capsys.readouterr().out
    assert "Hired Anna (Veterinarian)" in out
    assert "Anna | Wage: 60 | Role: Veterinarian" in out
    assert len(zoo.employees) == 2


def test_upgrade_at_max_level_skips_preview(high_rng, capsys):
    zoo = Zoo(rng=high_rng)
    enclosure = zoo.build_enclosure("Cats", C.TROPIC, 'Felines')
    enclosure.upgrade_level = C.MAX_UPGRADE_LEVEL
    capsys.readouterr()

    ZooApp(zoo, scripted("3", "3", "0", "6", "6")).run()

    out = capsys.readouterr().out
    assert "Error: This enclosure is already fully upgraded." in out
    assert "Upgrade cost" not in out


def test_entered_names_are_tidied(high_rng):
    zoo = Zoo(rng=high_rng)
    ZooApp(zoo, scripted("3", "1", "  Big   Cats ", "1", "1", "6", "6")).run()
    assert zoo.enclosures[0].name == "Big Cats"
