"""
Game tuning constants.

Every number the simulation depends on lives here so balance changes
stay in one place.
"""

# -----------------------
# Economy
# -----------------------
STARTING_MONEY = 100000
STARTING_FOOD = 10
STARTING_POPULARITY = 50

BASE_FOOD_COST = 5
ADVERTISEMENT_COST = 1000
ADVERTISEMENT_POPULARITY_BOOST = 5
ADVERTISEMENT_VISITOR_BOOST = 10
SHOP_REFRESH_COST = 1000

BASE_ANIMAL_PRICE = 2000
MIN_ANIMAL_PRICE = 100
PRICE_WEIGHT_SCALE = 500

# -----------------------
# Enclosures
# -----------------------
BASE_ENCLOSURE_COST = 500
BREEDING_ENCLOSURE_COST = 800
STANDARD_CAPACITY = 2
BREEDING_CAPACITY = 3
STANDARD_DAILY_COST = 50
BREEDING_DAILY_COST = 80
MAX_UPGRADE_LEVEL = 5
UPGRADE_COST_PER_LEVEL = 200
UPGRADE_CAPACITY_STEP = 2
BREEDING_UPGRADE_CAPACITY_STEP = 3
UPGRADE_DAILY_COST_STEP = 20
ENCLOSURE_SELL_BASE = 300
ENCLOSURE_SELL_PER_LEVEL = 100
BREEDING_ENCLOSURE_SELL_BONUS = 200

DIRT_PER_DAY = 2
DIRT_THRESHOLD = 5
DISEASE_SPREAD_PER_DAY = 2

# -----------------------
# Staff
# -----------------------
MAX_EMPLOYEES = 5
DIRECTOR_NAME = "Director Egor"
DIRECTOR_WAGE = 100

DIRECTOR = 'director'
VETERINARIAN = 'veterinarian'
CLEANER = 'cleaner'
CARETAKER = 'caretaker'

# role -> ((min wage, max wage), (min efficiency, max efficiency))
HIRING_RANGES = {
    VETERINARIAN: ((60, 100), (50, 100)),
    CLEANER: ((40, 70), (70, 100)),
    CARETAKER: ((50, 100), (60, 100)),
}
STAFF_NAMES = ["Anna", "Boris", "Victoria", "Gleb", "Daria",
               "Egor", "Jeanne", "Irina", "Konstantin"]
VET_DAILY_TREATMENTS = 20

# -----------------------
# Animals
# -----------------------
MAX_AGE = 2000
OLD_AGE_THRESHOLD = 1000
MIN_BREEDING_AGE = 5
FOOD_PER_ANIMAL = 2

HEALTHY = 'healthy'
SICK = 'sick'
DEAD = 'dead'

PREDATOR = 'predator'
HERBIVORE = 'herbivore'

TROPIC = 'tropic'
CONTINENTAL = 'continental'
ARCTIC = 'arctic'
CLIMATES = (TROPIC, CONTINENTAL, ARCTIC)

GENDERS = ('M', 'F')

HUNGER_HAPPINESS_PENALTY = 15
SICKNESS_HAPPINESS_PENALTY = 20
DIRT_HAPPINESS_PENALTY = 10
CONTENT_HAPPINESS_GAIN = 5
UNHAPPY_THRESHOLD = 50

# category -> {species: is_predator}
SPECIES = {
    'Felines': {'Lion': True, 'Tiger': True, 'Leopard': True,
                'Lynx': True, 'Cheetah': True},
    'Canines': {'Dog': False, 'Wolf': True, 'Fox': True,
                'Jackal': True, 'Hyena': True},
    'Birds': {'Eagle': True, 'Parrot': False, 'Penguin': True,
              'Owl': True, 'Flamingo': False},
    'Reptiles': {'Snake': True, 'Turtle': False, 'Lizard': False,
                 'Crocodile': True, 'Dinosaur': True},
    'Marine': {'Dolphin': True, 'Shark': True, 'Molluscs': False,
               'Octopus': True, 'Whale': False},
}
CATEGORIES = tuple(SPECIES)
MARINE = 'Marine'

ANIMAL_NAMES = {
    'Felines': ["Ginger", "Stripes", "Spots", "Mane", "Claw"],
    'Canines': ["Bobik", "Sharik", "Rex", "Lord", "Tuzik"],
    'Birds': ["Wing", "Beak", "Feather", "Talon", "Birdie"],
    'Reptiles': ["Spike", "Scale", "Serpent", "Fang", "Tail"],
    'Marine': ["Wave", "Fin", "Bubble", "Shell", "Pearl"],
}
BABY_NAMES = ["Baby", "Tiny", "Little", "Wee", "Kiddo"]

# Chance (numerator, denominator) that a standard enclosure for a
# category ends up predator-only.
PREDATOR_ENCLOSURE_ODDS = {
    'Felines': (1, 1),
    'Canines': (4, 5),
    'Birds': (1, 3),
    'Reptiles': (1, 2),
    'Marine': (2, 3),
}

# -----------------------
# Turn engine
# -----------------------
WIN_DAY = 30
POPULARITY_MIN = 10
POPULARITY_MAX = 100
POPULARITY_SWING = 10
VISITORS_PER_POPULARITY = 2
DIRT_REVENUE_PENALTY = 2
DAILY_PURCHASE_LIMIT = 1
PURCHASE_LIMIT_AFTER_DAY = 10

SHOP_MIN_OFFERS = 5
SHOP_MAX_OFFERS = 10
SHOP_MIN_REFRESH_DAYS = 1
SHOP_MAX_REFRESH_DAYS = 3

ONGOING = 'ongoing'
BANKRUPT = 'bankrupt'
WON = 'won'
