class ZooError(Exception):
    """Base class for zoo game errors."""
    pass


class InsufficientFundsError(ZooError):
    pass


class InsufficientFoodError(ZooError):
    pass


class HabitatCapacityExceededError(ZooError):
    pass


class IncompatibleSpeciesError(ZooError):
    pass


class ClimateMismatchError(ZooError):
    pass


class PlacementError(ZooError):
    """Animal does not match an enclosure's category, species lock or predator flag."""
    pass


class InvalidSelectionError(ZooError):
    pass


class BreedingError(ZooError):
    pass


class SameGenderError(BreedingError):
    pass


class TooYoungError(BreedingError):
    pass


class SpeciesMismatchError(BreedingError):
    pass


class DailyPurchaseLimitError(ZooError):
    pass


class EnclosureNotEmptyError(ZooError):
    pass


class MaxLevelError(ZooError):
    pass


class StaffLimitError(ZooError):
    pass


class NoSickAnimalsError(ZooError):
    pass


class GameOverError(ZooError):
    pass
