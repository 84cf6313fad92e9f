from typing import Callable, List, Optional


class HealthObserver:
    """
    Watches animals and narrates their health events (sickness, death,
    recovery, birth). Alerts go to ``sink`` when given, else to stdout.
    """

    def __init__(self, sink: Optional[Callable[[str], None]] = None):
        self.subscriptions = []
        self.alerts: List[str] = []
        self._sink = sink

    def subscribe(self, animal):
        if animal not in self.subscriptions:
            self.subscriptions.append(animal)
            animal._observers.append(self)

    def unsubscribe(self, animal):
        if animal in self.subscriptions:
            self.subscriptions.remove(animal)
            if self in animal._observers:
                animal._observers.remove(self)

    def notify(self, animal, message):
        alert = f"[ALERT] {animal.name} ({animal.species}): {message}"
        self.alerts.append(alert)
        if self._sink is not None:
            self._sink(alert)
        else:
            print(alert)
