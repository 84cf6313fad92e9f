from .exceptions import InsufficientFundsError


class FinanceManager:
    """
    Keeps the zoo's balance along with a history of what came in and went out.
    """

    def __init__(self, starting_balance: int = 0):
        self.balance = starting_balance
        self.income_history = []
        self.expense_history = []

    def can_afford(self, amount: int) -> bool:
        return self.balance >= amount

    def add_income(self, amount: int, reason: str = ""):
        self.balance += amount
        self.income_history.append((amount, reason))

    def add_expense(self, amount: int, reason: str = ""):
        if amount > self.balance:
            raise InsufficientFundsError("Not enough money.")
        self.balance -= amount
        self.expense_history.append((amount, reason))

    def force_expense(self, amount: int, reason: str = ""):
        """Bills that must be paid even when they push the balance below zero."""
        self.balance -= amount
        self.expense_history.append((amount, reason))
