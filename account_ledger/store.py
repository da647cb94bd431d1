"""
Ledger Store Module

Holds the single account balance. Values are rounded to two decimal places
on write; bounds are enforced by the caller, not here.
"""

from abc import ABC, abstractmethod
from decimal import Decimal

from .money import Numeric, round2


DEFAULT_INITIAL_BALANCE = Decimal('1000.00')


class BalanceStore(ABC):
    """Abstract interface for balance storage"""

    @abstractmethod
    def read(self) -> Decimal:
        """Return the current balance"""
        pass

    @abstractmethod
    def write(self, value: Numeric) -> None:
        """Replace the current balance"""
        pass


class InMemoryBalanceStore(BalanceStore):
    """In-memory balance for the lifetime of the process"""

    def __init__(self, initial_balance: Numeric = DEFAULT_INITIAL_BALANCE):
        self._balance = round2(initial_balance)

    def read(self) -> Decimal:
        return self._balance

    def write(self, value: Numeric) -> None:
        self._balance = round2(value)

    def __repr__(self) -> str:
        return f"InMemoryBalanceStore(balance={self._balance})"
