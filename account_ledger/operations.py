"""
Operation Dispatcher Module

Validates and applies VIEW, CREDIT and DEBIT operations against the ledger
store. Every rejection is checked before any write, and no error escapes
execute(): callers always get an OperationOutcome back.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Callable, Optional
import logging

from .money import MAX_BALANCE, format_amount, parse_amount, round2
from .store import BalanceStore
from .logging_config import get_logger, log_operation


AmountProvider = Callable[[], str]


class OperationCode(Enum):
    """Operations the dispatcher understands"""
    VIEW = "view"
    CREDIT = "credit"
    DEBIT = "debit"


class LedgerOperationError(ValueError):
    """Base class for rejected operations; str() is the user-facing message"""
    message = "Operation rejected."

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)

    @property
    def kind(self) -> str:
        return type(self).__name__


class InvalidAmount(LedgerOperationError):
    message = "Invalid amount. Please enter a positive number."


class AmountTooLarge(LedgerOperationError):
    message = "Amount exceeds maximum allowed."


class ResultOverflow(LedgerOperationError):
    message = "Resulting balance exceeds maximum allowed."


class InsufficientFunds(LedgerOperationError):
    message = "Insufficient funds for this debit."


class UnknownOperation(LedgerOperationError):

    def __init__(self, code):
        name = code.name if isinstance(code, OperationCode) else code
        super().__init__(f"Unknown operation: {name}")


@dataclass(frozen=True)
class OperationOutcome:
    """Result of a single dispatched operation"""
    code: object
    message: str
    accepted: bool
    balance: Decimal
    error: Optional[str] = None

    def __str__(self) -> str:
        return self.message


class OperationDispatcher:
    """
    Applies ledger operations to a balance store

    The store is owned by the caller and injected here; amounts come from an
    amount provider so the dispatcher never touches the console itself.
    """

    def __init__(self, store: BalanceStore, logger: Optional[logging.Logger] = None):
        self.store = store
        self.logger = logger or get_logger()
        self._handlers = {
            OperationCode.VIEW: self._view,
            OperationCode.CREDIT: self._credit,
            OperationCode.DEBIT: self._debit,
        }

    @property
    def balance(self) -> Decimal:
        return self.store.read()

    def execute(self, code: OperationCode,
                amount_provider: Optional[AmountProvider] = None) -> OperationOutcome:
        """
        Execute one operation

        Args:
            code: Operation to run
            amount_provider: Callable returning the amount text; required for
                CREDIT and DEBIT, called at most once

        Returns:
            OperationOutcome with the user-facing message

        Raises:
            ValueError: If CREDIT or DEBIT is requested without an amount provider
        """
        handler = self._handlers.get(code) if isinstance(code, OperationCode) else None
        name = code.name if isinstance(code, OperationCode) else str(code)

        try:
            if handler is None:
                raise UnknownOperation(code)
            if code is not OperationCode.VIEW and amount_provider is None:
                raise ValueError(f"{name} requires an amount provider")
            message = handler(amount_provider)
        except LedgerOperationError as e:
            balance = self.store.read()
            log_operation(
                self.logger, "info", f"{name} rejected: {e}",
                operation=name, balance=format_amount(balance),
                outcome="rejected", error=e.kind
            )
            return OperationOutcome(code, str(e), False, balance, e.kind)

        balance = self.store.read()
        if code is not OperationCode.VIEW:
            log_operation(
                self.logger, "info", f"{name} applied",
                operation=name, balance=format_amount(balance), outcome="accepted"
            )
        return OperationOutcome(code, message, True, balance)

    def _read_amount(self, amount_provider: AmountProvider) -> Decimal:
        text = amount_provider()
        try:
            amount = parse_amount(text)
        except ValueError:
            self.logger.debug("Unparsable amount %r", text)
            raise InvalidAmount()
        if amount <= 0:
            raise InvalidAmount()
        return amount

    def _view(self, amount_provider: Optional[AmountProvider]) -> str:
        return f"Current balance: {format_amount(self.store.read())}"

    def _credit(self, amount_provider: AmountProvider) -> str:
        amount = self._read_amount(amount_provider)
        if amount > MAX_BALANCE:
            raise AmountTooLarge()

        # Bounds are checked on the rounded sum
        new_balance = round2(self.store.read() + amount)
        if new_balance > MAX_BALANCE:
            raise ResultOverflow()

        self.store.write(new_balance)
        return f"Amount credited. New balance: {format_amount(new_balance)}"

    def _debit(self, amount_provider: AmountProvider) -> str:
        amount = self._read_amount(amount_provider)
        balance = self.store.read()
        if amount > balance:
            raise InsufficientFunds()

        new_balance = round2(balance - amount)
        self.store.write(new_balance)
        return f"Amount debited. New balance: {format_amount(new_balance)}"
