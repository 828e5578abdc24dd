"""
Domain Entity: Bank Accounts
Account family sharing the deposit/withdraw/calculate_interest capability set
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from domain.enums import AccountKind
from domain.events import OverdraftUsed
from domain.exceptions import InvalidArgumentError
from domain.ports.overdraft_notifier import IOverdraftNotifier

logger = logging.getLogger(__name__)


class BankAccount(ABC):
    """
    Base of the account family.

    The balance is only readable from outside; it changes through
    deposit/withdraw, and variants adjust it with _set_balance.
    """

    kind: AccountKind

    def __init__(self, number: str, holder: str, initial_balance: float):
        self._number = number
        self._holder = holder
        self._balance = float(initial_balance)

    @property
    def number(self) -> str:
        return self._number

    @property
    def holder(self) -> str:
        return self._holder

    @property
    def balance(self) -> float:
        return self._balance

    def _set_balance(self, balance: float) -> None:
        self._balance = balance

    def deposit(self, amount: float) -> None:
        """
        Add funds to the account

        Raises:
            InvalidArgumentError: if amount is not positive
        """
        if not amount > 0:
            raise InvalidArgumentError(
                "Deposit amount must be positive",
                details={"account_number": self._number, "amount": amount},
            )
        self._balance += amount
        logger.debug(f"[deposit] account={self._number} amount={amount} balance={self._balance}")

    def withdraw(self, amount: float) -> None:
        """
        Take funds out of the account, never below zero

        Raises:
            InvalidArgumentError: if amount is not positive or exceeds the balance
        """
        if not amount > 0 or amount > self._balance:
            raise InvalidArgumentError(
                "Invalid withdrawal amount",
                details={"account_number": self._number, "amount": amount, "balance": self._balance},
            )
        self._balance -= amount
        logger.debug(f"[withdraw] account={self._number} amount={amount} balance={self._balance}")

    @abstractmethod
    def calculate_interest(self) -> float:
        """Interest earned on the current balance"""
        pass

    def to_dict(self) -> dict:
        """Convert to dictionary"""
        return {
            "kind": self.kind.value,
            "number": self._number,
            "holder": self._holder,
            "balance": self._balance,
            "interest": self.calculate_interest(),
        }

    def __str__(self) -> str:
        return f"Account: {self._number}, Holder: {self._holder}, Balance: {self._balance}"

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(number={self._number!r}, "
            f"holder={self._holder!r}, balance={self._balance!r})"
        )


class Account(BankAccount):
    """Plain account without interest"""

    kind = AccountKind.BASIC

    def calculate_interest(self) -> float:
        return 0.0


class SavingsAccount(BankAccount):
    """Account earning 5% interest"""

    kind = AccountKind.SAVINGS
    INTEREST_RATE = 0.05

    def calculate_interest(self) -> float:
        return self._balance * self.INTEREST_RATE

    def add_interest(self) -> None:
        """Deposit the interest earned into this account"""
        interest = self.calculate_interest()
        self.deposit(interest)
        logger.debug(f"[add_interest] account={self._number} interest={interest}")


class CurrentAccount(BankAccount):
    """
    Account earning 2% interest that may overdraw down to -overdraft_limit.

    A withdrawal leaving the balance negative is reported to the notifier
    as an OverdraftUsed event, or logged as a warning when there is none.
    """

    kind = AccountKind.CURRENT
    INTEREST_RATE = 0.02

    def __init__(
        self,
        number: str,
        holder: str,
        initial_balance: float,
        overdraft_limit: float,
        notifier: Optional[IOverdraftNotifier] = None
    ):
        super().__init__(number, holder, initial_balance)
        self._overdraft_limit = float(overdraft_limit)
        self._notifier = notifier

    @property
    def overdraft_limit(self) -> float:
        return self._overdraft_limit

    @property
    def available_funds(self) -> float:
        """Balance plus the unused part of the overdraft"""
        return self._balance + self._overdraft_limit

    def calculate_interest(self) -> float:
        return self._balance * self.INTEREST_RATE

    def withdraw(self, amount: float) -> None:
        """
        Take funds out of the account, using the overdraft if needed

        Raises:
            InvalidArgumentError: if amount is not positive or exceeds
                balance plus overdraft limit
        """
        if not amount > 0 or self.available_funds < amount:
            raise InvalidArgumentError(
                "Withdrawal exceeds available balance and overdraft limit",
                details={
                    "account_number": self._number,
                    "amount": amount,
                    "available_funds": self.available_funds,
                },
            )

        new_balance = self._balance - amount
        self._set_balance(new_balance)
        logger.debug(f"[withdraw] account={self._number} amount={amount} balance={new_balance}")

        if new_balance < 0:
            if self._notifier is None:
                logger.warning(f"Overdraft used: {abs(new_balance)} (account={self._number})")
            else:
                self._notifier.notify(
                    OverdraftUsed(
                        account_number=self._number,
                        amount_overdrawn=abs(new_balance),
                        balance=new_balance,
                    )
                )

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["overdraft_limit"] = self._overdraft_limit
        return data
