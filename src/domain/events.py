"""
Domain Events
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class OverdraftUsed:
    """Emitted when a withdrawal leaves a current account below zero"""

    account_number: str
    amount_overdrawn: float
    balance: float

    def to_dict(self) -> dict:
        """Convert to dictionary"""
        return {
            "account_number": self.account_number,
            "amount_overdrawn": self.amount_overdrawn,
            "balance": self.balance,
        }
