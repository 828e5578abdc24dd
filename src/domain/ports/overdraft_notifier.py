"""
Port: Overdraft Notifier Interface
Defines contract for receiving overdraft notices from current accounts
"""

from abc import ABC, abstractmethod
from domain.events import OverdraftUsed


class IOverdraftNotifier(ABC):
    """Interface for overdraft notices"""

    @abstractmethod
    def notify(self, event: OverdraftUsed) -> None:
        """
        Receive a notice that an account went below zero

        Args:
            event: OverdraftUsed with the account number, the overdrawn
                amount and the resulting balance
        """
        pass
