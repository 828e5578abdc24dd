"""Account Kind Enumeration

Tags the variants of the account family.
"""

from enum import Enum


class AccountKind(str, Enum):
    """Account variant

    BASIC: Plain account, earns no interest
    SAVINGS: Earns 5% interest, no overdraft
    CURRENT: Earns 2% interest, may overdraw down to its limit
    """

    BASIC = "basic"
    SAVINGS = "savings"
    CURRENT = "current"

    def __str__(self) -> str:
        return self.value
