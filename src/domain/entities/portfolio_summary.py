"""
Domain Entity: Portfolio Summary
Totals computed over mixed collections of accounts, shapes and employees
"""

from dataclasses import dataclass, field


@dataclass
class PortfolioSummary:
    """Result of summarizing a portfolio"""

    total_balance: float = 0.0
    total_interest: float = 0.0
    total_area: float = 0.0
    total_perimeter: float = 0.0
    total_bonus: float = 0.0
    account_kinds: dict[str, int] = field(default_factory=dict)
    shape_kinds: dict[str, int] = field(default_factory=dict)
    employee_roles: dict[str, int] = field(default_factory=dict)

    @property
    def account_count(self) -> int:
        return sum(self.account_kinds.values())

    @property
    def shape_count(self) -> int:
        return sum(self.shape_kinds.values())

    @property
    def employee_count(self) -> int:
        return sum(self.employee_roles.values())

    def to_dict(self) -> dict:
        """Convert to dictionary"""
        return {
            "accounts": {
                "count": self.account_count,
                "by_kind": dict(self.account_kinds),
                "total_balance": self.total_balance,
                "total_interest": self.total_interest,
            },
            "shapes": {
                "count": self.shape_count,
                "by_kind": dict(self.shape_kinds),
                "total_area": self.total_area,
                "total_perimeter": self.total_perimeter,
            },
            "employees": {
                "count": self.employee_count,
                "by_role": dict(self.employee_roles),
                "total_bonus": self.total_bonus,
            },
        }
