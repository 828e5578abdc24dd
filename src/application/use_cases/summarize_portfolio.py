"""
Application Use Case: Summarize Portfolio
Aggregates interest, geometry and bonuses over mixed variants
"""

import logging
from collections import Counter
from typing import Iterable

from domain.entities import BankAccount, Employee, PortfolioSummary, Shape

logger = logging.getLogger(__name__)


class SummarizePortfolioUseCase:
    """
    Use case for totalling a collection of entities.

    Every figure comes from the shared capability set of each family, so
    any variant can be mixed into the inputs.
    """

    def execute(
        self,
        accounts: Iterable[BankAccount] = (),
        shapes: Iterable[Shape] = (),
        employees: Iterable[Employee] = ()
    ) -> PortfolioSummary:
        """
        Build a summary of the given entities

        Args:
            accounts: Any mix of account variants
            shapes: Any mix of shape variants
            employees: Employees and managers

        Returns:
            PortfolioSummary with totals and counts per variant
        """
        summary = PortfolioSummary()
        account_kinds = Counter()
        shape_kinds = Counter()
        employee_roles = Counter()

        for account in accounts:
            summary.total_balance += account.balance
            summary.total_interest += account.calculate_interest()
            account_kinds[account.kind.value] += 1

        for shape in shapes:
            summary.total_area += shape.calculate_area()
            summary.total_perimeter += shape.calculate_perimeter()
            shape_kinds[shape.kind.value] += 1

        for employee in employees:
            summary.total_bonus += employee.calculate_bonus()
            employee_roles[employee.role.value] += 1

        summary.account_kinds = dict(account_kinds)
        summary.shape_kinds = dict(shape_kinds)
        summary.employee_roles = dict(employee_roles)

        logger.debug(
            f"[summarize] accounts={summary.account_count} "
            f"shapes={summary.shape_count} employees={summary.employee_count}"
        )
        return summary
