"""Employee Role Enumeration"""

from enum import Enum


class EmployeeRole(str, Enum):
    """Employee variant

    STAFF: Regular employee, 10% bonus
    MANAGER: Department manager, 20% bonus
    """

    STAFF = "staff"
    MANAGER = "manager"

    def __str__(self) -> str:
        return self.value
