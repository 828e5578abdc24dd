"""
Domain Entity: Employees
"""

from dataclasses import dataclass
from typing import ClassVar

from ..enums import EmployeeRole


@dataclass
class Employee:
    """Employee entity, all fields freely mutable"""

    name: str
    employee_id: int
    salary: float

    role: ClassVar[EmployeeRole] = EmployeeRole.STAFF
    BONUS_RATE: ClassVar[float] = 0.1

    def calculate_bonus(self) -> float:
        """Bonus as a share of salary"""
        return self.salary * self.BONUS_RATE

    def to_dict(self) -> dict:
        """Convert to dictionary"""
        return {
            "role": self.role.value,
            "name": self.name,
            "employee_id": self.employee_id,
            "salary": self.salary,
            "bonus": self.calculate_bonus(),
        }

    def __str__(self) -> str:
        return f"Employee{{id={self.employee_id}, name='{self.name}', salary={self.salary}}}"


@dataclass
class Manager(Employee):
    """Employee heading a department, with a 20% bonus"""

    department: str

    role: ClassVar[EmployeeRole] = EmployeeRole.MANAGER
    BONUS_RATE: ClassVar[float] = 0.2

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["department"] = self.department
        return data

    def __str__(self) -> str:
        return (
            f"Manager{{id={self.employee_id}, name='{self.name}', "
            f"salary={self.salary}, department='{self.department}'}}"
        )
