from .account_kind import AccountKind
from .shape_kind import ShapeKind
from .employee_role import EmployeeRole

__all__ = ["AccountKind", "ShapeKind", "EmployeeRole"]
