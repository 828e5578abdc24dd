from .account import BankAccount, Account, SavingsAccount, CurrentAccount
from .shape import Shape, Circle, Rectangle
from .employee import Employee, Manager
from .portfolio_summary import PortfolioSummary

__all__ = [
    "BankAccount",
    "Account",
    "SavingsAccount",
    "CurrentAccount",
    "Shape",
    "Circle",
    "Rectangle",
    "Employee",
    "Manager",
    "PortfolioSummary",
]
