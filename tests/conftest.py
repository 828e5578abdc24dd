"""
Pytest configuration and shared fixtures.
"""
import sys
from pathlib import Path
import pytest

# Add src to path
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from domain.entities import (  # noqa: E402
    Account,
    Circle,
    CurrentAccount,
    Employee,
    Manager,
    Rectangle,
    SavingsAccount,
)
from infrastructure.notifications import RecordingOverdraftNotifier  # noqa: E402

pytest_plugins = ["pytester", "tests.plugins.lifecycle_logger"]


@pytest.fixture
def basic_account() -> Account:
    """Plain account with 1000.0."""
    return Account("ACC001", "John Doe", 1000.0)


@pytest.fixture
def savings_account() -> SavingsAccount:
    """Savings account with 1000.0."""
    return SavingsAccount("SAV001", "Alice", 1000.0)


@pytest.fixture
def overdraft_notifier() -> RecordingOverdraftNotifier:
    """Notifier collecting overdraft notices."""
    return RecordingOverdraftNotifier()


@pytest.fixture
def current_account(overdraft_notifier) -> CurrentAccount:
    """Current account with 100.0 and a 50.0 overdraft."""
    return CurrentAccount("CUR001", "Bob", 100.0, 50.0, notifier=overdraft_notifier)


@pytest.fixture
def mixed_shapes() -> list:
    """Circle and rectangle behind the Shape interface."""
    return [Circle("red", 2.0), Rectangle("blue", 3.0, 4.0)]


@pytest.fixture
def staff() -> list:
    """One employee and one manager."""
    return [Employee("John", 101, 50000.0), Manager("Alice", 201, 80000.0, "HR")]
