"""
Arithmetic helpers exercised by the lifecycle test suites
"""
from domain.exceptions import InvalidArgumentError


class Calculator:
    """
    Integer arithmetic with a float division.
    """

    @staticmethod
    def add(a: int, b: int) -> int:
        return a + b

    @staticmethod
    def subtract(a: int, b: int) -> int:
        return a - b

    @staticmethod
    def multiply(a: int, b: int) -> int:
        return a * b

    @staticmethod
    def divide(a: int, b: int) -> float:
        """
        Divide a by b.

        Raises:
            InvalidArgumentError: if b is zero
        """
        if b == 0:
            raise InvalidArgumentError("Cannot divide by zero", details={"dividend": a})
        return a / b

    @staticmethod
    def is_even(n: int) -> bool:
        return n % 2 == 0
