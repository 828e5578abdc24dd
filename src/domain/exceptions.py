"""
Domain Exceptions

Errors raised synchronously by entity operations. There is a single
failure kind: an argument the operation cannot accept.
"""

from typing import Any, Optional


class InvalidArgumentError(ValueError):
    """Raised when an operation receives an argument it cannot accept."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)
