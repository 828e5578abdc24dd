"""
Utility modules
"""
from .calculator import Calculator

__all__ = [
    'Calculator',
]
