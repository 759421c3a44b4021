"""
Customer Domain Layer
"""

from .entities import Customer
from .value_objects import CustomerType

__all__ = ["Customer", "CustomerType"]
