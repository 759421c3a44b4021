from .customer_type import CustomerType

__all__ = ["CustomerType"]
