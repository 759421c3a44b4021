"""
Customer Entity
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from voucher_order.core.domain import Email, Entity, PersonName

from ..value_objects.customer_type import CustomerType


@dataclass(eq=False)
class Customer(Entity[UUID]):
    """
    Customer aggregate.

    Name and email are re-validated on construction and on every change,
    so a Customer instance always holds a short non-blank name and a
    well-formed email.
    """

    name: str = ""
    email: str = ""
    customer_type: CustomerType = CustomerType.NORMAL
    last_login_at: datetime | None = None

    def __post_init__(self):
        self.name = PersonName(self.name).value
        self.email = Email(self.email).address
        if not isinstance(self.customer_type, CustomerType):
            self.customer_type = CustomerType.from_string(self.customer_type)

    def is_blacklisted(self) -> bool:
        return self.customer_type == CustomerType.BLACKLIST

    def change_name(self, name: str) -> None:
        self.name = PersonName(name).value
        self.touch()

    def change_email(self, email: str) -> None:
        self.email = Email(email).address
        self.touch()

    def change_type(self, customer_type: CustomerType) -> None:
        self.customer_type = customer_type
        self.touch()

    def __str__(self) -> str:
        return f"Customer {self.name} <{self.email}> ({self.customer_type.value})"
