"""
Customer table
"""

from sqlalchemy import Column, DateTime, Index, String

from .base import Base, uuid_column, TimestampMixin


class CustomerModel(Base, TimestampMixin):
    """Customers that can own vouchers and place orders."""

    __tablename__ = "customers"

    customer_id = uuid_column(primary_key=True)
    name = Column(String(20), nullable=False)
    email = Column(String(50), nullable=False, unique=True)
    customer_type = Column(String(20), nullable=False, default="NORMAL")
    last_login_at = Column(DateTime(timezone=True), nullable=True)

    __table_args__ = (Index("idx_customers_type", customer_type),)

    def __repr__(self):
        return f"<Customer(name='{self.name}', email='{self.email}')>"
