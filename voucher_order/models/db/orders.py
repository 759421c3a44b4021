"""
Order management tables
"""

from sqlalchemy import BigInteger, Column, ForeignKey, Index, Integer, LargeBinary, String

from .base import Base, uuid_column, TimestampMixin


class OrderModel(Base, TimestampMixin):
    """Orders placed by customers."""

    __tablename__ = "orders"

    order_id = uuid_column(primary_key=True)
    customer_id = uuid_column(nullable=False)
    voucher_id = Column(
        LargeBinary(16),
        ForeignKey("vouchers.voucher_id", ondelete="SET NULL"),
        nullable=True,
    )
    order_status = Column(String(30), nullable=False, default="ACCEPTED")

    __table_args__ = (Index("idx_orders_customer", customer_id),)

    def __repr__(self):
        return f"<Order(status='{self.order_status}')>"


class OrderItemModel(Base, TimestampMixin):
    """Line items of an order."""

    __tablename__ = "order_items"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(
        LargeBinary(16),
        ForeignKey("orders.order_id", ondelete="CASCADE"),
        nullable=False,
    )
    product_id = uuid_column(nullable=False)
    product_price = Column(BigInteger, nullable=False)
    quantity = Column(Integer, nullable=False)

    __table_args__ = (Index("idx_order_items_order", order_id),)
