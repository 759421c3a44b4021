"""
Voucher table
"""

from sqlalchemy import BigInteger, Column, ForeignKey, Index, LargeBinary, String

from .base import Base, uuid_column, TimestampMixin


class VoucherModel(Base, TimestampMixin):
    """Fixed-amount and percent discount vouchers."""

    __tablename__ = "vouchers"

    voucher_id = uuid_column(primary_key=True)
    rate = Column(BigInteger, nullable=False)  # amount for FIXED_AMOUNT, percent for PERCENT
    type = Column(String(20), nullable=False)
    customer_id = Column(
        LargeBinary(16),
        ForeignKey("customers.customer_id", ondelete="SET NULL"),
        nullable=True,
    )

    __table_args__ = (
        Index("idx_vouchers_customer", customer_id),
        Index("idx_vouchers_type_created", type, "created_at"),
    )

    def __repr__(self):
        return f"<Voucher(type='{self.type}', rate={self.rate})>"
