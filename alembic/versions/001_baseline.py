"""Baseline migration - customers, vouchers, orders and order items.

Revision ID: 001_baseline
Revises: None
Create Date: 2026-10-19

UUID columns are BYTEA holding the 16 raw bytes of the id.
"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001_baseline"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "customers",
        sa.Column("customer_id", sa.LargeBinary(16), primary_key=True),
        sa.Column("name", sa.String(20), nullable=False),
        sa.Column("email", sa.String(50), nullable=False, unique=True),
        sa.Column("customer_type", sa.String(20), nullable=False, server_default="NORMAL"),
        sa.Column("last_login_at", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
    )
    op.create_index("idx_customers_type", "customers", ["customer_type"])

    op.create_table(
        "vouchers",
        sa.Column("voucher_id", sa.LargeBinary(16), primary_key=True),
        sa.Column("rate", sa.BigInteger(), nullable=False),
        sa.Column("type", sa.String(20), nullable=False),
        sa.Column(
            "customer_id",
            sa.LargeBinary(16),
            sa.ForeignKey("customers.customer_id", ondelete="SET NULL"),
            nullable=True,
        ),
        *_timestamps(),
    )
    op.create_index("idx_vouchers_customer", "vouchers", ["customer_id"])
    op.create_index("idx_vouchers_type_created", "vouchers", ["type", "created_at"])

    op.create_table(
        "orders",
        sa.Column("order_id", sa.LargeBinary(16), primary_key=True),
        sa.Column("customer_id", sa.LargeBinary(16), nullable=False),
        sa.Column(
            "voucher_id",
            sa.LargeBinary(16),
            sa.ForeignKey("vouchers.voucher_id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("order_status", sa.String(30), nullable=False, server_default="ACCEPTED"),
        *_timestamps(),
    )
    op.create_index("idx_orders_customer", "orders", ["customer_id"])

    op.create_table(
        "order_items",
        sa.Column("seq", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "order_id",
            sa.LargeBinary(16),
            sa.ForeignKey("orders.order_id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("product_id", sa.LargeBinary(16), nullable=False),
        sa.Column("product_price", sa.BigInteger(), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=False),
        *_timestamps(),
    )
    op.create_index("idx_order_items_order", "order_items", ["order_id"])


def downgrade() -> None:
    """
    Drop all tables.

    WARNING: This is destructive and will delete all data!
    """
    op.drop_table("order_items")
    op.drop_table("orders")
    op.drop_table("vouchers")
    op.drop_table("customers")
