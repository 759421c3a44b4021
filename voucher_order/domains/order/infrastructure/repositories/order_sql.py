"""
SQL templates for the orders and order_items tables.
"""

from sqlalchemy import text

_ORDER_COLUMNS = "order_id, customer_id, voucher_id, order_status, created_at, updated_at"
_ITEM_COLUMNS = "order_id, product_id, product_price, quantity, created_at, updated_at"


class OrderSql:
    """Named, parameterized statements used by SQLOrderRepository."""

    INSERT = text(
        f"INSERT INTO orders ({_ORDER_COLUMNS}) "
        "VALUES (:order_id, :customer_id, :voucher_id, :order_status, :created_at, :updated_at)"
    )
    INSERT_ITEM = text(
        f"INSERT INTO order_items ({_ITEM_COLUMNS}) "
        "VALUES (:order_id, :product_id, :product_price, :quantity, :created_at, :updated_at)"
    )
    SELECT_BY_ID = text(f"SELECT {_ORDER_COLUMNS} FROM orders WHERE order_id = :order_id")
    SELECT_ALL = text(f"SELECT {_ORDER_COLUMNS} FROM orders ORDER BY created_at")
    SELECT_BY_CUSTOMER_ID = text(
        f"SELECT {_ORDER_COLUMNS} FROM orders WHERE customer_id = :customer_id ORDER BY created_at"
    )
    SELECT_ITEMS = text(
        "SELECT product_id, product_price, quantity FROM order_items WHERE order_id = :order_id ORDER BY seq"
    )
    UPDATE_BY_ID = text(
        "UPDATE orders SET order_status = :order_status, voucher_id = :voucher_id, updated_at = :updated_at "
        "WHERE order_id = :order_id"
    )
    UPDATE_CUSTOMER_ID = text(
        "UPDATE orders SET customer_id = :customer_id, updated_at = :updated_at WHERE order_id = :order_id"
    )
    DELETE_BY_ID = text("DELETE FROM orders WHERE order_id = :order_id")
    DELETE_ALL = text("DELETE FROM orders")
    DELETE_BY_CUSTOMER_ID = text("DELETE FROM orders WHERE customer_id = :customer_id")
