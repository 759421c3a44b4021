"""
SQL templates for the customers table.
"""

from sqlalchemy import text

_COLUMNS = "customer_id, name, email, customer_type, last_login_at, created_at, updated_at"


class CustomerSql:
    """Named, parameterized statements used by SQLCustomerRepository."""

    INSERT = text(
        f"INSERT INTO customers ({_COLUMNS}) "
        "VALUES (:customer_id, :name, :email, :customer_type, :last_login_at, :created_at, :updated_at)"
    )
    SELECT_BY_ID = text(f"SELECT {_COLUMNS} FROM customers WHERE customer_id = :customer_id")
    SELECT_ALL = text(f"SELECT {_COLUMNS} FROM customers ORDER BY created_at")
    SELECT_BY_NAME = text(f"SELECT {_COLUMNS} FROM customers WHERE name = :name ORDER BY created_at")
    SELECT_BY_EMAIL = text(f"SELECT {_COLUMNS} FROM customers WHERE email = :email")
    SELECT_BY_TYPE = text(
        f"SELECT {_COLUMNS} FROM customers WHERE customer_type = :customer_type ORDER BY created_at"
    )
    SELECT_BY_VOUCHER_ID = text(
        "SELECT c.customer_id, c.name, c.email, c.customer_type, c.last_login_at, c.created_at, c.updated_at "
        "FROM customers c JOIN vouchers v ON v.customer_id = c.customer_id "
        "WHERE v.voucher_id = :voucher_id"
    )
    UPDATE_BY_ID = text(
        "UPDATE customers SET name = :name, email = :email, customer_type = :customer_type, "
        "updated_at = :updated_at WHERE customer_id = :customer_id"
    )
    UPDATE_LAST_LOGIN = text(
        "UPDATE customers SET last_login_at = :last_login_at WHERE customer_id = :customer_id"
    )
    DELETE_BY_ID = text("DELETE FROM customers WHERE customer_id = :customer_id")
    DELETE_ALL = text("DELETE FROM customers")
    COUNT = text("SELECT COUNT(*) FROM customers")
