"""
SQL templates for the vouchers table.

Ids are bound as 16-byte UUID values; see `uuid_to_bin` in the repository.
"""

from sqlalchemy import text

_COLUMNS = "voucher_id, rate, type, customer_id, created_at, updated_at"


class VoucherSql:
    """Named, parameterized statements used by SQLVoucherRepository."""

    INSERT = text(
        f"INSERT INTO vouchers ({_COLUMNS}) "
        "VALUES (:voucher_id, :rate, :type, :customer_id, :created_at, :updated_at)"
    )
    SELECT_BY_ID = text(f"SELECT {_COLUMNS} FROM vouchers WHERE voucher_id = :voucher_id")
    SELECT_ALL = text(f"SELECT {_COLUMNS} FROM vouchers ORDER BY created_at")
    SELECT_BY_CUSTOMER_ID = text(
        f"SELECT {_COLUMNS} FROM vouchers WHERE customer_id = :customer_id ORDER BY created_at"
    )
    SELECT_BY_TYPE_AND_DATE = text(
        f"SELECT {_COLUMNS} FROM vouchers "
        "WHERE type = :type AND created_at >= :start_at AND created_at < :end_at "
        "ORDER BY created_at"
    )
    UPDATE_BY_ID = text(
        "UPDATE vouchers SET rate = :rate, type = :type, updated_at = :updated_at "
        "WHERE voucher_id = :voucher_id"
    )
    UPDATE_CUSTOMER_ID = text(
        "UPDATE vouchers SET customer_id = :customer_id, updated_at = :updated_at "
        "WHERE voucher_id = :voucher_id"
    )
    DELETE_BY_ID = text("DELETE FROM vouchers WHERE voucher_id = :voucher_id")
    DELETE_ALL = text("DELETE FROM vouchers")
    DELETE_BY_CUSTOMER_ID = text("DELETE FROM vouchers WHERE customer_id = :customer_id")
