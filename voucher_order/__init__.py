"""
Voucher / order management backend.

Customers, vouchers with fixed-amount and percent discounts, and orders whose
total is recomputed on demand, persisted through SQL-template repositories.
"""

__version__ = "0.1.0"
