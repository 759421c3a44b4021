from voucher_order.repositories.base import SQLTemplateRepository

__all__ = ["SQLTemplateRepository"]
