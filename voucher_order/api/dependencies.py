"""
Shared API dependencies.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from voucher_order.database.async_db import get_async_db

# Type alias for database session dependency
DbSession = Annotated[AsyncSession, Depends(get_async_db)]

__all__ = ["DbSession"]
