import logging
from typing import Any, Generic, TypeVar

from sqlalchemy import TextClause
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from voucher_order.core.domain import NoRowsUpdatedException

T = TypeVar("T")

logger = logging.getLogger(__name__)


class SQLTemplateRepository(Generic[T]):
    """
    Base for repositories that run hand-written SQL templates.

    Subclasses provide `table` and `_to_entity`; reads return entities,
    writes commit and return the affected row count.
    """

    table: str = ""

    def __init__(self, session: AsyncSession):
        """
        Initialize repository.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _to_entity(self, row: Any) -> T:
        raise NotImplementedError

    async def _fetch_one(self, statement: TextClause, params: dict[str, Any]) -> T | None:
        result = await self.session.execute(statement, params)
        row = result.mappings().first()
        return self._to_entity(row) if row else None

    async def _fetch_all(self, statement: TextClause, params: dict[str, Any] | None = None) -> list[T]:
        result = await self.session.execute(statement, params or {})
        return [self._to_entity(row) for row in result.mappings().all()]

    async def _write(self, statement: TextClause, params: dict[str, Any] | None = None) -> int:
        """Execute a write statement, commit, and return the affected row count."""
        try:
            result = await self.session.execute(statement, params or {})
            await self.session.commit()
            return result.rowcount
        except SQLAlchemyError as e:
            logger.error(f"Error writing to {self.table}: {e}")
            await self.session.rollback()
            raise

    async def _write_all(self, statements: list[tuple[TextClause, Any]]) -> int:
        """
        Execute several writes in a single transaction.

        Each entry is a statement with either one parameter dict or a list
        of them (executemany). Returns the total affected row count;
        drivers that cannot report it for executemany contribute nothing.
        """
        try:
            total = 0
            for statement, params in statements:
                result = await self.session.execute(statement, params)
                total += max(result.rowcount, 0)
            await self.session.commit()
            return total
        except SQLAlchemyError as e:
            logger.error(f"Error writing to {self.table}: {e}")
            await self.session.rollback()
            raise

    async def _update_by_id(self, statement: TextClause, params: dict[str, Any], entity_id: Any) -> int:
        """Run an update-by-id; zero affected rows is an error."""
        updated = await self._write(statement, params)
        if updated == 0:
            logger.warning(f"No rows updated in {self.table} for id {entity_id}")
            raise NoRowsUpdatedException(table=self.table, entity_id=entity_id)
        return updated
