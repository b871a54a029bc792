from typing import Generic, Optional, TypeVar

from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

RowT = TypeVar("RowT", bound=SQLModel)


class SqlModelRepository(Generic[RowT]):
    """
    Session plumbing shared by the SQLModel repositories.

    Writes are flushed, not committed: the unit of work owns the transaction.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _one_or_none(self, stmt) -> Optional[RowT]:
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def _first(self, stmt) -> Optional[RowT]:
        result = await self.session.exec(stmt)
        return result.first()

    async def _save(self, row: RowT) -> RowT:
        # refresh picks up server-side defaults such as created_at
        self.session.add(row)
        await self.session.flush()
        await self.session.refresh(row)
        return row
