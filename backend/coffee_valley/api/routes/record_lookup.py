"""Record Lookup Helpers - live-row queries shared by the route modules.

Invariants:
    - Only rows with deleted_at IS NULL are ever returned
    - get_live_or_404 raises ResourceNotFoundError, never returns None
"""

from typing import TypeVar

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from coffee_valley.core.errors import ErrorContext, ResourceNotFoundError

RecordT = TypeVar("RecordT")


def select_live(model: type[RecordT]) -> Select:
    """SELECT of every live row of `model`, oldest first."""
    return (
        select(model)
        .where(model.deleted_at.is_(None))
        .order_by(model.created_at)
    )


async def list_live(db: AsyncSession, model: type[RecordT]) -> list[RecordT]:
    result = await db.execute(select_live(model))
    return list(result.scalars().all())


async def get_live_or_404(
    db: AsyncSession,
    model: type[RecordT],
    record_id: str | int,
    message: str | None = None,
) -> RecordT:
    """Primary-key lookup restricted to live rows; raise 404 if absent."""
    result = await db.execute(
        select(model).where(
            model.id == record_id, model.deleted_at.is_(None),
        ),
    )
    record = result.scalar_one_or_none()
    if record is None:
        raise ResourceNotFoundError(
            model.__name__, str(record_id), message,
            ErrorContext(table=model.__tablename__),
        )
    return record
