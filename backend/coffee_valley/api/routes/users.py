"""Users Routes - list and register users; DELETE /users/{id} removes a catalog bean.

Invariants:
    - DELETE /users/{id} looks the id up in the beans table, not users
      (route name kept for existing clients); 404 if absent, 204 after soft delete
    - Passwords are stored as submitted and never echoed back

Migration note:
    - The previous service echoed password and used ID/CreatedAt/UpdatedAt/DeletedAt
      keys; responses here omit password and use id/created_at/updated_at

Design Decisions:
    - Delete sets deleted_at; the row stays in the table
"""

import logging

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from coffee_valley.api.routes.record_lookup import get_live_or_404, list_live
from coffee_valley.infrastructure.database import get_db
from coffee_valley.models.bean import Bean
from coffee_valley.models.users import Users
from coffee_valley.schemas.users import UserCreate, UserResponse

logger = logging.getLogger(__name__)
router = APIRouter(tags=["users"])


@router.get("/users", response_model=list[UserResponse])
async def list_users(db: AsyncSession = Depends(get_db)):
    return [UserResponse.from_record(u) for u in await list_live(db, Users)]


@router.post(
    "/users", response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register_user(
    body: UserCreate, db: AsyncSession = Depends(get_db),
):
    user = body.to_record()
    db.add(user)
    await db.commit()
    await db.refresh(user)
    logger.info("User registered", extra={"table": "users", "record_id": user.id})
    return UserResponse.from_record(user)


@router.delete(
    "/users/{record_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_user(record_id: str, db: AsyncSession = Depends(get_db)):
    """Soft-delete the bean with this id."""
    bean = await get_live_or_404(db, Bean, record_id, "user not found")
    bean.soft_delete()
    await db.commit()
    logger.info("Bean deleted", extra={"table": "beans", "record_id": bean.id})
    return Response(status_code=status.HTTP_204_NO_CONTENT)
