"""Bean Routes - catalog listing/creation, daily prices, and the joined price view.

Invariants:
    - GET /bean joins beans to daily_beans on beans.id = daily_beans.bean_id,
      keeping only sale_price >= 0 and live rows on both sides
    - GET /bean answers 204 with no body when the join is empty
    - POST handlers assign a fresh UUID id and answer 201 with the stored record
"""

import logging

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from coffee_valley.api.routes.record_lookup import list_live
from coffee_valley.core.errors import DatabaseError, ErrorContext
from coffee_valley.infrastructure.database import get_db
from coffee_valley.models.bean import Bean
from coffee_valley.models.daily_bean import DailyBean
from coffee_valley.schemas.bean import (
    BeanCreate, BeanPrice, BeanResponse, DailyBeanCreate, DailyBeanResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter(tags=["beans"])


@router.get("/bean", response_model=list[BeanPrice])
async def get_bean_prices(db: AsyncSession = Depends(get_db)):
    """Beans paired with their daily sale prices."""
    query = (
        select(Bean.bean_name, Bean.description_bean, DailyBean.sale_price)
        .join(DailyBean, Bean.id == DailyBean.bean_id)
        .where(
            DailyBean.sale_price >= 0,
            Bean.deleted_at.is_(None),
            DailyBean.deleted_at.is_(None),
        )
    )
    try:
        result = await db.execute(query)
    except SQLAlchemyError as e:
        logger.error(f"Bean price join failed: {e}", extra={"table": "beans"})
        raise DatabaseError(
            "bean price join", "query", ErrorContext(table="beans"),
            user_message="error fetching beans",
        )
    rows = [BeanPrice(**row._mapping) for row in result.all()]
    if not rows:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return rows


@router.get("/catalogs", response_model=list[BeanResponse])
async def list_catalogs(db: AsyncSession = Depends(get_db)):
    """Every live bean in the catalog."""
    return [BeanResponse.from_record(b) for b in await list_live(db, Bean)]


@router.post(
    "/catalog", response_model=BeanResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_catalog(
    body: BeanCreate, db: AsyncSession = Depends(get_db),
):
    """Add a bean to the catalog."""
    bean = body.to_record()
    db.add(bean)
    await db.commit()
    await db.refresh(bean)
    logger.info("Bean created", extra={"table": "beans", "record_id": bean.id})
    return BeanResponse.from_record(bean)


@router.post(
    "/daily-beans", response_model=DailyBeanResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_daily_bean(
    body: DailyBeanCreate, db: AsyncSession = Depends(get_db),
):
    """Record a sale price for a bean. bean_id is not checked against beans."""
    daily_bean = DailyBean(**body.model_dump())
    db.add(daily_bean)
    await db.commit()
    await db.refresh(daily_bean)
    logger.info(
        "Daily bean price created",
        extra={"table": "daily_beans", "record_id": daily_bean.id},
    )
    return DailyBeanResponse.model_validate(daily_bean)
