"""Distributor Routes - list, create, update by id.

Invariants:
    - PUT on a missing (or soft-deleted) id answers 404 and writes nothing
    - PUT overwrites only the keys present in the body; last write wins
    - PUT looks the record up before validating the body
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from coffee_valley.api.routes.record_lookup import get_live_or_404, list_live
from coffee_valley.infrastructure.database import get_db
from coffee_valley.models.distributor import Distributor
from coffee_valley.schemas.distributor import (
    DistributorCreate, DistributorResponse, DistributorUpdate,
)

logger = logging.getLogger(__name__)
router = APIRouter(tags=["distributors"])


@router.get("/distributors", response_model=list[DistributorResponse])
async def list_distributors(db: AsyncSession = Depends(get_db)):
    return await list_live(db, Distributor)


@router.post(
    "/distributor", response_model=DistributorResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_distributor(
    body: DistributorCreate, db: AsyncSession = Depends(get_db),
):
    distributor = Distributor(**body.model_dump())
    db.add(distributor)
    await db.commit()
    await db.refresh(distributor)
    logger.info(
        "Distributor created",
        extra={"table": "distributors", "record_id": distributor.id},
    )
    return distributor


@router.put("/distributor/{distributor_id}", response_model=DistributorResponse)
async def update_distributor(
    distributor_id: str,
    payload: Any = Body(None),
    db: AsyncSession = Depends(get_db),
):
    """Load by id, then bind the body onto it and save.

    The body is validated only after the lookup, so an unknown id is a 404
    whatever fields the body carries.
    """
    distributor = await get_live_or_404(
        db, Distributor, distributor_id, "Distributor not found",
    )
    body = _bind_update(payload)
    for key, value in body.model_dump(exclude_unset=True).items():
        setattr(distributor, key, value)
    await db.commit()
    await db.refresh(distributor)
    logger.info(
        "Distributor updated",
        extra={"table": "distributors", "record_id": distributor.id},
    )
    return distributor


def _bind_update(payload: Any) -> DistributorUpdate:
    """Validate a raw PUT body, reporting errors as request validation errors."""
    try:
        return DistributorUpdate.model_validate(
            {} if payload is None else payload,
        )
    except ValidationError as e:
        raise RequestValidationError([
            {**err, "loc": ("body", *err["loc"])} for err in e.errors()
        ])
