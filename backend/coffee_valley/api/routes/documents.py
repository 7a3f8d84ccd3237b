"""Document Routes - record document metadata (title, file reference, author)."""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from coffee_valley.infrastructure.database import get_db
from coffee_valley.models.document import Document
from coffee_valley.schemas.document import DocumentCreate, DocumentResponse

logger = logging.getLogger(__name__)
router = APIRouter(tags=["documents"])


@router.post(
    "/document", response_model=DocumentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def upload_document(
    body: DocumentCreate, db: AsyncSession = Depends(get_db),
):
    document = Document(**body.model_dump())
    db.add(document)
    await db.commit()
    await db.refresh(document)
    logger.info(
        "Document created",
        extra={"table": "documents", "record_id": document.id},
    )
    return document
