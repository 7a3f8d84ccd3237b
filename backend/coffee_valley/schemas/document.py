"""Document Schemas."""

from coffee_valley.schemas.common import EnvelopeResponse, RequestBody


class DocumentCreate(RequestBody):
    title: str | None = None
    document_file: str | None = None
    author: str | None = None


class DocumentResponse(EnvelopeResponse):
    id: str
    title: str | None = None
    document_file: str | None = None
    author: str | None = None
