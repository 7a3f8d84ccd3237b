"""Distributor Schemas - create body, partial update body, response."""

from coffee_valley.schemas.common import EnvelopeResponse, RequestBody


class DistributorFields(RequestBody):
    distributor_name: str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None
    phone: str | None = None
    email: str | None = None


class DistributorCreate(DistributorFields):
    pass


class DistributorUpdate(DistributorFields):
    """Only keys present in the body overwrite the stored record."""


class DistributorResponse(EnvelopeResponse):
    id: str
    distributor_name: str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None
    phone: str | None = None
    email: str | None = None
