"""Shared schema pieces - record envelope fields every response carries."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class RequestBody(BaseModel):
    """Base for inbound bodies: unknown keys are ignored, not rejected."""
    model_config = ConfigDict(extra="ignore")


class EnvelopeResponse(BaseModel):
    """Timestamps shared by every stored record."""
    model_config = ConfigDict(from_attributes=True)

    created_at: datetime
    updated_at: datetime
