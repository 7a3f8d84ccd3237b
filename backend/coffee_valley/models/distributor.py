"""Distributor ORM - supplier/customer contact record."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from coffee_valley.db.base import Base, RecordEnvelope, StringKeyed


class Distributor(StringKeyed, RecordEnvelope, Base):
    """Distributor entity - name plus postal and contact fields."""
    __tablename__ = "distributors"

    distributor_name: Mapped[str | None] = mapped_column(
        String(255), nullable=True,
    )
    city: Mapped[str | None] = mapped_column(String(100), nullable=True)
    state: Mapped[str | None] = mapped_column(String(100), nullable=True)
    country: Mapped[str | None] = mapped_column(String(100), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(15), nullable=True)
    email: Mapped[str | None] = mapped_column(String(100), nullable=True)
