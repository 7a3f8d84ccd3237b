"""Bean ORM - a coffee product listed in the catalog.

Invariants:
    - id is a generated UUID string (varchar 255)
    - price_per_unit is stored as text, not a number
    - All descriptive columns are nullable
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from coffee_valley.db.base import Base, RecordEnvelope, StringKeyed


class Bean(StringKeyed, RecordEnvelope, Base):
    """Bean entity - one coffee product."""
    __tablename__ = "beans"

    bean_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    description_bean: Mapped[str | None] = mapped_column(
        String(255), nullable=True,
    )
    price_per_unit: Mapped[str | None] = mapped_column(
        String(255), nullable=True,
    )
