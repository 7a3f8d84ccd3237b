"""DailyBean ORM - the sale price of a Bean on a given day.

Invariants:
    - bean_id points at beans.id but is NOT a foreign key (no cascade, no check)
    - sale_price is an integer

Design Decisions:
    - No relationship(): the only consumer is the ad hoc join behind GET /bean
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from coffee_valley.db.base import Base, RecordEnvelope, StringKeyed


class DailyBean(StringKeyed, RecordEnvelope, Base):
    """DailyBean entity - per-day price entry for a bean."""
    __tablename__ = "daily_beans"

    bean_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    sale_price: Mapped[int | None] = mapped_column(Integer, nullable=True)
