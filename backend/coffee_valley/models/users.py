"""Users ORM - registered user accounts.

Invariants:
    - id is an integer assigned by the database (autoincrement)
    - password is stored exactly as submitted and never returned by the API
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from coffee_valley.db.base import Base, RecordEnvelope


class Users(RecordEnvelope, Base):
    """Users entity - one account row."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    full_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    password: Mapped[str | None] = mapped_column(String(50), nullable=True)
