"""Document ORM - metadata for an uploaded file.

Invariants:
    - document_file holds a reference (path or URL), never the file contents
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from coffee_valley.db.base import Base, RecordEnvelope, StringKeyed


class Document(StringKeyed, RecordEnvelope, Base):
    """Document entity - title, file reference, author."""
    __tablename__ = "documents"

    title: Mapped[str | None] = mapped_column(String(100), nullable=True)
    document_file: Mapped[str | None] = mapped_column(
        String(255), nullable=True,
    )
    author: Mapped[str | None] = mapped_column(String(50), nullable=True)
