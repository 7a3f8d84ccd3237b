"""Database Declarations - SQLAlchemy Base and the shared record envelope.

Invariants:
    - All tables are declared against a single metadata (db/base.py)
"""
