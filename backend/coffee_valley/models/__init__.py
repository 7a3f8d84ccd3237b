"""ORM Models - SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base and RecordEnvelope (db/base.py)
    - No relationships are declared; DailyBean.bean_id is a loose reference

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all
      or alembic autogenerate runs
"""

from coffee_valley.models.bean import Bean  # noqa: F401
from coffee_valley.models.daily_bean import DailyBean  # noqa: F401
from coffee_valley.models.distributor import Distributor  # noqa: F401
from coffee_valley.models.document import Document  # noqa: F401
from coffee_valley.models.users import Users  # noqa: F401
