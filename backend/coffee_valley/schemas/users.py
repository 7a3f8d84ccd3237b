"""Users Schemas.

Invariants:
    - JSON uses fullname while the column is full_name
    - password is accepted on registration and never serialized back
"""

from coffee_valley.models.users import Users
from coffee_valley.schemas.common import EnvelopeResponse, RequestBody


class UserCreate(RequestBody):
    fullname: str | None = None
    email: str | None = None
    password: str | None = None

    def to_record(self) -> Users:
        return Users(
            full_name=self.fullname, email=self.email, password=self.password,
        )


class UserResponse(EnvelopeResponse):
    id: int
    fullname: str | None = None
    email: str | None = None

    @classmethod
    def from_record(cls, user: Users) -> "UserResponse":
        return cls(
            id=user.id,
            fullname=user.full_name,
            email=user.email,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
