"""User schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class UserFields(BaseModel):
    """Writable user fields.

    Only JSON types are enforced here. Length, presence and email format rules
    live in ``src.services.validation`` so every violation of a request is
    reported together.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "João Silva",
                "email": "joao@email.com",
                "age": 30,
                "phone": "(11) 99999-9999",
            }
        }
    )

    name: str | None = Field(None, description="Full name, 2 to 100 characters")
    email: str | None = Field(None, description="Unique email address, up to 150 characters")
    age: int | None = Field(None, description="Age in years")
    phone: str | None = Field(None, description="Phone number, up to 20 characters")


class UserCreate(UserFields):
    """Create a new user."""


class UserUpdate(UserFields):
    """Replace every writable field of an existing user."""


class UserResponse(BaseModel):
    """User response."""

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)

    id: int
    name: str
    email: str
    age: int | None
    phone: str | None
    created_at: datetime
    updated_at: datetime
