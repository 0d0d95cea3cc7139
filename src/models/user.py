"""User model."""

from sqlalchemy import Column, Integer, String, UniqueConstraint

from src.database import Base
from src.models.mixins import TimestampMixin

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 150
PHONE_MAX_LENGTH = 20


class User(Base, TimestampMixin):
    """A user record managed through the /users endpoints."""

    __tablename__ = "users"
    __table_args__ = (
        # Authoritative guard for email uniqueness, the service check is only an early exit
        UniqueConstraint("email", name="uq_users_email"),
        # Ids of deleted users are never handed out again
        {"sqlite_autoincrement": True},
    )

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(NAME_MAX_LENGTH), nullable=False)
    email = Column(String(EMAIL_MAX_LENGTH), nullable=False)
    age = Column(Integer, nullable=True)
    phone = Column(String(PHONE_MAX_LENGTH), nullable=True)

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email!r}>"
