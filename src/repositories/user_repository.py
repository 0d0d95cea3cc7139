"""Hand-written queries against the users table."""

import logging

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.models.user import User

logger = logging.getLogger(__name__)


class EmailAlreadyStored(Exception):
    """The users.email unique constraint rejected a write."""

    def __init__(self, email: str):
        super().__init__(f"Email already stored: {email}")
        self.email = email


class UserRepository:
    """Persistence operations for user records.

    Writes commit immediately. A unique-constraint violation on commit is rolled
    back and raised as ``EmailAlreadyStored``.
    """

    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, user_id: int) -> User | None:
        return self.db.query(User).filter(User.id == user_id).first()

    def find_by_email(self, email: str) -> User | None:
        return self.db.query(User).filter(User.email == email).first()

    def exists_by_email(self, email: str) -> bool:
        return self.db.query(self.db.query(User).filter(User.email == email).exists()).scalar()

    def exists_by_id(self, user_id: int) -> bool:
        return self.db.query(self.db.query(User).filter(User.id == user_id).exists()).scalar()

    def list_all(self) -> list[User]:
        return self.db.query(User).order_by(User.id).all()

    def find_by_name_containing(self, name: str) -> list[User]:
        """Case-insensitive substring match on name."""
        return (
            self.db.query(User)
            .filter(func.lower(User.name).contains(name.lower(), autoescape=True))
            .order_by(User.id)
            .all()
        )

    def find_by_age(self, age: int) -> list[User]:
        return self.db.query(User).filter(User.age == age).order_by(User.id).all()

    def find_by_age_between(self, min_age: int | None, max_age: int | None) -> list[User]:
        """Users whose age lies in [min_age, max_age]; a missing bound is open."""
        q = self.db.query(User).filter(User.age.is_not(None))
        if min_age is not None:
            q = q.filter(User.age >= min_age)
        if max_age is not None:
            q = q.filter(User.age <= max_age)
        return q.order_by(User.id).all()

    def insert(self, user: User) -> User:
        self.db.add(user)
        self._commit(user.email)
        self.db.refresh(user)
        return user

    def update(self, user: User) -> User:
        self._commit(user.email)
        self.db.refresh(user)
        return user

    def delete_by_id(self, user_id: int) -> bool:
        """Hard delete. Returns False when no row matched."""
        deleted = self.db.query(User).filter(User.id == user_id).delete()
        self.db.commit()
        return deleted > 0

    def _commit(self, email: str) -> None:
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(f"Unique constraint rejected email {email!r}: {e.orig}")
            raise EmailAlreadyStored(email) from None
