"""User service: email uniqueness, timestamps and persistence calls."""

import logging

from sqlalchemy.orm import Session

from src.errors import DuplicateEmail, NotFound
from src.models.mixins import local_now
from src.models.user import User
from src.repositories.user_repository import EmailAlreadyStored, UserRepository
from src.schemas.user import UserCreate, UserResponse, UserUpdate

logger = logging.getLogger(__name__)


class UserService:
    """Business operations on user records.

    Operations return their value or a failure object (``NotFound``,
    ``DuplicateEmail``); the router decides how a failure is rendered.
    Input is expected to have passed ``validate_user_fields`` already.
    """

    def __init__(self, db: Session, repository: UserRepository | None = None):
        self.db = db
        self.repository = repository or UserRepository(db)

    def list_users(self) -> list[UserResponse]:
        users = self.repository.list_all()
        logger.info(f"Found {len(users)} users")
        return [to_response(user) for user in users]

    def search_users(
        self,
        name: str | None = None,
        age: int | None = None,
        min_age: int | None = None,
        max_age: int | None = None,
    ) -> list[UserResponse]:
        """Filter users. Every given filter must match; no filters lists everyone."""
        if name is None and age is None and min_age is None and max_age is None:
            return self.list_users()

        if name is not None:
            users = self.repository.find_by_name_containing(name)
        elif age is not None:
            users = self.repository.find_by_age(age)
        else:
            users = self.repository.find_by_age_between(min_age, max_age)

        # Remaining filters are applied in memory on the narrowed result
        if age is not None:
            users = [u for u in users if u.age == age]
        if min_age is not None:
            users = [u for u in users if u.age is not None and u.age >= min_age]
        if max_age is not None:
            users = [u for u in users if u.age is not None and u.age <= max_age]

        logger.info(f"Search matched {len(users)} users")
        return [to_response(user) for user in users]

    def get_user(self, user_id: int) -> UserResponse | NotFound:
        user = self.repository.find_by_id(user_id)
        if user is None:
            return NotFound(user_id)
        return to_response(user)

    def create_user(self, data: UserCreate) -> UserResponse | DuplicateEmail:
        logger.info(f"Creating user with email: {data.email}")

        if self.repository.exists_by_email(data.email):
            return DuplicateEmail(data.email)

        user = User(name=data.name, email=data.email, age=data.age, phone=data.phone)
        user.mark_created(local_now())

        try:
            user = self.repository.insert(user)
        except EmailAlreadyStored as e:
            # Lost a race with a concurrent create
            return DuplicateEmail(e.email)

        logger.info(f"User created - ID: {user.id}")
        return to_response(user)

    def update_user(self, user_id: int, data: UserUpdate) -> UserResponse | NotFound | DuplicateEmail:
        """Full replace of name, email, age and phone; id and created_at are kept."""
        logger.info(f"Updating user with ID: {user_id}")

        user = self.repository.find_by_id(user_id)
        if user is None:
            return NotFound(user_id)

        owner = self.repository.find_by_email(data.email)
        if owner is not None and owner.id != user_id:
            return DuplicateEmail(data.email)

        user.name = data.name
        user.email = data.email
        user.age = data.age
        user.phone = data.phone
        user.mark_updated(local_now())

        try:
            user = self.repository.update(user)
        except EmailAlreadyStored as e:
            return DuplicateEmail(e.email)

        logger.info(f"User updated - ID: {user.id}")
        return to_response(user)

    def delete_user(self, user_id: int) -> NotFound | None:
        logger.info(f"Deleting user with ID: {user_id}")

        if not self.repository.exists_by_id(user_id):
            return NotFound(user_id)

        if not self.repository.delete_by_id(user_id):
            # Removed by someone else between the check and the delete
            return NotFound(user_id)

        logger.info(f"User deleted - ID: {user_id}")
        return None


def to_response(user: User) -> UserResponse:
    """Map a persisted record to its response shape."""
    return UserResponse.model_validate(user)
