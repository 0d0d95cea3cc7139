"""Data access for persisted records."""

from src.repositories.user_repository import EmailAlreadyStored, UserRepository

__all__ = [
    "EmailAlreadyStored",
    "UserRepository",
]
