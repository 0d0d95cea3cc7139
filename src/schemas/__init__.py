"""Pydantic schemas for API requests and responses."""

from src.schemas.error import ErrorResponse
from src.schemas.user import UserCreate, UserResponse, UserUpdate

__all__ = [
    "UserCreate",
    "UserUpdate",
    "UserResponse",
    "ErrorResponse",
]
