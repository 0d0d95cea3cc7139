"""User API endpoints."""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Query, Response, status

from src.api.dependencies import get_user_service
from src.errors import ServiceFailure, failure_response, validation_error_response
from src.schemas.error import ErrorResponse
from src.schemas.user import UserCreate, UserResponse, UserUpdate
from src.services.user_service import UserService
from src.services.validation import validate_user_fields

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])

NOT_FOUND_RESPONSE: dict[int | str, dict[str, Any]] = {
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse, "description": "User not found"},
}
BAD_REQUEST_RESPONSE: dict[int | str, dict[str, Any]] = {
    status.HTTP_400_BAD_REQUEST: {
        "model": ErrorResponse,
        "description": "Invalid data or email already in use",
    },
}


@router.get("", response_model=list[UserResponse], summary="List users")
def list_users(
    service: Annotated[UserService, Depends(get_user_service)],
    name: Annotated[str | None, Query(description="Case-insensitive part of the name")] = None,
    age: Annotated[int | None, Query(description="Exact age")] = None,
    min_age: Annotated[int | None, Query(alias="minAge", description="Minimum age")] = None,
    max_age: Annotated[int | None, Query(alias="maxAge", description="Maximum age")] = None,
):
    """Get all users, optionally filtered by name or age."""
    logger.info("Request received: GET /users")
    users = service.search_users(name=name, age=age, min_age=min_age, max_age=max_age)
    logger.info(f"Returning {len(users)} users")
    return users


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    summary="Get a user by ID",
    responses=NOT_FOUND_RESPONSE,
)
def get_user(
    user_id: int,
    service: Annotated[UserService, Depends(get_user_service)],
):
    """Get the details of one user."""
    logger.info(f"Request received: GET /users/{user_id}")
    result = service.get_user(user_id)
    if isinstance(result, ServiceFailure):
        return failure_response(result)
    return result


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a user",
    responses=BAD_REQUEST_RESPONSE,
)
def create_user(
    user_data: UserCreate,
    service: Annotated[UserService, Depends(get_user_service)],
):
    """Register a new user. The email must not belong to anyone else."""
    logger.info(f"Request received: POST /users - Email: {user_data.email}")

    violations = validate_user_fields(user_data)
    if violations:
        logger.warning(f"Validation failed: {[v.field for v in violations]}")
        return validation_error_response(violations)

    result = service.create_user(user_data)
    if isinstance(result, ServiceFailure):
        return failure_response(result)
    return result


@router.put(
    "/{user_id}",
    response_model=UserResponse,
    summary="Replace a user",
    responses={**BAD_REQUEST_RESPONSE, **NOT_FOUND_RESPONSE},
)
def update_user(
    user_id: int,
    user_data: UserUpdate,
    service: Annotated[UserService, Depends(get_user_service)],
):
    """Update every field of a user. Omitted optional fields are cleared."""
    logger.info(f"Request received: PUT /users/{user_id} - Email: {user_data.email}")

    violations = validate_user_fields(user_data)
    if violations:
        logger.warning(f"Validation failed: {[v.field for v in violations]}")
        return validation_error_response(violations)

    result = service.update_user(user_id, user_data)
    if isinstance(result, ServiceFailure):
        return failure_response(result)
    return result


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a user",
    responses=NOT_FOUND_RESPONSE,
)
def delete_user(
    user_id: int,
    service: Annotated[UserService, Depends(get_user_service)],
):
    """Permanently remove a user."""
    logger.info(f"Request received: DELETE /users/{user_id}")
    result = service.delete_user(user_id)
    if isinstance(result, ServiceFailure):
        return failure_response(result)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
