"""Users API router: list and register users."""

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, status
from pydantic import BaseModel
from starlette.responses import JSONResponse

from src.user_registry.api.http.deps import get_registration_service
from src.user_registry.core.errors import DuplicateEmailError, StoreUnavailableError
from src.user_registry.core.services.registration.registration_service import (
    RegistrationService,
)
from src.user_registry.core.services.registration.validator import (
    Rejected,
    Violation,
)
from src.user_registry.entities.user import UserRead

router = APIRouter(prefix="/users", tags=["users"])


class ViolationOut(BaseModel):
    field: str
    reason: str


class ValidationErrorResponse(BaseModel):
    detail: str
    violations: list[ViolationOut]


class ErrorResponse(BaseModel):
    detail: str


def validation_error_response(violations: tuple[Violation, ...]) -> JSONResponse:
    body = ValidationErrorResponse(
        detail="Validation failed",
        violations=[ViolationOut(field=v.field, reason=v.reason) for v in violations],
    )
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump())


@router.get(
    "",
    response_model=list[UserRead],
    responses={500: {"model": ErrorResponse}},
)
def list_users(
    service: RegistrationService = Depends(get_registration_service),
) -> list[UserRead]:
    """List all registered users."""
    try:
        users = service.list_users()
    except StoreUnavailableError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="User store unavailable",
        ) from e
    return [UserRead.model_validate(user, from_attributes=True) for user in users]


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=UserRead,
    responses={
        400: {"model": ValidationErrorResponse},
        409: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def create_user(
    payload: Any = Body(...),
    service: RegistrationService = Depends(get_registration_service),
) -> Any:
    """Register a new user."""
    try:
        outcome = service.register(payload)
    except DuplicateEmailError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Email already registered",
        ) from e
    except StoreUnavailableError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="User store unavailable",
        ) from e

    if isinstance(outcome, Rejected):
        return validation_error_response(outcome.violations)

    return UserRead.model_validate(outcome.user, from_attributes=True)
