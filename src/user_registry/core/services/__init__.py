"""Core services exports."""

# Database Service
from .database.db_manage import DbManageService
from .database.db_session import DbSessionService

# Registration validation
from .registration.validator import (
    Accepted,
    Rejected,
    Violation,
    validate_registration,
)

__all__ = [
    # Database Service
    "DbManageService",
    "DbSessionService",
    # Registration validation
    "Accepted",
    "Rejected",
    "Violation",
    "validate_registration",
]
