"""FastAPI dependency implementations."""

from __future__ import annotations

from fastapi import Request

from src.user_registry.api.http.app_data import ApplicationDependencies
from src.user_registry.core.services.registration.registration_service import (
    RegistrationService,
)
from src.user_registry.core.storage import UserStore


def get_user_store(request: Request) -> UserStore:
    """Get the user store instance."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.user_store


def get_registration_service(request: Request) -> RegistrationService:
    """Get the registration service instance."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.registration_service
