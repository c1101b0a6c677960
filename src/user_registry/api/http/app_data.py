from dataclasses import dataclass

from src.user_registry.core.services.registration.registration_service import (
    RegistrationService,
)
from src.user_registry.core.storage import UserStore


@dataclass
class ApplicationDependencies:
    user_store: UserStore
    registration_service: RegistrationService
