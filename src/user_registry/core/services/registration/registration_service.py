"""Registration flow: validate the payload, then insert it into the user store."""

from dataclasses import dataclass
from typing import Any

from loguru import logger

from src.user_registry.core.errors import DuplicateEmailError, StoreUnavailableError
from src.user_registry.core.services.registration.validator import (
    Rejected,
    validate_registration,
)
from src.user_registry.core.storage import UserStore
from src.user_registry.entities.user import User


@dataclass(frozen=True)
class Registered:
    user: User


class RegistrationService:
    """Validate-then-persist flow for new users."""

    def __init__(self, store: UserStore):
        self._store = store

    def list_users(self) -> list[User]:
        try:
            return self._store.list_all()
        except StoreUnavailableError as e:
            logger.bind(operation="list_all", error=str(e)).error("User store unavailable")
            raise

    def register(self, payload: Any) -> Registered | Rejected:
        """Register a user from a raw payload.

        Returns ``Rejected`` without touching the store when validation
        fails. Store errors are raised to the caller after a single attempt.

        Raises:
            DuplicateEmailError: The email is already registered
            StoreUnavailableError: The store could not persist the user
        """
        outcome = validate_registration(payload)
        if isinstance(outcome, Rejected):
            logger.bind(fields=outcome.fields).info("Registration rejected")
            return outcome

        try:
            user = self._store.insert(outcome.request)
        except DuplicateEmailError:
            logger.info("Registration conflict: email already registered")
            raise
        except StoreUnavailableError as e:
            # Payload contents stay out of the log
            logger.bind(operation="insert", error=str(e)).error("User store unavailable")
            raise

        logger.bind(user_id=user.id).info("User registered")
        return Registered(user)
