"""User storage interface and implementations.

Provides a single interface for the registered-user collection with an
in-memory variant and a database-backed variant, selected at startup.
"""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod

from loguru import logger
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import select

from src.user_registry.core.errors import DuplicateEmailError, StoreUnavailableError
from src.user_registry.core.services.database.db_manage import DbManageService
from src.user_registry.core.services.database.db_session import DbSessionService
from src.user_registry.entities.user import RegistrationRequest, User, UserTable
from src.user_registry.runtime.config.config_data import ConfigData


class UserStore(ABC):
    """Abstract interface for user storage backends."""

    @abstractmethod
    def list_all(self) -> list[User]:
        """Return every registered user.

        Returns:
            Users in insertion order, or an empty list
        """
        pass

    @abstractmethod
    def insert(self, request: RegistrationRequest) -> User:
        """Persist a validated registration under a fresh id.

        Args:
            request: Registration that already passed validation

        Returns:
            The stored user

        Raises:
            DuplicateEmailError: The email is already registered
            StoreUnavailableError: The backend could not complete the insert
        """
        pass

    @abstractmethod
    def health_check(self) -> bool:
        """Check if the storage backend is available."""
        pass

    def close(self) -> None:
        """Release backend resources."""


class InMemoryUserStore(UserStore):
    """Process-local user storage guarded by a lock."""

    def __init__(self):
        self._users: list[User] = []
        self._emails: set[str] = set()
        self._next_id = 1
        self._lock = threading.Lock()

    def list_all(self) -> list[User]:
        with self._lock:
            return list(self._users)

    def insert(self, request: RegistrationRequest) -> User:
        with self._lock:
            if request.email in self._emails:
                raise DuplicateEmailError(request.email)

            user = User.from_registration(self._next_id, request)
            self._next_id += 1
            self._users.append(user)
            self._emails.add(user.email)
            return user

    def health_check(self) -> bool:
        """In-memory storage is always available."""
        return True


class DatabaseUserStore(UserStore):
    """User storage backed by the ``user`` table."""

    def __init__(self, db_service: DbSessionService):
        self._db = db_service

    def list_all(self) -> list[User]:
        try:
            with self._db.session_scope() as session:
                rows = session.exec(select(UserTable).order_by(UserTable.id)).all()
                return [User.model_validate(row, from_attributes=True) for row in rows]
        except SQLAlchemyError as e:
            raise StoreUnavailableError("list_all", type(e).__name__) from e

    def insert(self, request: RegistrationRequest) -> User:
        row = UserTable.from_registration(request)
        try:
            with self._db.session_scope() as session:
                session.add(row)
                # Flush so the unique constraint fires inside this transaction
                session.flush()
                session.refresh(row)
                return User.model_validate(row, from_attributes=True)
        except IntegrityError as e:
            raise DuplicateEmailError(request.email) from e
        except SQLAlchemyError as e:
            raise StoreUnavailableError("insert", type(e).__name__) from e

    def health_check(self) -> bool:
        return self._db.health_check()

    def close(self) -> None:
        self._db.dispose()


def build_user_store(config: ConfigData) -> UserStore:
    """Create the storage backend named in the configuration."""
    backend = config.store.backend

    if backend == "memory":
        logger.info("User store: in-memory")
        return InMemoryUserStore()

    if backend == "database":
        db_service = DbSessionService(config)
        if config.store.create_tables:
            DbManageService(db_service.engine).create_all()
        logger.info("User store: database")
        return DatabaseUserStore(db_service)

    raise ValueError(f"Unknown user store backend: {backend}")
