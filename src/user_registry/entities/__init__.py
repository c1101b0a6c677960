"""Entities module with an entity-centric structure.

Each entity has its own package containing its domain model, its request
DTOs and its database persistence model.
"""

from .user import RegistrationRequest, User, UserRead, UserTable

__all__ = [
    "RegistrationRequest",
    "User",
    "UserRead",
    "UserTable",
]
