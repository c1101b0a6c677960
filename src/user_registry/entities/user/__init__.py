"""User entity module.

This module contains all User-related classes organized by responsibility:
- RegistrationRequest: Payload accepted at the registration endpoint
- User: Domain entity
- UserRead: Public response shape
- UserTable: Database persistence model
"""

from .entity import User, UserRead
from .registration import RegistrationRequest
from .table import UserTable

__all__ = ["RegistrationRequest", "User", "UserRead", "UserTable"]
