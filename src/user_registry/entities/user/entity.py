"""User domain entity."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from src.user_registry.entities.user.registration import RegistrationRequest


class User(BaseModel):
    """User entity representing a registered person.

    The store assigns ``id`` on insertion; it never changes afterwards.
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(description="Store-assigned identifier")
    name: str = Field(description="Display name, taken from the registration username")
    email: str = Field(description="User's email address, unique in the store")
    password: str = Field(description="Password as submitted at registration")

    @classmethod
    def from_registration(cls, user_id: int, request: RegistrationRequest) -> "User":
        """Build the stored user for a validated registration."""
        return cls(
            id=user_id,
            name=request.username,
            email=request.email,
            password=request.password,
        )

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, User):
            return False

        return (
            self.id == other.id
            and self.name == other.name
            and self.email == other.email
            and self.password == other.password
        )

    def __hash__(self) -> int:
        return hash((self.id, self.name, self.email, self.password))


class UserRead(BaseModel):
    """Public view of a user returned by the HTTP API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
