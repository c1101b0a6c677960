"""User database table model."""

from sqlmodel import Field, SQLModel

from src.user_registry.entities.user.registration import RegistrationRequest


class UserTable(SQLModel, table=True):
    """Database persistence model for users.

    This represents how the User entity is stored in the database.
    It's separate from the domain entity so the column mapping stays explicit.
    """

    __tablename__ = "user"
    # Ids are never reused
    __table_args__ = {"sqlite_autoincrement": True}

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(nullable=False)
    email: str = Field(nullable=False, unique=True, index=True)
    password: str = Field(nullable=False)

    @classmethod
    def from_registration(cls, request: RegistrationRequest) -> "UserTable":
        return cls(
            name=request.username,
            email=request.email,
            password=request.password,
        )
