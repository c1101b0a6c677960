"""Registration request DTO."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class RegistrationRequest(BaseModel):
    """Payload accepted by the registration endpoint.

    Field order is the order violations are reported in.
    """

    model_config = ConfigDict(strict=True, frozen=True)

    username: str = Field(min_length=3, max_length=20, description="Public handle")
    email: EmailStr = Field(description="User's email address")
    password: str = Field(min_length=8, max_length=20, description="Plain password")
