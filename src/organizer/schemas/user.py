"""User and authentication Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field

from organizer.schemas.state import UserState


class Credentials(BaseModel):
    """Schema for login and registration requests."""

    # Missing fields reach the service so that they fail the same way an
    # unknown user does
    username: str | None = Field(None, description="Account name")
    password: str | None = Field(None, description="Password")


class LoginResponse(BaseModel):
    """Schema for a successful login."""

    token: str
    state: UserState


class RegistrationResponse(BaseModel):
    """Schema for a successful registration."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(..., alias="userID")
    state: UserState


class MessageResponse(BaseModel):
    """Schema for a failure carrying a message."""

    message: str
