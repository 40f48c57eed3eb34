"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.

Request fields are typed Any on purpose: submissions reach the domain
validator as received, so a wrong type or a missing field gets the
same field-addressed message as any other rule violation.
"""

from typing import Any, Literal

from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    """Request model for account registration."""

    name: Any = Field(None, description="Display name (2-255 characters)")
    user_name: Any = Field(
        None,
        alias="userName",
        description="Unique handle: letters, numbers, underscores and hyphens",
    )
    email: Any = Field(None, description="Email address, stored lowercased")
    password: Any = Field(
        None,
        description="At least 8 characters with a lowercase letter, an uppercase letter and a digit",
    )
    role: Any = Field(None, description="applicant (default) or employer")
    confirm_password: Any = Field(
        None,
        alias="confirmPassword",
        description="Optional; when sent it must equal password",
    )

    def to_submission(self) -> dict[str, Any]:
        """Raw submission containing only the fields the client actually sent."""
        return self.model_dump(by_alias=True, exclude_unset=True)


class LoginRequest(BaseModel):
    """Request model for login."""

    email: Any = Field(None, description="Registered email address")
    password: Any = Field(None, description="Account password")

    def to_submission(self) -> dict[str, Any]:
        """Raw submission containing only the fields the client actually sent."""
        return self.model_dump(exclude_unset=True)


class OutcomeResponse(BaseModel):
    """Result envelope shared by registration and login."""

    status: Literal["SUCCESS", "ERROR"]
    message: str
