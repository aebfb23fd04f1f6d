"""DTOs describing the outcome of a sign-up attempt."""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from src.domain.entities.user import User


class UserDTO(BaseModel):
    """Public view of a registered user."""

    id: UUID = Field(description="User identifier")
    username: str = Field(description="Unique username")
    email: str = Field(description="Contact e-mail address")
    created_at: datetime = Field(description="Registration timestamp")

    @classmethod
    def from_domain(cls, user: User) -> "UserDTO":
        return cls(
            id=user.id,
            username=user.username,
            email=user.email,
            created_at=user.created_at,
        )


class SignUpResponseDTO(BaseModel):
    """Outcome of the sign-up use case, ready to hand to a caller."""

    succeeded: bool = Field(description="Whether the account was created")
    errors: Dict[str, List[str]] = Field(
        default_factory=dict, description="Field-keyed error messages"
    )
    messages: List[str] = Field(
        default_factory=list, description="Errors as full sentences"
    )
    user: Optional[UserDTO] = Field(default=None, description="Created user")

    model_config = {
        "json_schema_extra": {
            "example": {
                "succeeded": False,
                "errors": {"username": ["has already been taken"]},
                "messages": ["Username has already been taken"],
                "user": None,
            }
        }
    }

    @classmethod
    def from_use_case(cls, use_case) -> "SignUpResponseDTO":
        return cls(
            succeeded=use_case.succeeded(),
            errors=use_case.errors.to_dict(),
            messages=use_case.errors.full_messages(),
            user=UserDTO.from_domain(use_case.user) if use_case.user else None,
        )
