"""Input for the sign-up use case."""

from typing import Optional

from src.application.models import (
    AttributeModel,
    Validatable,
    acceptance,
    attribute,
    confirmation_of,
    length,
    matches,
    presence,
    validates,
)

USERNAME_PATTERN = r"[a-z0-9_]+"
EMAIL_PATTERN = r"[^@\s]+@[^@\s]+\.[^@\s]+"
MIN_PASSWORD_LENGTH = 8


class SignUpForm(AttributeModel, Validatable):
    """Registration data as submitted by the user."""

    username = attribute(str)
    email = attribute(str)
    password = attribute(str)
    password_confirmation = attribute(str)
    accept_terms = attribute(bool, default=False)

    validations = (
        validates(
            "username",
            presence(),
            length(minimum=3, maximum=30),
            matches(
                USERNAME_PATTERN,
                "may only contain lowercase letters, digits and underscores",
            ),
        ),
        validates(
            "email",
            presence(),
            matches(EMAIL_PATTERN, "is not a valid e-mail address"),
        ),
        validates("password", presence(), length(minimum=MIN_PASSWORD_LENGTH)),
        validates("password_confirmation", confirmation_of("password")),
        validates("accept_terms", acceptance()),
    )

    @property
    def normalized_email(self) -> Optional[str]:
        return self.email.strip().lower() if self.email else None
