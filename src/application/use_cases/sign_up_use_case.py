"""
Sign-Up Use Case - Application Layer

Registers a new account from a submitted :class:`SignUpForm` and sends the
welcome e-mail once the account exists.
"""

from typing import Optional

from dependency_injector.wiring import Provide, inject

from src.application.forms.sign_up_form import SignUpForm
from src.application.models import attribute
from src.application.use_cases.base import UseCase
from src.domain.entities.errors import RecordNotUniqueError
from src.domain.entities.user import User
from src.domain.ports.mailer import IMailer
from src.domain.repositories.user_repository import IUserRepository
from src.domain.services import hash_password
from src.shared import get_logger, retry_once

logger = get_logger(__name__)

USERNAME_TAKEN = "has already been taken"


class SignUpUseCase(UseCase):
    """Use case for registering a user."""

    form = attribute(SignUpForm)

    @inject
    def __init__(
        self,
        form: SignUpForm,
        user_repository: IUserRepository = Provide["user_repository"],
        mailer: IMailer = Provide["mailer"],
    ):
        """
        Initialize the use case with its input and dependencies.

        Args:
            form: Submitted registration data
            user_repository: Storage for accounts
            mailer: Delivers the welcome e-mail
        """
        super().__init__(form=form)
        self.user_repository = user_repository
        self.mailer = mailer
        self.user: Optional[User] = None

    def perform(self) -> None:
        self._check_form()
        # A concurrent sign-up may claim the username between check and insert.
        self.user = retry_once(self._create_user, on=(RecordNotUniqueError,))
        logger.info(
            "sign_up.user_created",
            user_id=str(self.user.id),
            username=self.user.username,
        )
        self.mailer.deliver_welcome(self.user)

    def _check_form(self) -> None:
        if self.form is None:
            self.fail_now("Sign-up form is missing")
        if self.form.invalid():
            self.merge_errors(self.form)
            logger.debug("sign_up.form_invalid", fields=self.form.errors.fields())
            self.fail_now()

    def _create_user(self) -> User:
        username = self.form.username
        if self.user_repository.exists_with_username(username):
            logger.info("sign_up.username_taken", username=username)
            self.fail_now(USERNAME_TAKEN, field="username")
        return self.user_repository.create(
            User(
                username=username,
                email=self.form.normalized_email,
                password_digest=hash_password(self.form.password),
            )
        )
