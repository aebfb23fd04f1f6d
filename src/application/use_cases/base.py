"""
Use Case Base - Application Layer

A use case models one user action. Concrete classes implement ``perform``
and are run through ``invoke``, which builds the instance, performs it
once and hands the finished instance back to the caller:

    use_case = SignUpUseCase.invoke(form)
    if use_case.succeeded():
        ...
    else:
        use_case.errors.full_messages()

Inside ``perform`` (or anything it calls) ``fail_now()`` stops the work
immediately and marks the use case as failed. Expected failures are
therefore reported through ``succeeded()`` and ``errors``, never raised.
Any other exception propagates unchanged out of ``invoke``.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, NoReturn, Optional, Type, TypeVar

from src.application.models.attributes import AttributeModel
from src.application.models.errors import BASE
from src.application.models.validations import Validatable
from src.domain.entities.errors import UsageError
from src.shared import get_logger

logger = get_logger(__name__)

U = TypeVar("U", bound="UseCase")


class Outcome(str, Enum):
    """Result of running a use case."""

    NOT_RUN = "not_run"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class _Abort(BaseException):
    # BaseException so that ``except Exception`` in domain code never
    # intercepts the signal on its way back to the run boundary.
    def __init__(self, token: object):
        super().__init__()
        self.token = token


class UseCase(AttributeModel, Validatable, ABC):
    """Base class for use cases: attributes, validations and outcome."""

    def __init__(self, **raw: Any):
        super().__init__(**raw)
        self._outcome = Outcome.NOT_RUN
        self._started = False
        self._token: Optional[object] = None

    @classmethod
    def invoke(cls: Type[U], *args: Any, **kwargs: Any) -> U:
        """Build a use case with the given arguments, run it and return it."""
        use_case = cls(*args, **kwargs)
        use_case.run()
        return use_case

    @abstractmethod
    def perform(self) -> None:
        """Do the work of the use case."""

    def run(self) -> "UseCase":
        """
        Perform the use case once and record its outcome.

        Raises:
            UsageError: If the use case was already run
        """
        if self._started:
            raise UsageError(
                f"{type(self).__name__} has already been performed",
                details={"outcome": self._outcome.value},
            )
        self._started = True
        token = object()
        self._token = token
        name = type(self).__name__
        logger.debug("use_case.started", use_case=name)

        try:
            self.perform()
        except _Abort as signal:
            if signal.token is not token:
                raise
            self._outcome = Outcome.FAILED
            logger.info(
                "use_case.failed",
                use_case=name,
                errors=self.errors.to_dict(),
            )
        except Exception as exc:
            logger.error(
                "use_case.errored",
                use_case=name,
                error=str(exc),
                exc_info=exc,
            )
            raise
        else:
            self._outcome = Outcome.SUCCEEDED
            logger.info("use_case.succeeded", use_case=name)
        finally:
            self._token = None

        return self

    def fail_now(
        self, message: Optional[str] = None, *, field: str = BASE
    ) -> NoReturn:
        """
        Stop ``perform`` immediately and mark the use case as failed.

        Args:
            message: Optional message recorded under ``field`` first
            field: Error key for ``message``; defaults to the whole object

        Raises:
            UsageError: If called while the use case is not performing
        """
        if self._token is None:
            raise UsageError(
                f"{type(self).__name__}.fail_now() called outside perform()"
            )
        if message is not None:
            self.errors.add(field, message)
        raise _Abort(self._token)

    def require_valid(self) -> None:
        """Run the declared validations and fail now if any of them fails."""
        if not self.valid():
            self.fail_now()

    @property
    def outcome(self) -> Outcome:
        return self._outcome

    def succeeded(self) -> bool:
        """
        Whether ``perform`` finished without failing.

        Raises:
            UsageError: If the use case has not finished performing
        """
        if self._outcome is Outcome.NOT_RUN:
            raise UsageError(
                f"{type(self).__name__} has not finished performing yet"
            )
        return self._outcome is Outcome.SUCCEEDED

    def failed(self) -> bool:
        return not self.succeeded()
