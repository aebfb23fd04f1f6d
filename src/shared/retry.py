"""Retry a block of code exactly once when it raises a recoverable error."""

from functools import wraps
from typing import Any, Callable, Tuple, Type, TypeVar

from src.domain.entities.errors import RecoverableError
from src.shared.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

ErrorTypes = Tuple[Type[BaseException], ...]


def retry_once(
    func: Callable[..., T],
    *args: Any,
    on: ErrorTypes = (RecoverableError,),
    **kwargs: Any,
) -> T:
    """
    Call ``func`` and call it a second time if it raises one of ``on``.

    A second failure of the same kind propagates unchanged; there is never a
    third attempt. Errors outside ``on`` propagate on the first attempt.

    Args:
        func: The block to execute
        on: Error types considered recoverable

    Returns:
        The value returned by the successful attempt
    """
    try:
        return func(*args, **kwargs)
    except on as exc:
        logger.warning(
            "retry.attempt_failed",
            function=getattr(func, "__qualname__", repr(func)),
            error=str(exc),
            error_type=type(exc).__name__,
        )
    return func(*args, **kwargs)


def retrying_once(
    *error_types: Type[BaseException],
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """Decorator form of :func:`retry_once`."""

    recoverable: ErrorTypes = error_types or (RecoverableError,)

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> T:
            return retry_once(func, *args, on=recoverable, **kwargs)

        return wrapper

    return decorator
