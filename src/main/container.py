"""
Dependency container injection module - Main Layer

This module implements the dependency injection container
to simplify the management and lifecycle of dependencies
in the application.
"""

from dependency_injector import containers, providers

from src.application.use_cases.sign_up_use_case import SignUpUseCase
from src.infrastructure.repositories.in_memory_user_repository import (
    InMemoryUserRepository,
)
from src.infrastructure.services.logging_mailer import LoggingMailer
from src.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependency-injector."""

    wiring_config = containers.WiringConfiguration(packages=["..application"])

    # Settings
    config = providers.Configuration()

    # Infrastructure
    user_repository = providers.Singleton(InMemoryUserRepository)

    mailer = providers.Singleton(
        LoggingMailer,
        sender=config.mailer.sender,
        welcome_subject=config.mailer.welcome_subject,
    )

    # Application (use cases): calling the provider runs the use case
    sign_up_use_case = providers.Callable(
        SignUpUseCase.invoke,
        user_repository=user_repository,
        mailer=mailer,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    logger.debug("container.initialized", environment=settings.environment.value)
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container
