"""
Main module - Main/Composition Root Layer

This module wires the layers together.

Its primary responsibilities include:
- Loading settings from the environment
- Configuring logging
- Configuring dependencies and services (Composition Root)
"""

from .config import AppSettings, get_settings
from .container import AppContainer, get_container, init_container

__all__ = [
    "AppSettings",
    "get_settings",
    "AppContainer",
    "init_container",
    "get_container",
]
