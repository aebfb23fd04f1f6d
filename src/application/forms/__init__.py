"""
Forms Package - Application Layer

Forms collect raw user input into typed attributes and validate it before
a use case acts on it.
"""

from .sign_up_form import SignUpForm

__all__ = ["SignUpForm"]
