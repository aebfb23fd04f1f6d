"""
DTOs Package - Application Layer

Data Transfer Objects used to hand use case results to callers.
"""

from .sign_up_dto import SignUpResponseDTO, UserDTO

__all__ = ["SignUpResponseDTO", "UserDTO"]
