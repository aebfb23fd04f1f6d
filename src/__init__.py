"""
Source Code Root Module

This module serves as the root for the source code of the application.

Layer Structure:
- Domain: Core business entities, errors, repository and port interfaces
- Application: Use cases, forms, DTOs and the attribute/validation models
- Infrastructure: Implementations of domain repositories and ports
- Shared: Cross-cutting concerns and shared utilities
- Main: Composition root and configuration
"""
