"""
Shared Domain Components.

Contém componentes compartilhados entre todos os domínios:
- Exceções de domínio
"""

from .exceptions import (
    DomainException,
    ValidationError,
    EntityNotFoundError,
    EntityAlreadyExistsError,
    PermissionDeniedError,
    BusinessRuleViolationError,
)

__all__ = [
    "DomainException",
    "ValidationError",
    "EntityNotFoundError",
    "EntityAlreadyExistsError",
    "PermissionDeniedError",
    "BusinessRuleViolationError",
]
