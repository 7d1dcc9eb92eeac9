"""
Domínio de Webinars - Capacidade de Assentos.

Este módulo contém a lógica de negócio de alteração de assentos:
- Entidades (WebinarEntity)
- Use Cases (ChangeSeatsService)
- DTOs (ChangeSeatsInputDTO)
- Ports (WebinarRepository, InMemoryWebinarRepository)
- Exceções (WebinarNotFoundError, WebinarNotOrganizerError, ...)

Características do Domínio:
- Apenas o organizador altera assentos
- Assentos só aumentam
- Teto de 1000 assentos
"""

from .entities import WebinarEntity
from .exceptions import (
    WebinarNotFoundError,
    WebinarNotOrganizerError,
    WebinarReduceSeatsError,
    WebinarTooManySeatsError,
)
from .dtos import ChangeSeatsInputDTO
from .ports import WebinarRepository, InMemoryWebinarRepository
from .use_cases import ChangeSeatsService

__all__ = [
    # Entities
    "WebinarEntity",
    # Exceptions
    "WebinarNotFoundError",
    "WebinarNotOrganizerError",
    "WebinarReduceSeatsError",
    "WebinarTooManySeatsError",
    # DTOs
    "ChangeSeatsInputDTO",
    # Ports
    "WebinarRepository",
    "InMemoryWebinarRepository",
    # Use Cases
    "ChangeSeatsService",
]
