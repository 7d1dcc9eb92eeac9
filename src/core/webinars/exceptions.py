"""
Exceções do Domínio de Webinars.

Taxonomia fechada de falhas da alteração de assentos. Nenhuma é
transitória: todas indicam divergência entre pedido e estado.
"""

from src.core.shared.exceptions import (
    BusinessRuleViolationError,
    EntityNotFoundError,
    PermissionDeniedError,
)


class WebinarNotFoundError(EntityNotFoundError):
    """Nenhum webinar com o ID informado."""

    def __init__(self, webinar_id: str = None):
        super().__init__(
            "Webinar not found",
            entity_type="Webinar",
            entity_id=webinar_id,
        )


class WebinarNotOrganizerError(PermissionDeniedError):
    """Usuário não é o organizador do webinar."""

    def __init__(self):
        super().__init__("User is not allowed to update this webinar")


class WebinarReduceSeatsError(BusinessRuleViolationError):
    """Novo número de assentos não é maior que o atual."""

    def __init__(self):
        super().__init__(
            "You cannot reduce the number of seats",
            rule="seats_cannot_decrease",
        )


class WebinarTooManySeatsError(BusinessRuleViolationError):
    """Número de assentos acima do teto."""

    def __init__(self, max_seats: int = 1000):
        self.max_seats = max_seats
        super().__init__(
            f"Webinar must have at most {max_seats} seats",
            rule="seats_ceiling",
        )
