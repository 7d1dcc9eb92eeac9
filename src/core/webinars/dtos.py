"""
Data Transfer Objects (DTOs) do Domínio de Webinars.

DTOs são estruturas simples para transportar dados entre camadas,
evitando vazamento de modelos internos para camadas externas.
"""

from dataclasses import dataclass

from src.core.users.entities import UserEntity


@dataclass(frozen=True)
class ChangeSeatsInputDTO:
    """
    DTO de entrada para alterar assentos.

    Imutável (frozen=True) para garantir que dados
    validados não sejam alterados acidentalmente.

    Attributes:
        user: Usuário que pede a alteração
        webinar_id: ID do webinar
        seats: Novo número de assentos
    """

    user: UserEntity
    webinar_id: str
    seats: int

    def to_dict(self) -> dict:
        return {
            "user_id": self.user.id,
            "webinar_id": self.webinar_id,
            "seats": self.seats,
        }
