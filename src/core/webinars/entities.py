"""
Entidades do Domínio de Webinars.

Entidades:
- WebinarEntity: Agregado principal do domínio

Regras de Negócio Encapsuladas:
- Validação de datas e assentos na criação
- Verificação de organizador
- Assentos só aumentam e nunca passam do teto
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import ClassVar, Optional
import uuid

from src.core.shared.exceptions import ValidationError
from src.core.users.entities import UserEntity

from .exceptions import WebinarReduceSeatsError, WebinarTooManySeatsError


@dataclass
class WebinarEntity:
    """
    Entidade de Domínio: Webinar.

    Invariantes:
    - Data de término estritamente depois da data de início
      (verificada em `create`, não na carga do repositório)
    - Assentos entre 1 e MAX_SEATS
    - Alteração de assentos só aumenta o valor

    Attributes:
        id: Identificador único
        organizer_id: ID do usuário dono do webinar
        title: Título
        start_date: Início (timezone-aware)
        end_date: Término (timezone-aware)
        seats: Capacidade de assentos

    Example:
        webinar = WebinarEntity.create(
            organizer_id="user-alice-id",
            title="Clean Architecture",
            start_date=start,
            end_date=end,
            seats=100,
        )

        webinar.change_seats(200)
    """

    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    organizer_id: str = ""
    title: str = ""
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    seats: int = 1

    MIN_SEATS: ClassVar[int] = 1
    MAX_SEATS: ClassVar[int] = 1000

    @classmethod
    def create(
        cls,
        organizer_id: str,
        title: str,
        start_date: datetime,
        end_date: datetime,
        seats: int,
        id: Optional[str] = None,
    ) -> "WebinarEntity":
        """
        Factory method para criar webinar com validações.

        Args:
            organizer_id: ID do organizador
            title: Título do webinar
            start_date: Data/hora de início
            end_date: Data/hora de término
            seats: Capacidade inicial
            id: ID explícito (default: UUID novo)

        Returns:
            Nova instância de WebinarEntity

        Raises:
            ValidationError: Se dados de entrada inválidos
            WebinarTooManySeatsError: Se seats acima do teto
        """
        if not organizer_id:
            raise ValidationError("Organizer is required", field="organizer_id")

        if not title or not title.strip():
            raise ValidationError("Title is required", field="title")

        if end_date <= start_date:
            raise ValidationError(
                "End date must be after start date",
                field="end_date"
            )

        if seats < cls.MIN_SEATS:
            raise ValidationError(
                f"Webinar must have at least {cls.MIN_SEATS} seat",
                field="seats"
            )

        if seats > cls.MAX_SEATS:
            raise WebinarTooManySeatsError(cls.MAX_SEATS)

        kwargs = {"id": id} if id else {}
        return cls(
            organizer_id=organizer_id,
            title=title.strip(),
            start_date=start_date,
            end_date=end_date,
            seats=seats,
            **kwargs,
        )

    def is_organizer(self, user: UserEntity) -> bool:
        """Verifica se o usuário é o organizador."""
        return user.id == self.organizer_id

    def change_seats(self, seats: int) -> None:
        """
        Altera a capacidade de assentos.

        Regras (nesta ordem):
        - Novo valor deve ser estritamente maior que o atual
        - Novo valor não pode passar de MAX_SEATS (inclusivo)

        Nada é alterado se alguma regra falhar.

        Raises:
            WebinarReduceSeatsError: Se seats <= atual
            WebinarTooManySeatsError: Se seats > MAX_SEATS
        """
        if seats <= self.seats:
            raise WebinarReduceSeatsError()

        if seats > self.MAX_SEATS:
            raise WebinarTooManySeatsError(self.MAX_SEATS)

        self.seats = seats

    def __repr__(self) -> str:
        return (
            f"WebinarEntity("
            f"id={self.id}, "
            f"organizer_id={self.organizer_id}, "
            f"seats={self.seats}"
            f")"
        )

    def __eq__(self, other: object) -> bool:
        """Comparação por ID (identidade de entidade)."""
        if not isinstance(other, WebinarEntity):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
