"""
Use Cases (Application Services) do Domínio de Webinars.

Use Cases implementados:
- ChangeSeatsService: Aumenta a capacidade de um webinar

Responsabilidades dos Use Cases:
- Buscar entidades via repositório
- Verificar autorização
- Delegar regras à entidade
- Persistir apenas depois de todas as validações

Princípios:
- Um Use Case = Uma operação de negócio
- Dependências injetadas (DI)
- Sem lógica de infraestrutura
"""

from .dtos import ChangeSeatsInputDTO
from .exceptions import WebinarNotFoundError, WebinarNotOrganizerError
from .ports import WebinarRepository


class ChangeSeatsService:
    """
    Use Case: Alterar número de assentos de um webinar.

    Fluxo:
    1. Buscar webinar (WebinarNotFoundError se ausente)
    2. Verificar organizador (WebinarNotOrganizerError)
    3. Validar novo valor na entidade
       (WebinarReduceSeatsError, WebinarTooManySeatsError)
    4. Persistir via repositório

    Uma leitura sempre; uma escrita só no caminho de sucesso.
    Sem locking: chamadas concorrentes no mesmo webinar
    terminam com o último escritor vencendo.

    Example:
        service = ChangeSeatsService(webinar_repo)
        service.execute(ChangeSeatsInputDTO(
            user=alice,
            webinar_id="webinar-id",
            seats=200,
        ))
    """

    def __init__(self, webinar_repo: WebinarRepository):
        self.webinar_repo = webinar_repo

    def execute(self, input_dto: ChangeSeatsInputDTO) -> None:
        """
        Executa alteração de assentos.

        Args:
            input_dto: Usuário, ID do webinar e novo valor

        Raises:
            WebinarNotFoundError: Se webinar não existe
            WebinarNotOrganizerError: Se usuário não é o organizador
            WebinarReduceSeatsError: Se novo valor <= atual
            WebinarTooManySeatsError: Se novo valor > 1000
        """
        webinar = self.webinar_repo.find_by_id(input_dto.webinar_id)

        if webinar is None:
            raise WebinarNotFoundError(input_dto.webinar_id)

        if not webinar.is_organizer(input_dto.user):
            raise WebinarNotOrganizerError()

        webinar.change_seats(input_dto.seats)

        self.webinar_repo.update(webinar)
