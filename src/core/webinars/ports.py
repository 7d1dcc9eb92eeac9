"""
Ports (Interfaces) do Domínio de Webinars.

Define o contrato que os Adapters de infraestrutura devem implementar
para persistência de webinars.

Princípio:
    Core define interfaces → Adapters implementam
    Dependências sempre apontam para o Core

Example:
    # No Adapter (Django)
    class DjangoWebinarRepository(WebinarRepository):
        def update(self, webinar: WebinarEntity) -> None:
            ...
"""

from dataclasses import replace
from typing import Dict, Iterable, Optional, Protocol, runtime_checkable

from src.core.shared.exceptions import EntityAlreadyExistsError

from .entities import WebinarEntity
from .exceptions import WebinarNotFoundError


@runtime_checkable
class WebinarRepository(Protocol):
    """
    Interface para persistência de Webinars.

    Apenas as duas operações de que o use case precisa.
    Usando Protocol para duck typing.

    Implementações:
    - DjangoWebinarRepository (PostgreSQL/SQLite via ORM)
    - InMemoryWebinarRepository (para testes)
    """

    def find_by_id(self, webinar_id: str) -> Optional[WebinarEntity]:
        """
        Busca webinar por ID.

        Args:
            webinar_id: Identificador único do webinar

        Returns:
            Entidade encontrada ou None se não existir
        """
        ...

    def update(self, webinar: WebinarEntity) -> None:
        """
        Persiste o estado completo de um webinar existente.

        Não é upsert.

        Args:
            webinar: Entidade a ser persistida

        Raises:
            WebinarNotFoundError: Se não existe registro com o ID
        """
        ...


class InMemoryWebinarRepository:
    """
    Implementação em memória do WebinarRepository.

    Guarda e devolve cópias das entidades, então quem chama
    nunca compartilha estado com o que está armazenado.

    Não usar em produção!

    Example:
        repo = InMemoryWebinarRepository([webinar])
        found = repo.find_by_id(webinar.id)
    """

    def __init__(self, webinars: Optional[Iterable[WebinarEntity]] = None):
        self._webinars: Dict[str, WebinarEntity] = {}
        for webinar in webinars or []:
            self._webinars[webinar.id] = replace(webinar)

    def create(self, webinar: WebinarEntity) -> None:
        """Insere webinar novo."""
        if webinar.id in self._webinars:
            raise EntityAlreadyExistsError(
                f"Webinar {webinar.id} already exists",
                entity_type="Webinar",
                entity_id=webinar.id,
            )
        self._webinars[webinar.id] = replace(webinar)

    def find_by_id(self, webinar_id: str) -> Optional[WebinarEntity]:
        """Busca webinar por ID."""
        webinar = self._webinars.get(webinar_id)
        return replace(webinar) if webinar else None

    async def afind_by_id(self, webinar_id: str) -> Optional[WebinarEntity]:
        """Versão assíncrona de find_by_id."""
        return self.find_by_id(webinar_id)

    def update(self, webinar: WebinarEntity) -> None:
        """Substitui o webinar armazenado."""
        if webinar.id not in self._webinars:
            raise WebinarNotFoundError(webinar.id)
        self._webinars[webinar.id] = replace(webinar)

    def count(self) -> int:
        return len(self._webinars)

    def clear(self) -> None:
        """Limpa todos os dados (útil para testes)."""
        self._webinars.clear()
