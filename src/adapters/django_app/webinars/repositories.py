"""
Repositórios Django para persistência de Webinars.

Implementam as interfaces (Ports) definidas no Core.
São DRIVEN ADAPTERS - acionados pelo Core em resposta a operações.

Responsabilidades:
- Implementar WebinarRepository protocol
- Mapear entities para models e vice-versa
- Executar queries no banco via ORM

Princípios:
- Repository não contém lógica de negócio
- Usa Mapper para conversões
- Trata apenas persistência
"""

from typing import Optional
import logging

from django.db import IntegrityError, transaction
from django.utils import timezone

from src.core.shared.exceptions import EntityAlreadyExistsError
from src.core.webinars.entities import WebinarEntity
from src.core.webinars.exceptions import WebinarNotFoundError
from src.core.webinars.ports import WebinarRepository as WebinarRepositoryPort

from .models import WebinarModel
from .mappers import WebinarMapper

logger = logging.getLogger(__name__)


class DjangoWebinarRepository(WebinarRepositoryPort):
    """
    Implementação Django do WebinarRepository.

    Example:
        repo = DjangoWebinarRepository()

        repo.create(webinar_entity)
        webinar = repo.find_by_id("webinar-id")
        repo.update(webinar)
    """

    def __init__(self):
        self._mapper = WebinarMapper()

    def create(self, webinar: WebinarEntity) -> None:
        """
        Insere webinar novo.

        Raises:
            EntityAlreadyExistsError: Se já existe webinar com o ID
        """
        logger.debug(f"Creating webinar: {webinar.id}")

        try:
            # atomic isola a falha sem quebrar uma transação externa
            with transaction.atomic():
                self._mapper.to_model(webinar).save(force_insert=True)
        except IntegrityError as e:
            raise EntityAlreadyExistsError(
                f"Webinar {webinar.id} already exists",
                entity_type="Webinar",
                entity_id=webinar.id,
            ) from e

        logger.info(f"Webinar created: {webinar.id}")

    def find_by_id(self, webinar_id: str) -> Optional[WebinarEntity]:
        """
        Busca webinar por ID.

        Returns:
            Entidade encontrada ou None
        """
        try:
            model = WebinarModel.objects.get(id=webinar_id)
            return self._mapper.to_entity(model)
        except WebinarModel.DoesNotExist:
            logger.debug(f"Webinar not found: {webinar_id}")
            return None

    def update(self, webinar: WebinarEntity) -> None:
        """
        Persiste estado completo de um webinar existente.

        Raises:
            WebinarNotFoundError: Se nenhuma linha corresponde ao ID
        """
        logger.debug(f"Updating webinar: {webinar.id}")

        # filter().update() não dispara auto_now
        fields = self._mapper.to_fields(webinar)
        fields['updated_at'] = timezone.now()

        updated = WebinarModel.objects.filter(id=webinar.id).update(**fields)

        if updated == 0:
            logger.debug(f"Webinar not found for update: {webinar.id}")
            raise WebinarNotFoundError(webinar.id)

        logger.info(f"Webinar updated: {webinar.id} (seats={webinar.seats})")
