"""
Mappers para conversão entre Entities (Core) e Models (Django).

Princípios:
- Mappers são stateless
- Não contêm lógica de negócio
- Tratam apenas conversão de dados
"""

from src.core.webinars.entities import WebinarEntity

from .models import WebinarModel


class WebinarMapper:
    """
    Mapper para conversão entre WebinarEntity e WebinarModel.

    Responsável por:
    - to_model(): Entity → Model
    - to_entity(): Model → Entity
    - to_fields(): Entity → dict de colunas graváveis
    """

    @staticmethod
    def to_fields(entity: WebinarEntity) -> dict:
        """Colunas persistidas a partir da entidade (sem o ID)."""
        return {
            'organizer_id': entity.organizer_id,
            'title': entity.title,
            'start_date': entity.start_date,
            'end_date': entity.end_date,
            'seats': entity.seats,
        }

    @staticmethod
    def to_model(entity: WebinarEntity) -> WebinarModel:
        """
        Converte WebinarEntity para WebinarModel.

        Note:
            Não chama .save() - deixa isso para o Repository
        """
        return WebinarModel(id=entity.id, **WebinarMapper.to_fields(entity))

    @staticmethod
    def to_entity(model: WebinarModel) -> WebinarEntity:
        """
        Converte WebinarModel para WebinarEntity.

        Note:
            Bypassa validações do factory method .create()
            pois dados já foram validados na criação original
        """
        return WebinarEntity(
            id=model.id,
            organizer_id=model.organizer_id,
            title=model.title,
            start_date=model.start_date,
            end_date=model.end_date,
            seats=model.seats,
        )
