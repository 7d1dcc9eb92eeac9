"""
Dependency Injection Container.

Configura e gerencia todas as dependências da aplicação.
Usa dependency-injector para lazy-loading e injeção automática.

Padrões:
- Singleton: Uma instância para toda app (repositories)
- Factory: Nova instância por chamada (services)
- Configuration: Valores vindos do Django settings

Providers são declarados por caminho de import (string) para
que o módulo possa ser importado antes do django.setup().
"""

from typing import Optional

from dependency_injector import containers, providers


class Container(containers.DeclarativeContainer):
    """
    Container principal de Dependency Injection.

    Example:
        from src.config.container import get_container

        service = get_container().change_seats_service()
        service.execute(input_dto)
    """

    # =========================================================================
    # Configuration
    # =========================================================================

    config = providers.Configuration()

    # =========================================================================
    # Repositories (Singleton - uma instância por app)
    # =========================================================================

    webinar_repository = providers.Singleton(
        "src.adapters.django_app.webinars.repositories.DjangoWebinarRepository"
    )

    # =========================================================================
    # Services / Use Cases (Factory - nova instância por chamada)
    # =========================================================================

    change_seats_service = providers.Factory(
        "src.core.webinars.use_cases.ChangeSeatsService",
        webinar_repo=webinar_repository,
    )


# =============================================================================
# Container Global (Singleton)
# =============================================================================

_container: Optional[Container] = None


def get_container() -> Container:
    """
    Retorna instância global do container.

    Cria se não existir (lazy initialization) e carrega
    a configuração a partir do Django settings.
    """
    global _container

    if _container is None:
        from django.conf import settings

        _container = Container()
        _container.config.from_dict({
            'fallback_user_id': getattr(settings, 'WEBINARS_FALLBACK_USER_ID', 'test-user'),
        })

    return _container


def reset_container() -> None:
    """Reset do container (para testes)."""
    global _container
    _container = None


# =============================================================================
# Testing Container
# =============================================================================

class TestingContainer(containers.DeclarativeContainer):
    """
    Container para testes sem banco.

    Usa InMemory implementations para testes rápidos.

    Example:
        container = TestingContainer()
        container.webinar_repository().create(webinar)
        container.change_seats_service().execute(input_dto)
    """

    config = providers.Configuration()

    webinar_repository = providers.Singleton(
        "src.core.webinars.ports.InMemoryWebinarRepository"
    )

    change_seats_service = providers.Factory(
        "src.core.webinars.use_cases.ChangeSeatsService",
        webinar_repo=webinar_repository,
    )
