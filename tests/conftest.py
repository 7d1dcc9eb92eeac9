"""
Configurações globais do Pytest para Webinar Seats Manager.

Este arquivo é carregado automaticamente pelo pytest e
fornece configuração do Django e fixtures compartilhadas.
"""

import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

# Adicionar raiz do projeto ao path para imports `src.*`
project_root_path = Path(__file__).parent.parent
sys.path.insert(0, str(project_root_path))


def pytest_configure(config):
    """Configura Django (SQLite em memória) e markers."""
    import django
    from django.conf import settings

    if not settings.configured:
        settings.configure(
            DEBUG=True,
            DATABASES={
                'default': {
                    'ENGINE': 'django.db.backends.sqlite3',
                    'NAME': ':memory:',
                }
            },
            INSTALLED_APPS=[
                'django.contrib.contenttypes',
                'django.contrib.auth',
                'django.contrib.sessions',
                'src.adapters.django_app.webinars',
            ],
            MIDDLEWARE=[
                'django.contrib.sessions.middleware.SessionMiddleware',
                'django.contrib.auth.middleware.AuthenticationMiddleware',
            ],
            ROOT_URLCONF='src.config.urls',
            DEFAULT_AUTO_FIELD='django.db.models.BigAutoField',
            USE_TZ=True,
            TIME_ZONE='UTC',
            SECRET_KEY='test-secret-key',
            WEBINARS_FALLBACK_USER_ID='test-user',
        )
        django.setup()

    config.addinivalue_line(
        "markers", "integration: marks tests that go from HTTP to the database"
    )


@pytest.fixture(scope="session")
def project_root():
    """Retorna o caminho raiz do projeto."""
    return project_root_path


@pytest.fixture
def alice():
    """Organizadora do webinar de exemplo."""
    from src.core.users.entities import UserEntity
    return UserEntity(id="user-alice-id", email="alice@example.com")


@pytest.fixture
def bob():
    """Usuário que não organiza o webinar de exemplo."""
    from src.core.users.entities import UserEntity
    return UserEntity(id="user-bob-id", email="bob@example.com")


@pytest.fixture
def sample_webinar(alice):
    """Webinar com 100 assentos organizado por alice."""
    from src.core.webinars.entities import WebinarEntity
    return WebinarEntity(
        id="webinar-id",
        organizer_id=alice.id,
        title="Webinar title",
        start_date=datetime(2024, 1, 1, 0, 0, tzinfo=timezone.utc),
        end_date=datetime(2024, 1, 1, 1, 0, tzinfo=timezone.utc),
        seats=100,
    )
