"""
Fixtures para testes dos adapters Django.

Settings e django.setup() ficam no conftest raiz.
"""

import json
from datetime import datetime, timedelta, timezone

import pytest


@pytest.fixture
def webinar_model_factory(db):
    """Factory para criar WebinarModel para testes."""
    from src.adapters.django_app.webinars.models import WebinarModel
    import uuid

    start = datetime(2024, 1, 1, 0, 0, tzinfo=timezone.utc)

    def create_webinar(**kwargs):
        defaults = {
            'id': str(uuid.uuid4()),
            'organizer_id': 'user-alice-id',
            'title': 'Webinar title',
            'start_date': start,
            'end_date': start + timedelta(hours=1),
            'seats': 100,
        }
        defaults.update(kwargs)
        return WebinarModel.objects.create(**defaults)

    return create_webinar


@pytest.fixture
def django_webinar_repo():
    """Repositório Django (requer db)."""
    from src.adapters.django_app.webinars.repositories import DjangoWebinarRepository
    return DjangoWebinarRepository()


@pytest.fixture
def json_body():
    """Helper para ler o body JSON de uma resposta."""
    def parse(response):
        return json.loads(response.content)
    return parse
