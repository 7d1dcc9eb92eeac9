"""
URL patterns para o domínio de Webinars.

Endpoints API JSON:
- POST /webinars/<id>/seats - Alterar número de assentos
"""

from django.urls import path
from . import api_views

app_name = 'webinars'

urlpatterns = [
    path('<str:pk>/seats', api_views.WebinarSeatsAPIView.as_view(), name='api_seats'),
]
