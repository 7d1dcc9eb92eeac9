"""
Configuração do Django App para Webinars.
"""

from django.apps import AppConfig


class WebinarsConfig(AppConfig):
    """Configuração do app Webinars."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'src.adapters.django_app.webinars'
    label = 'webinars'
    verbose_name = 'Gestão de Webinars'
