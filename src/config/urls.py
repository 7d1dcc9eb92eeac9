"""
URL Configuration para Webinar Seats Manager.

Estrutura:
- /webinars/ - API de Webinars
- /health/ - Health check
"""

from django.http import JsonResponse
from django.urls import path, include


def health(request):
    return JsonResponse({'status': 'ok'})


urlpatterns = [
    path('webinars/', include('src.adapters.django_app.webinars.urls')),
    path('health/', health, name='health'),
]
