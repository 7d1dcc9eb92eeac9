"""
API Views JSON para o domínio de Webinars.

Endpoints:
- POST /webinars/<id>/seats - Alterar número de assentos

Formato:
- Entrada: JSON {"seats": <int>}
- Saída: {"message": ...} em sucesso, {"error": ...} em falha

Autenticação:
- Session, se o usuário estiver autenticado
- Senão, usuário fallback configurado no container
"""

import json
import logging
from typing import Dict

from django.http import HttpRequest, JsonResponse
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from src.core.shared.exceptions import (
    BusinessRuleViolationError,
    DomainException,
    EntityNotFoundError,
    PermissionDeniedError,
    ValidationError,
)
from src.core.users.entities import UserEntity
from src.core.webinars.dtos import ChangeSeatsInputDTO
from src.config.container import get_container

from .forms import ChangeSeatsForm

logger = logging.getLogger(__name__)


# =============================================================================
# Helpers
# =============================================================================

def error_response(message: str, status: int) -> JsonResponse:
    return JsonResponse({'error': message}, status=status)


def parse_json_body(request: HttpRequest) -> Dict:
    """
    Parseia body JSON do request.

    Raises:
        ValidationError: Se JSON inválido ou não for objeto
    """
    if not request.body:
        return {}

    try:
        data = json.loads(request.body)
    except ValueError as e:
        raise ValidationError(f"Invalid JSON: {e}")

    if not isinstance(data, dict):
        raise ValidationError("JSON body must be an object")

    return data


# =============================================================================
# Base API View
# =============================================================================

@method_decorator(csrf_exempt, name='dispatch')
class BaseAPIView(View):
    """
    View base para APIs JSON.

    Fornece:
    - Parsing de JSON
    - Acesso ao container DI
    - Tratamento de erros padronizado
    """

    def get_container(self):
        return get_container()

    def parse_body(self, request: HttpRequest) -> Dict:
        """Parseia body JSON."""
        return parse_json_body(request)

    def get_current_user(self, request: HttpRequest) -> UserEntity:
        """Usuário da sessão ou o fallback configurado."""
        user = getattr(request, 'user', None)
        if user is not None and user.is_authenticated:
            return UserEntity(id=str(user.pk), email=getattr(user, 'email', ''))
        return UserEntity(id=self.get_container().config.fallback_user_id())

    def handle_exception(self, e: Exception) -> JsonResponse:
        """
        Traduz exceções do domínio para respostas HTTP.

        Mapeamento por classe, nunca pela mensagem.
        """
        if isinstance(e, ValidationError):
            return error_response(e.message, 400)

        if isinstance(e, EntityNotFoundError):
            return error_response(e.message, 404)

        if isinstance(e, PermissionDeniedError):
            return error_response(e.message, 401)

        if isinstance(e, BusinessRuleViolationError):
            return error_response(e.message, 400)

        if isinstance(e, DomainException):
            return error_response(e.message, 400)

        # Erro inesperado
        logger.exception(f"Unexpected API error: {e}")
        return error_response("Internal server error", 500)


# =============================================================================
# Webinar API Views
# =============================================================================

class WebinarSeatsAPIView(BaseAPIView):
    """
    API para alterar assentos.

    POST /webinars/<id>/seats
    """

    http_method_names = ['post']

    def post(self, request: HttpRequest, pk: str) -> JsonResponse:
        """
        Altera número de assentos.

        Body JSON:
        {
            "seats": int (obrigatório)
        }
        """
        try:
            form = ChangeSeatsForm(self.parse_body(request))
            if not form.is_valid():
                return error_response(form.first_error(), 400)

            change_seats_service = self.get_container().change_seats_service()

            input_dto = ChangeSeatsInputDTO(
                user=self.get_current_user(request),
                webinar_id=pk,
                seats=form.cleaned_data['seats'],
            )

            change_seats_service.execute(input_dto)

            logger.info(f"API: Webinar seats changed: {input_dto.to_dict()}")

            return JsonResponse({'message': 'Seats updated'}, status=200)

        except Exception as e:
            return self.handle_exception(e)

