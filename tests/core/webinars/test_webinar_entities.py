"""
Testes Unitários para Entidades do Domínio de Webinars.

Coverage:
- WebinarEntity.create(): Validações de criação
- WebinarEntity.is_organizer(): Verificação de organizador
- WebinarEntity.change_seats(): Regras de assentos
- Exceções do domínio (mensagens, códigos, to_dict)
"""

import pytest
from datetime import datetime, timedelta, timezone

from src.core.users.entities import UserEntity
from src.core.webinars.entities import WebinarEntity
from src.core.webinars.exceptions import (
    WebinarNotFoundError,
    WebinarNotOrganizerError,
    WebinarReduceSeatsError,
    WebinarTooManySeatsError,
)
from src.core.shared.exceptions import (
    BusinessRuleViolationError,
    DomainException,
    EntityNotFoundError,
    PermissionDeniedError,
    ValidationError,
)


START = datetime(2024, 1, 1, 10, 0, tzinfo=timezone.utc)
END = START + timedelta(hours=1)


class TestWebinarEntityCreate:
    """Testes para criação de webinars."""

    def test_create_valid_webinar(self):
        """Deve criar webinar com dados válidos."""
        webinar = WebinarEntity.create(
            organizer_id="user-alice-id",
            title="  Webinar title  ",
            start_date=START,
            end_date=END,
            seats=100,
        )

        assert len(webinar.id) == 36  # UUID
        assert webinar.organizer_id == "user-alice-id"
        assert webinar.title == "Webinar title"
        assert webinar.seats == 100

    def test_create_with_explicit_id(self):
        """Deve respeitar ID informado."""
        webinar = WebinarEntity.create(
            id="webinar-id",
            organizer_id="user-alice-id",
            title="Webinar title",
            start_date=START,
            end_date=END,
            seats=100,
        )

        assert webinar.id == "webinar-id"

    def test_create_end_before_start_fails(self):
        """Deve rejeitar término antes do início."""
        with pytest.raises(ValidationError) as exc_info:
            WebinarEntity.create(
                organizer_id="user-alice-id",
                title="Webinar title",
                start_date=END,
                end_date=START,
                seats=100,
            )

        assert exc_info.value.field == "end_date"

    def test_create_end_equal_start_fails(self):
        """Término igual ao início também é inválido."""
        with pytest.raises(ValidationError):
            WebinarEntity.create(
                organizer_id="user-alice-id",
                title="Webinar title",
                start_date=START,
                end_date=START,
                seats=100,
            )

    def test_create_without_organizer_fails(self):
        """Deve exigir organizador."""
        with pytest.raises(ValidationError) as exc_info:
            WebinarEntity.create(
                organizer_id="",
                title="Webinar title",
                start_date=START,
                end_date=END,
                seats=100,
            )

        assert exc_info.value.field == "organizer_id"

    def test_create_blank_title_fails(self):
        """Deve exigir título."""
        with pytest.raises(ValidationError) as exc_info:
            WebinarEntity.create(
                organizer_id="user-alice-id",
                title="   ",
                start_date=START,
                end_date=END,
                seats=100,
            )

        assert exc_info.value.field == "title"

    def test_create_zero_seats_fails(self):
        """Deve exigir pelo menos 1 assento."""
        with pytest.raises(ValidationError) as exc_info:
            WebinarEntity.create(
                organizer_id="user-alice-id",
                title="Webinar title",
                start_date=START,
                end_date=END,
                seats=0,
            )

        assert exc_info.value.field == "seats"

    def test_create_too_many_seats_fails(self):
        """Deve rejeitar mais de 1000 assentos."""
        with pytest.raises(WebinarTooManySeatsError):
            WebinarEntity.create(
                organizer_id="user-alice-id",
                title="Webinar title",
                start_date=START,
                end_date=END,
                seats=1001,
            )


class TestWebinarEntityOrganizer:
    """Testes para is_organizer."""

    def test_organizer_matches(self, sample_webinar, alice):
        assert sample_webinar.is_organizer(alice) is True

    def test_other_user_is_not_organizer(self, sample_webinar, bob):
        assert sample_webinar.is_organizer(bob) is False

    def test_compares_by_id_only(self, sample_webinar):
        """Email não influencia a autorização."""
        impostor = UserEntity(id="user-alice-id", email="other@example.com")
        assert sample_webinar.is_organizer(impostor) is True


class TestWebinarEntityChangeSeats:
    """Testes para change_seats."""

    def test_increase_seats(self, sample_webinar):
        sample_webinar.change_seats(200)
        assert sample_webinar.seats == 200

    def test_ceiling_is_inclusive(self, sample_webinar):
        """1000 assentos é permitido."""
        sample_webinar.change_seats(1000)
        assert sample_webinar.seats == 1000

    def test_reduce_seats_fails(self, sample_webinar):
        with pytest.raises(WebinarReduceSeatsError):
            sample_webinar.change_seats(50)

        assert sample_webinar.seats == 100

    def test_same_seats_fails(self, sample_webinar):
        """Valor igual ao atual não é aumento."""
        with pytest.raises(WebinarReduceSeatsError):
            sample_webinar.change_seats(100)

        assert sample_webinar.seats == 100

    def test_above_ceiling_fails(self, sample_webinar):
        with pytest.raises(WebinarTooManySeatsError):
            sample_webinar.change_seats(1001)

        assert sample_webinar.seats == 100

    def test_reduce_checked_before_ceiling(self):
        """Com os dois problemas, o de redução vem primeiro."""
        webinar = WebinarEntity(id="w", organizer_id="u", seats=1000)
        webinar.seats = 1500  # estado fora do invariante, vindo de fora do core

        with pytest.raises(WebinarReduceSeatsError):
            webinar.change_seats(1200)


class TestWebinarEntityIdentity:
    """Testes de igualdade por ID."""

    def test_equal_by_id(self, sample_webinar):
        other = WebinarEntity(id=sample_webinar.id, organizer_id="x", seats=5)
        assert other == sample_webinar
        assert hash(other) == hash(sample_webinar)

    def test_not_equal_to_other_types(self, sample_webinar):
        assert sample_webinar != "webinar-id"


class TestWebinarExceptions:
    """Mensagens e hierarquia das exceções."""

    def test_not_found(self):
        error = WebinarNotFoundError("missing")

        assert isinstance(error, EntityNotFoundError)
        assert error.message == "Webinar not found"
        assert error.to_dict() == {
            "error": "ENTITY_NOT_FOUND",
            "message": "Webinar not found",
            "entity_type": "Webinar",
            "entity_id": "missing",
        }

    def test_not_organizer(self):
        error = WebinarNotOrganizerError()

        assert isinstance(error, PermissionDeniedError)
        assert error.message == "User is not allowed to update this webinar"
        assert str(error) == "[PERMISSION_DENIED] User is not allowed to update this webinar"

    def test_reduce_seats(self):
        error = WebinarReduceSeatsError()

        assert isinstance(error, BusinessRuleViolationError)
        assert error.rule == "seats_cannot_decrease"
        assert error.message == "You cannot reduce the number of seats"

    def test_too_many_seats(self):
        error = WebinarTooManySeatsError()

        assert isinstance(error, BusinessRuleViolationError)
        assert error.rule == "seats_ceiling"
        assert error.message == "Webinar must have at most 1000 seats"

    def test_all_are_domain_exceptions(self):
        for error in (
            WebinarNotFoundError(),
            WebinarNotOrganizerError(),
            WebinarReduceSeatsError(),
            WebinarTooManySeatsError(),
        ):
            assert isinstance(error, DomainException)
