"""
Django Models para o domínio de Webinars.

Estes models são ADAPTERS - implementam a persistência para as
entidades de domínio definidas em src/core/webinars/entities.py.

IMPORTANTE:
- Models NÃO contêm lógica de negócio
- Lógica de negócio fica nas Entities do Core
- Models são mapeados para/de Entities via Mappers
"""

from django.db import models
from django.utils import timezone


class WebinarModel(models.Model):
    """
    Model Django para persistência de Webinars.

    Fields:
        id: ID como primary key (gerado pela Entity)
        organizer_id: ID do usuário organizador (string, sem FK)
        title: Título
        start_date: Início
        end_date: Término
        seats: Capacidade de assentos
        created_at: Timestamp de criação
        updated_at: Timestamp de última atualização
    """

    id = models.CharField(
        max_length=36,
        primary_key=True,
        editable=False,
        help_text="ID único do webinar"
    )

    # Sem ForeignKey: integridade referencial fica fora do core
    organizer_id = models.CharField(
        max_length=100,
        db_index=True,
        help_text="ID do usuário organizador"
    )

    title = models.CharField(
        max_length=200,
        help_text="Título do webinar"
    )

    start_date = models.DateTimeField(
        db_index=True,
        help_text="Data/hora de início"
    )

    end_date = models.DateTimeField(
        help_text="Data/hora de término"
    )

    seats = models.PositiveIntegerField(
        help_text="Capacidade de assentos"
    )

    created_at = models.DateTimeField(
        default=timezone.now,
        help_text="Data/hora de criação"
    )

    updated_at = models.DateTimeField(
        auto_now=True,
        help_text="Data/hora da última atualização"
    )

    class Meta:
        db_table = 'webinars'
        verbose_name = 'Webinar'
        verbose_name_plural = 'Webinars'
        ordering = ['start_date']
        indexes = [
            models.Index(
                fields=['organizer_id', 'start_date'],
                name='webinars_organizer_start_idx',
            ),
        ]

    def __str__(self):
        return f"[{self.id}] {self.title}"

    def __repr__(self):
        return f"<WebinarModel id={self.id} seats={self.seats}>"
