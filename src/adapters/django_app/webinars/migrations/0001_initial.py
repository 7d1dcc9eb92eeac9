"""
Migration inicial para o domínio de Webinars.

Cria a tabela:
- webinars: Tabela principal de webinars
"""

from django.db import migrations, models
import django.utils.timezone


class Migration(migrations.Migration):
    """Migration inicial."""

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='WebinarModel',
            fields=[
                ('id', models.CharField(
                    max_length=36,
                    primary_key=True,
                    serialize=False,
                    editable=False,
                    help_text='ID único do webinar'
                )),
                ('organizer_id', models.CharField(
                    max_length=100,
                    db_index=True,
                    help_text='ID do usuário organizador'
                )),
                ('title', models.CharField(
                    max_length=200,
                    help_text='Título do webinar'
                )),
                ('start_date', models.DateTimeField(
                    db_index=True,
                    help_text='Data/hora de início'
                )),
                ('end_date', models.DateTimeField(
                    help_text='Data/hora de término'
                )),
                ('seats', models.PositiveIntegerField(
                    help_text='Capacidade de assentos'
                )),
                ('created_at', models.DateTimeField(
                    default=django.utils.timezone.now,
                    help_text='Data/hora de criação'
                )),
                ('updated_at', models.DateTimeField(
                    auto_now=True,
                    help_text='Data/hora da última atualização'
                )),
            ],
            options={
                'verbose_name': 'Webinar',
                'verbose_name_plural': 'Webinars',
                'db_table': 'webinars',
                'ordering': ['start_date'],
                'indexes': [
                    models.Index(
                        fields=['organizer_id', 'start_date'],
                        name='webinars_organizer_start_idx'
                    ),
                ],
            },
        ),
    ]
