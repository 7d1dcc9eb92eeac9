#!/usr/bin/env python
"""
Setup rápido para desenvolvimento local.

Este script:
1. Configura Django settings
2. Verifica conexão com o banco
3. Executa migrations
4. Cria webinars de exemplo (opcional)

Sem DATABASE_URL/DATABASE_HOST o settings usa SQLite.

Uso:
    python scripts/quick_setup.py
    python scripts/quick_setup.py --with-sample-data
"""

import os
import sys
import argparse
from datetime import datetime, timedelta, timezone

# Adicionar raiz do projeto ao path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def setup_django():
    """Configura Django para uso standalone."""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'src.config.settings')

    import django
    django.setup()


def run_migrations():
    """Executa migrations."""
    from django.core.management import call_command

    print("Running migrations...")
    call_command('migrate', verbosity=1)
    print("Migrations done.")


def create_sample_data():
    """Cria webinars de exemplo."""
    from src.core.shared.exceptions import EntityAlreadyExistsError
    from src.core.webinars.entities import WebinarEntity
    from src.config.container import get_container

    container = get_container()
    repo = container.webinar_repository()
    organizer_id = container.config.fallback_user_id()

    start = datetime.now(timezone.utc).replace(minute=0, second=0, microsecond=0) + timedelta(days=7)

    sample_webinars = [
        {
            'id': 'webinar-clean-architecture',
            'title': 'Clean Architecture in practice',
            'seats': 100,
        },
        {
            'id': 'webinar-testing-django',
            'title': 'Testing Django apps with pytest',
            'seats': 50,
        },
    ]

    print("Creating sample webinars...")

    for offset, data in enumerate(sample_webinars):
        webinar = WebinarEntity.create(
            organizer_id=organizer_id,
            start_date=start + timedelta(days=offset),
            end_date=start + timedelta(days=offset, hours=1),
            **data,
        )
        try:
            repo.create(webinar)
            print(f"   + {webinar.id} ({webinar.seats} seats)")
        except EntityAlreadyExistsError:
            print(f"   = {webinar.id} already exists")


def check_connection():
    """Verifica conexão com o banco."""
    from django.db import connection, DatabaseError

    print("Checking database connection...")

    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
        print("Connection OK.")
        return True
    except DatabaseError as e:
        print(f"Connection error: {e}")
        return False


def show_info():
    """Mostra informações do setup."""
    from django.conf import settings

    print("\n" + "=" * 60)
    print("Setup info")
    print("=" * 60)
    print(f"  Database Engine: {settings.DATABASES['default']['ENGINE']}")
    print(f"  Database Name: {settings.DATABASES['default']['NAME']}")
    print(f"  Debug Mode: {settings.DEBUG}")
    print(f"  Fallback user: {settings.WEBINARS_FALLBACK_USER_ID}")
    print("=" * 60)
    print("\nTry it:")
    print("   curl -X POST http://localhost:8000/webinars/webinar-clean-architecture/seats \\")
    print("        -H 'Content-Type: application/json' -d '{\"seats\": 150}'")
    print("\n")


def main():
    parser = argparse.ArgumentParser(description='Setup rápido para desenvolvimento')
    parser.add_argument(
        '--with-sample-data',
        action='store_true',
        help='Criar webinars de exemplo'
    )
    parser.add_argument(
        '--check-only',
        action='store_true',
        help='Apenas verificar conexão'
    )

    args = parser.parse_args()

    print("\n" + "=" * 60)
    print("Webinar Seats Manager - Quick Setup")
    print("=" * 60 + "\n")

    setup_django()

    if args.check_only:
        check_connection()
        return

    if not check_connection():
        print("\nMake sure the database is running.")
        return

    run_migrations()

    if args.with_sample_data:
        create_sample_data()

    show_info()


if __name__ == '__main__':
    main()
