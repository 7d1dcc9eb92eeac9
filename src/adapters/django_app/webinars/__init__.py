"""
Django App de Webinars.

Persistência (models, mappers, repositories) e API HTTP
para o domínio definido em src/core/webinars.
"""
