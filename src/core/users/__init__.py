"""
Domínio de Usuários.

Apenas a identidade necessária para checagens de autorização.
"""

from .entities import UserEntity

__all__ = ["UserEntity"]
