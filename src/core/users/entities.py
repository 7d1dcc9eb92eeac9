"""
Entidade de Usuário.

O core só usa o `id` do usuário como token de autorização.
Dados de perfil e autenticação ficam fora do domínio.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserEntity:
    """
    Identidade de um usuário.

    Attributes:
        id: Identificador único
        email: Email (informativo, não usado em regras)
    """

    id: str
    email: str = ""

    def __eq__(self, other: object) -> bool:
        """Comparação por ID (identidade de entidade)."""
        if not isinstance(other, UserEntity):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
