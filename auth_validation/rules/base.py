from abc import ABC, abstractmethod
from typing import Optional

from pydantic import BaseModel, ConfigDict


class BaseRule(BaseModel, ABC):
    """
    Classe base abstrata para todas as regras de validação de campo.
    Cada regra é imutável e declarada na construção do schema.
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    # Identifica a variante da regra (ex: "length", "email_format")
    kind: str
    # Mensagem adicionada ao resultado quando a regra falha
    message: str = "Valor inválido"

    @abstractmethod
    def check(self, value: Optional[str]) -> bool:
        """
        Verifica a regra contra o valor de um campo.

        Args:
            value (Optional[str]): O valor do campo; None quando ausente.

        Returns:
            bool: True se o valor satisfaz a regra.
        """
        pass

    def bypasses(self, value: Optional[str], present: bool) -> bool:
        """Indica se o campo deve ser aceito sem avaliar as regras restantes."""
        return False
