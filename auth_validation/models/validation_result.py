# auth_validation/models/validation_result.py
from typing import Dict, List

from pydantic import BaseModel, Field


class ValidationResult(BaseModel):
    """
    Resultado de uma validação: mensagens de falha agrupadas por campo.
    Campo ausente do mapa, ou com lista vazia, é considerado válido.
    """
    errors: Dict[str, List[str]] = Field(default_factory=dict, description="Mensagens de falha por campo, na ordem das regras.")

    def add(self, field: str, message: str) -> None:
        self.errors.setdefault(field, []).append(message)

    def messages(self, field: str) -> List[str]:
        return list(self.errors.get(field, []))

    @property
    def invalid_fields(self) -> List[str]:
        return [field for field, messages in self.errors.items() if messages]

    @property
    def is_valid(self) -> bool:
        return not self.invalid_fields

    def as_error_list(self) -> List[Dict[str, str]]:
        """
        Achata o resultado em uma lista de erros, um item por regra que falhou.

        Returns:
            List[Dict[str, str]]: Ex: [{"field": "name", "message": "..."}]
        """
        return [
            {"field": field, "message": message}
            for field, messages in self.errors.items()
            for message in messages
        ]
