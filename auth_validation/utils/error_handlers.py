import logging
from http import HTTPStatus
from typing import Any, Dict, Optional

from auth_validation.models.validation_result import ValidationResult

logger = logging.getLogger(__name__)

# Mensagem usada quando o valor de um campo não é string (InvalidInputKind)
INVALID_INPUT_KIND_MESSAGE = "Tipo de valor inválido"


class SchemaNotFoundError(KeyError):
    """Seletor de schema desconhecido. Erro de quem chama, não resultado de validação."""

    def __init__(self, schema_name: str):
        super().__init__(schema_name)
        self.schema_name = schema_name

    def __str__(self) -> str:
        return f"Schema de validação '{self.schema_name}' não encontrado."


def build_error_response(result: ValidationResult) -> Optional[Dict[str, Any]]:
    """
    Converte um resultado rejeitado no corpo de erro entregue ao cliente.
    Retorna None quando o payload foi aceito.
    """
    if result.is_valid:
        return None

    status_code = HTTPStatus.BAD_REQUEST
    errors = result.as_error_list()
    logger.info(f"Payload rejeitado: [Código: {int(status_code)}] campos={result.invalid_fields}")
    return {"status_code": int(status_code), "errors": errors}
