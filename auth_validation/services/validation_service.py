# auth_validation/services/validation_service.py

import logging
from typing import Any, Mapping, Optional

from auth_validation.config.settings import settings
from auth_validation.models.validation_result import ValidationResult
from auth_validation.rules.engine import evaluate
from auth_validation.rules.schemas import SCHEMAS, FieldSchema
from auth_validation.utils.error_handlers import SchemaNotFoundError

logger = logging.getLogger(__name__)


class ValidationService:
    """
    Ponto de entrada da validação de payloads de cadastro e login.
    Resolve o schema pelo seletor ('registration' ou 'login') e delega ao motor de regras.
    Não guarda estado mutável: pode ser compartilhado entre threads.
    """
    def __init__(self, schemas: Optional[Mapping[str, FieldSchema]] = None):
        self.schemas = schemas if schemas is not None else SCHEMAS
        logger.info(f"ValidationService inicializado com os schemas: {', '.join(self.schemas)} (LOG_LEVEL={settings.LOG_LEVEL}).")

    def _resolve_schema(self, schema_name: str) -> FieldSchema:
        schema = self.schemas.get(schema_name)
        if schema is None:
            logger.warning(f"Seletor de schema '{schema_name}' não suportado.")
            raise SchemaNotFoundError(schema_name)
        return schema

    def validate(self, schema_name: str, payload: Mapping[str, Any]) -> ValidationResult:
        """
        Valida um payload contra o schema selecionado.

        Args:
            schema_name (str): 'registration' ou 'login'.
            payload (Mapping[str, Any]): Os dados recebidos, por nome de campo.

        Returns:
            ValidationResult: Mensagens de falha por campo.

        Raises:
            SchemaNotFoundError: se o seletor não corresponde a um schema registrado.
        """
        schema = self._resolve_schema(schema_name)
        result = evaluate(schema, payload)
        if result.is_valid:
            logger.info(f"Payload aceito no schema '{schema.name}'.")
        else:
            # Apenas os nomes dos campos: senha e documentos não vão para o log
            logger.info(f"Payload rejeitado no schema '{schema.name}': campos inválidos={result.invalid_fields}")
        return result

    def validate_registration(self, payload: Mapping[str, Any]) -> ValidationResult:
        return self.validate("registration", payload)

    def validate_login(self, payload: Mapping[str, Any]) -> ValidationResult:
        return self.validate("login", payload)
