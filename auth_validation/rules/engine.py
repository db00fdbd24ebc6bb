# auth_validation/rules/engine.py
import logging
from typing import Any, Mapping

from auth_validation.models.validation_result import ValidationResult
from auth_validation.rules.base import BaseRule
from auth_validation.rules.schemas import FieldSchema, FieldRules
from auth_validation.utils.error_handlers import INVALID_INPUT_KIND_MESSAGE

logger = logging.getLogger(__name__)


def _rule_passes(rule: BaseRule, field: str, value: Any) -> bool:
    try:
        return rule.check(value)
    except Exception as e:
        # Predicado com defeito conta como falha da regra
        logger.error(f"Regra '{rule.kind}' falhou com exceção no campo '{field}': {e}", exc_info=True)
        return False


def _evaluate_field(entry: FieldRules, payload: Mapping[str, Any], result: ValidationResult) -> None:
    present = entry.field in payload
    value = payload.get(entry.field)

    if any(rule.bypasses(value, present) for rule in entry.rules):
        return

    if value is not None and not isinstance(value, str):
        logger.debug(f"Campo '{entry.field}' com tipo inválido: {type(value).__name__}")
        result.add(entry.field, INVALID_INPUT_KIND_MESSAGE)
        return

    for rule in entry.rules:
        if not _rule_passes(rule, entry.field, value):
            logger.debug(f"Campo '{entry.field}' reprovado na regra '{rule.kind}'.")
            result.add(entry.field, rule.message)


def evaluate(schema: FieldSchema, payload: Mapping[str, Any]) -> ValidationResult:
    """
    Avalia um payload contra um schema.

    Todas as regras de cada campo são avaliadas, na ordem de declaração;
    cada regra reprovada adiciona sua própria mensagem. A única exceção é o
    campo opcional ausente, que dispensa as demais regras.

    Args:
        schema (FieldSchema): O schema com as regras por campo.
        payload (Mapping[str, Any]): Os dados recebidos, por nome de campo.

    Returns:
        ValidationResult: Mensagens de falha por campo. Vazio quando aceito.
    """
    result = ValidationResult()
    if not isinstance(payload, Mapping):
        logger.warning(f"Payload do tipo {type(payload).__name__} tratado como vazio no schema '{schema.name}'.")
        payload = {}

    for entry in schema.field_rules:
        _evaluate_field(entry, payload, result)
    return result
