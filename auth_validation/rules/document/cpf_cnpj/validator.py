# auth_validation/rules/document/cpf_cnpj/validator.py
import re
from typing import Any, Iterator, Optional

CPF_LENGTH = 11
CNPJ_LENGTH = 14

_NON_DIGITS = re.compile(r'[^0-9]')


def normalize_digits(raw: Optional[str]) -> str:
    """Remove caracteres não numéricos do documento."""
    if not raw:
        return ""
    return _NON_DIGITS.sub('', str(raw))


def _has_valid_shape(digits: str, length: int) -> bool:
    # Tamanho exato e dígitos não todos iguais (ex: 111.111.111-11)
    return len(digits) == length and len(set(digits)) > 1


def _cpf_check_digit(digits: str, weight_start: int) -> int:
    total_sum = sum(int(digit) * (weight_start - i) for i, digit in enumerate(digits))
    rest = 11 - (total_sum % 11)
    return 0 if rest in (10, 11) else rest


def _cnpj_weights(size: int) -> Iterator[int]:
    """
    Gera a sequência cíclica de pesos do CNPJ.
    Começa em `size - 7`, decrementa a cada posição e volta para 9 abaixo de 2.
    """
    weight = size - 7
    for _ in range(size):
        yield weight
        weight -= 1
        if weight < 2:
            weight = 9


def _cnpj_check_digit(digits: str) -> int:
    total_sum = sum(int(digit) * weight for digit, weight in zip(digits, _cnpj_weights(len(digits))))
    remainder = total_sum % 11
    return 0 if remainder < 2 else 11 - remainder


def validate_cpf(value: Any) -> bool:
    """
    Valida um CPF pelos dígitos verificadores.

    O campo é opcional: valor ausente ou vazio é considerado válido.
    Aceita o documento formatado (ex: '111.444.777-35').

    Args:
        value (Any): O CPF em qualquer formato.

    Returns:
        bool: True se o CPF for válido ou ausente, False caso contrário.
    """
    if not value:
        return True
    if not isinstance(value, str):
        return False

    cpf = normalize_digits(value)
    if not _has_valid_shape(cpf, CPF_LENGTH):
        return False

    # Primeiro dígito verificador
    if _cpf_check_digit(cpf[:9], 10) != int(cpf[9]):
        return False

    # Segundo dígito verificador
    if _cpf_check_digit(cpf[:10], 11) != int(cpf[10]):
        return False

    return True


def validate_cnpj(value: Any) -> bool:
    """
    Valida um CNPJ pelos dígitos verificadores.

    O campo é opcional: valor ausente ou vazio é considerado válido.
    Aceita o documento formatado (ex: '11.444.777/0001-61').

    Args:
        value (Any): O CNPJ em qualquer formato.

    Returns:
        bool: True se o CNPJ for válido ou ausente, False caso contrário.
    """
    if not value:
        return True
    if not isinstance(value, str):
        return False

    cnpj = normalize_digits(value)
    if not _has_valid_shape(cnpj, CNPJ_LENGTH):
        return False

    size = CNPJ_LENGTH - 2
    if _cnpj_check_digit(cnpj[:size]) != int(cnpj[size]):
        return False

    # O segundo dígito inclui o primeiro dígito já verificado
    size += 1
    if _cnpj_check_digit(cnpj[:size]) != int(cnpj[size]):
        return False

    return True


# Nomes pelo tamanho do identificador
validate11 = validate_cpf
validate14 = validate_cnpj
