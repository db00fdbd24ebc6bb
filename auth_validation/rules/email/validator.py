# auth_validation/rules/email/validator.py

import logging
from typing import Any

from email_validator import EmailNotValidError, validate_email

logger = logging.getLogger(__name__)

# Domínios aceitos no cadastro. Comparação exata: sem trim e sensível a maiúsculas.
ALLOWED_DOMAINS = frozenset({"gmail.com", "hotmail.com", "yahoo.com"})


def extract_domain(email: Any) -> str:
    """
    Retorna tudo o que vem depois do primeiro '@'.
    Sem '@' (ou input que não é string) o domínio é vazio.
    """
    if not isinstance(email, str):
        return ""
    _, separator, domain = email.partition("@")
    return domain if separator else ""


def domain_allowed(email: Any) -> bool:
    """Verifica se o domínio do e-mail está na lista de domínios permitidos."""
    domain = extract_domain(email)
    return domain in ALLOWED_DOMAINS


def is_email_format(email: Any) -> bool:
    """
    Verifica o formato convencional do e-mail (local@dominio.tld).

    Usa a biblioteca 'email_validator' sem consulta DNS:
    `check_deliverability=False` mantém a validação pura, sem I/O.

    Args:
        email (Any): O endereço de e-mail a ser verificado.

    Returns:
        bool: True se o formato for válido.
    """
    if not isinstance(email, str) or not email:
        return False
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError as e:
        logger.debug(f"Formato de e-mail inválido: {e}")
        return False
    return True


# Nome usado nos schemas
domainAllowed = domain_allowed
