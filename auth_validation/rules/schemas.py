# auth_validation/rules/schemas.py
import logging
from types import MappingProxyType
from typing import Mapping, Tuple

from pydantic import BaseModel, ConfigDict

from auth_validation.rules.base import BaseRule
from auth_validation.rules.document.cpf_cnpj.validator import validate_cnpj, validate_cpf
from auth_validation.rules.email.validator import domain_allowed
from auth_validation.rules.field_rules import CustomPredicate, EmailFormat, LengthBound, OptionalField, SetMembership
from auth_validation.rules.pessoa.genero.validator import ACCOUNT_TYPES, GENRE_OPTIONS, SEX_OPTIONS
from auth_validation.utils.error_handlers import SchemaNotFoundError

logger = logging.getLogger(__name__)


class FieldRules(BaseModel):
    """Regras de um campo, na ordem em que são avaliadas."""
    model_config = ConfigDict(frozen=True)

    field: str
    rules: Tuple[BaseRule, ...]


class FieldSchema(BaseModel):
    """Schema nomeado: campos e suas regras, na ordem de declaração."""
    model_config = ConfigDict(frozen=True)

    name: str
    field_rules: Tuple[FieldRules, ...]

    @property
    def field_names(self) -> Tuple[str, ...]:
        return tuple(entry.field for entry in self.field_rules)


def _field(field: str, *rules: BaseRule) -> FieldRules:
    return FieldRules(field=field, rules=rules)


REGISTRATION_SCHEMA = FieldSchema(
    name="registration",
    field_rules=(
        _field("name", LengthBound(min_length=6, max_length=50, message="O nome não condiz com os limites de tamanho")),
        _field(
            "email",
            LengthBound(min_length=7, max_length=50, message="Email inválido"),
            EmailFormat(message="Email inválido"),
            CustomPredicate(predicate=domain_allowed, message="O dominio do email não é permitido"),
        ),
        _field("password", LengthBound(min_length=8, max_length=100, message="A senha não condiz com os limites de tamanho")),
        _field("CPF", OptionalField(nullable=True), CustomPredicate(predicate=validate_cpf, message="CPF inválido")),
        _field("CNPJ", OptionalField(nullable=True), CustomPredicate(predicate=validate_cnpj, message="CNPJ inválido")),
        _field("type", SetMembership(allowed_values=ACCOUNT_TYPES, message="Type inválido")),
        _field("sex", SetMembership(allowed_values=SEX_OPTIONS, message="Sexo inválido")),
        _field("genre", SetMembership(allowed_values=GENRE_OPTIONS, message="Gênero inválido")),
    ),
)

LOGIN_SCHEMA = FieldSchema(
    name="login",
    field_rules=(
        _field(
            "email",
            LengthBound(min_length=7, max_length=50, message="Email inválido para login"),
            EmailFormat(message="Email inválido para login"),
        ),
        _field("password", LengthBound(min_length=8, max_length=100, message="Senha incorreta")),
    ),
)

SCHEMAS: Mapping[str, FieldSchema] = MappingProxyType({
    REGISTRATION_SCHEMA.name: REGISTRATION_SCHEMA,
    LOGIN_SCHEMA.name: LOGIN_SCHEMA,
})


def get_schema(name: str) -> FieldSchema:
    """
    Retorna o schema registrado com o nome informado.

    Raises:
        SchemaNotFoundError: se o nome não corresponde a nenhum schema.
    """
    try:
        return SCHEMAS[name]
    except KeyError:
        logger.warning(f"Schema '{name}' não registrado. Disponíveis: {', '.join(SCHEMAS)}.")
        raise SchemaNotFoundError(name) from None
