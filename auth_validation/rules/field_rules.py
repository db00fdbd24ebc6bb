# auth_validation/rules/field_rules.py
from typing import Callable, Literal, Optional, Tuple

from pydantic import Field, model_validator

from auth_validation.rules.base import BaseRule
from auth_validation.rules.email.validator import is_email_format


class LengthBound(BaseRule):
    """Tamanho do valor em caracteres dentro de [min_length, max_length], inclusive."""
    kind: Literal["length"] = "length"
    min_length: int = Field(0, ge=0)
    max_length: int

    @model_validator(mode="after")
    def validate_bounds(self) -> "LengthBound":
        if self.min_length > self.max_length:
            raise ValueError("min_length não pode ser maior que max_length")
        return self

    def check(self, value: Optional[str]) -> bool:
        length = len(value) if value is not None else 0
        return self.min_length <= length <= self.max_length


class SetMembership(BaseRule):
    """O valor precisa ser exatamente igual a uma das opções permitidas."""
    kind: Literal["set_membership"] = "set_membership"
    allowed_values: Tuple[str, ...]

    def check(self, value: Optional[str]) -> bool:
        return value in self.allowed_values


class OptionalField(BaseRule):
    """
    Torna o campo opcional.
    Campo ausente sempre passa; valor None só passa quando `nullable` é True.
    """
    kind: Literal["optional"] = "optional"
    nullable: bool = False

    def check(self, value: Optional[str]) -> bool:
        return True

    def bypasses(self, value: Optional[str], present: bool) -> bool:
        if not present:
            return True
        return value is None and self.nullable


class EmailFormat(BaseRule):
    """Formato convencional de e-mail, com ao menos um ponto no domínio."""
    kind: Literal["email_format"] = "email_format"

    def check(self, value: Optional[str]) -> bool:
        return is_email_format(value)


class CustomPredicate(BaseRule):
    """
    Regra com predicado arbitrário.
    O predicado retorna False para sinalizar falha; a mensagem vem da regra.
    """
    kind: Literal["custom"] = "custom"
    predicate: Callable[[Optional[str]], bool]

    def check(self, value: Optional[str]) -> bool:
        return bool(self.predicate(value))
