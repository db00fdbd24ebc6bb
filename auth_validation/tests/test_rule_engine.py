# auth_validation/tests/test_rule_engine.py

import pytest
from pydantic import ValidationError

from auth_validation.rules.engine import evaluate
from auth_validation.rules.field_rules import CustomPredicate, EmailFormat, LengthBound, OptionalField, SetMembership
from auth_validation.rules.schemas import (
    LOGIN_SCHEMA,
    REGISTRATION_SCHEMA,
    SCHEMAS,
    FieldRules,
    FieldSchema,
    get_schema,
)
from auth_validation.utils.error_handlers import INVALID_INPUT_KIND_MESSAGE, SchemaNotFoundError


def _schema(*entries):
    return FieldSchema(name="teste", field_rules=entries)


def _raise(value):
    raise RuntimeError("predicado com defeito")


@pytest.fixture
def valid_registration():
    return {
        "name": "Maria Silva",
        "email": "maria@gmail.com",
        "password": "senha-forte-123",
        "CPF": "111.444.777-35",
        "CNPJ": "11.444.777/0001-61",
        "type": "PROVIDER",
        "sex": "Feminino",
        "genre": "Não-binário",
    }


def test_length_bound_is_inclusive():
    rule = LengthBound(min_length=6, max_length=8)
    assert rule.check("abcdef") is True
    assert rule.check("abcdefgh") is True
    assert rule.check("abcde") is False
    assert rule.check("abcdefghi") is False
    assert rule.check(None) is False


def test_length_bound_rejects_inverted_bounds():
    with pytest.raises(ValidationError):
        LengthBound(min_length=10, max_length=2)


def test_set_membership_is_exact():
    rule = SetMembership(allowed_values=("CLIENT", "PROVIDER"))
    assert rule.check("CLIENT") is True
    assert rule.check("client") is False
    assert rule.check(" CLIENT") is False
    assert rule.check(None) is False


def test_rules_are_immutable():
    rule = LengthBound(min_length=1, max_length=2)
    with pytest.raises(ValidationError):
        rule.max_length = 10


def test_optional_field_bypass():
    nullable = OptionalField(nullable=True)
    strict = OptionalField()
    assert nullable.bypasses(None, present=False) is True
    assert nullable.bypasses(None, present=True) is True
    assert strict.bypasses(None, present=False) is True
    assert strict.bypasses(None, present=True) is False
    assert nullable.bypasses("", present=True) is False


def test_all_failing_rules_contribute_messages():
    schema = _schema(
        FieldRules(field="email", rules=(
            LengthBound(min_length=7, max_length=50, message="tamanho"),
            EmailFormat(message="formato"),
            CustomPredicate(predicate=lambda value: False, message="dominio"),
        )),
    )
    result = evaluate(schema, {"email": "x@y"})
    assert result.messages("email") == ["tamanho", "formato", "dominio"]


def test_missing_required_field_fails_its_rules():
    result = evaluate(LOGIN_SCHEMA, {})
    assert result.messages("email") == ["Email inválido para login", "Email inválido para login"]
    assert result.messages("password") == ["Senha incorreta"]


def test_optional_field_absent_or_null_passes():
    schema = _schema(FieldRules(field="CPF", rules=(
        OptionalField(nullable=True),
        CustomPredicate(predicate=lambda value: False, message="CPF inválido"),
    )))
    assert evaluate(schema, {}).is_valid
    assert evaluate(schema, {"CPF": None}).is_valid
    assert evaluate(schema, {"CPF": "123"}).messages("CPF") == ["CPF inválido"]


def test_non_nullable_optional_runs_rules_on_null():
    schema = _schema(FieldRules(field="apelido", rules=(
        OptionalField(nullable=False),
        LengthBound(min_length=2, max_length=10, message="apelido"),
    )))
    assert evaluate(schema, {}).is_valid
    assert evaluate(schema, {"apelido": None}).messages("apelido") == ["apelido"]


def test_wrong_value_kind_is_a_single_violation():
    result = evaluate(REGISTRATION_SCHEMA, {"name": 12345678, "CPF": 11144477735, "genre": ["Queer"]})
    assert result.messages("name") == [INVALID_INPUT_KIND_MESSAGE]
    assert result.messages("CPF") == [INVALID_INPUT_KIND_MESSAGE]
    assert result.messages("genre") == [INVALID_INPUT_KIND_MESSAGE]


def test_raising_predicate_is_reported_as_failure():
    schema = _schema(FieldRules(field="x", rules=(CustomPredicate(predicate=_raise, message="falhou"),)))
    result = evaluate(schema, {"x": "valor"})
    assert result.messages("x") == ["falhou"]


def test_non_mapping_payload_does_not_fault():
    result = evaluate(LOGIN_SCHEMA, ["email", "password"])
    assert not result.is_valid
    assert set(result.invalid_fields) == {"email", "password"}


def test_undeclared_fields_are_ignored():
    result = evaluate(LOGIN_SCHEMA, {"email": "user@gmail.com", "password": "longenough1", "extra": 1})
    assert result.is_valid
    assert "extra" not in result.errors


def test_valid_registration(valid_registration):
    assert evaluate(REGISTRATION_SCHEMA, valid_registration).errors == {}


def test_registration_rejects_documents_and_domain(valid_registration):
    payload = dict(valid_registration, CPF="11144477736", CNPJ="11444777000162", email="maria@outlook.com")
    result = evaluate(REGISTRATION_SCHEMA, payload)
    assert result.messages("CPF") == ["CPF inválido"]
    assert result.messages("CNPJ") == ["CNPJ inválido"]
    assert result.messages("email") == ["O dominio do email não é permitido"]


def test_registration_rejects_enumerations(valid_registration):
    payload = dict(valid_registration, type="ADMIN", sex="M", genre="Outro")
    result = evaluate(REGISTRATION_SCHEMA, payload)
    assert result.messages("type") == ["Type inválido"]
    assert result.messages("sex") == ["Sexo inválido"]
    assert result.messages("genre") == ["Gênero inválido"]


def test_registry():
    assert get_schema("registration") is REGISTRATION_SCHEMA
    assert get_schema("login") is LOGIN_SCHEMA
    assert REGISTRATION_SCHEMA.field_names == ("name", "email", "password", "CPF", "CNPJ", "type", "sex", "genre")
    assert LOGIN_SCHEMA.field_names == ("email", "password")
    with pytest.raises(TypeError):
        SCHEMAS["outro"] = LOGIN_SCHEMA


def test_unknown_schema():
    with pytest.raises(SchemaNotFoundError) as excinfo:
        get_schema("admin")
    assert excinfo.value.schema_name == "admin"
    assert isinstance(excinfo.value, KeyError)


def test_genre_enumeration_size():
    genre_rule = REGISTRATION_SCHEMA.field_rules[-1].rules[0]
    assert len(genre_rule.allowed_values) == 36
    assert len(set(genre_rule.allowed_values)) == 36
