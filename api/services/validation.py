"""Reusable field validators.

Every validator has the shape ``(field, value, errors) -> None``: it appends
zero or more human-readable messages to ``errors`` instead of raising, so a
payload's problems are all reported together. ``run_validators`` applies a
set of them and raises FieldValidationError when anything was collected.
"""

import re
from collections.abc import Callable, Mapping
from datetime import date, datetime
from typing import Any

from core.security import BCRYPT_MAX_BYTES

FieldValidator = Callable[[str, Any, list[str]], None]

EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
CELULAR_RE = re.compile(r"\(?\d{2}\)?[\s-]?\d{4,5}-?\d{4}")
CEP_RE = re.compile(r"\d{5}-?\d{3}")
UF_RE = re.compile(r"[A-Za-z]{2}")

NOME_MAX = 100
EMAIL_MAX = 150
CELULAR_MAX = 20
SENHA_MIN = 6
SENHA_MAX = 50


class FieldValidationError(Exception):
    """One or more field rules failed. Surfaced as 400."""

    def __init__(self, errors: list[str], message: str = "Bad Request Exception"):
        self.errors = list(errors)
        self.message = message
        super().__init__("; ".join(self.errors) or message)


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def _required(field: str) -> str:
    return f'Campo "{field}" é obrigatório.'


def _too_long(field: str, limit: int) -> str:
    return f'Campo "{field}" deve ter no máximo {limit} caracteres.'


def validate_nome(field: str, value: Any, errors: list[str]) -> None:
    """Names (nome_abrigo, nome_adotante, nome_pet, ...)."""
    if _is_blank(value):
        errors.append(_required(field))
    elif len(value) > NOME_MAX:
        errors.append(_too_long(field, NOME_MAX))


def validate_email(field: str, value: Any, errors: list[str]) -> None:
    if _is_blank(value):
        errors.append(_required(field))
    elif not EMAIL_RE.fullmatch(value):
        errors.append(f'Campo "{field}" deve conter um e-mail válido.')
    elif len(value) > EMAIL_MAX:
        errors.append(_too_long(field, EMAIL_MAX))


def validate_celular(field: str, value: Any, errors: list[str]) -> None:
    """Brazilian mobile numbers, e.g. (11) 91234-5678."""
    if _is_blank(value):
        errors.append(_required(field))
    elif not CELULAR_RE.fullmatch(value):
        errors.append(
            f'Campo "{field}" deve conter um número de celular válido '
            "(ex: (11) 91234-5678)."
        )
    elif len(value) > CELULAR_MAX:
        errors.append(_too_long(field, CELULAR_MAX))


def validate_senha(field: str, value: Any, errors: list[str]) -> None:
    if _is_blank(value):
        errors.append(_required(field))
    elif len(value) < SENHA_MIN:
        errors.append(f'Campo "{field}" deve conter no mínimo {SENHA_MIN} caracteres.')
    elif len(value) > SENHA_MAX:
        errors.append(_too_long(field, SENHA_MAX))
    elif len(value.encode("utf-8")) > BCRYPT_MAX_BYTES:
        errors.append(
            f'Campo "{field}" deve ter no máximo {BCRYPT_MAX_BYTES} bytes em UTF-8.'
        )


def parse_date(value: Any) -> date | None:
    """Calendar date from a date/datetime or an ISO string; None if unparseable."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        return None


def _validate_date(field: str, value: Any, errors: list[str]) -> None:
    if parse_date(value) is None:
        errors.append(f'Campo "{field}" é obrigatório e deve conter uma data válida.')


def validate_data_cadastro(field: str, value: Any, errors: list[str]) -> None:
    """Registration dates (data_cadastro_*)."""
    _validate_date(field, value, errors)


def validate_data_nascimento(field: str, value: Any, errors: list[str]) -> None:
    """Birth dates (data_nascimento_pet); a future date is not a birth date."""
    _validate_date(field, value, errors)
    parsed = parse_date(value)
    if parsed is not None and parsed > date.today():
        errors.append(f'Campo "{field}" não pode ser uma data futura.')


def text_validator(max_length: int) -> FieldValidator:
    """Required free text bounded to ``max_length`` characters."""

    def validate_texto(field: str, value: Any, errors: list[str]) -> None:
        if _is_blank(value):
            errors.append(_required(field))
        elif len(value) > max_length:
            errors.append(_too_long(field, max_length))

    return validate_texto


def validate_cep(field: str, value: Any, errors: list[str]) -> None:
    if _is_blank(value):
        errors.append(_required(field))
    elif not CEP_RE.fullmatch(value):
        errors.append(f'Campo "{field}" deve conter um CEP válido (ex: 01310-100).')


def validate_uf(field: str, value: Any, errors: list[str]) -> None:
    if _is_blank(value):
        errors.append(_required(field))
    elif not UF_RE.fullmatch(value):
        errors.append(f'Campo "{field}" deve conter a sigla de um estado (ex: SP).')


def run_validators(
    rules: Mapping[str, FieldValidator],
    data: Mapping[str, Any],
    *,
    partial: bool = False,
    message: str = "Bad Request Exception",
) -> None:
    """Apply ``rules`` to ``data``.

    With ``partial=True`` only the fields present in ``data`` are checked
    (PATCH semantics); otherwise a missing field counts as absent.
    """
    errors: list[str] = []
    for field, validator in rules.items():
        if partial and field not in data:
            continue
        validator(field, data.get(field), errors)
    if errors:
        raise FieldValidationError(errors, message=message)
