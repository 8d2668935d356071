"""Secret-field handling: hash before writes, blank before reads."""

import asyncio
from collections.abc import Iterable, Mapping
from typing import Any

from core.security import hash_password


async def hash_secrets(record: dict[str, Any], secret_fields: Iterable[str]) -> None:
    """Replace each textual secret value in ``record`` with its bcrypt hash.

    Mutates ``record`` in place. bcrypt is CPU-bound, so it runs in a worker
    thread and the event loop only awaits it.
    """
    for field in secret_fields:
        value = record.get(field)
        if isinstance(value, str):
            record[field] = await asyncio.to_thread(hash_password, value)


def _blank_secrets(
    record: Mapping[str, Any], secret_fields: frozenset[str]
) -> dict[str, Any]:
    cleaned = dict(record)
    for field in secret_fields:
        if field in cleaned:
            cleaned[field] = ""
    return cleaned


def sanitize(
    records: Mapping[str, Any] | list[Mapping[str, Any]],
    secret_fields: Iterable[str],
) -> dict[str, Any] | list[dict[str, Any]]:
    """Shallow copies of ``records`` with every secret field set to ``""``.

    Accepts a single record or a list; the input is never modified.
    """
    fields = frozenset(secret_fields)
    if isinstance(records, list):
        return [_blank_secrets(record, fields) for record in records]
    return _blank_secrets(records, fields)
