"""Payload normalization applied at the record-store boundary.

Blank optional text is stored as ``None`` so that "not provided" and
"explicitly blanked" look the same in storage; the read side turns ``None``
back into ``""`` for the text fields the UI edits.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from repair_shop.domain.entity_schema import EntitySchema
from repair_shop.domain.exceptions import EntityValidationError


def is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def blank_to_none(payload: Mapping[str, Any], fields: Iterable[str]) -> dict[str, Any]:
    """Return a copy of ``payload`` with blank strings in ``fields`` replaced by None."""
    result = dict(payload)
    for name in fields:
        if name in result and is_blank(result[name]):
            result[name] = None
    return result


def none_to_blank(record: Mapping[str, Any], fields: Iterable[str]) -> dict[str, Any]:
    """Return a copy of ``record`` with None in ``fields`` replaced by ``""``."""
    result = dict(record)
    for name in fields:
        if result.get(name) is None:
            result[name] = ""
    return result


def normalize_payload(
    schema: EntitySchema,
    payload: Mapping[str, Any],
    *,
    partial: bool = False,
) -> dict[str, Any]:
    """Validate and clean a write payload for ``schema``.

    Unknown and server-managed keys are dropped. With ``partial=False`` every
    required field must be present; with ``partial=True`` only the required
    fields that appear in the payload are checked.

    Raises:
        EntityValidationError: a required field is missing/blank or a
            non-negative field holds a negative number.
    """
    clean = {key: value for key, value in payload.items() if key in schema.fields}
    clean = blank_to_none(clean, schema.optional_text)

    missing = [
        name
        for name in schema.required
        if (not partial or name in clean) and is_blank(clean.get(name))
    ]
    if missing:
        raise EntityValidationError(schema.label, missing)

    negative = [
        name
        for name in schema.non_negative
        if isinstance(clean.get(name), (int, float)) and clean[name] < 0
    ]
    if negative:
        raise EntityValidationError(schema.label, negative, reason="must not be negative")

    return clean
