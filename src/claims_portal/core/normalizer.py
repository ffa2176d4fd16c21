"""Normalize claims-API payloads into canonical claim records.

The backend has shipped two field-naming conventions (snake_case and
camelCase) and two envelope shapes per endpoint.  Everything here is
fail-soft: a malformed payload becomes an empty result, never an exception.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import UnionType
from typing import Any, TypeVar, Union, get_args, get_origin

from loguru import logger
from pydantic import BaseModel, ValidationError
from pydantic.fields import FieldInfo

from claims_portal.schemas.claim import ClaimDetail, ClaimSummary

ModelT = TypeVar("ModelT", bound=BaseModel)

_MISSING = object()


# ---------------------------------------------------------------------------
# Field resolution
# ---------------------------------------------------------------------------


def resolve_field(obj: Any, *keys: str, default: Any = None) -> Any:
    """Return the value of the first key present in *obj*, else *default*.

    A key holding ``None`` counts as present.  Keys are tried in the order
    given, so callers pass the preferred spelling first.
    """
    if not isinstance(obj, Mapping):
        return default
    for key in keys:
        if key in obj:
            return obj[key]
    return default


def _candidate_keys(name: str, field: FieldInfo) -> tuple[str, ...]:
    """snake_case spelling first, camelCase alias second."""
    snake = name.rstrip("_")
    if field.alias and field.alias != snake:
        return (snake, field.alias)
    return (snake,)


# ---------------------------------------------------------------------------
# Generic record normalization
# ---------------------------------------------------------------------------


def normalize_record(model_cls: type[ModelT], raw: Any) -> ModelT:
    """Build *model_cls* from *raw*, resolving each field independently.

    Nested model fields are normalized recursively; a missing or non-mapping
    nested group becomes an empty group.  Values the model rejects fall back
    to the field default.
    """
    if not isinstance(raw, Mapping):
        raw = {}

    values: dict[str, Any] = {}
    for name, field in model_cls.model_fields.items():
        value = resolve_field(raw, *_candidate_keys(name, field), default=_MISSING)
        if value is _MISSING:
            continue
        values[name] = _normalize_value(field.annotation, value)

    return _validate_fail_soft(model_cls, values)


def _normalize_value(annotation: Any, value: Any) -> Any:
    if _is_model(annotation):
        return normalize_record(annotation, value)

    origin = get_origin(annotation)
    if origin is list:
        (item_type,) = get_args(annotation)
        if not isinstance(value, list):
            return []
        if not _is_model(item_type):
            return value
        return [normalize_record(item_type, item) for item in value if isinstance(item, Mapping)]

    if origin in (Union, UnionType) and isinstance(value, Mapping):
        for member in get_args(annotation):
            if _is_model(member):
                return normalize_record(member, value)

    return value


def _is_model(annotation: Any) -> bool:
    return isinstance(annotation, type) and issubclass(annotation, BaseModel)


def _validate_fail_soft(model_cls: type[ModelT], values: dict[str, Any]) -> ModelT:
    try:
        return model_cls.model_validate(values)
    except ValidationError as exc:
        rejected_locs = {err["loc"][0] for err in exc.errors() if err["loc"]}

    rejected = {
        name
        for name, field in model_cls.model_fields.items()
        if name in rejected_locs or field.alias in rejected_locs
    }
    logger.warning(
        "Dropping unparseable {model} fields: {fields}",
        model=model_cls.__name__,
        fields=sorted(rejected),
    )
    kept = {name: value for name, value in values.items() if name not in rejected}
    try:
        return model_cls.model_validate(kept)
    except ValidationError:
        logger.warning("Falling back to an empty {model}", model=model_cls.__name__)
        return model_cls()


# ---------------------------------------------------------------------------
# Endpoint payloads
# ---------------------------------------------------------------------------


def normalize_claim_list(payload: Any) -> list[ClaimSummary]:
    """Normalize a ``GET /api/claims`` body.

    Accepts a bare list of claims or ``{"claims": [...]}``.  Any other shape
    yields an empty list so the list page still renders.
    """
    if isinstance(payload, list):
        items = payload
        logger.debug("Found {n} claims in bare list response", n=len(items))
    elif isinstance(payload, Mapping) and isinstance(payload.get("claims"), list):
        items = payload["claims"]
        logger.debug("Found {n} claims under 'claims' key", n=len(items))
    else:
        logger.warning(
            "No valid claims data in response of type {kind}",
            kind=type(payload).__name__,
        )
        return []

    claims = [normalize_record(ClaimSummary, item) for item in items if isinstance(item, Mapping)]
    skipped = len(items) - len(claims)
    if skipped:
        logger.warning("Skipped {n} non-object entries in claims list", n=skipped)
    return claims


def normalize_claim_detail(payload: Any) -> ClaimDetail | None:
    """Normalize a ``GET /api/claims/{id}`` body.

    Accepts a bare claim object or ``{"claimData": {...}}``.  Returns ``None``
    when the payload holds no usable record.
    """
    if not isinstance(payload, Mapping):
        logger.warning("Claim detail response is not an object: {kind}", kind=type(payload).__name__)
        return None

    wrapped = payload.get("claimData")
    if wrapped:
        if not isinstance(wrapped, Mapping):
            logger.warning("'claimData' is not an object: {kind}", kind=type(wrapped).__name__)
            return None
        logger.debug("Unwrapping claim from 'claimData'")
        return normalize_record(ClaimDetail, wrapped)

    return normalize_record(ClaimDetail, payload)


def normalize_cancel_response(payload: Any) -> ClaimDetail | None:
    """Extract the updated record from a cancel response.

    The backend nests the record under ``claim``; anything else yields
    ``None``.
    """
    record = resolve_field(payload, "claim")
    if not isinstance(record, Mapping):
        logger.warning("Cancel response carries no 'claim' object")
        return None
    return normalize_record(ClaimDetail, record)
