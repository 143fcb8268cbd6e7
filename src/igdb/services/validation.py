"""Checks that the data models keep up with the remote schema."""

from collections.abc import Iterable

import structlog

from ..models.base import Model
from .errors import MissingFieldsError

log = structlog.stdlib.get_logger()


def missing_model_fields(model: type[Model], fields: Iterable[str]) -> list[str]:
    """Return the top-level names in ``fields`` that ``model`` does not decode.

    Subfields (``cover.url``), the ``*`` wildcard and blank names are ignored.
    """
    known = set(model.json_fields())
    missing = []
    for name in fields:
        name = name.strip()
        if not name or "." in name or name == "*":
            continue
        if name not in known and name not in missing:
            missing.append(name)
    return missing


def validate_model_fields(model: type[Model], fields: Iterable[str]) -> None:
    """Raise if ``model`` lacks any of the fields reported by the API.

    ``fields`` is usually the result of a service's ``fields()`` call.

    Raises:
        MissingFieldsError: Listing the missing names in reported order
    """
    missing = missing_model_fields(model, fields)
    if missing:
        log.warning("Model is missing fields", model=model.__name__, missing=missing)
        raise MissingFieldsError(missing)
