from __future__ import annotations

from typing import Any, Callable, Mapping, Optional

from flask import request

from ..core.exceptions import ValidationError

# JSON key -> (attribute name, converter)
FieldMap = Mapping[str, tuple[str, Optional[Callable[[Any], Any]]]]


def json_body() -> dict:
    body = request.get_json(silent=True)
    if body is None:
        return {}
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    return body


def pick_fields(body: Mapping[str, Any], fields: FieldMap) -> dict:
    """Translate the camelCase keys present in ``body`` into attribute names.

    Keys absent from the body are left out so updates stay partial.
    """
    out: dict = {}
    for key, (attr, convert) in fields.items():
        if key in body:
            value = body[key]
            out[attr] = convert(value) if convert and value is not None else value
    return out
