from __future__ import annotations

from typing import Any, TypeVar

from flask import request
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from hero_api.shared.errors import ValidationError
from hero_api.shared.errors.validation import raise_validation_error

M = TypeVar("M", bound=BaseModel)


def parse_body(model: type[M]) -> M:
    """Decode the JSON object body into ``model``; anything else is a 400."""

    payload: Any = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise ValidationError("invalid_payload", message="Invalid request payload")
    try:
        return model.model_validate(payload)
    except PydanticValidationError as exc:
        raise_validation_error(exc)
