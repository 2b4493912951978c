"""
Intent Sanitizer - the boundary between raw model output and an Intent.

The NLU model's reply is untrusted text. Everything it says is coerced
into the shape the handlers expect, or rejected with IntentParseError so
the caller can fall back to keyword parsing.
"""

import json
import logging
import re
from typing import Any, Dict, List

from pydantic import ValidationError

from omniagent.ai.intent.schemas import ActionTag, Intent, IntentParameters
from omniagent.core.config import settings


logger = logging.getLogger("omniagent.ai.intent.sanitizer")


_FENCE = re.compile(r"```(?:json)?", re.IGNORECASE)


class IntentParseError(ValueError):
    """Raised when model output cannot be turned into an Intent."""
    pass


def strip_code_fences(raw: str) -> str:
    """Remove ```json / ``` markers and surrounding whitespace."""
    return _FENCE.sub("", raw).strip()


def clamp_limit(value: Any):
    """
    Numeric limit → int capped at MAX_FETCH_LIMIT.

    Non-numeric, zero or negative limits are dropped (None).
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return None
    if not isinstance(value, (int, float)) or value != value:
        return None
    if value <= 0:
        return None
    return int(min(value, settings.MAX_FETCH_LIMIT))


def normalize_values(values: Any) -> List[List[str]]:
    """Rows of string cells; null cells → "", non-list rows → []."""
    if not isinstance(values, list):
        return []
    return [
        ["" if cell is None else str(cell) for cell in row] if isinstance(row, list) else []
        for row in values
    ]


def _sanitize_parameters(raw: Any) -> Dict[str, Any]:
    if not isinstance(raw, dict):
        return {}

    params: Dict[str, Any] = {}
    for key, value in raw.items():
        field_name = _field_for(key)
        if field_name is None or value is None:
            continue

        if field_name == "limit":
            value = clamp_limit(value)
            if value is None:
                continue
        elif field_name == "values":
            value = normalize_values(value)
        elif isinstance(value, (int, float)) and not isinstance(value, bool):
            value = str(value)
        elif not isinstance(value, str):
            # Lists/objects/bools for a scalar text field carry no usable value
            continue

        params[field_name] = value
    return params


def _field_for(key: str):
    """Map a camelCase or snake_case key to an IntentParameters field name."""
    if key in IntentParameters.model_fields:
        return key
    for name, info in IntentParameters.model_fields.items():
        if info.alias == key:
            return name
    return None


def parse_model_output(raw: str) -> Intent:
    """
    Turn model output into an Intent.

    Raises:
        IntentParseError: fences/JSON/shape/validation failure
    """
    text = strip_code_fences(raw or "")
    if not text:
        raise IntentParseError("Empty model output")

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise IntentParseError(f"Invalid JSON: {e}") from e

    if not isinstance(payload, dict):
        raise IntentParseError(f"Expected a JSON object, got {type(payload).__name__}")

    action = ActionTag.from_value(payload.get("action"))
    if action is ActionTag.NONE and payload.get("action") not in (None, "none"):
        logger.warning(f"Unknown action tag from model: {payload.get('action')!r}")

    natural_response = payload.get("naturalResponse")
    if not isinstance(natural_response, str) or not natural_response.strip():
        natural_response = "Okay."

    try:
        return Intent(
            action=action,
            parameters=IntentParameters(**_sanitize_parameters(payload.get("parameters"))),
            uses_context=payload.get("usesContext") is True,
            natural_response=natural_response,
            source="ai",
        )
    except ValidationError as e:
        raise IntentParseError(f"Intent validation failed: {e}") from e
