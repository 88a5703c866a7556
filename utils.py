import json
import math
import logging
import re
from typing import Any

logger = logging.getLogger(__name__)

INVALID_FORMAT_ERROR = "AI returned an invalid format."

_FENCE_PATTERN = re.compile(r"\A```json\s*|```\s*\Z")


def strip_code_fence(text: str) -> str:
    return _FENCE_PATTERN.sub("", text).strip()


def _reject_constant(token: str) -> None:
    raise ValueError(f"Non-standard JSON constant: {token}")


def _parse_finite_float(token: str) -> float:
    value = float(token)
    if not math.isfinite(value):
        raise ValueError(f"JSON number out of range: {token}")
    return value


def parse_ai_response(text: str) -> Any:
    """Decode the model's text output as JSON.

    A ```json ... ``` wrapper is removed first. Text that still fails to
    decode is replaced by an error object so callers have a single failure
    shape to check for.
    """
    cleaned_text = strip_code_fence(text)
    try:
        return json.loads(cleaned_text, parse_float=_parse_finite_float, parse_constant=_reject_constant)
    except ValueError:
        logger.error("Failed to parse AI response as JSON: %s", cleaned_text[:1000])
        return {"error": INVALID_FORMAT_ERROR}
