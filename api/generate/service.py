import logging
from typing import Any

from fastapi import status

from gemini_chat import extract_candidate_text, generate_content
from utils import parse_ai_response

logger = logging.getLogger(__name__)


UPSTREAM_FAILED_ERROR = "Failed to get a response from the AI."
NO_CONTENT_ERROR = "No content received from the AI."


class RelayError(Exception):
    """A failure whose status and caller-facing message are already decided."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message


async def relay_prompt(prompt: str, api_key: str) -> Any:
    resp = await generate_content(prompt, api_key)

    if not resp.is_success:
        logger.error("Gemini API error status=%d body=%s", resp.status_code, resp.text[:1000])
        raise RelayError(resp.status_code, UPSTREAM_FAILED_ERROR)

    raw_text = extract_candidate_text(resp.json())
    if raw_text is None:
        raise RelayError(status.HTTP_500_INTERNAL_SERVER_ERROR, NO_CONTENT_ERROR)

    parsed = parse_ai_response(raw_text)
    if isinstance(parsed, dict) and parsed.get("error"):
        raise RelayError(status.HTTP_500_INTERNAL_SERVER_ERROR, parsed["error"])

    return parsed
