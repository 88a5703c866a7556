import logging
import os
from typing import Any

import httpx
from dotenv import load_dotenv

logger = logging.getLogger(__name__)


DEFAULT_MODEL = "gemini-2.0-flash"
DEFAULT_API_BASE = "https://generativelanguage.googleapis.com"
DEFAULT_TIMEOUT_SECONDS = 60.0


def get_api_key() -> str | None:
    load_dotenv()
    api_key = (os.getenv("GEMINI_API_KEY") or "").strip()
    return api_key or None


def get_model_name() -> str:
    load_dotenv()
    return (os.getenv("GEMINI_MODEL") or "").strip() or DEFAULT_MODEL


def get_api_base() -> str:
    load_dotenv()
    return ((os.getenv("GEMINI_API_BASE") or "").strip() or DEFAULT_API_BASE).rstrip("/")


def get_timeout_seconds() -> float:
    load_dotenv()
    raw = (os.getenv("GEMINI_TIMEOUT_SECONDS") or "").strip()
    if not raw:
        return DEFAULT_TIMEOUT_SECONDS
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring invalid GEMINI_TIMEOUT_SECONDS=%r", raw)
        return DEFAULT_TIMEOUT_SECONDS


def build_generate_url(model_name: str, api_base: str = DEFAULT_API_BASE) -> str:
    return f"{api_base}/v1beta/models/{model_name}:generateContent"


def build_payload(prompt: str) -> dict[str, Any]:
    return {"contents": [{"role": "user", "parts": [{"text": prompt}]}]}


async def generate_content(
    prompt: str,
    api_key: str,
    model_name: str | None = None,
    api_base: str | None = None,
    timeout_seconds: float | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.Response:
    """Send one generateContent request and return the raw response.

    The key is passed as the ``key`` query parameter and is never logged.
    Status handling is left to the caller.
    """
    resolved_model = model_name or get_model_name()
    url = build_generate_url(resolved_model, api_base or get_api_base())
    timeout = timeout_seconds if timeout_seconds is not None else get_timeout_seconds()

    logger.info("Calling Gemini model=%s prompt_len=%d", resolved_model, len(prompt))
    async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
        resp = await client.post(
            url,
            params={"key": api_key},
            json=build_payload(prompt),
            headers={"Content-Type": "application/json"},
        )
    logger.info("Gemini HTTP model=%s returned status=%d", resolved_model, resp.status_code)
    return resp


def extract_candidate_text(result: dict[str, Any]) -> str | None:
    candidates = result.get("candidates")
    if not isinstance(candidates, list) or not candidates:
        return None
    # Only the first candidate's first part is used.
    return candidates[0]["content"]["parts"][0]["text"]
