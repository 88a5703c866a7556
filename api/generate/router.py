import json
import logging
from typing import Any

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from api.generate.schemas import ErrorResponse, GenerateRequest
from gemini_chat import get_api_key
from .service import RelayError, relay_prompt

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")

# Non-POST methods are routed here too so they get the JSON error body.
RELAY_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def _error_response(status_code: int, message: Any) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.api_route(
    "/generate",
    methods=RELAY_METHODS,
    responses={
        400: {"model": ErrorResponse},
        405: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def generate(request: Request) -> JSONResponse:
    if request.method != "POST":
        return _error_response(status.HTTP_405_METHOD_NOT_ALLOWED, "Method Not Allowed")

    api_key = get_api_key()
    if not api_key:
        logger.error("GEMINI_API_KEY is not set")
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "API key not configured on the server.")

    try:
        try:
            body = json.loads(await request.body())
        except (json.JSONDecodeError, UnicodeDecodeError):
            return _error_response(status.HTTP_400_BAD_REQUEST, "Invalid JSON in request body.")

        try:
            payload = GenerateRequest.model_validate(body)
        except ValidationError:
            return _error_response(status.HTTP_400_BAD_REQUEST, "Prompt is required.")

        return JSONResponse(status_code=status.HTTP_200_OK, content=await relay_prompt(payload.prompt, api_key))
    except RelayError as exc:
        return _error_response(exc.status_code, exc.message)
    except Exception:
        logger.exception("Internal server error while relaying prompt")
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "An unexpected error occurred on the server.")
