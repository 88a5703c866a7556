from pydantic import BaseModel, Field


class GenerateRequest(BaseModel):
    prompt: str = Field(..., min_length=1, strict=True, description="Prompt to send to Gemini")


class ErrorResponse(BaseModel):
    error: str
