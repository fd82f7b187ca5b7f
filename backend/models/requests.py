from pydantic import BaseModel, Field


class TextEvaluateRequest(BaseModel):
    text: str = Field(..., max_length=200000, description="Decoded document text")
    file_name: str = Field("document.txt", max_length=255, description="Label used for logging and the prompt")


class VerifyRequest(BaseModel):
    hash: str | None = Field(None, max_length=128, description="SHA-256 hex digest of the document bytes")
