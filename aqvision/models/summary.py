"""Pydantic models for the AI summary endpoint."""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class SummaryRequest(BaseModel):
    """Request body for POST /api/gemini."""

    model_config = ConfigDict(populate_by_name=True)

    prompt: Optional[str] = None
    system_instruction: Optional[str] = Field(default=None, alias="systemInstruction")


class SummaryResponse(BaseModel):
    """Generated (or fallback) summary text."""

    text: str
