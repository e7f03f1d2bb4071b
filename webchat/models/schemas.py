"""
Pydantic request / response schemas for the API.
"""

from pydantic import BaseModel, Field
from typing import Literal, Optional


# ── Chat ─────────────────────────────────────────────────
class ChatRequest(BaseModel):
    message: Optional[str] = None


class ChatResponse(BaseModel):
    response: str


class ErrorResponse(BaseModel):
    error: str


# ── Transcript ───────────────────────────────────────────
class ChatMessage(BaseModel):
    id: int = Field(ge=1)
    text: str
    sender: Literal["user", "bot"]


# ── Web search ───────────────────────────────────────────
class SearchResult(BaseModel):
    snippet: str
    source_label: str

    def format(self) -> str:
        return f"Based on web search: {self.snippet}\n\nSource: {self.source_label}"
