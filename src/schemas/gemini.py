"""Gemini generateContent response schemas.

Only the fields the client reads are modelled; everything else is allowed
through untouched.
"""

from pydantic import BaseModel


class GeminiPart(BaseModel):
    text: str | None = None

    model_config = {"extra": "allow"}


class GeminiContent(BaseModel):
    parts: list[GeminiPart] = []
    role: str | None = None

    model_config = {"extra": "allow"}


class GeminiCandidate(BaseModel):
    content: GeminiContent | None = None
    finishReason: str | None = None

    model_config = {"extra": "allow"}


class GeminiResponse(BaseModel):
    """A generateContent response body."""

    candidates: list[GeminiCandidate] = []

    model_config = {"extra": "allow"}

    @property
    def text(self) -> str:
        """Concatenated text of the first candidate, or an empty string."""
        if not self.candidates or self.candidates[0].content is None:
            return ""
        return "".join(part.text or "" for part in self.candidates[0].content.parts)
