from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ── Request Models ──────────────────────────────────────────────────────────


class EmailRequest(BaseModel):
    """Incoming email to reply to, plus an optional tone."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    email_content: str = Field(default="", alias="emailContent")
    tone: Optional[str] = None

    @field_validator("email_content", mode="before")
    @classmethod
    def _null_content_is_empty(cls, value):
        return "" if value is None else value


# ── Result Models ───────────────────────────────────────────────────────────


class ReplyResult(BaseModel):
    """Outcome of a reply generation: either generated text or a failure reason."""

    model_config = ConfigDict(frozen=True)

    text: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def success(cls, text: str) -> ReplyResult:
        return cls(text=text)

    @classmethod
    def failure(cls, message: str) -> ReplyResult:
        return cls(error=message)

    @property
    def ok(self) -> bool:
        return self.error is None

    def as_text(self) -> str:
        """Render as the plain-text reply body (``"Error: ..."`` on failure)."""
        if self.ok:
            return self.text or ""
        return f"Error: {self.error}"
