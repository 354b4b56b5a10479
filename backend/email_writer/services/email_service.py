"""
Email Service — build the reply prompt and turn the model output into a reply.

Failures from the generation client never escape this module: they come
back as a failed ReplyResult, or as an "Error: ..." string via the legacy
generate_email_reply().
"""

from __future__ import annotations

import logging
from typing import Protocol

from email_writer.models.email_models import EmailRequest, ReplyResult
from email_writer.prompts.email_reply import (
    INSTRUCTION,
    ORIGINAL_EMAIL_HEADER,
    TONE_TEMPLATE,
)

logger = logging.getLogger(__name__)

# Characters that make a tone blank. Non-breaking spaces (\u00a0, \u2007, \u202f)
# are not among them, so a tone made of those still adds a tone clause.
_BLANK_CHARS = (
    " \t\n\x0b\x0c\r\x1c\x1d\x1e\x1f"
    "\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2008\u2009\u200a"
    "\u2028\u2029\u205f\u3000"
)


class GenerationClient(Protocol):
    async def generate(self, prompt: str) -> str: ...


def build_prompt(request: EmailRequest) -> str:
    """Build the prompt text for a reply. Tone and content are passed through verbatim."""
    prompt = INSTRUCTION

    if request.tone is not None and request.tone.strip(_BLANK_CHARS):
        prompt += TONE_TEMPLATE.format(tone=request.tone)

    prompt += ORIGINAL_EMAIL_HEADER + request.email_content
    return prompt


class EmailReplyService:
    """Generates email replies through an injected generation client."""

    def __init__(self, client: GenerationClient):
        self._client = client

    async def generate_reply(self, request: EmailRequest) -> ReplyResult:
        prompt = build_prompt(request)
        try:
            text = await self._client.generate(prompt)
        except Exception as e:
            logger.error(f"Reply generation failed: {e}")
            return ReplyResult.failure(str(e))
        return ReplyResult.success(text)

    async def generate_email_reply(self, request: EmailRequest) -> str:
        """Same as generate_reply() but rendered as a plain string."""
        result = await self.generate_reply(request)
        return result.as_text()
