"""
Request-scoped helpers — hand the startup-built client and settings to routes.
"""

from __future__ import annotations

from fastapi import Depends, Request

from email_writer.config import Settings
from email_writer.services.email_service import EmailReplyService
from email_writer.services.llm_service import GeminiClient


def get_settings(request: Request) -> Settings:
    """FastAPI dependency returning the settings the app was built with."""
    return request.app.state.settings


def get_gemini_client(request: Request) -> GeminiClient:
    """FastAPI dependency returning the client created at startup."""
    return request.app.state.gemini_client


def get_email_service(
    client: GeminiClient = Depends(get_gemini_client),
) -> EmailReplyService:
    return EmailReplyService(client)
