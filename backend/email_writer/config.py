from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # App
    app_name: str = "Email Reply Writer"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "info"

    # CORS: the browser extension calls in from arbitrary mail origins
    cors_origins: list[str] = ["*"]

    # Gemini
    gemini_api_key: Optional[str] = None
    gemini_model: str = "gemini-2.5-flash"

    # Return 502 instead of 200 when generation fails (body is unchanged)
    surface_error_status: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()


# ── Model Registry ──────────────────────────────────────────────────────────

MODELS = {
    "gemini-2.5-flash": {
        "name": "Gemini 2.5 Flash",
        "model_id": "gemini/gemini-2.5-flash",
        "description": "Default reply writer",
    },
    "gemini-2.0-flash": {
        "name": "Gemini 2.0 Flash",
        "model_id": "gemini/gemini-2.0-flash",
        "description": "Fallback when 2.5 hits rate limits",
    },
}
