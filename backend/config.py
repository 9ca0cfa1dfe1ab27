import os
from pydantic_settings import BaseSettings


def _parse_cors_origins() -> list[str] | None:
    """Parse CORS_ORIGINS env var as comma-separated string or JSON list."""
    raw = os.environ.get("CORS_ORIGINS")
    if not raw:
        return None
    if raw.startswith("["):
        import json
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseSettings):
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.0-flash-lite"
    gemini_temperature: float = 0.3
    gemini_max_output_tokens: int = 8192
    gemini_timeout_seconds: int = 60

    # Extra attempts after the first call (total attempts = retries + 1)
    ats_max_retries: int = 1
    coding_max_retries: int = 2
    interview_max_retries: int = 1
    concept_max_retries: int = 1
    solution_max_retries: int = 0

    # Cap on raw model text echoed back in errors and logs
    raw_snippet_chars: int = 5000
    solution_snippet_chars: int = 1000

    link_check_timeout_seconds: float = 8.0
    max_upload_size_mb: int = 5
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]
    debug: bool = False
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
