"""Application configuration via environment variables."""

import os
from dataclasses import dataclass, field
from typing import List
from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    # Server
    host: str = "0.0.0.0"
    port: int = 3001
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    validate_layout: bool = True

    # Editor
    api_url: str = "http://localhost:3001"
    request_timeout: float = 5.0

    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "3001")),
            cors_origins=[o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()],
            validate_layout=_env_bool("VALIDATE_LAYOUT", True),
            api_url=os.getenv("LAYOUT_API_URL", "http://localhost:3001").rstrip("/"),
            request_timeout=float(os.getenv("REQUEST_TIMEOUT", "5")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
