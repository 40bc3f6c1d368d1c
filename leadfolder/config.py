# leadfolder/config.py
"""
Configuration settings for the workspace UI and the backend proxy.
Environment variables (and a local .env file) override defaults.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, fields
from typing import List

from dotenv import load_dotenv

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class Settings:
    """Workspace configuration"""

    # LLM provider
    OPENAI_API_KEY: str = ""
    MODEL_NAME: str = "gpt-4.1-mini"
    TEMPERATURE: float = 0.4

    # Backend server
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    DEBUG: bool = False
    CORS_ORIGINS: List[str] = field(default_factory=lambda: ["*"])

    # UI -> backend
    BACKEND_URL: str = "http://localhost:5000"
    BACKEND_TIMEOUT: float = 0.0  # seconds, 0 = no timeout

    # History
    HISTORY_PATH: str = "data/history.json"
    HISTORY_KEY: str = "jc-ai-proposal-history-v1"
    HISTORY_LIMIT: int = 15

    LOG_LEVEL: str = "INFO"

    @classmethod
    def from_env(cls, *, dotenv: bool = True) -> "Settings":
        """Build settings from the process environment."""
        if dotenv:
            load_dotenv()
        values = {}
        for f in fields(cls):
            env_value = os.getenv(f.name)
            if env_value is None:
                continue
            values[f.name] = _coerce(env_value, f.type)
        return cls(**values)

    @property
    def backend_timeout(self) -> float | None:
        return self.BACKEND_TIMEOUT if self.BACKEND_TIMEOUT > 0 else None


def _coerce(raw: str, field_type):
    # Annotations are strings under `from __future__ import annotations`
    name = field_type if isinstance(field_type, str) else getattr(field_type, "__name__", str(field_type))
    if name == "bool":
        return raw.strip().lower() in ("true", "1", "yes")
    if name == "int":
        return int(raw)
    if name == "float":
        return float(raw)
    if name.startswith("List"):
        return [x.strip() for x in raw.split(",") if x.strip()]
    return raw.strip()


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )
