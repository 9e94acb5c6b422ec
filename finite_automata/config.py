"""
Runtime configuration read from environment variables.
"""

import os
from typing import List, Mapping, Optional

from pydantic import BaseModel, Field

DEFAULT_CORS_ORIGINS = "http://localhost:5173,http://localhost:3000"


class Settings(BaseModel):
    log_level: str = Field(default="INFO")
    log_dir: Optional[str] = Field(default=None, description="Unset = console only")
    api_key: Optional[str] = Field(default=None, description="Unset = auth disabled")
    cors_allowed_origins: List[str] = Field(default_factory=lambda: DEFAULT_CORS_ORIGINS.split(","))
    environment: Optional[str] = None
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    max_input_symbols: int = Field(default=10000, gt=0)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ

        origins = env.get("CORS_ALLOWED_ORIGINS", DEFAULT_CORS_ORIGINS).split(",")
        if env.get("ENVIRONMENT") == "development":
            origins = ["*"]

        return cls(
            log_level=env.get("AUTOMATA_LOG_LEVEL", "INFO"),
            log_dir=env.get("AUTOMATA_LOG_DIR") or None,
            api_key=env.get("API_KEY") or None,
            cors_allowed_origins=[o.strip() for o in origins if o.strip()],
            environment=env.get("ENVIRONMENT"),
            api_host=env.get("API_HOST", "0.0.0.0"),
            api_port=int(env.get("API_PORT", "8000")),
            max_input_symbols=int(env.get("MAX_INPUT_SYMBOLS", "10000")),
        )
