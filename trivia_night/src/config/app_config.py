# Copyright (c) 2025 Jonathan Piette
# This file is part of TriviaNight and is licensed for non-commercial use only.
# See the LICENSE file for details.

"""
Application Configuration.

Server settings resolved from environment variables with sensible defaults,
so the same build runs on a laptop or behind a venue router.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Mapping, Optional

from trivia_night.src.monitoring.core.exceptions import ConfigurationError

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000
DEFAULT_STATIC_DIR = Path(__file__).resolve().parents[3] / "public"
DEFAULT_LOG_LEVEL = "INFO"

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class AppConfig:
    """
    Runtime configuration for the trivia server.

    Attributes:
        host: Interface the HTTP server binds to
        port: TCP port (env ``PORT``)
        static_dir: Directory holding the host/leaderboard/signup pages
        log_level: Root log level name
        cors_allowed_origins: Origins accepted by the Socket.IO server
    """
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    static_dir: Path = DEFAULT_STATIC_DIR
    log_level: str = DEFAULT_LOG_LEVEL
    cors_allowed_origins: List[str] = field(default_factory=lambda: ["*"])

    def __post_init__(self):
        """Validate configuration values."""
        if not 0 < self.port < 65536:
            raise ConfigurationError(f"port must be between 1 and 65535, got {self.port}")

        self.log_level = self.log_level.upper()
        if self.log_level not in VALID_LOG_LEVELS:
            raise ConfigurationError(
                f"Unknown log level '{self.log_level}'. "
                f"Valid levels: {', '.join(sorted(VALID_LOG_LEVELS))}"
            )

        self.static_dir = Path(self.static_dir)

    @property
    def base_url(self) -> str:
        """URL announced in the startup banner."""
        host = "localhost" if self.host in ("0.0.0.0", "") else self.host
        return f"http://{host}:{self.port}"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AppConfig":
        """
        Build configuration from environment variables.

        Args:
            environ: Mapping to read from (defaults to ``os.environ``)

        Returns:
            AppConfig instance

        Raises:
            ConfigurationError: If a value cannot be parsed
        """
        env = os.environ if environ is None else environ

        raw_port = env.get("PORT", str(DEFAULT_PORT))
        try:
            port = int(raw_port)
        except ValueError as e:
            raise ConfigurationError(f"PORT must be an integer, got '{raw_port}'") from e

        origins = env.get("TRIVIA_CORS_ORIGINS", "*")

        return cls(
            host=env.get("HOST", DEFAULT_HOST),
            port=port,
            static_dir=Path(env.get("TRIVIA_STATIC_DIR", str(DEFAULT_STATIC_DIR))),
            log_level=env.get("LOG_LEVEL", DEFAULT_LOG_LEVEL),
            cors_allowed_origins=[o.strip() for o in origins.split(",") if o.strip()],
        )
