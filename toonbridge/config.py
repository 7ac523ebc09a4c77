"""Runtime settings for toonbridge.

Settings come from environment variables. None of them change the TOON
grammar; they only bound request size and tune logging.

Environment variables:
    TOONBRIDGE_MAX_INPUT_LENGTH: Largest accepted conversion input, in characters.
    TOONBRIDGE_DEBUG: "true" enables DEBUG logging.
    TOONBRIDGE_MCP_SERVER: "true" when running as an MCP stdio server.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from toonbridge.constants import DEFAULT_MAX_INPUT_LENGTH
from toonbridge.types.errors import ConfigurationError
from toonbridge.utils.logger import is_debug_enabled, is_mcp_server, logger


@dataclass(frozen=True)
class Settings:
    """Immutable runtime settings."""

    max_input_length: int = DEFAULT_MAX_INPUT_LENGTH
    debug: bool = False
    mcp_server: bool = False

    def __post_init__(self) -> None:
        if self.max_input_length <= 0:
            raise ConfigurationError(
                f"max_input_length must be positive, got {self.max_input_length}"
            )

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from the environment, ignoring invalid values."""
        raw_limit = os.environ.get("TOONBRIDGE_MAX_INPUT_LENGTH", "").strip()
        max_input_length = DEFAULT_MAX_INPUT_LENGTH
        if raw_limit:
            try:
                max_input_length = int(raw_limit)
            except ValueError:
                logger.warning(
                    f"Ignoring non-integer TOONBRIDGE_MAX_INPUT_LENGTH={raw_limit!r}"
                )
            else:
                if max_input_length <= 0:
                    logger.warning(
                        f"Ignoring non-positive TOONBRIDGE_MAX_INPUT_LENGTH={raw_limit!r}"
                    )
                    max_input_length = DEFAULT_MAX_INPUT_LENGTH

        return cls(
            max_input_length=max_input_length,
            debug=is_debug_enabled(),
            mcp_server=is_mcp_server(),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return process-wide settings (read once from the environment)."""
    return Settings.from_env()
