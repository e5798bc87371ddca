"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use BARRAGE_ prefix (e.g., BARRAGE_JITTER_FACTOR=0.25).

Settings can also be loaded from a .env file in the working directory.
"""

import json
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use BARRAGE_ prefix.

    Examples:
        BARRAGE_JITTER_FACTOR=0
        BARRAGE_CANCEL_MESSAGE=stopped
        BARRAGE_COMPACT_PAYLOAD=false
    """

    model_config = SettingsConfigDict(
        env_prefix="BARRAGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Ticker configuration
    jitter_factor: float = Field(
        default=0.5,
        ge=0,
        description="Default jitter factor: each tick waits every * (U + factor), U uniform in [0, 1)",
    )

    # Output configuration
    cancel_message: str = Field(
        default="cancelled",
        description="Line printed when the loop is stopped by an interrupt",
    )

    compact_payload: bool = Field(
        default=True,
        description="Print the payload as single-line JSON without spaces",
    )

    def payload_render(self, data: Any) -> str:
        """
        Render a JSON payload for printing on each tick.

        Args:
            data: Value decoded from the --data argument

        Returns:
            JSON text, compact or indented depending on compact_payload

        Example:
            >>> AppSettings().payload_render({"a": [1, 2]})
            '{"a":[1,2]}'
        """
        if self.compact_payload:
            return json.dumps(data, separators=(",", ":"), ensure_ascii=False)
        return json.dumps(data, indent=2, ensure_ascii=False)


# Singleton instance - import this in your code
appsettings = AppSettings()
