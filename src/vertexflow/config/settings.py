"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support.

Usage:
    from vertexflow.config import GeometrySettings

    # Load from environment variables (VERTEXFLOW_*)
    settings = GeometrySettings()

    # Or override with explicit values
    settings = GeometrySettings(check_position_range=True, position_bits=32)
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GeometrySettings(BaseSettings):  # type: ignore[misc]
    """Configuration for vertex creation.

    Attributes:
        position_bits: Width of the signed integer each position component
            must fit when range checking is enabled.
        check_position_range: Reject out-of-range positions when creating
            vertices.

    Environment Variables:
        VERTEXFLOW_POSITION_BITS
        VERTEXFLOW_CHECK_POSITION_RANGE
    """

    model_config = SettingsConfigDict(
        env_prefix="VERTEXFLOW_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    position_bits: int = Field(default=64, ge=2, le=1024)
    check_position_range: bool = False
