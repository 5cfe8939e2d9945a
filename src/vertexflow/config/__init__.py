"""Configuration module using Pydantic Settings.

Usage:
    from vertexflow.config import GeometrySettings

    settings = GeometrySettings(check_position_range=True)
"""

from vertexflow.config.settings import GeometrySettings

__all__ = [
    "GeometrySettings",
]
