"""Configuration settings for algeo."""

from pathlib import Path

from pydantic import BaseModel, Field


class IntersectionConfig(BaseModel):
    """Configuration for cubic curve intersection."""

    imag_tolerance: float = Field(
        default=1e-10,
        ge=0.0,
        le=1e-3,
        description="Largest imaginary part of a root still treated as real",
    )
    parameter_tolerance: float = Field(
        default=0.0,
        ge=0.0,
        le=1e-3,
        description="How far outside [0, 1] a root may lie and still be accepted (clamped)",
    )


class GeometryConfig(BaseModel):
    """Configuration for adaptive curve measurements."""

    arclen_tolerance: float = Field(
        default=1e-6,
        gt=0.0,
        description="Maximum gap between arc length bounds before subdividing",
    )
    arclen_max_depth: int = Field(
        default=16,
        ge=1,
        le=32,
        description="Maximum subdivision depth for arc length",
    )


class ProcessingConfig(BaseModel):
    """Configuration for batch processing."""

    max_workers: int | None = Field(
        default=None,
        description="Max worker processes (None = auto, 1 = run inline)",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class AlgeoSettings(BaseModel):
    """Main application settings."""

    intersection: IntersectionConfig = Field(default_factory=IntersectionConfig)
    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> AlgeoSettings:
    """Get default application settings."""
    return AlgeoSettings()
