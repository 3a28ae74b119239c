"""Configuration settings for Leatherpattern."""

from pathlib import Path

from pydantic import BaseModel, Field


class StitchConfig(BaseModel):
    """Configuration for stitch lines and stitch holes.

    All distances are in millimeters.
    """

    margin: float = Field(
        default=5.0,
        ge=0.0,
        le=50.0,
        description="Distance of the stitch line inside the outline",
    )
    spacing: float = Field(
        default=4.0,
        gt=0.0,
        le=50.0,
        description="Distance between consecutive stitch holes",
    )
    hole_size: float = Field(
        default=1.5,
        gt=0.0,
        le=20.0,
        description="Stitch hole diameter",
    )
    mirror_edge_stitches: bool = Field(
        default=True,
        description="Reflect edge stitches across the fold line for symmetric outlines",
    )
    hole_border_margin: float = Field(
        default=3.0,
        ge=0.0,
        le=50.0,
        description="Inset of the stitch border drawn around bordered holes",
    )
    hole_border_spacing: float = Field(
        default=3.0,
        gt=0.0,
        le=50.0,
        description="Stitch spacing along hole borders",
    )


class GeometryConfig(BaseModel):
    """Configuration for sampling and fixed-point precision."""

    samples_per_segment: int = Field(
        default=20,
        ge=2,
        le=200,
        description="Samples taken along each bezier segment",
    )
    fold_stub_spacing: float = Field(
        default=5.0,
        gt=0.0,
        le=50.0,
        description="Sample spacing of the synthetic fold-line stubs (mm)",
    )
    clipper_scale: int = Field(
        default=100,
        ge=1,
        le=100000,
        description="Fixed-point units per millimeter for boolean operations",
    )
    arc_tolerance: float = Field(
        default=0.25,
        gt=0.0,
        le=5.0,
        description="Maximum deviation of round offset joins from a true arc (mm)",
    )
    circle_segments: int = Field(
        default=72,
        ge=8,
        le=720,
        description="Polygon segments used to approximate linked circles",
    )
    hole_segments: int = Field(
        default=40,
        ge=8,
        le=360,
        description="Polygon segments used to approximate round holes",
    )
    min_range_gap: float = Field(
        default=0.01,
        gt=0.0,
        lt=0.5,
        description="Minimum start/end separation of an edge range (fraction)",
    )


class SnapConfig(BaseModel):
    """Configuration for node snapping while editing."""

    snap_grid: bool = Field(default=False, description="Snap edited points to the grid")
    grid_size: float = Field(default=5.0, gt=0.0, le=100.0, description="Grid size (mm)")
    snap_fold: bool = Field(default=False, description="Snap nodes near the fold line onto it")
    fold_threshold: float = Field(
        default=3.0,
        ge=0.0,
        le=50.0,
        description="Distance from the fold line within which nodes snap (mm)",
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


class PatternSettings(BaseModel):
    """Main application settings."""

    stitch: StitchConfig = Field(default_factory=StitchConfig)
    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    snap: SnapConfig = Field(default_factory=SnapConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> PatternSettings:
    """Get default application settings."""
    return PatternSettings()
