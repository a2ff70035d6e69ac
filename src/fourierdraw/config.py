"""Configuration management for fourierdraw."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class FourierDrawSettings(BaseSettings):
    """Application configuration loaded from environment variables.

    Environment variables should be prefixed with FOURIERDRAW_
    Example: FOURIERDRAW_NUM_COEFFICIENTS=25

    Attributes:
        num_coefficients: Default number of Fourier terms (K)
        max_coefficients: Upper bound of the coefficient slider
        canvas_width: Canvas width in pixels
        canvas_height: Canvas height in pixels
        padding: Safety margin applied when scaling the epicycles
        frame_interval_ms: Delay between animation frames
        brush_size: Line width of the freehand stroke
        output_format: Default coefficient output format
    """

    # Transform Configuration
    num_coefficients: int = Field(
        default=50,
        ge=1,
        description="Number of Fourier coefficients to compute",
    )
    max_coefficients: int = Field(
        default=200,
        ge=1,
        description="Largest coefficient count offered by the slider",
    )

    # Canvas Configuration
    canvas_width: int = Field(
        default=800,
        gt=0,
        description="Canvas width in pixels",
    )
    canvas_height: int = Field(
        default=600,
        gt=0,
        description="Canvas height in pixels",
    )
    padding: float = Field(
        default=1.1,
        gt=1.0,
        description="Padding factor for the total epicycle radius",
    )

    # Animation Configuration
    frame_interval_ms: int = Field(
        default=16,
        ge=1,
        description="Delay between animation frames in milliseconds",
    )
    brush_size: float = Field(
        default=8.0,
        gt=0,
        description="Stroke width used while drawing",
    )

    # Output Configuration
    output_format: Literal["json", "text", "markdown"] = Field(
        default="json",
        description="Default output format",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="FOURIERDRAW_",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def canvas_extents(self) -> tuple[int, int]:
        """Canvas (width, height)."""
        return (self.canvas_width, self.canvas_height)


# Global config instance (lazy-loaded)
_config: FourierDrawSettings | None = None


def get_config() -> FourierDrawSettings:
    """Get or create the global configuration instance.

    Returns:
        FourierDrawSettings: The configuration object
    """
    global _config
    if _config is None:
        _config = FourierDrawSettings()
    return _config


def reset_config() -> None:
    """Reset the global configuration (useful for testing)."""
    global _config
    _config = None
