"""
Sketch configuration.
One immutable settings value is built at startup and handed to placement,
composition and rendering. Sizes are canvas units (pixels on screen).
"""

from dataclasses import dataclass


# Base footprint every pattern recipe is authored against
REFERENCE_SIZE = 350.0

# Footprint range as a fraction of min(width, height)
MIN_SIZE_FRACTION = 0.15
MAX_SIZE_FRACTION = 0.25

MAX_PATTERNS = 30
MAX_TOTAL_ATTEMPTS = 1000
MIN_PATTERNS = 20  # advisory, only logged

# Below this a pattern is an unreadable smudge
MIN_FOOTPRINT = 10.0

BACKGROUND_COLOR = (232, 198, 198)
BACKGROUND_SHAPES = 150
FRAME_INTERVAL_MS = 33


@dataclass(frozen=True)
class SketchConfig:
    reference_size: float = REFERENCE_SIZE
    min_size_fraction: float = MIN_SIZE_FRACTION
    max_size_fraction: float = MAX_SIZE_FRACTION
    max_patterns: int = MAX_PATTERNS
    max_total_attempts: int = MAX_TOTAL_ATTEMPTS
    min_patterns: int = MIN_PATTERNS
    min_footprint: float = MIN_FOOTPRINT
    background_shapes: int = BACKGROUND_SHAPES
    frame_interval_ms: int = FRAME_INTERVAL_MS

    def size_range(self, width, height):
        """Footprint bounds (lo, hi) for a canvas of the given size."""
        m = min(width, height)
        return m * self.min_size_fraction, m * self.max_size_fraction


DEFAULT_CONFIG = SketchConfig()
