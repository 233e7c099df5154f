"""
Mandala Field: a canvas of non-overlapping, gently animated mandalas.
"""

from .composer import PlacedPattern, compose, render
from .config import DEFAULT_CONFIG, SketchConfig
from .noise import PerlinNoise
from .patterns import PATTERN_KINDS, PatternKind, draw_pattern
from .placement import Slot, overlaps, place
from .sketch import SketchState
from .surface import DrawingSurface, MatplotlibSurface, RecordingSurface

__all__ = [
    "DEFAULT_CONFIG", "SketchConfig", "PerlinNoise", "Slot", "overlaps",
    "place", "PatternKind", "PATTERN_KINDS", "draw_pattern", "PlacedPattern",
    "compose", "render", "SketchState", "DrawingSurface",
    "MatplotlibSurface", "RecordingSurface",
]
