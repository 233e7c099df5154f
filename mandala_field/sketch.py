"""
Sketch state owned by the window driver.
Holds the current composition and frame counter. A resize throws the old
composition away and lays out a fresh one; each frame paints the background
and then the patterns.
"""

import logging
import random

from .background import draw_noise_background
from .composer import compose, render
from .config import DEFAULT_CONFIG
from .noise import PerlinNoise
from .placement import place

logger = logging.getLogger(__name__)


class SketchState:
    def __init__(self, config=DEFAULT_CONFIG, seed=None):
        self.config = config
        self.width = 0
        self.height = 0
        self.composition = ()
        self.frame_count = 0
        self._reset_random(seed)

    def _reset_random(self, seed):
        self.seed = seed
        self.rng = random.Random(seed) if seed is not None else random.Random()
        self.noise = PerlinNoise(seed)

    def on_resize(self, width, height):
        """Replace the composition with a new layout for a width x height canvas."""
        self.width, self.height = width, height
        slots = place(width, height, self.config, self.rng)
        self.composition = compose(slots, self.config, self.rng)
        logger.debug("Composed %d patterns for %gx%g", len(self.composition),
                     width, height)
        return self.composition

    def paint(self, surface, background=True):
        """Draw the current frame without advancing the frame counter."""
        if background:
            draw_noise_background(surface, self.noise, self.width, self.height,
                                  self.frame_count, self.config.background_shapes)
        render(self.composition, surface, self.noise, self.frame_count)

    def on_frame(self, surface):
        self.paint(surface)
        self.frame_count += 1

    def reseed(self, seed=None):
        """New random stream and a fresh layout at the current size."""
        self._reset_random(seed)
        return self.on_resize(self.width, self.height)

    @property
    def pattern_count(self):
        return len(self.composition)
