"""
Greedy rejection-sampling placement of circular footprints.
Candidates are sampled inside the canvas and kept only when they clear every
slot accepted so far. The attempt ceiling is the only termination guarantee,
so a crowded or tiny canvas simply ends up sparser.
"""

import logging
import math
import random
from dataclasses import dataclass

from .config import DEFAULT_CONFIG

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Slot:
    x: float
    y: float
    size: float  # footprint diameter

    @property
    def radius(self):
        return self.size / 2


def overlaps(x, y, size, slots):
    """True if a footprint at (x, y) would cut into any of ``slots``.
    Touching footprints do not overlap."""
    for slot in slots:
        distance = math.hypot(x - slot.x, y - slot.y)
        if distance < (size + slot.size) / 2:
            return True
    return False


def _placeable(width, height, config):
    if width <= 0 or height <= 0:
        return False
    if config.max_patterns <= 0 or config.max_total_attempts <= 0:
        return False
    if config.min_size_fraction <= 0:
        return False
    if config.min_size_fraction > config.max_size_fraction:
        return False
    if config.max_size_fraction > 1:
        return False
    _lo, hi = config.size_range(width, height)
    return hi >= config.min_footprint


def _random_candidate(width, height, config, rng):
    lo, hi = config.size_range(width, height)
    size = rng.uniform(lo, hi)
    margin = size / 2
    x = rng.uniform(margin, width - margin)
    y = rng.uniform(margin, height - margin)
    return x, y, size


def place(width, height, config=DEFAULT_CONFIG, rng=None):
    """Sample up to ``config.max_patterns`` non-overlapping slots.

    Stops at whichever comes first: the pattern cap or
    ``config.max_total_attempts`` candidates. Degenerate canvases and
    inconsistent size ranges give an empty list.
    """
    if not _placeable(width, height, config):
        logger.debug("Nothing to place on %gx%g canvas", width, height)
        return []
    rng = rng if rng is not None else random.Random()

    slots = []
    attempts = 0
    while len(slots) < config.max_patterns and attempts < config.max_total_attempts:
        x, y, size = _random_candidate(width, height, config, rng)
        if not overlaps(x, y, size, slots):
            slots.append(Slot(x, y, size))
        attempts += 1

    logger.info("Created %d patterns after %d attempts", len(slots), attempts)
    if len(slots) < config.min_patterns:
        logger.warning("Only %d of %d wanted patterns fit on %gx%g canvas",
                       len(slots), config.min_patterns, width, height)
    return slots
