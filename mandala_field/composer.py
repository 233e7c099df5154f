"""
Turns placed slots into a drawable composition.
Each slot gets a random pattern kind and a scale relative to the reference
footprint. Compositions are sorted largest first so smaller patterns layer
on top, and are rebuilt from scratch whenever the layout changes.
"""

import random
from dataclasses import dataclass

from .config import DEFAULT_CONFIG
from .patterns import PATTERN_KINDS, PatternKind, draw_pattern
from .placement import Slot


@dataclass(frozen=True)
class PlacedPattern:
    slot: Slot
    kind: PatternKind
    scale: float
    seed: int = 0  # fixes the pattern's noise offsets across frames

    @property
    def center(self):
        return (self.slot.x, self.slot.y)


def compose(slots, config=DEFAULT_CONFIG, rng=None):
    """Assign kinds and scales; returns a tuple ordered by size, largest first."""
    rng = rng if rng is not None else random.Random()
    placed = []
    for slot in slots:
        kind = rng.choice(PATTERN_KINDS)
        placed.append(PlacedPattern(slot, kind, slot.size / config.reference_size,
                                    rng.getrandbits(32)))
    placed.sort(key=lambda p: p.slot.size, reverse=True)
    return tuple(placed)


def render(composition, surface, noise, frame=0):
    for pattern in composition:
        draw_pattern(pattern.kind, pattern.center, pattern.scale, noise,
                     surface, frame, random.Random(pattern.seed))
