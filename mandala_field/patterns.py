"""
Mandala pattern recipes.
Every recipe is authored against a 350-unit reference footprint and drawn
at (center, scale). Noise jitters bead positions, bead sizes, disc centres
and spoke endpoints, so a pattern breathes from frame to frame without
changing its layout. Nothing a recipe draws reaches past
REFERENCE_SIZE / 2 * scale from its centre.
"""

import math
import random
from enum import Enum

from .config import REFERENCE_SIZE

RING_BEADS = 50          # beads in a decorative ring
BORDER_BEADS = 25        # beads in each border chain
BORDER_RADIUS = 150      # border chain and outline radius
BORDER_BEAD_SIZES = (30, 20, 10)
BORDER_WEIGHT = 5
BEAD_JITTER = 5          # max outward bead drift
DOT_RINGS = 6
DOTS_PER_RING = 24
DOT_RADIUS = 4
DOT_MATRIX_RADIUS = 70

ORANGE = (252, 101, 13)
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
RED = (255, 0, 0)
GREEN = (30, 142, 41)


class PatternKind(Enum):
    PURPLE = "purple"
    ORANGE = "orange"
    ORANGE_CIRCLE = "orange_circle"
    GREEN = "green"
    WHITE = "white"
    YELLOW_ORANGE = "yellow_orange"
    SECOND_PURPLE = "second_purple"
    SECOND_WHITE = "second_white"


PATTERN_KINDS = list(PatternKind)


# ══════════════════════════════════════════════════════════════
# Shared primitives
# ══════════════════════════════════════════════════════════════

class _Pen:
    """Draw context for one pattern: centre, scale, noise, surface, frame."""

    def __init__(self, center, scale, noise, surface, frame, rng):
        self.x, self.y = center
        self.scale = scale
        self.noise = noise
        self.surface = surface
        self.frame = frame
        self.rng = rng

    def disc(self, diameter, fill, stroke=None, weight=1):
        """Filled circle, centre and diameter nudged by noise."""
        s = self.surface
        jitter = self.noise(self.rng.uniform(0, 200) + self.frame * 0.01) * 0.05
        cx = self.x + jitter * 10 * self.scale
        cy = self.y + jitter * 10 * self.scale
        s.fill(fill)
        if stroke is not None:
            s.stroke(stroke)
            s.stroke_weight(weight * self.scale)
        else:
            s.no_stroke()
        s.circle(cx, cy, diameter * (0.95 + jitter) * self.scale)

    def bead_ring(self, radius, count, size, fill):
        """``count`` beads evenly spaced on a ring, drifting with noise."""
        s = self.surface
        s.fill(fill)
        s.no_stroke()
        offset = self.rng.uniform(0, 200)
        for i in range(count):
            a = 2 * math.pi * i / count
            n = self.noise(offset + i * 0.01 + self.frame * 0.001)
            r = (radius + n * BEAD_JITTER) * self.scale
            s.circle(self.x + r * math.cos(a), self.y + r * math.sin(a),
                     size * self.scale * (0.8 + n * 0.4))

    def rings(self, radii, size, fill):
        for r in radii:
            self.bead_ring(r, RING_BEADS, size, fill)

    def spokes(self, r_in, r_out, count, color, weight=2):
        """Radial lines like bicycle spokes."""
        s = self.surface
        s.no_fill()
        s.stroke(color)
        s.stroke_weight(weight * self.scale)
        offset = self.rng.uniform(0, 200)
        for i in range(count):
            a = 2 * math.pi * i / count
            n = self.noise(offset + i * 0.1 + self.frame * 0.01)
            ri = (r_in + n * 5) * self.scale
            ro = (r_out + n * 10) * self.scale
            ca, sa = math.cos(a), math.sin(a)
            s.line(self.x + ri * ca, self.y + ri * sa,
                   self.x + ro * ca, self.y + ro * sa)

    def dot_matrix(self, fill):
        s = self.surface
        s.fill(fill)
        s.no_stroke()
        for ring in range(1, DOT_RINGS + 1):
            dist = ring / DOT_RINGS * DOT_MATRIX_RADIUS * self.scale
            for i in range(DOTS_PER_RING):
                a = 2 * math.pi * i / DOTS_PER_RING
                s.circle(self.x + math.cos(a) * dist, self.y + math.sin(a) * dist,
                         DOT_RADIUS * 2 * self.scale)

    def border(self):
        """Black outline threaded with orange, black and white bead chains."""
        s = self.surface
        s.stroke(BLACK)
        s.stroke_weight(BORDER_WEIGHT * self.scale)
        s.no_fill()
        s.circle(self.x, self.y, BORDER_RADIUS * 2 * self.scale)
        for size, color in zip(BORDER_BEAD_SIZES, (ORANGE, BLACK, WHITE)):
            self.bead_ring(BORDER_RADIUS, BORDER_BEADS, size, color)

    def discs(self, specs):
        for spec in specs:
            self.disc(*spec)


# ══════════════════════════════════════════════════════════════
# Palettes
# ══════════════════════════════════════════════════════════════

_RING_RADII = [130, 120, 110, 100, 90, 80]
_INNER_RING_RADII = [135, 125, 115, 105, 95, 85]

_PURPLE_CORE = [
    (40, (113, 164, 192), (72, 135, 100)),
    (30, (207, 178, 168), (240, 84, 84)),
    (25, (218, 71, 137), (54, 49, 49)),
    (22, (221, 178, 174), (240, 84, 84)),
    (15, (243, 233, 171), (112, 194, 58)),
    (5, WHITE, WHITE),
]

_SECOND_PURPLE_CORE = [
    (40, (213, 30, 80), (72, 135, 100)),
    (30, (222, 173, 179), (240, 84, 84)),
    (25, (181, 186, 194), (54, 49, 49)),
    (22, (199, 144, 175), (240, 84, 84)),
    (15, (216, 165, 169), (112, 194, 58)),
    (5, WHITE, WHITE),
]

_ORANGE_CORE = [(80, (217, 221, 92)), (68, (243, 176, 35)),
                (40, (176, 173, 182)), (18, (190, 164, 185))]

_GREEN_CORE = [(80, (128, 193, 183)), (68, (209, 234, 243)),
               (40, (228, 145, 142)), (18, (208, 159, 165))]

_WHITE_STEPS = [
    (140, (249, 239, 143)), (130, (255, 198, 147)), (120, (247, 235, 136)),
    (110, (153, 179, 193)), (100, (213, 207, 201)), (90, (220, 199, 200)),
    (80, (240, 229, 150)), (70, (250, 196, 106)), (60, (223, 199, 61)),
    (50, (248, 175, 140)), (40, (227, 196, 198)), (30, (253, 225, 128)),
    (20, (217, 171, 103)),
]

_YELLOW_ORANGE_STEPS = [
    (120, (209, 204, 129)), (110, (188, 199, 183)), (100, (185, 174, 151)),
    (90, (161, 166, 162)), (80, (157, 151, 186)), (70, (220, 214, 128)),
    (60, (168, 166, 194)), (50, (173, 219, 255)), (40, (242, 235, 189)),
    (30, (184, 167, 162)), (20, (190, 164, 194)), (10, (209, 202, 122)),
]

_SECOND_WHITE_STEPS = [
    (140, (138, 150, 146)), (130, (130, 180, 198)), (120, (223, 201, 222)),
    (110, (183, 188, 166)), (100, (196, 209, 164)), (90, (146, 213, 237)),
    (80, (234, 172, 220)), (70, (188, 196, 143)), (60, (198, 207, 180)),
    (50, (128, 162, 174)), (40, (142, 152, 154)), (30, (169, 169, 96)),
    (20, (142, 195, 211)),
]


# ══════════════════════════════════════════════════════════════
# Recipes
# ══════════════════════════════════════════════════════════════

def _purple(pen):
    pen.disc(280, (232, 179, 174))
    pen.disc(140, (166, 199, 198), (247, 20, 73), 4)
    pen.disc(70, (222, 118, 146), (200, 200, 50))
    pen.spokes(35, 70, 25, (250, 144, 82))
    pen.discs(_PURPLE_CORE)
    pen.border()
    pen.rings(_RING_RADII, 5, RED)


def _orange(pen):
    pen.disc(280, (191, 148, 173))
    pen.disc(150, (164, 180, 176))
    pen.spokes(75, 140, 50, RED, 3)
    pen.dot_matrix(RED)
    pen.discs(_ORANGE_CORE)
    pen.border()


def _orange_circle(pen):
    pen.disc(280, (113, 187, 204))
    pen.disc(150, (122, 175, 205), (238, 232, 58), 6)
    pen.disc(70, (163, 181, 119), (190, 238, 58), 6)
    pen.rings(_INNER_RING_RADII, 5, (254, 233, 126))
    pen.rings([57], 5, WHITE)
    pen.disc(40, (243, 236, 150))
    pen.disc(20, (182, 186, 233))
    pen.disc(8, (200, 173, 234))
    pen.border()


def _green(pen):
    pen.disc(280, (207, 170, 99))
    pen.spokes(75, 140, 50, RED, 1.7)
    pen.disc(150, (157, 186, 154))
    pen.dot_matrix((180, 180, 238))
    pen.discs(_GREEN_CORE)
    pen.border()


def _white(pen):
    pen.disc(280, (241, 146, 84))
    pen.discs(_WHITE_STEPS)
    pen.border()
    pen.rings(_RING_RADII, 7, GREEN)


def _yellow_orange(pen):
    pen.disc(280, (132, 123, 167))
    pen.disc(140, (180, 153, 192))
    pen.disc(130, (174, 192, 193))
    pen.discs(_YELLOW_ORANGE_STEPS)
    pen.border()
    pen.rings(_RING_RADII, 5, (152, 109, 185))


def _second_purple(pen):
    pen.disc(280, (214, 74, 104))
    pen.disc(140, (234, 137, 145), (247, 20, 73), 4)
    pen.disc(70, (169, 198, 212), (200, 200, 50))
    pen.spokes(35, 70, 25, (196, 152, 180))
    pen.discs(_SECOND_PURPLE_CORE)
    pen.border()
    # alternating small and large beads
    for i, r in enumerate(_RING_RADII):
        pen.bead_ring(r, RING_BEADS, 5 if i % 2 == 0 else 10, RED)


def _second_white(pen):
    pen.disc(280, (175, 202, 183))
    pen.discs(_SECOND_WHITE_STEPS)
    pen.border()
    pen.rings(_RING_RADII, 7, GREEN)


_RECIPES = {
    PatternKind.PURPLE: _purple,
    PatternKind.ORANGE: _orange,
    PatternKind.ORANGE_CIRCLE: _orange_circle,
    PatternKind.GREEN: _green,
    PatternKind.WHITE: _white,
    PatternKind.YELLOW_ORANGE: _yellow_orange,
    PatternKind.SECOND_PURPLE: _second_purple,
    PatternKind.SECOND_WHITE: _second_white,
}


def bounding_radius(scale):
    """Furthest any recipe may draw from its centre."""
    return REFERENCE_SIZE / 2 * scale


def draw_pattern(kind, center, scale, noise, surface, frame=0, rng=None):
    """Draw one pattern of ``kind`` centred at ``center``.

    ``noise`` is any callable returning [0, 1) values; ``rng`` supplies the
    per-primitive noise offsets. Unknown kinds raise KeyError.
    """
    recipe = _RECIPES[kind]
    rng = rng if rng is not None else random.Random()
    recipe(_Pen(center, scale, noise, surface, frame, rng))
