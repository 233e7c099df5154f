import math
import random

import pytest

from mandala_field.noise import PerlinNoise
from mandala_field.patterns import (
    PATTERN_KINDS, PatternKind, bounding_radius, draw_pattern,
)
from mandala_field.surface import RecordingSurface


def _extent(op, cx, cy):
    """Furthest distance from (cx, cy) that an op paints, strokes included."""
    half_stroke = op.weight / 2 if op.stroke is not None else 0.0
    if op.kind == "circle":
        x, y, d = op.geometry
        return math.hypot(x - cx, y - cy) + d / 2 + half_stroke
    x1, y1, x2, y2 = op.geometry
    return max(math.hypot(x1 - cx, y1 - cy),
               math.hypot(x2 - cx, y2 - cy)) + half_stroke


def _draw(kind, center=(400, 300), scale=1.0, frame=0, seed=0,
          noise=None):
    surface = RecordingSurface()
    noise = noise if noise is not None else PerlinNoise(seed)
    draw_pattern(kind, center, scale, noise, surface, frame, random.Random(seed))
    return surface


def test_there_are_eight_kinds():
    assert len(PATTERN_KINDS) == 8
    assert len(set(PATTERN_KINDS)) == 8


@pytest.mark.parametrize("kind", PATTERN_KINDS)
@pytest.mark.parametrize("scale", [0.15, 0.571, 1.0])
def test_pattern_stays_inside_footprint(kind, scale):
    surface = _draw(kind, scale=scale, frame=17)
    assert surface.ops
    limit = bounding_radius(scale) + 1e-9
    for op in surface.ops:
        assert _extent(op, 400, 300) <= limit


@pytest.mark.parametrize("kind", PATTERN_KINDS)
def test_pattern_stays_inside_footprint_with_maximal_noise(kind):
    surface = _draw(kind, scale=0.5, noise=lambda *args: 0.999999)
    limit = bounding_radius(0.5) + 1e-9
    for op in surface.ops:
        assert _extent(op, 400, 300) <= limit


@pytest.mark.parametrize("kind", PATTERN_KINDS)
def test_pattern_is_deterministic(kind):
    a = _draw(kind, frame=5, seed=3)
    b = _draw(kind, frame=5, seed=3)
    assert a.ops == b.ops


@pytest.mark.parametrize("kind", PATTERN_KINDS)
def test_pattern_jitters_between_frames(kind):
    a = _draw(kind, frame=0, seed=3)
    b = _draw(kind, frame=400, seed=3)
    assert len(a.ops) == len(b.ops)
    assert a.ops != b.ops


def test_geometry_scales_with_scale():
    flat = lambda *args: 0.0
    small = _draw(PatternKind.WHITE, center=(0, 0), scale=0.5, noise=flat)
    large = _draw(PatternKind.WHITE, center=(0, 0), scale=1.0, noise=flat)
    for s, l in zip(small.circles(), large.circles()):
        assert s.geometry[2] == pytest.approx(l.geometry[2] * 0.5)
        assert s.geometry[0] == pytest.approx(l.geometry[0] * 0.5)


def test_first_primitive_is_main_disc():
    surface = _draw(PatternKind.PURPLE, noise=lambda *args: 0.0)
    first = surface.ops[0]
    assert first.kind == "circle"
    assert first.geometry == pytest.approx((400, 300, 280 * 0.95))
    assert first.fill[:3] == (232, 179, 174)
    assert first.stroke is None


@pytest.mark.parametrize("kind,has_lines", [
    (PatternKind.PURPLE, True),
    (PatternKind.ORANGE, True),
    (PatternKind.GREEN, True),
    (PatternKind.SECOND_PURPLE, True),
    (PatternKind.WHITE, False),
    (PatternKind.SECOND_WHITE, False),
    (PatternKind.YELLOW_ORANGE, False),
    (PatternKind.ORANGE_CIRCLE, False),
])
def test_spokes_only_in_spoked_themes(kind, has_lines):
    assert bool(_draw(kind).lines()) == has_lines


def test_dot_matrix_themes_have_lattice():
    mid = lambda *args: 0.5
    dots = [op for op in _draw(PatternKind.ORANGE, noise=mid).circles()
            if op.geometry[2] == pytest.approx(8.0)]
    assert len(dots) == 6 * 24


def test_border_outline_is_unfilled():
    surface = _draw(PatternKind.GREEN, scale=1.0)
    outlines = [op for op in surface.circles() if op.fill is None]
    assert len(outlines) == 1
    assert outlines[0].geometry[2] == pytest.approx(300)
    assert outlines[0].stroke[:3] == (0, 0, 0)


def test_unknown_kind_raises():
    with pytest.raises(KeyError):
        _draw("spiral")
