import random

import pytest

from mandala_field.composer import PlacedPattern, compose, render
from mandala_field.config import DEFAULT_CONFIG, SketchConfig
from mandala_field.noise import PerlinNoise
from mandala_field.patterns import PATTERN_KINDS
from mandala_field.placement import Slot, place
from mandala_field.surface import RecordingSurface


def test_single_slot_gets_kind_and_scale():
    (placed,) = compose([Slot(500, 500, 200)], DEFAULT_CONFIG, random.Random(0))
    assert placed.kind in PATTERN_KINDS
    assert placed.scale == pytest.approx(200 / 350)
    assert placed.scale == pytest.approx(0.571, abs=1e-3)
    assert placed.center == (500, 500)


def test_composition_is_sorted_largest_first():
    slots = [Slot(0, 0, 50), Slot(0, 0, 200), Slot(0, 0, 120), Slot(0, 0, 200)]
    composition = compose(slots, DEFAULT_CONFIG, random.Random(1))
    sizes = [p.slot.size for p in composition]
    assert sizes == [200, 200, 120, 50]


@pytest.mark.parametrize("seed", [2, 3, 4])
def test_composed_placement_order_and_scale(seed):
    rng = random.Random(seed)
    composition = compose(place(1000, 1000, DEFAULT_CONFIG, rng), DEFAULT_CONFIG, rng)
    sizes = [p.slot.size for p in composition]
    assert sizes == sorted(sizes, reverse=True)
    for p in composition:
        assert p.scale == pytest.approx(p.slot.size / DEFAULT_CONFIG.reference_size)


def test_scale_follows_configured_reference_size():
    config = SketchConfig(reference_size=100.0)
    (placed,) = compose([Slot(10, 10, 50)], config, random.Random(0))
    assert placed.scale == pytest.approx(0.5)


def test_kinds_are_drawn_from_all_variants():
    slots = [Slot(i, i, 100) for i in range(400)]
    kinds = {p.kind for p in compose(slots, DEFAULT_CONFIG, random.Random(8))}
    assert kinds == set(PATTERN_KINDS)


def test_compose_empty():
    assert compose([], DEFAULT_CONFIG, random.Random(0)) == ()


def test_composition_is_immutable():
    composition = compose([Slot(1, 2, 3)], DEFAULT_CONFIG, random.Random(0))
    assert isinstance(composition, tuple)
    with pytest.raises(AttributeError):
        composition[0].scale = 2.0


def test_render_draws_in_composition_order():
    composition = compose([Slot(100, 100, 70), Slot(500, 500, 175)],
                          DEFAULT_CONFIG, random.Random(4))
    surface = RecordingSurface()
    render(composition, surface, PerlinNoise(0), frame=3)
    circles = surface.circles()
    # first primitive belongs to the large pattern, last to the small one
    assert circles[0].geometry[0] == pytest.approx(500, abs=1)
    assert circles[-1].geometry[0] == pytest.approx(100, abs=36)


def test_render_is_repeatable_for_same_frame():
    composition = compose([Slot(300, 300, 200)], DEFAULT_CONFIG, random.Random(6))
    noise = PerlinNoise(6)
    a, b = RecordingSurface(), RecordingSurface()
    render(composition, a, noise, frame=10)
    render(composition, b, noise, frame=10)
    assert a.ops == b.ops


def test_render_empty_composition_draws_nothing():
    surface = RecordingSurface()
    render((), surface, PerlinNoise(0))
    assert surface.ops == []


def test_placed_pattern_default_seed():
    p = PlacedPattern(Slot(0, 0, 35), PATTERN_KINDS[0], 0.1)
    assert p.seed == 0
