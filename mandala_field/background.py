"""
Drifting noise background: a scatter of translucent pink and mint circles
whose positions, sizes and colours follow the noise field over time.
"""

from .config import BACKGROUND_COLOR, BACKGROUND_SHAPES

PINK = (232, 198, 198)
MINT = (198, 232, 223)
ALPHA = 127
NOISE_SCALE = 0.005
MIN_SHAPE = 20
MAX_SHAPE = 60


def _map(value, lo, hi):
    return lo + value * (hi - lo)


def draw_noise_background(surface, noise, width, height, frame=0,
                          count=BACKGROUND_SHAPES):
    surface.background(BACKGROUND_COLOR)
    surface.no_stroke()
    for i in range(count):
        x = noise(i * 0.5, frame * 0.001) * width
        y = noise(i * 0.6 + 1000, frame * 0.005) * height
        size = _map(noise(i * 0.1 + 2000, frame * 0.01), MIN_SHAPE, MAX_SHAPE)
        value = noise(x * NOISE_SCALE, y * NOISE_SCALE, frame * 0.002)
        color = PINK if value < 0.5 else MINT
        surface.fill(color + (ALPHA,))
        surface.circle(x, y, size * (0.5 + value))
