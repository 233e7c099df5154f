"""
Smooth value noise in the style of Processing / p5.js ``noise()``.
A lattice of random values is interpolated with a cosine ease and summed
over a few octaves, so samples taken close together (by index or by frame)
stay correlated. Output is in [0, 1).
"""

import math

import numpy as np

_YWRAPB = 4
_YWRAP = 1 << _YWRAPB
_ZWRAPB = 8
_ZWRAP = 1 << _ZWRAPB
_SIZE = 4095


def _scaled_cosine(t):
    return 0.5 * (1.0 - math.cos(t * math.pi))


class PerlinNoise:
    """Seeded noise source. ``sample(x, y, z)`` is deterministic per seed."""

    def __init__(self, seed=None, octaves=4, falloff=0.5):
        self.seed = seed
        self.octaves = octaves
        self.falloff = falloff
        rng = np.random.default_rng(seed)
        self._lattice = rng.random(_SIZE + 1).tolist()

    def sample(self, x, y=0.0, z=0.0):
        x, y, z = abs(x), abs(y), abs(z)
        xi, yi, zi = int(math.floor(x)), int(math.floor(y)), int(math.floor(z))
        xf, yf, zf = x - xi, y - yi, z - zi
        lat = self._lattice

        r = 0.0
        ampl = 0.5
        for _ in range(self.octaves):
            of = xi + (yi << _YWRAPB) + (zi << _ZWRAPB)
            rxf = _scaled_cosine(xf)
            ryf = _scaled_cosine(yf)

            n1 = lat[of & _SIZE]
            n1 += rxf * (lat[(of + 1) & _SIZE] - n1)
            n2 = lat[(of + _YWRAP) & _SIZE]
            n2 += rxf * (lat[(of + _YWRAP + 1) & _SIZE] - n2)
            n1 += ryf * (n2 - n1)

            of += _ZWRAP
            n2 = lat[of & _SIZE]
            n2 += rxf * (lat[(of + 1) & _SIZE] - n2)
            n3 = lat[(of + _YWRAP) & _SIZE]
            n3 += rxf * (lat[(of + _YWRAP + 1) & _SIZE] - n3)
            n2 += ryf * (n3 - n2)

            n1 += _scaled_cosine(zf) * (n2 - n1)
            r += n1 * ampl
            ampl *= self.falloff

            xi <<= 1
            xf *= 2
            yi <<= 1
            yf *= 2
            zi <<= 1
            zf *= 2
            if xf >= 1.0:
                xi += 1
                xf -= 1
            if yf >= 1.0:
                yi += 1
                yf -= 1
            if zf >= 1.0:
                zi += 1
                zf -= 1
        return r

    __call__ = sample
