"""
Immediate-mode drawing surfaces.
Pattern recipes set stroke/fill state and then issue circles and lines;
every primitive lands on top of the ones drawn before it.
Colors are 0-255 tuples (r, g, b) or (r, g, b, a); a bare int is grey.
"""

from collections import namedtuple

from matplotlib.lines import Line2D
from matplotlib.patches import Circle

DrawOp = namedtuple("DrawOp", "kind geometry fill stroke weight")


def _rgba(color):
    """0-255 color spec -> matplotlib 0-1 RGBA tuple."""
    if color is None:
        return None
    if isinstance(color, (int, float)):
        color = (color, color, color)
    if len(color) == 3:
        color = tuple(color) + (255,)
    return tuple(c / 255.0 for c in color)


def _normalize(color):
    if isinstance(color, (int, float)):
        return (color, color, color, 255)
    if len(color) == 3:
        return tuple(color) + (255,)
    return tuple(color)


class DrawingSurface:
    """Shared stroke/fill state. Subclasses implement ``_circle`` and ``_line``."""

    def __init__(self):
        self.fill_color = (255, 255, 255, 255)
        self.stroke_color = (0, 0, 0, 255)
        self.weight = 1.0

    def fill(self, color):
        self.fill_color = _normalize(color)

    def no_fill(self):
        self.fill_color = None

    def stroke(self, color):
        self.stroke_color = _normalize(color)

    def no_stroke(self):
        self.stroke_color = None

    def stroke_weight(self, weight):
        self.weight = weight

    def circle(self, x, y, d):
        self._circle(x, y, d)

    def line(self, x1, y1, x2, y2):
        self._line(x1, y1, x2, y2)

    def background(self, color):
        raise NotImplementedError

    def _circle(self, x, y, d):
        raise NotImplementedError

    def _line(self, x1, y1, x2, y2):
        raise NotImplementedError


class RecordingSurface(DrawingSurface):
    """Keeps every primitive as a ``DrawOp`` in draw order."""

    def __init__(self):
        super().__init__()
        self.ops = []
        self.background_color = None

    def background(self, color):
        self.background_color = _normalize(color)
        self.ops = []

    def _circle(self, x, y, d):
        self.ops.append(DrawOp("circle", (x, y, d), self.fill_color,
                               self.stroke_color, self.weight))

    def _line(self, x1, y1, x2, y2):
        # lines are never filled
        self.ops.append(DrawOp("line", (x1, y1, x2, y2), None,
                               self.stroke_color, self.weight))

    def circles(self):
        return [op for op in self.ops if op.kind == "circle"]

    def lines(self):
        return [op for op in self.ops if op.kind == "line"]


class MatplotlibSurface(DrawingSurface):
    """Draws onto a matplotlib Axes laid out like a canvas (y grows downward).

    ``units_per_point`` converts stroke weights given in canvas units into
    matplotlib line widths, which are in points.
    """

    def __init__(self, ax, width, height, units_per_point=1.0):
        super().__init__()
        self.ax = ax
        self.width = width
        self.height = height
        self.units_per_point = units_per_point
        self._z = 0

    def _next_z(self):
        self._z += 1
        return self._z

    def _lw(self):
        return self.weight / self.units_per_point

    def background(self, color):
        ax = self.ax
        ax.clear()
        ax.set_xlim(0, self.width)
        ax.set_ylim(self.height, 0)
        ax.set_aspect("equal")
        ax.set_axis_off()
        ax.set_facecolor(_rgba(color))
        ax.figure.set_facecolor(_rgba(color))
        self._z = 0

    def _circle(self, x, y, d):
        if self.fill_color is None and self.stroke_color is None:
            return
        patch = Circle((x, y), d / 2.0,
                       facecolor=_rgba(self.fill_color) or "none",
                       edgecolor=_rgba(self.stroke_color) or "none",
                       linewidth=self._lw() if self.stroke_color else 0,
                       zorder=self._next_z())
        self.ax.add_patch(patch)

    def _line(self, x1, y1, x2, y2):
        if self.stroke_color is None:
            return
        self.ax.add_line(Line2D([x1, x2], [y1, y2],
                                color=_rgba(self.stroke_color),
                                linewidth=self._lw(),
                                solid_capstyle="round",
                                zorder=self._next_z()))
