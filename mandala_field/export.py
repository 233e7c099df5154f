"""
Single-frame export: PNG through an off-screen matplotlib figure, DXF with
the patterns' circles and spokes as native entities for plotters and
laser cutters. These are pictures of one frame; layouts are not saved.
"""

import ezdxf
from ezdxf import colors
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure

from .surface import MatplotlibSurface, RecordingSurface

DXF_LAYERS = {
    "Discs": 1,
    "Outlines": 7,
    "Spokes": 8,
}


def _dxf_layer(op):
    if op.kind == "line":
        return "Spokes"
    if op.fill is None:
        return "Outlines"
    return "Discs"


def _dxf_color(op):
    rgba = op.fill if op.fill is not None else op.stroke
    if rgba is None:
        return None
    return colors.rgb2int(tuple(int(c) for c in rgba[:3]))


def export_dxf(ops, filepath, height):
    """Write recorded circle/line ops to a DXF file.
    Canvas y grows downward, so y is flipped against ``height``."""
    doc = ezdxf.new("R2010")
    doc.header["$INSUNITS"] = 0
    msp = doc.modelspace()
    for name, color in DXF_LAYERS.items():
        doc.layers.add(name, color=color)
    for op in ops:
        attribs = {"layer": _dxf_layer(op)}
        true_color = _dxf_color(op)
        if true_color is not None:
            attribs["true_color"] = true_color
        if op.kind == "circle":
            x, y, d = op.geometry
            if d <= 0:
                continue
            msp.add_circle((x, height - y), d / 2, dxfattribs=attribs)
        elif op.kind == "line":
            x1, y1, x2, y2 = op.geometry
            msp.add_line((x1, height - y1), (x2, height - y2), dxfattribs=attribs)
    doc.saveas(filepath)
    return doc


def export_frame_dxf(state, filepath):
    """Patterns of the current frame, background left out."""
    surface = RecordingSurface()
    state.paint(surface, background=False)
    return export_dxf(surface.ops, filepath, state.height)


def render_figure(state, dpi=100):
    """Off-screen figure holding the current frame at canvas resolution."""
    if state.width <= 0 or state.height <= 0:
        raise ValueError(
            f"Canvas has no area yet ({state.width}x{state.height}); "
            "resize it before exporting")
    fig = Figure(figsize=(state.width / dpi, state.height / dpi), dpi=dpi)
    FigureCanvasAgg(fig)
    ax = fig.add_axes([0, 0, 1, 1])
    surface = MatplotlibSurface(ax, state.width, state.height,
                                units_per_point=dpi / 72.0)
    state.paint(surface)
    return fig


def export_png(state, filepath, dpi=100):
    fig = render_figure(state, dpi)
    fig.savefig(filepath, dpi=dpi, facecolor=fig.get_facecolor(),
                edgecolor="none")
    return filepath
