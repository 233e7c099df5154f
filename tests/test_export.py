import ezdxf
import pytest

from mandala_field.config import SketchConfig
from mandala_field.export import export_dxf, export_frame_dxf, export_png
from mandala_field.sketch import SketchState
from mandala_field.surface import DrawOp, RecordingSurface


@pytest.fixture
def state():
    state = SketchState(SketchConfig(background_shapes=20), seed=9)
    state.on_resize(400, 300)
    return state


def test_export_dxf_writes_entities(tmp_path):
    ops = [
        DrawOp("circle", (10, 20, 8), (255, 0, 0, 255), None, 1),
        DrawOp("circle", (50, 50, 30), None, (0, 0, 0, 255), 2),
        DrawOp("line", (0, 0, 10, 10), None, (255, 0, 0, 255), 1),
    ]
    path = tmp_path / "frame.dxf"
    export_dxf(ops, str(path), height=100)
    doc = ezdxf.readfile(str(path))
    msp = doc.modelspace()
    circles = msp.query("CIRCLE")
    lines = msp.query("LINE")
    assert len(circles) == 2
    assert len(lines) == 1
    first = circles[0]
    assert first.dxf.radius == pytest.approx(4)
    assert first.dxf.center.y == pytest.approx(80)
    assert first.dxf.layer == "Discs"
    assert circles[1].dxf.layer == "Outlines"
    assert lines[0].dxf.layer == "Spokes"


def test_export_frame_dxf_matches_recorded_patterns(tmp_path, state):
    recorded = RecordingSurface()
    state.paint(recorded, background=False)
    path = tmp_path / "patterns.dxf"
    export_frame_dxf(state, str(path))
    msp = ezdxf.readfile(str(path)).modelspace()
    assert len(msp.query("CIRCLE")) == len(recorded.circles())
    assert len(msp.query("LINE")) == len(recorded.lines())


def test_export_png(tmp_path, state):
    path = tmp_path / "frame.png"
    export_png(state, str(path), dpi=50)
    data = path.read_bytes()
    assert data.startswith(b"\x89PNG")
    assert state.frame_count == 0


def test_export_png_before_first_resize_explains_itself(tmp_path):
    path = tmp_path / "empty.png"
    with pytest.raises(ValueError, match="resize it before exporting"):
        export_png(SketchState(seed=1), str(path))
    assert not path.exists()
