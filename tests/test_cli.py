"""Tests for the cadmodel command line summary."""

import pytest

from cadmodel.main import main, parse_args

DRAWING = """
name: office
layouts:
  Sheet1: {}
entities:
  Model:
    - {type: line, start: [0, 0, 0], end: [5, 0, 0]}
    - {type: line, start: [0, 1, 0], end: [5, 1, 0]}
    - {type: circle, radius: 3}
  Sheet1:
    - {type: mtext, value: "Notes"}
"""


@pytest.fixture
def drawing_path(tmp_path):
    path = tmp_path / "office.yaml"
    path.write_text(DRAWING)
    return path


def test_parse_args_defaults(drawing_path):
    args = parse_args([str(drawing_path)])
    assert args.layout is None
    assert args.kind is None
    assert not args.all_layouts
    assert args.verbose == 0


def test_summary_of_active_layout(drawing_path, capsys):
    assert main([str(drawing_path)]) == 0

    out = capsys.readouterr().out
    assert "Drawing 'office'" in out
    assert "Layout 'Model' (block *Model_Space): 3 entities" in out
    assert "  - circle: 1" in out
    assert "  - line: 2" in out
    assert "Layout 'Sheet1'" not in out


def test_summary_of_named_layout(drawing_path, capsys):
    assert main([str(drawing_path), "--layout", "Sheet1"]) == 0

    out = capsys.readouterr().out
    assert "Layout 'Sheet1' (block *Paper_Space0): 1 entities" in out
    assert "  - mtext: 1" in out


def test_summary_of_all_layouts_in_tab_order(drawing_path, capsys):
    assert main([str(drawing_path), "-a"]) == 0

    out = capsys.readouterr().out
    model = out.index("Layout 'Model'")
    layout1 = out.index("Layout 'Layout1'")
    sheet1 = out.index("Layout 'Sheet1'")
    assert model < layout1 < sheet1


def test_kind_lists_handles(drawing_path, capsys):
    assert main([str(drawing_path), "-k", "circle"]) == 0

    out = capsys.readouterr().out
    handles_line = next(line for line in out.splitlines() if "circle handles:" in line)
    handles = handles_line.split(":", 1)[1].strip().split(", ")
    assert len(handles) == 1
    int(handles[0], 16)


def test_unknown_layout_is_an_error(drawing_path, capsys):
    assert main([str(drawing_path), "-l", "Nope"]) == 1
    assert "error: The layout 'Nope' does not exist." in capsys.readouterr().err


def test_missing_drawing_is_an_error(tmp_path, capsys):
    assert main([str(tmp_path / "missing.yaml")]) == 1
    assert "error:" in capsys.readouterr().err


def test_invalid_drawing_is_an_error(tmp_path, capsys):
    path = tmp_path / "bad.yaml"
    path.write_text("underlays:\n  x: {type: pdf, file: x.txt}\n")

    assert main([str(path)]) == 1
    assert "do not match" in capsys.readouterr().err


@pytest.mark.parametrize("content", [
    "entities:\n  Model:\n    - line\n",
    "entities:\n  Model:\n    - {type: line, start: abc}\n",
    "layouts:\n  - Sheet1\n",
    "entities: [1, 2]\n",
    "name: [unclosed\n",
])
def test_malformed_drawing_is_an_error(tmp_path, capsys, content):
    path = tmp_path / "bad.yaml"
    path.write_text(content)

    assert main([str(path)]) == 1
    assert "error:" in capsys.readouterr().err
