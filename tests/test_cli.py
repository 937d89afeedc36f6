"""Tests for the command-line entry point."""

import json

from pathgeom.cli import describe_segment, main
from pathgeom.models.path import ClosePath, LineTo, Point
from tests.conftest import QUARTER_ARC_D


def test_describe_segment():
    assert describe_segment(LineTo(Point(1.5, -2))) == "LineTo (1.5, -2)"
    assert describe_segment(ClosePath()) == "ClosePath"


def test_prints_segments(capsys):
    assert main(["M0,0 L10,0"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == ["MoveTo (0, 0)", "LineTo (10, 0)"]


def test_strict_failure_exit_code(capsys):
    assert main(["M0,0 Q1"]) == 1
    err = capsys.readouterr().err
    assert "error:" in err
    assert "at index 7" in err


def test_failure_does_not_stop_other_inputs(capsys):
    assert main(["M0,0 Q1", "M1,1"]) == 1
    assert "MoveTo (1, 1)" in capsys.readouterr().out


def test_tolerant_keeps_partial_path(capsys):
    assert main(["--tolerant", "M0,0 Q1"]) == 0
    captured = capsys.readouterr()
    assert captured.out.splitlines() == ["MoveTo (0, 0)"]
    assert "warning:" in captured.err


def test_json_output(capsys):
    assert main(["--json", "M0,0 L10,0"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["path_data"] == "M0,0 L10,0"
    assert [s["kind"] for s in data["segments"]] == ["MoveTo", "LineTo"]
    assert data["segments"][1]["points"] == [[10, 0]]
    assert data["bbox"] == [0, 0, 10, 0]
    assert data["subpath_count"] == 1
    assert data["error"] is None


def test_json_reports_tolerant_error(capsys):
    assert main(["--json", "--tolerant", "M0,0 Q1"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["error"]["kind"] == "ExpectedNumberNotFound"
    assert data["error"]["offset"] == 7


def test_scale(capsys):
    assert main(["--scale", "2", "M1,1 L10,0"]) == 0
    assert capsys.readouterr().out.splitlines() == ["MoveTo (2, 2)", "LineTo (20, 0)"]


def test_arc_output(capsys):
    assert main([QUARTER_ARC_D]) == 0
    assert capsys.readouterr().out.splitlines()[1].startswith("ArcTo center=(0, 0)")


def test_flatten_arcs(capsys):
    assert main(["--flatten-arcs", QUARTER_ARC_D]) == 0
    assert capsys.readouterr().out.splitlines()[1].startswith("CubicCurveTo")


def test_cache_flag(capsys):
    assert main(["--cache", "M0,0 L1,1", "M0,0 L1,1"]) == 0
    assert capsys.readouterr().out.count("LineTo (1, 1)") == 2


def test_reads_file(tmp_path, capsys):
    source = tmp_path / "paths.txt"
    source.write_text("M0,0 L1,1\n\nM2,2 L3,3\n", encoding="utf-8")
    assert main(["-f", str(source)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["MoveTo (0, 0)", "LineTo (1, 1)", "MoveTo (2, 2)", "LineTo (3, 3)"]


def test_no_input(capsys):
    assert main([]) == 2
    assert "No path data" in capsys.readouterr().err


def test_no_tolerant_overrides_settings(monkeypatch, capsys):
    monkeypatch.setattr("pathgeom.cli.settings.tolerant", True)
    assert main(["M0,0 Q1"]) == 0
    assert main(["--no-tolerant", "M0,0 Q1"]) == 1
    assert "error:" in capsys.readouterr().err


def test_no_cache_overrides_settings(monkeypatch, capsys):
    monkeypatch.setattr("pathgeom.cli.settings.use_cache", True)
    assert main(["--no-cache", "M0,0 L1,1"]) == 0
    assert capsys.readouterr().out.splitlines() == ["MoveTo (0, 0)", "LineTo (1, 1)"]
