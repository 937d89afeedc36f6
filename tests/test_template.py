"""Tests for ShapeTemplate."""

import pytest

from pathgeom.models.path import ArcTo, LineTo, MoveTo, Point
from pathgeom.parser.errors import PathParseError
from pathgeom.template import ShapeTemplate
from tests.conftest import HOME_DOOR_D, HOME_ROOF_D, QUARTER_ARC_D


def test_from_path_data():
    tpl = ShapeTemplate.from_path_data(24, 24, HOME_DOOR_D, HOME_ROOF_D)
    assert tpl.size == (24, 24)
    assert len(tpl.paths) == 2
    assert tpl.paths[0][0] == MoveTo(Point(15, 21))


def test_from_path_data_is_strict():
    with pytest.raises(PathParseError):
        ShapeTemplate.from_path_data(24, 24, "M0,0 Q1")


def test_integer_size_rounds_up():
    tpl = ShapeTemplate(10.2, 7.0)
    assert tpl.int_width == 11
    assert tpl.int_height == 7


def test_from_view_box_translates_content():
    tpl = ShapeTemplate.from_view_box((10, 10, 20, 20), "M10,10 L30,30")
    assert tpl.size == (20, 20)
    assert tpl.paths[0].segments == [MoveTo(Point(0, 0)), LineTo(Point(20, 20))]


def test_from_view_box_at_origin_accepts_paths():
    tpl = ShapeTemplate.from_view_box((0, 0, 24, 24), ShapeTemplate.from_path_data(1, 1, HOME_DOOR_D).paths[0])
    assert tpl.paths[0][0] == MoveTo(Point(15, 21))


def test_scale_uniform():
    tpl = ShapeTemplate.from_path_data(10, 10, QUARTER_ARC_D).scale(2)
    assert (tpl.width, tpl.height) == (20, 20)
    seg = tpl.paths[0][1]
    assert isinstance(seg, ArcTo)
    assert seg.point == Point(0, 20)


def test_scale_per_axis_flattens_arcs():
    tpl = ShapeTemplate.from_path_data(10, 10, QUARTER_ARC_D).scale(2, 3)
    assert tpl.size == (20, 30)
    path = tpl.paths[0]
    assert not any(isinstance(seg, ArcTo) for seg in path)
    assert path.end_point == Point(0, 30)


def test_scale_by_one_is_a_copy():
    tpl = ShapeTemplate.from_path_data(10, 10, "M0,0 L1,1")
    same = tpl.scale(1)
    assert same is not tpl
    assert same.paths == tpl.paths


def test_paths_are_defensive_copies():
    tpl = ShapeTemplate.from_path_data(10, 10, "M0,0 L1,1")
    tpl.paths[0].append(LineTo(Point(5, 5)))
    assert len(tpl.paths[0]) == 2


def test_sample():
    tpl = ShapeTemplate.from_path_data(10, 10, "M0,0 L10,0", "M0,5 L10,5")
    samples = tpl.sample(4)
    assert len(samples) == 2
    assert samples[1].shape == (5, 2)


def test_repr():
    assert repr(ShapeTemplate(24, 24)) == "ShapeTemplate(width=24, height=24, paths=0)"
