"""Path command handlers.

Each handler consumes zero or more operand groups: after the first group,
further groups with no command letter in between repeat the same command.
Relative (lower-case) forms add the current point to every coordinate of
a group, taken before that group is applied.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pathgeom.geometry.arc import arc_to_cubics, solve_arc
from pathgeom.models.path import (
    ArcTo,
    ClosePath,
    CubicCurveTo,
    LineTo,
    MoveTo,
    Point,
    QuadraticCurveTo,
)
from pathgeom.parser.registry import command

if TYPE_CHECKING:
    from pathgeom.parser.interpreter import InterpreterState


@command("Mm", description="Start a new subpath")
def move_to(state: InterpreterState, relative: bool) -> None:
    while state.lexer.at_number():
        state.append(MoveTo(state.read_point(relative)))
    state.clear_prev()


@command("Ll", description="Straight line")
def line_to(state: InterpreterState, relative: bool) -> None:
    while state.lexer.at_number():
        state.append(LineTo(state.read_point(relative)))
    state.clear_prev()


@command("Hh", description="Horizontal line, y held")
def horizontal_line_to(state: InterpreterState, relative: bool) -> None:
    while state.lexer.at_number():
        x = state.lexer.read_number()
        state.append(LineTo(Point(state.base(relative).x + x, state.current_point.y)))
    state.clear_prev()


@command("Vv", description="Vertical line, x held")
def vertical_line_to(state: InterpreterState, relative: bool) -> None:
    while state.lexer.at_number():
        y = state.lexer.read_number()
        state.append(LineTo(Point(state.current_point.x, state.base(relative).y + y)))
    state.clear_prev()


@command("Cc", description="Cubic Bezier curve")
def cubic_to(state: InterpreterState, relative: bool) -> None:
    while state.lexer.at_number():
        base = state.base(relative)
        x1, y1, x2, y2, x, y = state.lexer.read_numbers(6)
        control2 = base + Point(x2, y2)
        state.append(CubicCurveTo(base + Point(x1, y1), control2, base + Point(x, y)))
        state.prev_cubic_control = control2
    state.clear_prev(cubic=False)


@command("Ss", description="Smooth cubic Bezier curve")
def smooth_cubic_to(state: InterpreterState, relative: bool) -> None:
    while state.lexer.at_number():
        base = state.base(relative)
        x2, y2, x, y = state.lexer.read_numbers(4)
        control1 = state.reflected_control(state.prev_cubic_control)
        control2 = base + Point(x2, y2)
        state.append(CubicCurveTo(control1, control2, base + Point(x, y)))
        state.prev_cubic_control = control2
    state.clear_prev(cubic=False)


@command("Qq", description="Quadratic Bezier curve")
def quadratic_to(state: InterpreterState, relative: bool) -> None:
    while state.lexer.at_number():
        base = state.base(relative)
        x1, y1, x, y = state.lexer.read_numbers(4)
        control = base + Point(x1, y1)
        state.append(QuadraticCurveTo(control, base + Point(x, y)))
        state.prev_quadratic_control = control
    state.clear_prev(quadratic=False)


@command("Tt", description="Smooth quadratic Bezier curve")
def smooth_quadratic_to(state: InterpreterState, relative: bool) -> None:
    while state.lexer.at_number():
        end = state.read_point(relative)
        control = state.reflected_control(state.prev_quadratic_control)
        state.append(QuadraticCurveTo(control, end))
        state.prev_quadratic_control = control
    state.clear_prev(quadratic=False)


@command("Aa", description="Elliptical arc")
def arc_to(state: InterpreterState, relative: bool) -> None:
    config = state.config
    while state.lexer.at_number():
        base = state.base(relative)
        rx, ry, rotation, large_arc, sweep, x, y = state.lexer.read_numbers(7)
        start = state.current_point
        end = base + Point(x, y)

        if end == start:
            # Zero-length arc: nothing is drawn
            continue
        # A radius whose square underflows draws the same as a zero radius
        if rx * rx == 0 or ry * ry == 0:
            state.append(LineTo(end))
            continue

        arc = solve_arc(
            start,
            rx,
            ry,
            rotation,
            large_arc != 0,
            sweep != 0,
            end,
            margin=config.radii_check_margin,
            epsilon=config.radii_scale_epsilon,
        )
        if arc.extent == 0:
            # Radii so large the arc is indistinguishable from its chord
            state.append(LineTo(end))
        elif config.arcs_as_cubics:
            for cubic in arc_to_cubics(arc, end, config.arc_max_segment_degrees):
                state.append(cubic)
        else:
            state.append(ArcTo(arc, end))
    state.clear_prev()


@command("Zz", description="Close the current subpath")
def close_path(state: InterpreterState, relative: bool) -> None:
    state.append(ClosePath())
    state.clear_prev()
