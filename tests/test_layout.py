import math

import pytest

from surkl.layout import (
    Line,
    Side,
    get_guides,
    get_ngon,
    get_ngon_side_norm,
    make_ngon,
    make_ngons,
)


def _length(line):
    return math.hypot(line.dx, line.dy)


def _midpoint(line):
    return ((line.p1[0] + line.p2[0]) / 2, (line.p1[1] + line.p2[1]) / 2)


def test_default_line_is_null():
    assert Line().is_null() is True
    assert Line((0, 0), (1, 0)).is_null() is False
    assert Line((2.5, 3.0), (2.5, 3.0)).is_null() is True


def test_normal_vector():
    assert Line((0.0, 0.0), (1.0, 0.0)).normal_vector() == Line((0.0, 0.0), (0.0, -1.0))


@pytest.mark.parametrize("line", [
    Line((0, 0), (3, 4)),
    Line((1, 2), (-5, 7)),
    Line((-1, -1), (2, -3)),
])
def test_normal_vector_is_perpendicular_and_same_length(line):
    norm = line.normal_vector()
    assert norm.p1 == line.p1
    assert math.isclose(line.dx * norm.dx + line.dy * norm.dy, 0.0, abs_tol=1e-9)
    assert math.isclose(_length(norm), _length(line))


def test_intersects_crossing():
    a = Line((-1, 0), (1, 0))
    b = Line((0, -1), (0, 1))
    assert a.intersects(b) is True
    assert b.intersects(a) is True


def test_intersects_parallel():
    assert Line((0, 0), (1, 0)).intersects(Line((0, 1), (1, 1))) is False


def test_intersects_outside_bounds():
    assert Line((0, 0), (1, 0)).intersects(Line((5, -1), (5, 1))) is False
    assert Line((0, 0), (1, 0)).intersects(Line((0.5, 1), (0.5, 2))) is False


@pytest.mark.parametrize("n", [2, 3, 4, 5, 8])
def test_make_ngon_vertices_on_unit_circle(n):
    ngon = make_ngon(n)
    assert len(ngon) == n
    for side in ngon:
        for x, y in (side.edge.p1, side.edge.p2):
            assert math.isclose(math.hypot(x, y), 1.0)


@pytest.mark.parametrize("n", [3, 4, 6])
def test_make_ngon_sides_are_closed(n):
    ngon = make_ngon(n)
    for current, following in zip(ngon, ngon[1:] + ngon[:1]):
        assert math.isclose(current.edge.p1[0], following.edge.p2[0], abs_tol=1e-9)
        assert math.isclose(current.edge.p1[1], following.edge.p2[1], abs_tol=1e-9)


@pytest.mark.parametrize("n", [3, 4, 7])
def test_make_ngon_norm_matches_edge(n):
    for side in make_ngon(n):
        assert side.norm == side.edge.normal_vector()


@pytest.mark.parametrize("n", [3, 4, 6])
def test_first_side_faces_start_angle(n):
    mx, my = _midpoint(make_ngon(n, 0)[0].edge)
    assert math.isclose(my, 0.0, abs_tol=1e-9)
    assert mx > 0


def test_start_angle_rotates_first_side():
    mx, my = _midpoint(make_ngon(4, 90)[0].edge)
    assert math.isclose(mx, 0.0, abs_tol=1e-9)
    assert my < 0


def test_make_ngon_clamps_to_one_side():
    assert len(make_ngon(0)) == 1
    assert len(make_ngon(-3)) == 1


def test_make_ngons():
    ngons = make_ngons(6)
    assert len(ngons) == 7
    assert ngons[0] == [] and ngons[1] == []
    assert [len(g) for g in ngons[2:]] == [2, 3, 4, 5, 6]


def test_get_ngon_matches_make_ngon():
    assert get_ngon(5) == make_ngon(5, 0)
    assert get_ngon(0) == []
    assert get_ngon(1) == []


def test_get_ngon_returns_independent_copy():
    first = get_ngon(4)
    first[0].norm = Line()
    second = get_ngon(4)
    assert second[0].norm.is_null() is False


def test_get_ngon_negative():
    with pytest.raises(ValueError):
        get_ngon(-1)


def test_get_ngon_side_norm():
    assert get_ngon_side_norm(2, 4) == get_ngon(4)[2].norm


@pytest.mark.parametrize("i, n", [(4, 4), (0, 1), (-1, 3)])
def test_get_ngon_side_norm_out_of_range(i, n):
    with pytest.raises(IndexError):
        get_ngon_side_norm(i, n)


def test_get_guides_no_points():
    guides = get_guides(4, [])
    assert guides == get_ngon(4)
    assert all(not side.norm.is_null() for side in guides)


def test_get_guides_clears_crossed_side():
    guides = get_guides(4, [(10.0, 0.0)])
    assert guides[0].norm.is_null()
    assert [s.norm.is_null() for s in guides[1:]] == [False, False, False]
    assert all(isinstance(s, Side) for s in guides)


def test_get_guides_up_clears_second_side():
    guides = get_guides(4, [(0.0, -10.0)])
    assert guides[1].norm.is_null()
    assert sum(s.norm.is_null() for s in guides) == 1


def test_get_guides_same_side_twice_clears_once():
    guides = get_guides(4, [(10.0, 0.0), (10.0, 1.0)])
    assert sum(s.norm.is_null() for s in guides) == 1


def test_get_guides_all_directions():
    guides = get_guides(4, [(10, 0), (0, -10), (-10, 0), (0, 10)])
    assert all(s.norm.is_null() for s in guides)


def test_get_guides_point_inside_does_nothing():
    guides = get_guides(4, [(0.1, 0.0)])
    assert all(not s.norm.is_null() for s in guides)


def test_get_guides_point_at_centre():
    with pytest.raises(ValueError):
        get_guides(4, [(0.0, 0.0)])