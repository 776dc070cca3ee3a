from horizon.math_helper import are_rects_overlapping, i_lerp, ipoint2_lerp
from horizon.structs import IPoint2, IRect


def test_identical_rects_overlap():
    r = IRect(5, 5, 10, 10)
    assert are_rects_overlapping(r, r) is True


def test_touching_edges_count_as_overlap():
    assert are_rects_overlapping(IRect(0, 0, 10, 10), IRect(10, 0, 5, 5)) is True
    assert are_rects_overlapping(IRect(0, 0, 10, 10), IRect(0, 10, 5, 5)) is True


def test_separated_rects_do_not_overlap():
    base = IRect(0, 0, 10, 10)
    assert are_rects_overlapping(base, IRect(11, 0, 5, 5)) is False
    assert are_rects_overlapping(base, IRect(-6, 0, 5, 5)) is False
    assert are_rects_overlapping(base, IRect(0, 11, 5, 5)) is False
    assert are_rects_overlapping(base, IRect(0, -6, 5, 5)) is False


def test_overlap_is_symmetric():
    a = IRect(0, 0, 10, 10)
    b = IRect(4, 7, 20, 2)
    assert are_rects_overlapping(a, b) == are_rects_overlapping(b, a)


def test_i_lerp_endpoints():
    assert i_lerp(-4, 20, 0.0) == -4
    assert i_lerp(-4, 20, 1.0) == 20


def test_i_lerp_midpoint_and_truncation():
    assert i_lerp(0, 10, 0.5) == 5
    assert i_lerp(0, 10, 0.99) == 9


def test_ipoint2_lerp_endpoints():
    a = IPoint2(1, -3)
    b = IPoint2(9, 17)
    assert ipoint2_lerp(a, b, 0.0) == a
    assert ipoint2_lerp(a, b, 1.0) == b


def test_ipoint2_lerp_matches_component_lerp():
    a = IPoint2(2, 40)
    b = IPoint2(30, -8)
    p = ipoint2_lerp(a, b, 0.3)
    assert p == IPoint2(i_lerp(2, 30, 0.3), i_lerp(40, -8, 0.3))