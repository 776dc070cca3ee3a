import pytest

from horizon.structs import AudioData, Color, FPoint2, FPoint3, IPoint2, IPoint3, IRect


def test_defaults_are_zero():
    assert IPoint2() == IPoint2(0, 0)
    assert FPoint2() == FPoint2(0.0, 0.0)
    assert IPoint3() == IPoint3(0, 0, 0)
    assert FPoint3() == FPoint3(0.0, 0.0, 0.0)
    assert Color() == Color(0, 0, 0)
    assert AudioData() == AudioData(0, 0)
    assert IRect() == IRect(0, 0, 0, 0)


def test_add_then_subtract_round_trip():
    a = IPoint2(3, -8)
    b = IPoint2(-5, 11)
    assert (a + b) - b == a


def test_scalar_matches_point_of_equal_components():
    a = IPoint2(6, -9)
    assert a + 4 == a + IPoint2(4, 4)
    assert a - 4 == a - IPoint2(4, 4)
    assert a * 3 == a * IPoint2(3, 3)
    assert a / 3 == a / IPoint2(3, 3)


def test_multiply_then_divide_round_trip():
    a = IPoint2(7, -13)
    b = IPoint2(3, 5)
    assert (a * b) / b == a


def test_multiply_by_one_is_identity():
    a = IPoint2(12, -4)
    assert a * 1 == a


def test_division_truncates_toward_zero():
    assert IPoint2(-7, 7) / 2 == IPoint2(-3, 3)


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        IPoint2(1, 1) / 0


def test_equality_checks_both_components():
    assert IPoint2(1, 2) == IPoint2(1, 2)
    assert not IPoint2(1, 2) == IPoint2(1, 3)
    assert not IPoint2(1, 2) == IPoint2(0, 2)


def test_in_place_add_does_not_mutate_shared_point():
    p = IPoint2(1, 1)
    a = p
    a += IPoint2(2, 2)
    assert p == IPoint2(1, 1)
    assert a == p + IPoint2(2, 2)


def test_unsupported_operand_raises_type_error():
    with pytest.raises(TypeError):
        IPoint2(1, 1) + "x"