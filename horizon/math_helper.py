"""Geometry and interpolation helpers."""

from __future__ import annotations

from .structs import IPoint2, IRect


def are_rects_overlapping(first_rect: IRect, second_rect: IRect) -> bool:
    """Return True when the rectangles overlap or touch."""
    first_right = first_rect.x + first_rect.width
    second_right = second_rect.x + second_rect.width
    first_bottom = first_rect.y + first_rect.height
    second_bottom = second_rect.y + second_rect.height

    if first_rect.x > second_right:
        return False
    if first_right < second_rect.x:
        return False
    if first_rect.y > second_bottom:
        return False
    if first_bottom < second_rect.y:
        return False
    return True


def i_lerp(start_value: int, end_value: int, lerp_value: float) -> int:
    """Interpolate between two integers, truncating toward zero."""
    return int(start_value + (end_value - start_value) * lerp_value)


def ipoint2_lerp(start_value: IPoint2, end_value: IPoint2, lerp_value: float) -> IPoint2:
    """Interpolate two points component-wise."""
    return IPoint2(
        i_lerp(start_value.x, end_value.x, lerp_value),
        i_lerp(start_value.y, end_value.y, lerp_value),
    )