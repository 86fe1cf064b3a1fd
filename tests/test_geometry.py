import pytest

from cardschema.geometry import (
    I32_MAX,
    U32_MAX,
    FinalRect,
    Rect,
    absolute_rect,
    clamp_to_i32,
    clamp_to_u32,
)


def test_contains():
    assert Rect.at(0, 0, 10, 10).contains(5, 5)
    assert Rect.at(10, 10, 10, 10).contains(15, 15)
    assert not Rect.at(0, 0, 10, 10).contains(15, 5)
    assert not Rect.at(0, 0, 10, 10).contains(5, 15)
    assert not Rect.at(0, 0, 10, 10).contains(15, 15)
    assert not Rect.at(10, 10, 10, 10).contains(5, 5)


def test_contains_edges_are_inclusive():
    rect = Rect.at(2, 2, 5, 5)
    assert rect.right == 6
    assert rect.bottom == 6
    assert rect.contains(2, 2)
    assert rect.contains(6, 6)
    assert not rect.contains(7, 6)
    assert not rect.contains(6, 7)


def test_contains_rejects_points_outside_i32_range():
    rect = Rect.at(0, 0, 10, 10)
    assert not rect.contains(I32_MAX + 1, 5)
    assert not rect.contains(5, U32_MAX)


@pytest.mark.parametrize("width,height", [(0, 5), (5, 0), (-1, 3)])
def test_rect_requires_positive_size(width, height):
    with pytest.raises(ValueError):
        Rect.at(0, 0, width, height)


def test_final_rect_from_rect():
    final = FinalRect.from_rect(Rect.at(-3, 4, 10, 20))
    assert final == FinalRect(x=-3, y=4, width=10, height=20)
    assert final.to_dict() == {"x": -3, "y": 4, "width": 10, "height": 20}


@pytest.mark.parametrize(
    "value,expected",
    [(-5, 0), (0, 0), (42, 42), (U32_MAX, U32_MAX), (U32_MAX + 10, U32_MAX), (3.9, 3)],
)
def test_clamp_to_u32(value, expected):
    assert clamp_to_u32(value) == expected


@pytest.mark.parametrize(
    "value,expected",
    [(0, 0), (17, 17), (I32_MAX, I32_MAX), (U32_MAX, I32_MAX)],
)
def test_clamp_to_i32(value, expected):
    assert clamp_to_i32(value) == expected


def test_absolute_rect_uses_origin_and_size():
    rect = absolute_rect(3.7, 4.2, 10.9, 20.0)
    assert (rect.left, rect.top, rect.width, rect.height) == (3, 4, 10, 20)


def test_absolute_rect_has_at_least_one_pixel():
    rect = absolute_rect(0.0, 0.0, 0.0, 0.25)
    assert (rect.width, rect.height) == (1, 1)