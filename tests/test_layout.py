import pytest

from loading_screen.layout import (
    CornerAnchor,
    LogicalSize,
    ScreenOffset,
    ScreenRect,
    resolve_anchor_rect,
)

SCREEN_W = 1920
SCREEN_H = 1080
SIZE = LogicalSize(50, 10)


@pytest.mark.parametrize("x, y", [(1, 1), (20.5, 10), (1900, 1070)])
def test_positive_offsets_anchor_top_left(x: float, y: float) -> None:
    rect, anchor = resolve_anchor_rect(ScreenOffset(x, y), SIZE, SCREEN_W, SCREEN_H)

    assert anchor is CornerAnchor.TOP_LEFT
    assert (rect.x, rect.y) == (x, y)


@pytest.mark.parametrize("x, y", [(20, -10), (5, -0.5), (300, -1080)])
def test_positive_x_non_positive_y_anchors_bottom_left(x: float, y: float) -> None:
    rect, anchor = resolve_anchor_rect(ScreenOffset(x, y), SIZE, SCREEN_W, SCREEN_H)

    assert anchor is CornerAnchor.BOTTOM_LEFT
    assert rect.x == x
    assert rect.y == SCREEN_H + y


@pytest.mark.parametrize("x, y", [(-20, 10), (-0.5, 300)])
def test_non_positive_x_positive_y_anchors_top_right(x: float, y: float) -> None:
    rect, anchor = resolve_anchor_rect(ScreenOffset(x, y), SIZE, SCREEN_W, SCREEN_H)

    assert anchor is CornerAnchor.TOP_RIGHT
    assert rect.x == SCREEN_W + x
    assert rect.y == y


def test_negative_offsets_anchor_bottom_right() -> None:
    rect, anchor = resolve_anchor_rect(
        ScreenOffset(-20, -10), LogicalSize(50, 10), 1920, 1080
    )

    assert anchor is CornerAnchor.BOTTOM_RIGHT
    assert rect == ScreenRect(1900, 1070, 50, 10)


def test_zero_offset_sticks_to_far_edges() -> None:
    rect, anchor = resolve_anchor_rect(ScreenOffset(0, 0), SIZE, SCREEN_W, SCREEN_H)

    assert anchor is CornerAnchor.BOTTOM_RIGHT
    assert (rect.x, rect.y) == (SCREEN_W, SCREEN_H)


def test_zero_is_non_positive_per_axis() -> None:
    _, x_zero = resolve_anchor_rect(ScreenOffset(0, 15), SIZE, SCREEN_W, SCREEN_H)
    _, y_zero = resolve_anchor_rect(ScreenOffset(15, 0), SIZE, SCREEN_W, SCREEN_H)

    assert x_zero is CornerAnchor.TOP_RIGHT
    assert y_zero is CornerAnchor.BOTTOM_LEFT


def test_size_is_passed_through_unclamped() -> None:
    rect, _ = resolve_anchor_rect(
        ScreenOffset(-5000, 10), LogicalSize(3000, 0.25), SCREEN_W, SCREEN_H
    )

    assert rect == ScreenRect(-3080, 10, 3000, 0.25)


def test_resolution_is_idempotent() -> None:
    args = (ScreenOffset(-12.75, 33.1), LogicalSize(640, 48), 2560, 1440)

    assert resolve_anchor_rect(*args) == resolve_anchor_rect(*args)


def test_rect_follows_screen_size() -> None:
    offset = ScreenOffset(-20, -10)

    small, _ = resolve_anchor_rect(offset, SIZE, 800, 600)
    large, _ = resolve_anchor_rect(offset, SIZE, 2560, 1440)

    assert (small.x, small.y) == (780, 590)
    assert (large.x, large.y) == (2540, 1430)


def test_as_pygame_rect_rounds_to_ints() -> None:
    rect = ScreenRect(10.6, 20.4, 50, 10)

    converted = rect.as_pygame_rect()

    assert (converted.x, converted.y, converted.w, converted.h) == (11, 20, 50, 10)
    assert rect.as_tuple() == (10.6, 20.4, 50, 10)
