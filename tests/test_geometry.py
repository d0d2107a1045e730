import pytest

from stamplayout.models import BoundingBox, PageDimensions, Point


def box(x0, y0, x1, y1) -> BoundingBox:
    return BoundingBox(Point(x0, y0), Point(x1, y1))


def test_overlap_is_symmetric():
    a = box(0, 0, 100, 50)
    b = box(50, 25, 150, 75)
    c = box(200, 200, 300, 300)

    assert a.overlaps(b) and b.overlaps(a)
    assert not a.overlaps(c) and not c.overlaps(a)


def test_touching_edges_do_not_overlap():
    left = box(0, 0, 100, 100)
    right = box(100, 0, 200, 100)
    above = box(0, 100, 100, 200)

    assert not left.overlaps(right)
    assert not right.overlaps(left)
    assert not left.overlaps(above)


def test_box_overlaps_itself():
    a = box(10, 10, 20, 20)
    assert a.overlaps(a)


def test_contains_is_inclusive():
    a = box(0, 0, 10, 10)
    assert a.contains(Point(0, 0))
    assert a.contains(Point(10, 10))
    assert a.contains(Point(5, 5))
    assert not a.contains(Point(10.1, 5))


def test_width_and_height():
    a = box(10, 20, 40, 80)
    assert a.width == 30
    assert a.height == 60


def test_inverted_box_is_rejected():
    with pytest.raises(ValueError):
        box(10, 10, 5, 20)


@pytest.mark.parametrize("width,height", [(0, 100), (100, 0), (-1, 10)])
def test_page_dimensions_must_be_positive(width, height):
    with pytest.raises(ValueError):
        PageDimensions(width, height)


def test_page_area():
    assert PageDimensions(612, 792).area == 484704
