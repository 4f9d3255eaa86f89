import pygame
import pytest

from flut.canvas import Canvas
from flut.widgets.core import Rect
from flut.widgets.painters import Spacing
from flut.widgets.transforms import Scale, Translation

CONSTRAINT = Rect(0.0, 0.0, 100.0, 100.0)


@pytest.fixture
def canvas():
    return Canvas(pygame.Surface((100, 100), pygame.SRCALPHA))


def test_scale_builds_its_child():
    child = Spacing()
    assert Scale(scale=0.5, child=child).build(CONSTRAINT) is child


def test_scale_shrinks_about_center(canvas):
    widget = Scale(scale=0.5, child=Spacing())
    widget.pre_draw(canvas, CONSTRAINT)
    mapped = canvas.map_rect(CONSTRAINT)
    assert mapped.center == CONSTRAINT.center
    assert mapped.width == pytest.approx(CONSTRAINT.width * widget.scale)
    widget.post_draw(canvas, CONSTRAINT)
    assert canvas.map_rect(CONSTRAINT) == CONSTRAINT


def test_translation_builds_its_child():
    child = Spacing()
    assert Translation(translation=(1.0, 2.0), child=child).build(CONSTRAINT) is child


def test_translation_offsets_and_restores(canvas):
    widget = Translation(translation=(3.0, 4.0), child=Spacing())
    widget.pre_draw(canvas, CONSTRAINT)
    assert canvas.map_rect(CONSTRAINT) == Rect(3.0, 4.0, CONSTRAINT.width, CONSTRAINT.height)
    widget.post_draw(canvas, CONSTRAINT)
    assert canvas.map_rect(CONSTRAINT) == CONSTRAINT