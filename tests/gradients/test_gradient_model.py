import numpy as np
import pytest

from chromagrad.colors.rgb import ColorRGBA, BLACK
from chromagrad.gradients.gradient import Gradient, Paint, Stop
from chromagrad.types.geometry_types import Box2, Point
from chromagrad.types.gradient_types import GradientKind, GradientType, Spread


def test_gradient_type_properties():
    assert GradientType("repeating-radial").kind == GradientKind.RADIAL
    assert GradientType("repeating-radial").repeating
    assert GradientType("linear").kind == GradientKind.LINEAR
    assert not GradientType("linear").repeating


def test_start_end_alias_bounds():
    grad = Gradient.linear()
    grad.start = Point(0.2, 0.3)
    grad.end.y = 1.0
    assert grad.bounds == Box2(Point(0.2, 0.3), Point(1.0, 1.0))


def test_set_radius():
    grad = Gradient.radial()
    grad.set_radius(0.25)
    assert grad.radius == Point(0.25, 0.25)
    grad.set_radius((0.1, 0.4))
    assert grad.radius == Point(0.1, 0.4)


def test_as_kind_keeps_stops_and_spread():
    grad = Gradient.linear(spread=Spread.REFLECT, stops=[Stop(0.0, BLACK), Stop(1.0, BLACK)])
    radial = grad.as_kind(GradientKind.RADIAL)
    assert radial is grad
    assert grad.is_radial
    assert grad.spread == Spread.REFLECT
    assert len(grad.stops) == 2
    assert grad.as_kind(GradientKind.LINEAR) is grad
    assert grad.kind == GradientKind.LINEAR


def test_copy_is_deep():
    grad = Gradient.linear(stops=[Stop(0.5, BLACK)])
    dup = grad.copy()
    dup.stops[0].offset = 0.9
    dup.start.x = 0.7
    assert grad.stops[0].offset == 0.5
    assert grad.start.x == 0.0
    assert dup != grad


def test_renderer_arrays():
    grad = Gradient.linear(stops=[
        Stop(0.0, ColorRGBA((255, 0, 0)), 1.0),
        Stop(1.0, ColorRGBA((0, 0, 255, 128)), 0.5),
    ])
    offsets = grad.offsets()
    colors = grad.colors()
    assert offsets.dtype == np.float32
    np.testing.assert_allclose(offsets, [0.0, 1.0])
    assert colors.shape == (2, 4)
    np.testing.assert_allclose(colors[0], [1.0, 0.0, 0.0, 1.0])
    np.testing.assert_allclose(colors[1], [0.0, 0.0, 1.0, 128 / 255 * 0.5], rtol=1e-6)


def test_empty_arrays():
    grad = Gradient()
    assert grad.offsets().shape == (0,)
    assert grad.colors().shape == (0, 4)


def test_paint():
    assert not Paint().is_gradient
    paint = Paint(solid=BLACK, gradient=Gradient())
    assert paint.is_gradient
    dup = paint.copy()
    assert dup == paint
    assert dup.gradient is not paint.gradient


@pytest.mark.parametrize("kind", list(GradientKind))
def test_constructors(kind):
    grad = Gradient.radial() if kind == GradientKind.RADIAL else Gradient.linear()
    assert grad.kind == kind
