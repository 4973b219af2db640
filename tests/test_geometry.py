"""Tests for ternary coordinate conversion and grid spacing."""

from __future__ import annotations

import logging
import math

import pytest

np = pytest.importorskip("numpy")

from ternplot.geometry import (  # noqa: E402
	HEIGHT,
	cart_to_tern,
	default_limits,
	denormalize,
	format_tick,
	grid_spacing,
	identify_axis,
	normalize,
	tern_to_cart,
	tern_to_cart_abc,
	tick_values,
	validate_limits,
	vertices,
)


@pytest.mark.parametrize(
	("name", "expected"),
	[("A", 0), ("b", 1), ("C", 2), ("1", 0), ("3", 2), ("bottom", 1), (2, 2)],
)
def test_identify_axis_aliases(name, expected):
	assert identify_axis(name) == expected


@pytest.mark.parametrize("name", ["D", "", 3, -1, True])
def test_identify_axis_rejects_unknown(name):
	with pytest.raises(ValueError):
		identify_axis(name)


def test_vertices_match_pure_components():
	corners = vertices()
	for idx_e, idx_f, corner in (("A", "B", 0), ("B", "C", 1), ("C", "A", 2)):
		x, y = tern_to_cart(idx_e, 1.0, idx_f, 0.0)
		assert math.isclose(float(x), corners[corner][0], abs_tol=1e-12)
		assert math.isclose(float(y), corners[corner][1], abs_tol=1e-12)


def test_centroid_and_argument_order_independence():
	x1, y1 = tern_to_cart("A", 1 / 3, "B", 1 / 3)
	x2, y2 = tern_to_cart("C", 1 / 3, "A", 1 / 3)
	assert math.isclose(float(x1), 0.5)
	assert math.isclose(float(y1), HEIGHT / 3)
	assert math.isclose(float(x1), float(x2))
	assert math.isclose(float(y1), float(y2))


def test_cart_to_tern_inverts_conversion():
	a = np.array([0.1, 0.5, 0.0, 0.25])
	c = np.array([0.3, 0.2, 1.0, 0.25])
	x, y = tern_to_cart("A", a, "C", c)
	back_a, back_b, back_c = cart_to_tern(x, y)
	np.testing.assert_allclose(back_a, a, atol=1e-12)
	np.testing.assert_allclose(back_c, c, atol=1e-12)
	np.testing.assert_allclose(back_b, 1.0 - a - c, atol=1e-12)

	with pytest.raises(ValueError):
		cart_to_tern([0.5, 0.2], [0.1])


def test_tern_to_cart_abc_closes_composition():
	x, y = tern_to_cart_abc([20.0], [30.0], [50.0])
	x_ref, y_ref = tern_to_cart("A", [0.2], "B", [0.3])
	np.testing.assert_allclose(x, x_ref)
	np.testing.assert_allclose(y, y_ref)

	with pytest.raises(ValueError):
		tern_to_cart_abc([0.0], [0.0], [0.0])
	with pytest.raises(ValueError):
		tern_to_cart_abc([20.0, 10.0], [30.0, 10.0], [50.0])


def test_tern_to_cart_validation():
	with pytest.raises(ValueError):
		tern_to_cart("A", 0.2, "a", 0.3)
	with pytest.raises(ValueError):
		tern_to_cart("A", [0.2, 0.1], "B", [0.3])


def test_limits_and_normalization():
	lim = [[0, 10, 20], [50, 60, 40]]
	values = normalize([0, 25, 50], lim, "A")
	np.testing.assert_allclose(values, [0.0, 0.5, 1.0])
	np.testing.assert_allclose(denormalize([0.0, 0.5, 1.0], lim, "C"), [20.0, 30.0, 40.0])
	np.testing.assert_allclose(default_limits(), [[0, 0, 0], [100, 100, 100]])

	with pytest.raises(ValueError):
		validate_limits([[0, 0, 0], [1, 0, 1]])
	with pytest.raises(ValueError):
		validate_limits([0, 1])


def test_grid_spacing_linspace_default():
	points = grid_spacing(default_limits())
	assert len(points) == 3
	for values in points:
		np.testing.assert_allclose(values, np.linspace(0, 1, 6))


def test_grid_spacing_increment_uses_data_units():
	points = grid_spacing([[0, 0, 0], [100, 50, 100]], usegridspace=True, gridspaceunit=10)
	np.testing.assert_allclose(points[0], np.linspace(0, 1, 11))
	np.testing.assert_allclose(points[1], np.linspace(0, 1, 6))
	assert points[2][-1] == pytest.approx(1.0)


def test_grid_spacing_increment_fallback_warns(tern_logs):
	points = grid_spacing([[0, 0, 0], [100, 100, 5]], usegridspace=True, gridspaceunit=10)
	np.testing.assert_allclose(points[2], np.linspace(0, 1, 6))
	np.testing.assert_allclose(points[0], np.linspace(0, 1, 11))
	warnings = [r for r in tern_logs.records if r.levelno == logging.WARNING]
	assert len(warnings) == 1
	assert "reverting to linspace" in warnings[0].getMessage()


def test_grid_spacing_rejects_small_count():
	with pytest.raises(ValueError):
		grid_spacing(default_limits(), gridspaceunit=1)


def test_tick_values_and_format():
	values = tick_values(grid_spacing(default_limits()), [[0, 0, 0], [100, 100, 1]])
	np.testing.assert_allclose(values[0], [0, 20, 40, 60, 80, 100])
	np.testing.assert_allclose(values[2], [0, 0.2, 0.4, 0.6, 0.8, 1.0])
	assert format_tick(20.0, "%2.0f") == "20"
	assert format_tick(0.0, "%2.0f") == "0"
	assert format_tick(0.25, "{:.1%}") == "25.0%"
