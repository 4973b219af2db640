"""Integration tests for :class:`ternplot.plot.TernaryAxes` frame construction."""

from __future__ import annotations

import math

import pytest

np = pytest.importorskip("numpy")

from ternplot import TernaryAxes, ternary_axes  # noqa: E402
from ternplot.geometry import HEIGHT  # noqa: E402
from ternplot.imports import matplotlib as mpl  # type: ignore  # noqa: E402
from ternplot.imports import pyplot as plt  # type: ignore  # noqa: E402


@pytest.fixture()
def make_tern():
	created = []

	def factory(*args, **kwargs):
		kwargs.setdefault("figsize", (4, 4))
		axes = TernaryAxes(*args, **kwargs)
		created.append(axes)
		return axes

	try:
		yield factory
	finally:
		for axes in created:
			plt.close(axes.fig)


def test_default_handle_hierarchy(tern):
	assert len(tern.outline.lines) == 3
	assert [len(group) for group in tern.grid.lines] == [6, 6, 6]
	assert [len(group) for group in tern.tick.text] == [6, 6, 6]
	assert [t.get_text() for t in tern.title.text] == ["Variable 1", "Variable 2", "Variable 3"]
	assert [t.get_text() for t in tern.tick.text[0]] == ["0", "20", "40", "60", "80", "100"]
	assert len(tern.axes_color_links) == 3
	assert tern.dataplots == []
	assert not tern.ax.axison
	assert tern.ax.get_aspect() == 1.0


def test_outline_edges_follow_vertex_layout(tern):
	left, bottom, right = (np.column_stack([ln.get_xdata(), ln.get_ydata()]) for ln in tern.outline.lines)
	np.testing.assert_allclose(left, [[0.0, 0.0], [0.5, HEIGHT]], atol=1e-12)
	np.testing.assert_allclose(bottom, [[1.0, 0.0], [0.0, 0.0]], atol=1e-12)
	np.testing.assert_allclose(right, [[0.5, HEIGHT], [1.0, 0.0]], atol=1e-12)


def test_gridlines_extend_beyond_labeled_edge(make_tern):
	tern = make_tern({"ticklinelength": 0.1})
	# A = 0.4 gridline: horizontal, ends 0.1 left of the left edge
	line = tern.grid.lines[0][2]
	xs, ys = np.asarray(line.get_xdata()), np.asarray(line.get_ydata())
	np.testing.assert_allclose(ys, [0.4 * HEIGHT, 0.4 * HEIGHT])
	assert math.isclose(xs.min(), 0.2 - 0.1)
	assert math.isclose(xs.max(), 0.8)


def test_tick_labels_sit_at_tick_tips_plus_shift(make_tern):
	tern = make_tern({"ticklinelength": 0.05, "tickshift": [[-0.03, 0.0, 0.01], [0.0, 0.02, 0.0]]})
	x, y = tern.tick.text[1][0].get_position()
	# B = 0 tick starts at the C vertex and points down-right
	assert math.isclose(x, 1.0 + 0.05 * 0.5 + 0.0)
	assert math.isclose(y, -0.05 * HEIGHT + 0.02)

	x, y = tern.tick.text[0][0].get_position()
	assert math.isclose(x, -0.05 - 0.03)
	assert math.isclose(y, 0.0)


def test_custom_general_settings(make_tern):
	tern = make_tern(
		{
			"wlimits": [[0, 0, 0], [50, 50, 50]],
			"usegridspace": True,
			"gridspaceunit": 10,
			"titlelabels": ["SiO2", "CaO", "Al2O3"],
			"tick_fmt": "%.0f%%",
		}
	)
	assert [len(group) for group in tern.grid.lines] == [6, 6, 6]
	assert tern.tick.text[2][-1].get_text() == "50%"
	assert tern.title.text[2].get_text() == "Al2O3"
	assert tern.title.text[0].get_rotation() == pytest.approx(60.0)


def test_style_kwargs_are_forwarded(make_tern):
	tern = make_tern(
		None,
		outline={"linewidth": 3.0},
		grid={"linestyle": "--"},
		tick={"fontsize": 7},
		label={"fontsize": 15},
	)
	assert tern.outline.lines[0].get_linewidth() == 3.0
	assert tern.grid.lines[1][0].get_linestyle() == "--"
	assert tern.tick.text[2][0].get_fontsize() == 7
	assert tern.title.text[1].get_fontsize() == 15


def test_flat_option_list(make_tern):
	tern = make_tern(["gridspaceunit", 11, "titlelabels", ["x", "y", "z"]])
	assert len(tern.grid.lines[0]) == 11


def test_draws_on_given_axes(make_tern):
	fig, ax = plt.subplots()
	try:
		tern = make_tern(ax=ax)
		assert tern.ax is ax
		assert tern.fig is fig
	finally:
		plt.close(fig)


def test_set_axis_color_updates_linked_elements(tern):
	tern.set_axis_color("B", "red")
	red = mpl.colors.to_rgba("red")
	assert mpl.colors.to_rgba(tern.title.text[1].get_color()) == red
	assert mpl.colors.to_rgba(tern.outline.lines[1].get_color()) == red
	assert all(mpl.colors.to_rgba(t.get_color()) == red for t in tern.tick.text[1])
	# grid is not linked by default, other axes untouched
	assert mpl.colors.to_rgba(tern.grid.lines[1][0].get_color()) != red
	assert mpl.colors.to_rgba(tern.title.text[0].get_color()) != red


def test_color_change_on_member_propagates(tern):
	tern.title.text[2].set(color="tab:green")
	green = mpl.colors.to_rgba("tab:green")
	assert mpl.colors.to_rgba(tern.outline.lines[2].get_color()) == green
	assert mpl.colors.to_rgba(tern.tick.text[2][3].get_color()) == green
	assert mpl.colors.to_rgba(tern.outline.lines[0].get_color()) != green


def test_link_colors_with_grid_and_bad_name(tern):
	links = tern.link_colors(["grid", "outline"])
	assert len(links[0]) == 6 + 1
	tern.set_axis_color(0, "blue")
	blue = mpl.colors.to_rgba("blue")
	assert all(mpl.colors.to_rgba(ln.get_color()) == blue for ln in tern.grid.lines[0])
	# titles are no longer linked
	tern.title.text[0].set(color="orange")
	assert mpl.colors.to_rgba(tern.outline.lines[0].get_color()) == blue

	with pytest.raises(ValueError):
		tern.link_colors(["tick", "legend"])
	assert tern.link_color == ["grid", "outline"]


def test_bad_link_setting_raises(make_tern):
	with pytest.raises(ValueError):
		make_tern({"link_color": ["ticks"]})


def test_shift_xy(tern):
	before = tern.title.text[1].get_position()
	tern.shift_xy("B", "title", (0.1, -0.2))
	after = tern.title.text[1].get_position()
	assert after[0] == pytest.approx(before[0] + 0.1)
	assert after[1] == pytest.approx(before[1] - 0.2)

	tick_before = [t.get_position() for t in tern.tick.text[2]]
	moved = tern.shift_xy(2, "tick", [0.0, 0.05])
	assert len(moved) == 6
	for (x0, y0), text in zip(tick_before, tern.tick.text[2]):
		assert text.get_position() == pytest.approx((x0, y0 + 0.05))

	with pytest.raises(ValueError):
		tern.shift_xy("A", "grid", (0, 0))
	with pytest.raises(ValueError):
		tern.shift_xy("A", "title", (0, 0, 0))


def test_save_plot_appends_extension(tern, tmp_path):
	target = tern.save_plot(str(tmp_path / "tern"), dpi=50, fig_format="png")
	assert target.endswith("tern.png")
	assert (tmp_path / "tern.png").exists()

	with pytest.raises(ValueError):
		tern.save_plot(str(tmp_path / "x"), dpi=0)


def test_ternary_axes_function_builds_frame():
	tern = ternary_axes({"titlelabels": ["Qz", "Fsp", "Lit"]}, outline={"linewidth": 2.0}, figsize=(4, 4))
	try:
		assert isinstance(tern, TernaryAxes)
		assert [t.get_text() for t in tern.title.text] == ["Qz", "Fsp", "Lit"]
		assert tern.outline.lines[0].get_linewidth() == 2.0
	finally:
		plt.close(tern.fig)


def test_ternarypos_sets_axes_position(make_tern):
	tern = make_tern({"ternarypos": [0.2, 0.1, 0.5, 0.6]})
	bounds = tern.ax.get_position(original=True).bounds
	assert bounds == pytest.approx((0.2, 0.1, 0.5, 0.6))


def test_color_link_remove_stops_sync(tern):
	link = tern.axes_color_links[0]
	link.remove()
	tern.title.text[0].set(color="purple")
	purple = mpl.colors.to_rgba("purple")
	assert mpl.colors.to_rgba(tern.title.text[0].get_color()) == purple
	assert mpl.colors.to_rgba(tern.outline.lines[0].get_color()) != purple

	# the link itself still recolors its members on request
	link.set_color("olive")
	assert mpl.colors.to_rgba(tern.outline.lines[0].get_color()) == mpl.colors.to_rgba("olive")


def test_shift_xy_accumulates(tern):
	x0, y0 = tern.title.text[0].get_position()
	tern.shift_xy("A", "title", (0.05, 0.0))
	tern.shift_xy("A", "title", (0.05, -0.1))
	x1, y1 = tern.title.text[0].get_position()
	assert x1 == pytest.approx(x0 + 0.1)
	assert y1 == pytest.approx(y0 - 0.1)
