# tests/conftest.py

from pathlib import Path
import logging
import sys

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

matplotlib = pytest.importorskip("matplotlib")
matplotlib.use("Agg", force=True)


@pytest.fixture()
def tern_logs(caplog, monkeypatch):
	"""Route ternplot records to caplog (the package logger does not propagate)."""
	from ternplot.logutil import get_logger

	monkeypatch.setattr(get_logger(), "propagate", True)
	caplog.set_level(logging.DEBUG, logger="ternplot")
	return caplog


@pytest.fixture()
def tern():
	from ternplot import TernaryAxes
	from ternplot.imports import pyplot as plt  # type: ignore

	axes = TernaryAxes(figsize=(4, 4))
	try:
		yield axes
	finally:
		plt.close(axes.fig)
