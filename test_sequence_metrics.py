"""
Tests for sequence summaries and chart value coercion.
"""

import math

import matplotlib

matplotlib.use("Agg")

import numpy as np

from muxsim.engine import Mode, generate_fdm, generate_tdm, generate_wdm
from muxsim.plotting_utils import coerce_value, coerce_values, plot_samples
from muxsim.sequence_metrics import compute_metrics


def test_coerce_value():
    assert coerce_value("1") == 1.0
    assert coerce_value(3) == 3.0
    assert coerce_value(0.25) == 0.25
    assert math.isnan(coerce_value("x"))
    assert math.isnan(coerce_value(" "))


def test_coerce_values_from_tdm():
    values = coerce_values(generate_tdm("1x", "0"))

    assert values.dtype == float
    np.testing.assert_array_equal(values[:2], [1.0, 0.0])
    assert np.isnan(values[2])


def test_metrics_for_wdm():
    metrics = compute_metrics(generate_wdm("1010", "1100"))

    assert metrics["sample_count"] == 4
    assert metrics["start_time"] == 0.0
    assert metrics["end_time"] == 3.0
    assert metrics["min_value"] == 0.0
    assert metrics["max_value"] == 3.0
    assert metrics["mean_value"] == 1.5
    assert metrics["nan_count"] == 0


def test_metrics_for_fdm_with_invalid_bit():
    metrics = compute_metrics(generate_fdm("1x", ""))

    assert metrics["sample_count"] == 200
    assert metrics["end_time"] == 1.99
    assert metrics["nan_count"] == 100
    assert metrics["max_value"] <= 1.0


def test_metrics_for_empty_sequence():
    metrics = compute_metrics([])

    assert metrics["sample_count"] == 0
    assert metrics["nan_count"] == 0
    assert math.isnan(metrics["start_time"])
    assert math.isnan(metrics["max_value"])


def test_plot_samples_saves_figure(tmp_path):
    import matplotlib.pyplot as plt

    save_path = tmp_path / "charts" / "fdm.png"
    fig, ax = plot_samples(generate_fdm("10", "01"), "fdm", save_path=str(save_path))

    assert save_path.is_file()
    assert ax.get_legend().get_texts()[0].get_text() == "FDM Signal"
    assert len(ax.get_xticks()) <= 20
    plt.close(fig)


def test_plot_samples_without_saving():
    import matplotlib.pyplot as plt

    fig, ax = plot_samples(generate_tdm("1010", "1100"), Mode.TDM)

    assert [t.get_text() for t in ax.get_xticklabels()] == [str(i) for i in range(8)]
    plt.close(fig)
