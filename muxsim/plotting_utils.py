"""
Plotting utilities for visualizing multiplexed sample sequences.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Sequence, Union

import numpy as np

if TYPE_CHECKING:
    from matplotlib.axes import Axes
    from matplotlib.figure import Figure

    from muxsim.engine import Mode, Sample

LINE_COLOR = "#10b981"
MAX_TICK_LABELS = 20


def coerce_value(value) -> float:
    """Convert a sample value to float; anything unparseable becomes nan."""
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return np.nan
    return float(value)


def coerce_values(samples: Sequence[Sample]) -> np.ndarray:
    """Sample values as a float array, ready for plotting."""
    return np.array([coerce_value(sample.value) for sample in samples], dtype=float)


def plot_samples(
    samples: Sequence[Sample],
    mode: Union[Mode, str],
    save_path: str | None = None,
) -> tuple[Figure, Axes]:
    """
    Plot a sample sequence as a line chart with one category per time label.

    Parameters
    ----------
    samples : sequence of Sample
        Sequence from one of the generators
    mode : Mode or str
        Mode the sequence was generated with, used for the legend and title
    save_path : str | None, optional
        Path to save the figure (default: None, don't save)

    Returns
    -------
    fig : matplotlib.figure.Figure
        The figure object
    ax : matplotlib.axes.Axes
        The axes object
    """
    import matplotlib.pyplot as plt

    from muxsim.engine import Mode

    mode = Mode.parse(mode)
    labels = [str(sample.time) for sample in samples]
    values = coerce_values(samples)
    positions = np.arange(len(samples))

    fig, ax = plt.subplots(figsize=(10, 4))

    # NaN values leave gaps in the line
    ax.plot(positions, values, "-o", color=LINE_COLOR, markersize=3, linewidth=1.5,
            label=f"{mode.value} Signal")

    # Thin the tick labels for long sequences (FDM emits 100 samples per bit)
    step = max(1, int(np.ceil(len(labels) / MAX_TICK_LABELS)))
    ax.set_xticks(positions[::step])
    ax.set_xticklabels(labels[::step], rotation=45 if step > 1 else 0)

    ax.grid(True, alpha=0.3)
    ax.set_xlabel("Time")
    ax.set_ylabel("Value")
    ax.set_title(f"{mode.value} Simulation")
    ax.legend(loc="best")
    fig.text(0.5, 0.01, mode.description, ha="center", va="bottom", fontsize=8, wrap=True)

    plt.tight_layout(rect=(0, 0.08, 1, 1))
    if save_path:
        # Create output directory if it doesn't exist
        save_path_obj = Path(save_path)
        save_path_obj.parent.mkdir(parents=True, exist_ok=True)
        plt.savefig(save_path, dpi=150, bbox_inches="tight")
    return fig, ax
