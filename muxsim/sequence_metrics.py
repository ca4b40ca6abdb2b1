"""
Shared utilities for summarizing generated sample sequences.
"""

from __future__ import annotations

from typing import Dict, Sequence

import numpy as np

from muxsim.engine import Sample
from muxsim.plotting_utils import coerce_values


def compute_metrics(samples: Sequence[Sample]) -> Dict[str, float]:
    """
    Extract sample count, time span, value range, and not-a-number count.

    Values are coerced to floats the same way the chart does, so a raw TDM
    character that is not a digit counts as not-a-number.

    Parameters
    ----------
    samples : sequence of Sample
        Sequence returned by one of the generators

    Returns
    -------
    dict
        - sample_count: number of samples
        - start_time, end_time: first and last time as floats (nan if empty)
        - min_value, max_value, mean_value: over finite values (nan if none)
        - nan_count: samples whose value is not a number
    """
    values = coerce_values(samples)
    times = np.array([float(sample.time) for sample in samples], dtype=float)

    finite = values[np.isfinite(values)]
    if len(finite) == 0:
        min_value = max_value = mean_value = np.nan
    else:
        min_value = float(np.min(finite))
        max_value = float(np.max(finite))
        mean_value = float(np.mean(finite))

    metrics = {
        "sample_count": len(samples),
        "start_time": float(times[0]) if len(times) else np.nan,
        "end_time": float(times[-1]) if len(times) else np.nan,
        "min_value": min_value,
        "max_value": max_value,
        "mean_value": mean_value,
        "nan_count": int(np.sum(np.isnan(values))),
    }

    return metrics
