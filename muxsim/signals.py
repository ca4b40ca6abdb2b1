"""
Signal generators for the multiplexing simulations.

This module provides the signal classes the FDM generator combines: a
sinusoidal carrier and a bit signal that holds each bit for one bit period.
All signals extend the Signal abstract base class and accept either a scalar
time or a numpy array of times.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

import numpy as np


class Signal(ABC):
    """
    Abstract base class for signal generators.

    All signal classes must implement __call__(t) to return the signal value at time t.
    """

    @abstractmethod
    def __call__(self, t: float | np.ndarray) -> float | np.ndarray:
        """
        Get the signal value at time t.

        Parameters
        ----------
        t : float or np.ndarray
            Elapsed time (seconds)

        Returns
        -------
        float or np.ndarray
            Signal value at time t
        """
        pass


class Carrier(Signal):
    """
    Sinusoidal carrier: A * sin(2*pi*f*t + phase).

    Parameters
    ----------
    frequency : float
        Carrier frequency in Hz
    amplitude : float
        Carrier amplitude (default: 1.0)
    phase : float
        Phase offset in radians (default: 0.0)
    """

    def __init__(self, frequency: float, amplitude: float = 1.0, phase: float = 0.0):
        self.frequency = frequency
        self.amplitude = amplitude
        self.phase = phase

    def __call__(self, t: float | np.ndarray) -> float | np.ndarray:
        return self.amplitude * np.sin(2 * np.pi * self.frequency * t + self.phase)


class BitSignal(Signal):
    """
    Bit stream held constant over each bit period.

    Outside the stream (before t=0 or after the last bit) the signal is 0.
    NaN bits stay NaN.

    Parameters
    ----------
    bits : sequence of float
        Bit values, one per bit period
    bit_duration : float
        Length of one bit period in seconds (default: 1.0)
    """

    def __init__(self, bits: Sequence[float], bit_duration: float = 1.0):
        self.bits = np.asarray(bits, dtype=float)
        self.bit_duration = bit_duration

    def at_index(self, index: int | np.ndarray) -> float | np.ndarray:
        """Bit value at an integer bit index, 0 where the index is out of range."""
        index = np.asarray(index)
        flat = np.atleast_1d(index)
        in_range = (flat >= 0) & (flat < len(self.bits))
        values = np.zeros(flat.shape, dtype=float)
        values[in_range] = self.bits[flat[in_range]]
        return values if index.ndim else float(values[0])

    def __call__(self, t: float | np.ndarray) -> float | np.ndarray:
        index = np.floor(np.asarray(t, dtype=float) / self.bit_duration).astype(int)
        return self.at_index(index)

