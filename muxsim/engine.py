"""
Multiplexing Signal Engine
==========================

Turns two digit streams into the sample sequence a chart draws for one of
three multiplexing disciplines:

- TDM: bits of A and B take turns in alternating time slots.
- FDM: each stream keys its own sine carrier and the carriers are summed.
- WDM: each stream's bit is weighted by its own "wavelength" and summed.

Every generator is a pure function of its inputs and parameters. Streams of
unequal length are handled differently per mode: TDM simply stops emitting
samples for the exhausted stream, while FDM and WDM read a missing bit as 0.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Union

import numpy as np

from muxsim.bits import InvalidDigitPolicy, filter_chars, resolve_digits
from muxsim.signals import BitSignal, Carrier


class Sample(NamedTuple):
    """One (time, value) point of a sample sequence."""

    time: Union[int, str]
    value: Union[int, float, str]


class UnsupportedModeError(ValueError):
    """Raised when a mode tag does not name TDM, FDM or WDM."""


_DESCRIPTIONS = {
    "TDM": (
        "Time Division Multiplexing (TDM) takes turns sending bits from multiple input "
        "streams. For every cycle, one bit from A, then one from B is transmitted."
    ),
    "FDM": (
        "Frequency Division Multiplexing (FDM) assigns each signal to a different "
        "frequency. Each bit modulates a sine wave, and the combined signal is the "
        "sum of these waveforms."
    ),
    "WDM": (
        "Wavelength Division Multiplexing (WDM) uses different light wavelengths to "
        "transmit signals simultaneously over fiber optics. This simulation uses different "
        "numerical wavelengths for Input A and Input B to mimic the combined signal."
    ),
}


class Mode(Enum):
    TDM = "TDM"
    FDM = "FDM"
    WDM = "WDM"

    @property
    def description(self) -> str:
        """Explanatory text for this mode."""
        return _DESCRIPTIONS[self.value]

    @classmethod
    def parse(cls, tag: Union["Mode", str]) -> "Mode":
        """
        Resolve a mode tag.

        Accepts a Mode or a string; strings are matched case-insensitively
        after stripping whitespace.

        Raises
        ------
        UnsupportedModeError
            If the tag names no mode
        """
        if isinstance(tag, cls):
            return tag
        if isinstance(tag, str):
            key = tag.strip().upper()
            if key in cls.__members__:
                return cls[key]
        valid = ", ".join(cls.__members__)
        raise UnsupportedModeError(f"Unsupported mode {tag!r}. Valid modes: {valid}")


@dataclass(frozen=True)
class FDMParameters:
    """
    Constants of the FDM simulation.

    Attributes
    ----------
    bit_duration : float, optional
        Length of one bit period (time units). Default: 1
    sample_rate : float, optional
        Samples per time unit. Default: 100
    freq_a : float, optional
        Carrier frequency for stream A in Hz. Default: 2
    freq_b : float, optional
        Carrier frequency for stream B in Hz. Default: 5
    """

    bit_duration: float = 1
    sample_rate: float = 100
    freq_a: float = 2.0
    freq_b: float = 5.0

    def __post_init__(self):
        if self.bit_duration <= 0:
            raise ValueError(f"bit_duration must be > 0, got {self.bit_duration}")
        if self.sample_rate <= 0:
            raise ValueError(f"sample_rate must be > 0, got {self.sample_rate}")
        if self.samples_per_bit < 1:
            raise ValueError(
                f"bit_duration * sample_rate must give at least 1 sample per bit, "
                f"got {self.bit_duration} * {self.sample_rate}"
            )

    @property
    def samples_per_bit(self) -> int:
        return int(round(self.bit_duration * self.sample_rate))


@dataclass(frozen=True)
class WDMParameters:
    """
    Constants of the WDM simulation.

    Attributes
    ----------
    wavelength_a : float, optional
        Weight applied to stream A's bit. Default: 1
    wavelength_b : float, optional
        Weight applied to stream B's bit. Default: 2
    """

    wavelength_a: float = 1
    wavelength_b: float = 2


def generate_tdm(
    stream_a: str,
    stream_b: str,
    policy: InvalidDigitPolicy = InvalidDigitPolicy.NAN,
) -> list[Sample]:
    """
    Interleave the two streams bit by bit.

    Tick i places A's bit at time 2i and B's bit at time 2i+1. Values are
    the raw characters. Once a stream runs out it emits nothing more, so the
    output holds len(A) + len(B) samples.

    Parameters
    ----------
    stream_a, stream_b : str
        Digit streams
    policy : InvalidDigitPolicy
        Handling of non-digit characters. Under NAN (default) they pass
        through unchanged.

    Returns
    -------
    list[Sample]
        Samples ordered A-then-B within each tick, ticks ascending
    """
    bits_a = filter_chars(stream_a, policy, name="A")
    bits_b = filter_chars(stream_b, policy, name="B")

    samples = []
    for i in range(max(len(bits_a), len(bits_b))):
        if i < len(bits_a):
            samples.append(Sample(2 * i, bits_a[i]))
        if i < len(bits_b):
            samples.append(Sample(2 * i + 1, bits_b[i]))
    return samples


def generate_fdm(
    stream_a: str,
    stream_b: str,
    params: FDMParameters | None = None,
    policy: InvalidDigitPolicy = InvalidDigitPolicy.NAN,
) -> list[Sample]:
    """
    Sum of two bit-keyed sine carriers.

    Sample i sits at t = i / sample_rate and reads bit i // samples_per_bit
    of each stream (0 past the end of a stream):

        value = bit_a * sin(2*pi*freq_a*t) + bit_b * sin(2*pi*freq_b*t)

    A NaN bit makes every sample of its bit period NaN.

    Parameters
    ----------
    stream_a, stream_b : str
        Digit streams
    params : FDMParameters, optional
        Simulation constants (default: FDMParameters())
    policy : InvalidDigitPolicy
        Handling of non-digit characters (default: NAN)

    Returns
    -------
    list[Sample]
        samples_per_bit * max(len(A), len(B)) samples; time is formatted
        with two decimals
    """
    if params is None:
        params = FDMParameters()

    bits_a = BitSignal(resolve_digits(stream_a, policy, name="A"), params.bit_duration)
    bits_b = BitSignal(resolve_digits(stream_b, policy, name="B"), params.bit_duration)
    carrier_a = Carrier(params.freq_a)
    carrier_b = Carrier(params.freq_b)

    spb = params.samples_per_bit
    n = spb * max(len(bits_a.bits), len(bits_b.bits))

    index = np.arange(n)
    t = index / params.sample_rate
    bit_index = index // spb

    # NaN * 0.0 stays NaN, so an invalid bit poisons its whole period
    values = bits_a.at_index(bit_index) * carrier_a(t) + bits_b.at_index(bit_index) * carrier_b(t)

    return [Sample(f"{t_i:.2f}", value) for t_i, value in zip(t.tolist(), values.tolist())]


def generate_wdm(
    stream_a: str,
    stream_b: str,
    params: WDMParameters | None = None,
    policy: InvalidDigitPolicy = InvalidDigitPolicy.NAN,
) -> list[Sample]:
    """
    Weight each stream's bit by its wavelength and add them, one sample per tick.

    A missing bit (past the end of the shorter stream) counts as 0.

    Parameters
    ----------
    stream_a, stream_b : str
        Digit streams
    params : WDMParameters, optional
        Wavelength constants (default: WDMParameters())
    policy : InvalidDigitPolicy
        Handling of non-digit characters (default: NAN)
    """
    if params is None:
        params = WDMParameters()

    bits_a = resolve_digits(stream_a, policy, name="A")
    bits_b = resolve_digits(stream_b, policy, name="B")

    samples = []
    for i in range(max(len(bits_a), len(bits_b))):
        a = bits_a[i] if i < len(bits_a) else 0
        b = bits_b[i] if i < len(bits_b) else 0
        samples.append(Sample(i, a * params.wavelength_a + b * params.wavelength_b))
    return samples


def generate(
    mode: Union[Mode, str],
    stream_a: str,
    stream_b: str,
    policy: InvalidDigitPolicy = InvalidDigitPolicy.NAN,
    fdm_params: FDMParameters | None = None,
    wdm_params: WDMParameters | None = None,
    strict: bool = True,
) -> list[Sample]:
    """
    Run the generator for the selected mode.

    Parameters
    ----------
    mode : Mode or str
        Multiplexing mode, e.g. Mode.FDM or "fdm"
    stream_a, stream_b : str
        Digit streams
    policy : InvalidDigitPolicy
        Handling of non-digit characters (default: NAN)
    fdm_params, wdm_params : optional
        Constants for the FDM and WDM generators
    strict : bool
        If True (default) an unknown mode raises UnsupportedModeError.
        If False it produces an empty sequence instead.

    Returns
    -------
    list[Sample]
    """
    try:
        mode = Mode.parse(mode)
    except UnsupportedModeError:
        if strict:
            raise
        return []

    if mode is Mode.TDM:
        return generate_tdm(stream_a, stream_b, policy)
    if mode is Mode.FDM:
        return generate_fdm(stream_a, stream_b, fdm_params, policy)
    if mode is Mode.WDM:
        return generate_wdm(stream_a, stream_b, wdm_params, policy)
    raise AssertionError(f"Unhandled mode {mode}")


def generate_all(
    stream_a: str,
    stream_b: str,
    policy: InvalidDigitPolicy = InvalidDigitPolicy.NAN,
    fdm_params: FDMParameters | None = None,
    wdm_params: WDMParameters | None = None,
) -> dict[Mode, list[Sample]]:
    """Sample sequences for every mode, keyed by Mode."""
    return {
        mode: generate(mode, stream_a, stream_b, policy, fdm_params, wdm_params)
        for mode in Mode
    }
