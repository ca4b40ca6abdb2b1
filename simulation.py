"""
User-defined simulation settings.

Edit the streams and the mode below, then run `python main.py` (or
`python main.py path/to/other_settings.py`).
"""

from muxsim.bits import InvalidDigitPolicy
from muxsim.engine import FDMParameters, WDMParameters

# ============================================================================
# Inputs
# ============================================================================

mode = "TDM"  # "TDM", "FDM" or "WDM"

stream_a = "1010"  # Input stream A
stream_b = "1100"  # Input stream B

# ============================================================================
# Simulation constants (optional - uses defaults if None)
# ============================================================================

fdm_params = FDMParameters(
    bit_duration=1,  # Time units per bit
    sample_rate=100,  # Samples per time unit
    freq_a=2.0,  # Carrier frequency for A (Hz)
    freq_b=5.0,  # Carrier frequency for B (Hz)
)

wdm_params = WDMParameters(
    wavelength_a=1,
    wavelength_b=2,
)

# Non-digit characters: NAN keeps them as not-a-number, ZERO reads them as 0,
# SKIP drops them, RAISE stops with an error
invalid_digits = InvalidDigitPolicy.NAN

# ============================================================================
# Output (optional)
# ============================================================================

print_limit = 20  # Number of samples to print
save_path = "output/tdm_signal.png"  # Path to save the chart (None to skip)
