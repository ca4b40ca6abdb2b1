"""
Command-line entry point for running and plotting a multiplexing simulation.
"""

from __future__ import annotations

import importlib.util
import sys
from pathlib import Path
from types import ModuleType

import numpy as np

from muxsim.bits import InvalidDigitPolicy
from muxsim.engine import FDMParameters, Mode, WDMParameters, generate
from muxsim.plotting_utils import plot_samples
from muxsim.sequence_metrics import compute_metrics

DEFAULT_CONFIG_FILE = "simulation.py"


def load_config_module(config_file: str | Path) -> ModuleType:
    """Import a simulation configuration file by path."""
    path = Path(config_file)
    if not path.is_file():
        raise FileNotFoundError(f"Simulation config not found: {path}")

    spec = importlib.util.spec_from_file_location(path.stem, path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def _require(module: ModuleType, name: str, config_file: str | Path):
    if not hasattr(module, name):
        raise AttributeError(
            f"{config_file} must define a '{name}' variable. "
            f"Found in {config_file}: {[n for n in dir(module) if not n.startswith('_')]}"
        )
    return getattr(module, name)


def _optional(module: ModuleType, name: str, expected_type, default):
    value = getattr(module, name, None)
    if value is None:
        return default
    if not isinstance(value, expected_type):
        raise TypeError(f"{name} must be a {expected_type.__name__} instance, got {type(value)}")
    return value


def load_settings(config_file: str | Path = DEFAULT_CONFIG_FILE) -> dict:
    """
    Read and validate the settings of a simulation config file.

    Returns
    -------
    dict
        mode, stream_a, stream_b, policy, fdm_params, wdm_params,
        print_limit and save_path
    """
    module = load_config_module(config_file)

    mode = Mode.parse(_require(module, "mode", config_file))

    stream_a = _require(module, "stream_a", config_file)
    stream_b = _require(module, "stream_b", config_file)
    for name, stream in (("stream_a", stream_a), ("stream_b", stream_b)):
        if not isinstance(stream, str):
            raise TypeError(f"{name} must be a str, got {type(stream)}")

    save_path = getattr(module, "save_path", None)
    if save_path is not None and not isinstance(save_path, (str, Path)):
        raise TypeError(f"save_path must be a str or Path, got {type(save_path)}")

    return {
        "mode": mode,
        "stream_a": stream_a,
        "stream_b": stream_b,
        "policy": _optional(module, "invalid_digits", InvalidDigitPolicy, InvalidDigitPolicy.NAN),
        "fdm_params": _optional(module, "fdm_params", FDMParameters, FDMParameters()),
        "wdm_params": _optional(module, "wdm_params", WDMParameters, WDMParameters()),
        "print_limit": _optional(module, "print_limit", int, 20),
        "save_path": save_path,
    }


def print_samples(samples, limit: int) -> None:
    """Print the first `limit` samples as a time/value table."""
    print(f"{'time':>8}  value")
    for sample in samples[:limit]:
        print(f"{sample.time!s:>8}  {sample.value!r}")
    if len(samples) > limit:
        print(f"... ({len(samples) - limit} more samples)")


def main(config_file: str | Path | None = None):
    if config_file is None:
        config_file = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_CONFIG_FILE

    settings = load_settings(config_file)
    mode = settings["mode"]

    print(f"=== {mode.value} Simulation ===")
    print(mode.description)
    print(f"Input A: {settings['stream_a']!r}")
    print(f"Input B: {settings['stream_b']!r}")
    print()

    samples = generate(
        mode,
        settings["stream_a"],
        settings["stream_b"],
        policy=settings["policy"],
        fdm_params=settings["fdm_params"],
        wdm_params=settings["wdm_params"],
    )

    print("=== Samples ===")
    print_samples(samples, settings["print_limit"])

    metrics = compute_metrics(samples)
    print("\n=== Summary ===")
    for key, value in metrics.items():
        if np.isfinite(value):
            print(f"  {key}: {value:.4f}" if isinstance(value, float) else f"  {key}: {value}")
        else:
            print(f"  {key}: {value}")

    save_path = settings["save_path"]
    if save_path:
        plot_samples(samples, mode, save_path=str(save_path))
        print(f"\nPlot saved to {save_path}")

    return samples


if __name__ == "__main__":
    main()
