"""
Tests for loading simulation settings and the command-line run.
"""

import matplotlib

matplotlib.use("Agg")

import pytest

from muxsim.bits import InvalidDigitPolicy
from muxsim.engine import FDMParameters, Mode, UnsupportedModeError, WDMParameters
from muxsim.main import load_settings, main


def write_config(tmp_path, body):
    path = tmp_path / "settings.py"
    path.write_text(body)
    return path


def test_load_settings_defaults(tmp_path):
    path = write_config(tmp_path, 'mode = "wdm"\nstream_a = "10"\nstream_b = "1"\n')
    settings = load_settings(path)

    assert settings["mode"] is Mode.WDM
    assert settings["policy"] is InvalidDigitPolicy.NAN
    assert settings["fdm_params"] == FDMParameters()
    assert settings["wdm_params"] == WDMParameters()
    assert settings["print_limit"] == 20
    assert settings["save_path"] is None


def test_load_settings_custom(tmp_path):
    path = write_config(
        tmp_path,
        "from muxsim.bits import InvalidDigitPolicy\n"
        "from muxsim.engine import FDMParameters\n"
        'mode = "FDM"\nstream_a = "1"\nstream_b = "0"\n'
        "fdm_params = FDMParameters(sample_rate=10)\n"
        "invalid_digits = InvalidDigitPolicy.ZERO\n"
        "print_limit = 3\n",
    )
    settings = load_settings(path)

    assert settings["fdm_params"].samples_per_bit == 10
    assert settings["policy"] is InvalidDigitPolicy.ZERO
    assert settings["print_limit"] == 3


def test_load_settings_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_settings(tmp_path / "nope.py")


def test_load_settings_missing_stream(tmp_path):
    path = write_config(tmp_path, 'mode = "TDM"\nstream_a = "10"\n')
    with pytest.raises(AttributeError, match="stream_b"):
        load_settings(path)


def test_load_settings_wrong_types(tmp_path):
    path = write_config(tmp_path, 'mode = "TDM"\nstream_a = 10\nstream_b = "1"\n')
    with pytest.raises(TypeError):
        load_settings(path)

    path = write_config(tmp_path, 'mode = "TDM"\nstream_a = "1"\nstream_b = "1"\nfdm_params = 5\n')
    with pytest.raises(TypeError):
        load_settings(path)


def test_load_settings_unknown_mode(tmp_path):
    path = write_config(tmp_path, 'mode = "CDM"\nstream_a = "1"\nstream_b = "1"\n')
    with pytest.raises(UnsupportedModeError):
        load_settings(path)


def test_main_prints_and_saves_plot(tmp_path, capsys):
    chart = tmp_path / "out" / "tdm.png"
    path = write_config(
        tmp_path,
        f'mode = "TDM"\nstream_a = "1010"\nstream_b = "1100"\n'
        f"print_limit = 4\nsave_path = {str(chart)!r}\n",
    )

    samples = main(path)
    out = capsys.readouterr().out

    assert samples == [(0, "1"), (1, "1"), (2, "0"), (3, "1"),
                       (4, "1"), (5, "0"), (6, "0"), (7, "0")]
    assert "=== TDM Simulation ===" in out
    assert "... (4 more samples)" in out
    assert "sample_count: 8" in out
    assert chart.is_file()
