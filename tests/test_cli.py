"""
Tests for settings loading and the command line entry point.
"""

import matplotlib.pyplot as plt
import pandas as pd
import pytest

from hilbert_curve import cli
from hilbert_curve.cli import main
from hilbert_curve.config import DEFAULT_CANVAS_SIZE, DEFAULT_ORDER, LARGE_CANVAS_SIZE, load_settings


@pytest.fixture
def env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("ROOT_DIR", str(tmp_path))
    monkeypatch.delenv("HILBERT_ORDER", raising=False)
    monkeypatch.delenv("HILBERT_CANVAS_SIZE", raising=False)
    return monkeypatch


def test_default_settings(env, tmp_path):
    settings = load_settings()
    assert settings.root_dir == tmp_path
    assert settings.order == DEFAULT_ORDER
    assert settings.canvas_size == DEFAULT_CANVAS_SIZE


def test_settings_from_environment(env):
    env.setenv("HILBERT_ORDER", "3")
    env.setenv("HILBERT_CANVAS_SIZE", "512")
    settings = load_settings()
    assert settings.order == 3
    assert settings.canvas_size == 512


def test_invalid_setting(env):
    env.setenv("HILBERT_ORDER", "three")
    with pytest.raises(ValueError, match="HILBERT_ORDER"):
        load_settings()


def test_single_index(env, capsys):
    main(order=2, index=15)
    assert capsys.readouterr().out.strip() == "15 -> (3, 0)"


def test_index_out_of_domain(env, capsys):
    main(order=2, index=16)
    assert capsys.readouterr().out.startswith("Error:")


def test_invalid_order(env, capsys):
    main(order=0)
    assert capsys.readouterr().out.startswith("Error:")


def test_write_points(env, tmp_path, capsys):
    env.setenv("HILBERT_ORDER", "2")
    main(output="points.csv", progress=False)
    out = capsys.readouterr().out
    assert "Order 2 curve: 4x4 grid, 16 points" in out
    assert "Cell size on a 256px canvas: 64px" in out
    df = pd.read_csv(tmp_path / "points.csv")
    assert len(df) == 16
    assert tuple(df.iloc[-1][["x", "y"]]) == (3, 0)


def test_large_canvas(env, capsys):
    main(order=2, large=True, progress=False)
    assert f"Cell size on a {LARGE_CANVAS_SIZE}px canvas: 128px" in capsys.readouterr().out


def test_canvas_size_overrides_large(env, capsys):
    main(order=2, large=True, canvas_size=64, progress=False)
    assert "Cell size on a 64px canvas: 16px" in capsys.readouterr().out


def test_plot_computes_curve_once(env, capsys):
    calls = []
    real_curve_points = cli.curve_points

    def counting_curve_points(*args, **kwargs):
        calls.append(args)
        return real_curve_points(*args, **kwargs)

    shown = []
    env.setattr(cli, "curve_points", counting_curve_points)
    env.setattr("hilbert_curve.visualize.curve_points", counting_curve_points)
    env.setattr(cli.plt, "show", lambda: shown.append(plt.gcf()))
    try:
        main(order=3, plot=True, progress=False)
        assert len(calls) == 1
        assert len(shown) == 1
        ax = shown[0].axes[0]
        assert ax.get_title() == "2D Order 3 Hilbert Curve"
        assert len(ax.collections[-1].get_segments()) == 63
    finally:
        plt.close("all")
