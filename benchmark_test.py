# benchmark_test.py
# PyTest unit tests for the runtime-vs-n log n study

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pytest

from hull_stepper.benchmark import main, nlogn, plot_runtime, run_benchmark


def test_nlogn():
    assert nlogn(0) == 0.0
    assert nlogn(1) == 1.0
    assert nlogn(8) == pytest.approx(24.0)


def test_run_benchmark_table():
    df = run_benchmark([20, 80], repeats=1, seed=3)
    assert list(df.columns) == ["n", "seconds", "steps", "pops", "nlogn_scaled"]
    assert df["n"].tolist() == [20, 80]
    assert (df["seconds"] > 0).all()
    # every point is pushed once per phase
    assert (df["steps"] >= 2 * df["n"]).all()
    assert (df["steps"] == 2 * df["n"] + df["pops"]).all()
    largest = df.iloc[-1]
    assert largest["nlogn_scaled"] == pytest.approx(largest["seconds"])


def test_run_benchmark_needs_sizes():
    with pytest.raises(ValueError):
        run_benchmark([])


def test_plot_runtime():
    df = run_benchmark([10, 40], repeats=1)
    ax = plot_runtime(df)
    assert len(ax.get_lines()) == 2
    plt.close(ax.figure)


def test_main_writes_csv(tmp_path, capsys):
    out = tmp_path / "runtime.csv"
    assert main(["--sizes", "10", "30", "--repeats", "1", "--no-plot", "--csv", str(out)]) == 0
    assert out.exists()
    assert "nlogn_scaled" in capsys.readouterr().out
