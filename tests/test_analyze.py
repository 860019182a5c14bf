import numpy as np
import pandas as pd
import pytest

from mcdist.analyze import fit_loglog, load_convergence, main, try_linear_fit
from mcdist.io import DataWriter
from mcdist.metrics import summarize_runs


def _synthetic(ns, sigma=0.25):
    return pd.DataFrame({
        "n": ns,
        "mean": [0.52] * len(ns),
        "std": [sigma / np.sqrt(n) for n in ns],
    })


def test_fit_recovers_slope_and_sigma():
    fit = fit_loglog(_synthetic([100, 1_000, 10_000, 100_000]))
    assert fit["slope"] == pytest.approx(-0.5, abs=1e-9)
    assert fit["sigma_hat"] == pytest.approx(0.25, rel=1e-9)
    assert fit["n_points"] == 4


def test_fit_skips_zero_std_rows():
    df = _synthetic([100, 1_000, 10_000])
    df.loc[0, "std"] = 0.0
    fit = fit_loglog(df)
    assert fit["n_points"] == 2


def test_fit_needs_two_points():
    assert fit_loglog(_synthetic([100])) is None
    assert try_linear_fit(np.array([1.0]), np.array([2.0])) is None


def test_main_writes_fit(tmp_path, capsys):
    rows = [summarize_runs([0.52 + 0.25 / np.sqrt(n), 0.52 - 0.25 / np.sqrt(n)], n)
            for n in (100, 10_000, 1_000_000)]
    DataWriter(str(tmp_path)).write_convergence(rows)
    fit_out = tmp_path / "fit.dat"

    main(["--input", str(tmp_path), "--fit-out", str(fit_out)])

    fit = pd.read_csv(fit_out, sep="\t")
    assert fit["slope"].iloc[0] == pytest.approx(-0.5, abs=1e-4)
    out = capsys.readouterr().out
    assert "[FIT]" in out
    assert "[CONV]" in out


def test_main_single_point_skips_fit(tmp_path, capsys):
    DataWriter(str(tmp_path)).write_convergence([summarize_runs([0.5], 10)])
    main(["--input", str(tmp_path)])
    assert "skip" in capsys.readouterr().out


def test_load_convergence_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_convergence(str(tmp_path))


def test_load_convergence_bad_columns(tmp_path):
    (tmp_path / "convergence.dat").write_text("a\tb\n1\t2\n")
    with pytest.raises(ValueError):
        load_convergence(str(tmp_path))
