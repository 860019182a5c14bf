import os

import pandas as pd
import pytest

from mcdist.config import EstimatorConfig
from mcdist.io import CONVERGENCE_COLUMNS, DataWriter, read_dat
from mcdist.metrics import EXPECTED_DISTANCE
from mcdist.simulator import ConvergenceStudy


def _cfg(tmp_path, **kwargs):
    base = dict(seed=3, runs=5, n_grid=(100, 10_000), output_dir=str(tmp_path / "out"))
    base.update(kwargs)
    return EstimatorConfig(**base)


def test_study_writes_convergence_file(tmp_path, capsys):
    path, df = ConvergenceStudy(_cfg(tmp_path)).run()

    assert os.path.isfile(path)
    assert list(df.columns) == CONVERGENCE_COLUMNS
    assert df["n"].tolist() == [100, 10_000]
    assert (df["runs"] == 5).all()

    on_disk = read_dat(path)
    assert list(on_disk.columns) == CONVERGENCE_COLUMNS
    assert on_disk["n"].tolist() == [100, 10_000]
    assert on_disk["mean"].iloc[1] == pytest.approx(EXPECTED_DISTANCE, abs=0.02)

    out = capsys.readouterr().out
    assert "[OK] scris:" in out
    assert "[STUDY]" in out


def test_study_is_reproducible(tmp_path):
    _, a = ConvergenceStudy(_cfg(tmp_path / "a")).run()
    _, b = ConvergenceStudy(_cfg(tmp_path / "b")).run()
    pd.testing.assert_frame_equal(a, b)


def test_study_with_workers(tmp_path):
    _, df = ConvergenceStudy(_cfg(tmp_path, workers=3, n_grid=(1_000,))).run()
    assert df["mean"].iloc[0] == pytest.approx(EXPECTED_DISTANCE, abs=0.05)


def test_study_rejects_bad_config(tmp_path):
    with pytest.raises(ValueError):
        ConvergenceStudy(_cfg(tmp_path, runs=0))


def test_writer_benchmark_file(tmp_path):
    rows = [{"name": "sqrt", "variant": "np_sqrt", "n": 10, "repeats": 2,
             "best_s": 1e-6, "mean_s": 2e-6}]
    path = DataWriter(str(tmp_path)).write_benchmark(rows)
    df = read_dat(path)
    assert df["variant"].tolist() == ["np_sqrt"]
    assert df["mean_s"].iloc[0] == pytest.approx(2e-6)


def test_read_dat_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_dat(str(tmp_path / "nope.dat"))
