import os

import pytest

from mcdist.cli import main


def test_single_estimate(capsys):
    main(["--n", "1000", "--seed", "1"])
    out = capsys.readouterr().out
    assert out.startswith("Estimate: ")
    value = float(out.split()[1])
    assert 0.0 <= value <= 2 ** 0.5


def test_single_estimate_is_reproducible(capsys):
    main(["--n", "500", "--seed", "4", "--method", "loop"])
    first = capsys.readouterr().out
    main(["--n", "500", "--seed", "4", "--method", "loop"])
    assert capsys.readouterr().out == first


@pytest.mark.parametrize("argv", [["--n", "0"], ["--n", "-5"], ["--workers", "0"], ["--n", "2.5"]])
def test_invalid_arguments_exit(argv):
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    assert exc_info.value.code == 2


def test_study_mode(tmp_path, capsys):
    out_dir = tmp_path / "out"
    main(["--study", "--n-grid", "10", "100", "--runs", "3", "--seed", "2", "--output", str(out_dir)])
    assert os.path.isfile(out_dir / "convergence.dat")
    assert "Estimate:" not in capsys.readouterr().out


def test_benchmark_mode(tmp_path):
    out_dir = tmp_path / "out"
    main(["--benchmark", "--bench-n", "100", "--bench-repeats", "1", "--only", "sqrt",
          "--output", str(out_dir)])
    assert os.path.isfile(out_dir / "benchmark.dat")


def test_env_info(capsys):
    main(["--env-info"])
    out = capsys.readouterr().out
    assert out.startswith("numpy")
    assert "OMP_NUM_THREADS=" in out
