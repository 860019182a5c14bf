import math

import numpy as np
import pytest

from mcdist.metrics import (
    DISTANCE_STD,
    EXPECTED_DISTANCE,
    SECOND_MOMENT,
    expected_std,
    summarize_runs,
)
from mcdist.models import SampleBatch


def test_analytical_constants():
    assert EXPECTED_DISTANCE == pytest.approx(0.521405, abs=1e-6)
    assert SECOND_MOMENT == pytest.approx(1.0 / 3.0)
    assert DISTANCE_STD == pytest.approx(0.2479, abs=1e-3)


def test_constants_match_sampled_distances():
    d = SampleBatch.draw(1_000_000, np.random.default_rng(5)).distances()
    assert d.mean() == pytest.approx(EXPECTED_DISTANCE, abs=0.003)
    assert d.std() == pytest.approx(DISTANCE_STD, abs=0.003)
    assert (d * d).mean() == pytest.approx(SECOND_MOMENT, abs=0.003)


def test_expected_std():
    assert expected_std(1) == pytest.approx(DISTANCE_STD)
    assert expected_std(10_000) == pytest.approx(DISTANCE_STD / 100.0)


def test_summarize_runs():
    row = summarize_runs([0.5, 0.52, 0.54], 100)
    assert row["n"] == 100
    assert row["runs"] == 3
    assert row["mean"] == pytest.approx(0.52)
    assert row["std"] == pytest.approx(0.02)
    assert row["abs_error"] == pytest.approx(abs(0.52 - EXPECTED_DISTANCE))
    assert row["std_theory"] == pytest.approx(DISTANCE_STD / 10.0)


def test_summarize_single_run_has_zero_std():
    row = summarize_runs([0.51], 10)
    assert row["std"] == 0.0
    assert row["runs"] == 1


def test_summarize_empty_raises():
    with pytest.raises(ValueError):
        summarize_runs([], 10)
