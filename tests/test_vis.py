import importlib.util

import numpy as np
import pytest

from mcdist.vis import plot_series_vpython


@pytest.mark.skipif(importlib.util.find_spec("vpython") is not None, reason="vpython este instalat")
def test_plot_without_vpython_raises():
    with pytest.raises(RuntimeError, match="pip install vpython"):
        plot_series_vpython(np.arange(3.0), {"std": np.ones(3)})
