# src/mcdist/metrics.py

# NumPy: toate statisticile sunt vectorizate peste rulări:
#  - mean peste estimatele repetate (același n);
#  - std cu ddof=1 => deviație standard de *eșantion* (rulările sunt un eșantion);
#  - eroarea standard teoretică σ/√n vine din varianța unei singure distanțe.

import math
from typing import Dict, Sequence

import numpy as np

# E[d] pentru două puncte uniforme în [0,1]^2 (rezultat analitic clasic):
#   (2 + √2 + 5 ln(1 + √2)) / 15
EXPECTED_DISTANCE = (2.0 + math.sqrt(2.0) + 5.0 * math.log(1.0 + math.sqrt(2.0))) / 15.0

# E[d^2] = E[(x1-x2)^2] + E[(y1-y2)^2] = 1/6 + 1/6
SECOND_MOMENT = 1.0 / 3.0

# σ al unei singure distanțe: sqrt(E[d^2] - E[d]^2) ≈ 0.2479
DISTANCE_STD = math.sqrt(SECOND_MOMENT - EXPECTED_DISTANCE ** 2)

MAX_DISTANCE = math.sqrt(2.0)


def expected_std(n) -> float:
    """Eroarea standard teoretică a estimatului pentru n eșantioane: σ / √n."""
    return DISTANCE_STD / math.sqrt(n)


def summarize_runs(estimates: Sequence[float], n: int) -> Dict[str, float]:
    """
    Rezumatul rulărilor repetate pentru același n.

    Returnează
    ----------
    dict cu:
      - 'n', 'runs'
      - 'mean'       : media estimatelor
      - 'std'        : deviația standard între rulări (ddof=1; 0 dacă runs == 1)
      - 'abs_error'  : |mean - EXPECTED_DISTANCE|
      - 'std_theory' : σ / √n, de comparat cu 'std'
    """
    est = np.asarray(estimates, dtype=float)
    if est.size == 0:
        raise ValueError("summarize_runs: lista de estimate este goală.")
    mean = float(est.mean())
    std = float(est.std(ddof=1)) if est.size > 1 else 0.0
    return {
        'n': int(n),
        'runs': int(est.size),
        'mean': mean,
        'std': std,
        'abs_error': abs(mean - EXPECTED_DISTANCE),
        'std_theory': expected_std(n),
    }
