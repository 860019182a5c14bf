# src/mcdist/estimator.py

# Despre NumPy (np):
#  - Tipul de bază este np.ndarray; distanțele se calculează vectorizat pe tot lotul.
#  - Uniformele se generează în lot: rng.random((n, 4)) în loc de n×4 apeluri scalare.
#  - Reproductibilitate: generatorul np.random.Generator se pasează explicit
#    (sau o sămânță → np.random.default_rng(seed)); nu atingem np.random.seed.

"""
ESTIMATORUL MONTE CARLO
=======================
Estimează E[ ||P1 - P2|| ] pentru P1, P2 ~ U([0,1]^2) independente:

    d_i = sqrt( (x1_i - x2_i)^2 + (y1_i - y2_i)^2 ),     estimat = (1/n) Σ_i d_i

Valoarea exactă: (2 + √2 + 5 ln(1 + √2)) / 15 ≈ 0.521405 (vezi metrics.py).

Strategii (echivalente statistic, NU bit-identice între ele):
  - 'loop'       : varianta naivă, 4 extrageri scalare per eșantion + math.sqrt;
  - 'vectorized' : un singur apel batch (n, 4) + np.sqrt pe tot vectorul;
  - workers > 1  : n împărțit în partiții, fiecare cu generatorul ei (rng.spawn),
                   mediile parțiale combinate ponderat cu mărimea partiției.
"""

import math
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Union

import numpy as np

from .errors import InvalidArgument
from .models import SampleBatch

METHODS = ('vectorized', 'loop')

RandomSource = Union[np.random.Generator, int, None]


# ------------------------- validări -------------------------

def check_positive_int(value, name: str = 'n') -> int:
    """Întoarce int(value) sau ridică InvalidArgument (0, -5, 2.5, True, '3' sunt invalide)."""
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
        raise InvalidArgument(f"{name} trebuie să fie un întreg pozitiv, am primit {value!r}")
    if value <= 0:
        raise InvalidArgument(f"{name} trebuie să fie > 0, am primit {value!r}")
    return int(value)


def as_generator(rng: RandomSource) -> np.random.Generator:
    """Generator explicit: îl lăsăm așa cum e, iar o sămânță (sau None) trece prin default_rng."""
    if isinstance(rng, np.random.Generator):
        return rng
    if rng is None:
        return np.random.default_rng()
    if isinstance(rng, (int, np.integer)) and not isinstance(rng, (bool, np.bool_)):
        return np.random.default_rng(int(rng))
    raise InvalidArgument(f"rng trebuie să fie np.random.Generator, int sau None, am primit {type(rng).__name__}")


def partition(n: int, parts: int) -> List[int]:
    """
    Împarte n în `parts` bucăți aproape egale (diferență max 1); primele n % parts
    primesc un eșantion în plus. Suma este exact n.
    """
    q, r = divmod(n, parts)
    return [q + (1 if i < r else 0) for i in range(parts)]


# ------------------------- strategii -------------------------

def pairwise_distances(batch: np.ndarray) -> np.ndarray:
    """Distanțele pentru un tablou (n, 4) cu coloanele x1, x2, y1, y2."""
    return SampleBatch(batch).distances()


def estimate_loop(n: int, rng: np.random.Generator) -> float:
    """
    Varianta naivă: pentru fiecare eșantion cerem 4 uniforme, una câte una.
    Vectorul de distanțe este pre-alocat (np.empty), nu crescut element cu element.
    """
    n = check_positive_int(n)
    d = np.empty(n)
    for i in range(n):
        x1 = rng.random()
        x2 = rng.random()
        y1 = rng.random()
        y2 = rng.random()
        dx, dy = x1 - x2, y1 - y2
        d[i] = math.sqrt(dx * dx + dy * dy)
    return float(d.mean())


def estimate_vectorized(n: int, rng: np.random.Generator, chunk_size: Optional[int] = None) -> float:
    """
    Varianta vectorizată: un apel rng.random((n, 4)), apoi distanțe și medie pe tot lotul.

    chunk_size (opțional) limitează memoria: extragem loturi consecutive de cel mult
    chunk_size rânduri și acumulăm suma distanțelor. Fluxul de numere aleatoare este
    același ca la un singur lot, deci rezultatul diferă doar prin rotunjirea sumei.
    """
    n = check_positive_int(n)
    if chunk_size is None:
        return float(SampleBatch.draw(n, rng).distances().mean())

    chunk_size = check_positive_int(chunk_size, 'chunk_size')
    total, done = 0.0, 0
    while done < n:
        m = min(chunk_size, n - done)
        total += float(SampleBatch.draw(m, rng).distances().sum())
        done += m
    return total / n


def estimate_parallel(n: int, rng: np.random.Generator, workers: int,
                      method: str = 'vectorized', chunk_size: Optional[int] = None) -> float:
    """
    Partiționează n pe `workers` fire; fiecare partiție primește un generator copil
    independent (rng.spawn), deci rezultatul este determinist pentru aceeași sămânță.

    Combinare: estimat = Σ_k n_k * mean_k / n  (medie ponderată cu mărimea partiției).
    Partițiile goale (workers > n) sunt eliminate.
    """
    n = check_positive_int(n)
    workers = check_positive_int(workers, 'workers')
    if method not in METHODS:
        raise InvalidArgument(f"method necunoscut: {method!r} (alege din {METHODS})")

    sizes = [s for s in partition(n, workers) if s > 0]
    children = rng.spawn(len(sizes))

    def run_part(size, child):
        if method == 'loop':
            return estimate_loop(size, child)
        return estimate_vectorized(size, child, chunk_size)

    with ThreadPoolExecutor(max_workers=len(sizes)) as pool:
        partials = list(pool.map(run_part, sizes, children))

    return float(np.dot(np.asarray(sizes, float), np.asarray(partials, float)) / n)


# ------------------------- API public -------------------------

def estimate_average_distance(
    n: int,
    rng: RandomSource = None,
    method: str = 'vectorized',
    workers: int = 1,
    chunk_size: Optional[int] = None,
) -> float:
    """
    Estimează distanța medie dintre două puncte uniforme în pătratul unitate.

    Parametri
    ---------
    n : int
        Numărul de eșantioane (întreg > 0). Altfel → InvalidArgument, fără rezultat parțial.
    rng : np.random.Generator | int | None
        Sursa de aleator. Generatorul este consumat; o sămânță întreagă dă rezultate
        reproductibile; None → sămânță din entropia sistemului.
    method : 'vectorized' | 'loop'
        Strategia de calcul (aceeași valoare așteptată, cost foarte diferit).
    workers : int
        > 1 → partiționare pe fire (vezi estimate_parallel).
    chunk_size : int | None
        Doar pentru 'vectorized': mărimea maximă a unui lot.

    Returnează
    ----------
    float în [0, √2]; converge la ≈ 0.5214 când n → ∞.
    """
    n = check_positive_int(n)
    workers = check_positive_int(workers, 'workers')
    if method not in METHODS:
        raise InvalidArgument(f"method necunoscut: {method!r} (alege din {METHODS})")
    if chunk_size is not None:
        check_positive_int(chunk_size, 'chunk_size')

    gen = as_generator(rng)
    if workers > 1:
        return estimate_parallel(n, gen, workers, method=method, chunk_size=chunk_size)
    if method == 'loop':
        return estimate_loop(n, gen)
    return estimate_vectorized(n, gen, chunk_size)
