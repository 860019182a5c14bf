# src/mcdist/benchmark.py
"""
Micro-benchmark-uri pentru idiomurile de performanță ilustrate de estimator:

  - estimator      : 'loop' (4 extrageri scalare/eșantion) vs 'vectorized' (un lot (n, 4));
  - draws          : n apeluri rng.random() vs un singur rng.random(n);
  - sqrt           : x ** 0.5 și np.power(x, 0.5) vs np.sqrt(x);
  - growth         : listă crescută cu append / np.append vs vector pre-alocat.

Timpii depind de mașină, de versiunea NumPy și de BLAS; NU sunt invarianți și
nu sunt testați ca ordine ("A e mai rapid decât B"). environment_info() raportează
pool-urile de fire (OpenMP/BLAS) pentru context.
"""

import os
from time import perf_counter
from typing import Callable, Dict, List

import numpy as np
import pandas as pd
from threadpoolctl import threadpool_info

from .estimator import check_positive_int, estimate_loop, estimate_vectorized
from .io import BENCHMARK_COLUMNS

THREAD_ENV_VARS = ('OMP_NUM_THREADS', 'MKL_NUM_THREADS', 'OPENBLAS_NUM_THREADS')


def time_call(fn: Callable[[], object], repeats: int):
    """Rulează fn de `repeats` ori; întoarce (best_s, mean_s)."""
    times = []
    for _ in range(repeats):
        t0 = perf_counter()
        fn()
        times.append(perf_counter() - t0)
    return min(times), sum(times) / len(times)


# ------------------------- variante comparate -------------------------

def _draws_single(n, rng):
    return [rng.random() for _ in range(n)]


def _draws_batch(n, rng):
    return rng.random(n)


def _grow_list(n):
    out = []
    for i in range(n):
        out.append(i * 0.5)
    return out


def _grow_np_append(n):
    out = np.empty(0)
    for i in range(n):
        out = np.append(out, i * 0.5)
    return out


def _preallocated(n):
    out = np.empty(n)
    for i in range(n):
        out[i] = i * 0.5
    return out


def _cases(n: int, rng: np.random.Generator) -> Dict[str, Dict[str, Callable[[], object]]]:
    x = rng.random(n) * 2.0
    # np.append copiază tot vectorul la fiecare pas (O(n^2)); limităm mărimea
    n_grow = min(n, 5_000)
    return {
        'estimator': {
            'loop': lambda: estimate_loop(n, rng),
            'vectorized': lambda: estimate_vectorized(n, rng),
        },
        'draws': {
            'single': lambda: _draws_single(4 * n, rng),
            'batch': lambda: _draws_batch(4 * n, rng),
        },
        'sqrt': {
            'pow_operator': lambda: x ** 0.5,
            'np_power': lambda: np.power(x, 0.5),
            'np_sqrt': lambda: np.sqrt(x),
        },
        'growth': {
            'list_append': lambda: _grow_list(n_grow),
            'np_append': lambda: _grow_np_append(n_grow),
            'preallocated': lambda: _preallocated(n_grow),
        },
    }


def run_benchmarks(n: int, repeats: int, rng: np.random.Generator, only=None) -> pd.DataFrame:
    """
    Rulează toate grupurile (sau doar cele din `only`) și întoarce un DataFrame
    cu coloanele name, variant, n, repeats, best_s, mean_s.
    """
    n = check_positive_int(n)
    repeats = check_positive_int(repeats, 'repeats')
    rows: List[dict] = []
    for name, variants in _cases(n, rng).items():
        if only and name not in only:
            continue
        for variant, fn in variants.items():
            best, mean = time_call(fn, repeats)
            size = min(n, 5_000) if name == 'growth' else n
            print(f"[BENCH] {name:<10s} {variant:<13s} n={size:<8d} best={best:.4g}s  mean={mean:.4g}s")
            rows.append({'name': name, 'variant': variant, 'n': size,
                         'repeats': repeats, 'best_s': best, 'mean_s': mean})
    return pd.DataFrame(rows, columns=BENCHMARK_COLUMNS)


def environment_info():
    """Variabilele *_NUM_THREADS, pool-urile de fire detectate (OpenMP/BLAS) și versiunea NumPy."""
    pools = [
        {'internal_api': lib.get('internal_api'),
         'filename': lib.get('filename'),
         'num_threads': lib.get('num_threads')}
        for lib in threadpool_info()
    ]
    env = {k: os.environ.get(k) for k in THREAD_ENV_VARS}
    return {'numpy': np.__version__, 'env': env, 'threadpools': pools}
