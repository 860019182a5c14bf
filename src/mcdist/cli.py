# src/mcdist/cli.py

# Despre NumPy (np):
#  - Uniformele se generează în lot (rng.random((n, 4))), fără bucle Python.
#  - Reproductibilitate: --seed → np.random.default_rng(seed), generator pasat explicit.

import argparse

import numpy as np

from .benchmark import environment_info, run_benchmarks
from .config import EstimatorConfig
from .errors import InvalidArgument
from .estimator import METHODS, estimate_average_distance
from .io import DataWriter
from .metrics import EXPECTED_DISTANCE
from .simulator import ConvergenceStudy


def build_parser():
    """
    Argumentele din linia de comandă.
    Trei moduri: estimare simplă (implicit), --study (convergență), --benchmark.
    """
    p = argparse.ArgumentParser(
        description='Monte Carlo: distanța medie între două puncte uniforme în pătratul unitate')

    # --- ESTIMARE ---
    p.add_argument('--n', type=int, default=100_000,
                   help="Numărul de eșantioane (cost ~ O(n)).")
    p.add_argument('--method', type=str, default='vectorized', choices=list(METHODS),
                   help="'vectorized' (un lot n×4) sau 'loop' (4 extrageri scalare per eșantion).")
    p.add_argument('--workers', type=int, default=1,
                   help="Partiții/fire; mediile parțiale se combină ponderat.")
    p.add_argument('--chunk-size', type=int, default=None,
                   help="Mărimea maximă a unui lot (doar 'vectorized'); limitează memoria.")
    p.add_argument('--seed', type=int, default=None,
                   help="Sămânța RNG pentru reproducibilitate (np.random.default_rng(seed)).")

    # --- STUDIU DE CONVERGENȚĂ ---
    p.add_argument('--study', action='store_true',
                   help="Rulează studiul de convergență și scrie convergence.dat.")
    p.add_argument('--runs', type=int, default=20,
                   help="Rulări independente pentru fiecare n din grilă.")
    p.add_argument('--n-grid', type=int, nargs='+', default=[100, 1_000, 10_000, 100_000],
                   help="Valorile lui n pentru studiu (ex: 100 10000 1000000).")

    # --- BENCHMARK ---
    p.add_argument('--benchmark', action='store_true',
                   help="Rulează micro-benchmark-urile și scrie benchmark.dat.")
    p.add_argument('--bench-n', type=int, default=10_000,
                   help="Mărimea problemei pentru benchmark-uri.")
    p.add_argument('--bench-repeats', type=int, default=5,
                   help="Repetări per măsurătoare (raportăm min și medie).")
    p.add_argument('--only', type=str, nargs='+', default=None,
                   choices=['estimator', 'draws', 'sqrt', 'growth'],
                   help="Doar grupurile de benchmark indicate.")
    p.add_argument('--env-info', action='store_true',
                   help="Afișează pool-urile de fire (OpenMP/BLAS) detectate de threadpoolctl.")

    # --- OUTPUT / VIZUALIZARE ---
    p.add_argument('--output', type=str, default='output',
                   help="Directorul unde se vor scrie fișierele .dat (TSV).")
    p.add_argument('--enable-vpython', action='store_true',
                   help="După --study, desenează curbele de convergență în VPython.")
    return p


def main(argv=None):
    """
    Flux:
      1) Parsează argumentele.
      2) Construiește și validează EstimatorConfig.
      3) Rulează modul cerut și afișează/scrie rezultatul.
    """
    p = build_parser()
    a = p.parse_args(argv)

    cfg = EstimatorConfig(
        n=a.n, method=a.method, workers=a.workers, chunk_size=a.chunk_size, seed=a.seed,
        runs=a.runs, n_grid=tuple(a.n_grid),
        bench_n=a.bench_n, bench_repeats=a.bench_repeats,
        output_dir=a.output, enable_vpython=a.enable_vpython,
    )
    try:
        cfg.validate()
    except InvalidArgument as e:
        p.error(str(e))

    if a.env_info:
        info = environment_info()
        print('numpy', info['numpy'])
        for k, v in info['env'].items():
            print(f'{k}=', v)
        for lib in info['threadpools']:
            print(lib['internal_api'], lib['filename'], lib['num_threads'])

    if a.study:
        ConvergenceStudy(cfg).run()

    if a.benchmark:
        df = run_benchmarks(cfg.bench_n, cfg.bench_repeats, np.random.default_rng(cfg.seed), only=a.only)
        path = DataWriter(cfg.output_dir).write_benchmark(df.to_dict('records'))
        print(f"[OK] scris: {path}")

    if not (a.study or a.benchmark or a.env_info):
        est = estimate_average_distance(cfg.n, cfg.seed, method=cfg.method,
                                        workers=cfg.workers, chunk_size=cfg.chunk_size)
        print(f"Estimate: {est:.6f}  (n={cfg.n}, method={cfg.method}, "
              f"exact≈{EXPECTED_DISTANCE:.6f}, |err|={abs(est - EXPECTED_DISTANCE):.2e})")


if __name__ == '__main__':
    main()
