# src/mcdist/simulator.py

# Despre NumPy (np):
#  - Reproductibilitate: un singur np.random.default_rng(seed) la nivelul studiului;
#    fiecare rulare primește un generator copil independent (rng.spawn), deci
#    rulările nu împart stare și rezultatul nu depinde de ordinea execuției.

import numpy as np
import pandas as pd

from .config import EstimatorConfig
from .estimator import estimate_average_distance
from .io import CONVERGENCE_COLUMNS, DataWriter
from .metrics import summarize_runs


class ConvergenceStudy:
    """
    ORCHESTRATORUL STUDIULUI DE CONVERGENȚĂ (SRP)
    ---------------------------------------------
    • Pentru fiecare n din cfg.n_grid rulează estimatorul de cfg.runs ori.
    • Rezumă rulările (medie, std între rulări, eroare absolută, σ/√n teoretic).
    • Scrie convergence.dat.
    • Opțional: desenează curbele în VPython.
    """

    def __init__(self, cfg: EstimatorConfig):
        self.cfg = cfg.validate()
        self.rng = np.random.default_rng(cfg.seed)
        self.writer = DataWriter(cfg.output_dir)

    def estimates_for(self, n: int):
        """cfg.runs estimate independente pentru același n."""
        cfg = self.cfg
        return [
            estimate_average_distance(n, child, method=cfg.method,
                                      workers=cfg.workers, chunk_size=cfg.chunk_size)
            for child in self.rng.spawn(cfg.runs)
        ]

    def run(self):
        """
        Rulează studiul pe toată grila.
        Returnează (calea către convergence.dat, DataFrame cu aceleași coloane).
        """
        rows = []
        for n in self.cfg.n_grid:
            row = summarize_runs(self.estimates_for(n), n)
            print(f"[STUDY] n={row['n']:<10d} mean={row['mean']:.6f}  std={row['std']:.3g}  "
                  f"(σ/√n={row['std_theory']:.3g})")
            rows.append(row)

        path = self.writer.write_convergence(rows)
        print(f"[OK] scris: {path}")
        df = pd.DataFrame(rows, columns=CONVERGENCE_COLUMNS)

        if self.cfg.enable_vpython:
            from .vis import plot_convergence_vpython
            plot_convergence_vpython(df)

        return path, df
