# src/mcdist/analyze.py
"""
Analiză post-procesare pentru studiul de convergență (convergence.dat).

Pentru estimatorul Monte Carlo, deviația între rulări scade ca σ/√n:
  log(std) = a · log(n) + b,    cu a ≈ -0.5 și e^b ≈ σ ≈ 0.2479

Fit liniar robust:
  - folosește doar rândurile cu std > 0 (runs == 1 dă std = 0, log nedefinit);
  - NU aruncă eroare dacă sunt prea puține puncte — doar sare peste fit.
"""

from __future__ import annotations
import argparse, os
import numpy as np
import pandas as pd
from typing import Optional, Tuple

from .io import CONVERGENCE_COLUMNS, read_dat
from .metrics import DISTANCE_STD, EXPECTED_DISTANCE

# ------------------------- I/O helpers -------------------------

def load_convergence(input_dir: str) -> pd.DataFrame:
    df = read_dat(os.path.join(input_dir, "convergence.dat"))
    missing = [c for c in ("n", "mean", "std") if c not in df.columns]
    if missing:
        raise ValueError(
            f"Lipsesc coloanele {missing} din convergence.dat.\n"
            f"Coloane găsite={list(df.columns)}, așteptate={CONVERGENCE_COLUMNS}"
        )
    return df.sort_values("n").reset_index(drop=True)

# ------------------------- Fitting -------------------------

def try_linear_fit(x: np.ndarray, y: np.ndarray) -> Optional[Tuple[float, float]]:
    """Întoarce (m, b) sau None dacă sunt prea puține puncte."""
    if x.size < 2:
        return None
    m, b = np.polyfit(x, y, deg=1)
    return float(m), float(b)

def fit_loglog(df: pd.DataFrame) -> Optional[dict]:
    """
    Fit log(std) vs log(n) pe rândurile cu std > 0 și n distincte.
    Returnează dict(slope, intercept, sigma_hat, n_points) sau None.
    """
    sel = df[(df["std"] > 0) & (df["n"] > 0)]
    x = np.log(sel["n"].to_numpy(dtype=float))
    y = np.log(sel["std"].to_numpy(dtype=float))
    if np.unique(x).size < 2:
        return None
    fit = try_linear_fit(x, y)
    if fit is None:
        return None
    m, b = fit
    return {"slope": m, "intercept": b, "sigma_hat": float(np.exp(b)), "n_points": int(x.size)}

# ------------------------- CLI -------------------------

def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Analiză convergență: fit log(std) vs log(n) din convergence.dat")
    p.add_argument("--input", required=True, help="Folderul cu convergence.dat")
    p.add_argument("--fit-out", type=str, default=None,
                   help="Dacă e setat, salvează fitul într-un DAT (slope, intercept, sigma_hat, n_points).")
    p.add_argument("--plot", action="store_true", help="Plotează std și σ/√n în VPython (2D graph).")
    return p.parse_args(argv)

def main(argv=None):
    a = parse_args(argv)
    df = load_convergence(a.input)

    for row in df.itertuples(index=False):
        print(f"[CONV] n={int(row.n):<10d} mean={row.mean:.6f}  |err|={abs(row.mean - EXPECTED_DISTANCE):.2e}  std={row.std:.3g}")

    fit = fit_loglog(df)
    if fit is None:
        print("[FIT] insuficiente puncte pentru fit — skip.")
    else:
        print(f"[FIT] log(std) = {fit['slope']:.4f}·log(n) + {fit['intercept']:.4f}  "
              f"→ σ_hat={fit['sigma_hat']:.4f} (teoretic {DISTANCE_STD:.4f}, panta teoretică -0.5)")
        if a.fit_out:
            pd.DataFrame([fit]).to_csv(a.fit_out, sep="\t", index=False, float_format="%.8g")
            print(f"[OK] fit salvat: {a.fit_out}")

    if a.plot:
        from .vis import plot_convergence_vpython
        plot_convergence_vpython(df)

if __name__ == "__main__":
    main()
