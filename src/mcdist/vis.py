# src/mcdist/vis.py

"""
VIZUALIZARE VPYTHON (OPȚIONALĂ)
===============================
Scop:
  - să vedem cum scade împrăștierea estimatului cu n (std între rulări vs σ/√n);
  - să vedem media rulărilor apropiindu-se de valoarea exactă ≈ 0.5214.

Important:
  - Vizualizarea este *pasivă*: nu afectează datele salvate în .dat.
  - Axa orizontală este log10(n) (grila tipică acoperă mai multe ordine de mărime).

Dependență:
  - Necesită `vpython` (pip install vpython).
"""

from __future__ import annotations
import numpy as np

from .metrics import EXPECTED_DISTANCE


def plot_series_vpython(
    x: np.ndarray,
    series: dict,
    title: str = "Convergență Monte Carlo",
    xlabel: str = "log10(n)",
    ylabel: str = "",
    legend: bool = True
):
    """
    RO: Plotează serii 2D (x, y) folosind VPython (graph + gcurve).
    Această fereastră NU se închide automat (util pentru inspectare manuală).

    Parametri
    ---------
    x : np.ndarray, shape (K,)
    series : dict[str, np.ndarray]
        {nume_curba -> valori_y}; toate y trebuie să aibă shape (K,).
    """
    try:
        from vpython import graph, gcurve, gdots, color
    except Exception as e:
        raise RuntimeError('VPython is not installed. Run `pip install vpython`.') from e

    palette = [color.red, color.green, color.blue, color.cyan,
               color.magenta, color.yellow, color.white, color.orange]
    names = list(series.keys())

    full_title = f"{title}  —  {' | '.join(names)}" if legend else title
    g = graph(title=full_title, xtitle=xlabel, ytitle=ylabel,
              width=900, height=600, fast=False)

    for i, name in enumerate(names):
        col = palette[i % len(palette)]
        curve = gcurve(graph=g, color=col, label=name)
        dots = gdots(graph=g, color=col)
        for xv, yv in zip(x, series[name]):
            curve.plot(float(xv), float(yv))
            dots.plot(float(xv), float(yv))
    return g


def plot_convergence_vpython(df):
    """
    Două grafice din tabelul de convergență (coloanele n, mean, std, std_theory):
      1) log10(std) și log10(σ/√n) vs log10(n)  — drepte de pantă ≈ -1/2;
      2) media rulărilor vs log10(n), cu linia valorii exacte.
    """
    n = df["n"].to_numpy(dtype=float)
    x = np.log10(n)

    std = df["std"].to_numpy(dtype=float)
    keep = std > 0
    plot_series_vpython(
        x[keep],
        {"log10 std": np.log10(std[keep]),
         "log10 σ/√n": np.log10(df["std_theory"].to_numpy(dtype=float)[keep])},
        title="Împrăștierea estimatului", ylabel="log10(std)",
    )
    plot_series_vpython(
        x,
        {"mean": df["mean"].to_numpy(dtype=float),
         "exact": np.full_like(x, EXPECTED_DISTANCE)},
        title="Media rulărilor", ylabel="distanța medie",
    )
