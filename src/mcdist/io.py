# src/mcdist/io.py

import os

import pandas as pd

CONVERGENCE_COLUMNS = ['n', 'runs', 'mean', 'std', 'abs_error', 'std_theory']
BENCHMARK_COLUMNS = ['name', 'variant', 'n', 'repeats', 'best_s', 'mean_s']


class DataWriter:
    """
    Clasa responsabilă DOAR de scrierea pe disc a rezultatelor
    (SRP: Single Responsibility). Produce fișiere .dat (TSV) ușor de
    importat în gnuplot/matplotlib/Excel.

    Convenții:
      - separare cu TAB ('\t')
      - fără index pandas       -> doar coloanele utile
      - float_format='%.8g'     -> 8 cifre semnificative
    """

    def __init__(self, output_dir: str):
        # Creează directorul de output dacă nu există (idempotent).
        self.output_dir = output_dir
        os.makedirs(output_dir, exist_ok=True)

    def _write(self, rows, columns, filename):
        df = pd.DataFrame(list(rows), columns=columns)
        path = os.path.join(self.output_dir, filename)
        df.to_csv(path, sep='\t', index=False, float_format='%.8g')
        return path

    def write_convergence(self, rows):
        """
        Scrie rezultatul studiului de convergență.

        Parametri
        ---------
        rows : iterabil de dict (ieșirea metrics.summarize_runs), câte unul per n.

        Output
        ------
        <output_dir>/convergence.dat (TSV)
          Coloane: n, runs, mean, std, abs_error, std_theory
        """
        return self._write(rows, CONVERGENCE_COLUMNS, 'convergence.dat')

    def write_benchmark(self, rows):
        """<output_dir>/benchmark.dat cu coloanele name, variant, n, repeats, best_s, mean_s."""
        return self._write(rows, BENCHMARK_COLUMNS, 'benchmark.dat')


def read_dat(path: str) -> pd.DataFrame:
    if not os.path.isfile(path):
        raise FileNotFoundError(f"Nu am găsit fișierul: {os.path.abspath(path)}")
    df = pd.read_csv(path, sep='\t')
    df.columns = [c.strip().lstrip("\ufeff") for c in df.columns]
    return df
