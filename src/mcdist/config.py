# src/mcdist/config.py

# Despre NumPy (np):
#  - Uniformele pe [0, 1) se generează în lot cu rng.random((n, 4)).
#  - Reproductibilitate: o singură sămânță (`seed`) → np.random.default_rng(seed);
#    din el se derivă generatoare copil independente (rng.spawn) pentru rulări/partiții.

from dataclasses import dataclass
from typing import Optional, Tuple

from .errors import InvalidArgument
from .estimator import METHODS, check_positive_int


@dataclass(frozen=True)
class EstimatorConfig:
    """
    ============================================================================
    CONFIGURAȚIA ESTIMATORULUI
    ============================================================================

    SCOP
    ----
    Reunește toți parametrii folosiți de CLI, studiul de convergență și benchmark-uri.
    Restul codului citește exclusiv din acest obiect ⇒ setările sunt centralizate
    și ușor de reprodus.

    MODEL
    -----
    Două puncte (x1, y1), (x2, y2) cu cele 4 coordonate i.i.d. U[0, 1):
        d = sqrt((x1 - x2)^2 + (y1 - y2)^2),      estimat = media lui d pe n eșantioane
    Estimatul converge la ≈ 0.5214; deviația între rulări scade ca 1/√n.

    GHID PRACTIC
    ------------
    • `n` mare → estimat mai precis (cost O(n)).
    • `method='loop'` e doar demonstrativ (de zeci de ori mai lent).
    • `chunk_size` limitează memoria pentru n foarte mare (≈ 32 B per eșantion).
    • `workers` > 1 împarte n pe fire; rezultatul rămâne determinist pentru un `seed` dat.

    Fișiere rezultate:
      - convergence.dat : n, runs, mean, std, abs_error, std_theory
      - benchmark.dat   : name, variant, n, repeats, best_s, mean_s
    """

    # -----------------------
    # ESTIMARE SIMPLĂ
    # -----------------------

    n: int = 100_000
    # Numărul de eșantioane pentru o estimare.

    method: str = 'vectorized'
    # 'vectorized' → un apel batch (n, 4); 'loop' → 4 extrageri scalare per eșantion.

    workers: int = 1
    # Număr de partiții/fire. 1 = secvențial.

    chunk_size: Optional[int] = None
    # Mărimea maximă a unui lot în 'vectorized' (None = un singur lot).

    seed: Optional[int] = None
    # Sămânța RNG (reproductibilitate). None → entropie din sistem.

    # -----------------------
    # STUDIU DE CONVERGENȚĂ
    # -----------------------

    runs: int = 20
    # Rulări independente pentru fiecare n din grilă (pentru std între rulări).

    n_grid: Tuple[int, ...] = (100, 1_000, 10_000, 100_000)
    # Valorile lui n pentru studiu.

    # -----------------------
    # BENCHMARK
    # -----------------------

    bench_n: int = 10_000
    # Mărimea problemei în micro-benchmark-uri.

    bench_repeats: int = 5
    # De câte ori repetăm fiecare măsurătoare (raportăm min și medie).

    # --------
    # OUTPUT
    # --------

    output_dir: str = 'output'
    # Directorul în care sunt scrise fișierele .dat (TSV).

    enable_vpython: bool = False
    # Dacă True, după studiu desenăm curbele de convergență în VPython.

    def validate(self) -> 'EstimatorConfig':
        """Ridică InvalidArgument la prima valoare incoerentă; întoarce self."""
        check_positive_int(self.n, 'n')
        check_positive_int(self.workers, 'workers')
        check_positive_int(self.runs, 'runs')
        check_positive_int(self.bench_n, 'bench_n')
        check_positive_int(self.bench_repeats, 'bench_repeats')
        if self.chunk_size is not None:
            check_positive_int(self.chunk_size, 'chunk_size')
        if self.method not in METHODS:
            raise InvalidArgument(f"method necunoscut: {self.method!r} (alege din {METHODS})")
        if not self.n_grid:
            raise InvalidArgument("n_grid nu poate fi gol.")
        for v in self.n_grid:
            check_positive_int(v, 'n_grid')
        return self
