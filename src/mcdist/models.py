# src/mcdist/models.py

# Despre NumPy (np):
#  - Tipul de bază este np.ndarray (aici tablouri (n, 4) de extrageri uniforme).
#  - Operațiile sunt vectorizate și suportă broadcasting (eficient, fără bucle Python).
#  - Uniformele pe [0, 1) se generează într-un singur apel: rng.random((n, 4)).
#  - Reproductibilitate: generatorul (np.random.Generator) este transmis explicit,
#    nu folosim starea globală np.random.*.

import numpy as np

# Ordinea coloanelor într-un eșantion: punctul 1 = (x1, y1), punctul 2 = (x2, y2).
COLUMNS = ('x1', 'x2', 'y1', 'y2')


class SampleBatch:
    """
    Un lot de n eșantioane, fiecare cu 4 extrageri uniforme independente pe [0, 1):
      - u : shape (n, 4), coloanele în ordinea x1, x2, y1, y2

    Obiectul este efemer: există doar pe durata unei treceri de estimare.
    SRP: stochează extragerile și calculează distanțele; nu face medieri sau I/O.
    """

    def __init__(self, u: np.ndarray):
        u = np.asarray(u, dtype=float)
        if u.ndim != 2 or u.shape[1] != 4:
            raise ValueError(f"SampleBatch cere shape (n, 4), am primit {u.shape}")
        self.u = u

    @classmethod
    def draw(cls, n: int, rng: np.random.Generator) -> "SampleBatch":
        """Un singur apel batch pentru n×4 uniforme (nu n×4 apeluri scalare)."""
        return cls(rng.random((n, 4)))

    def __len__(self):
        return self.u.shape[0]

    def distances(self) -> np.ndarray:
        """
        Distanța euclidiană pentru fiecare eșantion, shape (n,), valori în [0, √2].

        Folosim np.sqrt (rădăcină adevărată), nu ** 0.5: rezultatul e identic
        matematic, dar sqrt e mai ieftin.
        """
        dx = self.u[:, 0] - self.u[:, 1]
        dy = self.u[:, 2] - self.u[:, 3]
        return np.sqrt(dx * dx + dy * dy)
