# src/qctools/nanotube.py
import math

from .constants import CNT_LATTICE
from .errors import DomainError

def cnt_diameter(n: int, m: int) -> float:
    """Diameter (Å) of a CNT(n,m); also prints it rounded to 0.01 Å."""
    if n < m or n < 1 or m < 0:
        raise DomainError(f"CNT({n},{m}): chiral indices need n >= m >= 0 and n >= 1")
    diam = CNT_LATTICE / math.pi * math.sqrt(n * n + n * m + m * m)
    print(f"{round(diam, 2)} Å")
    return diam
