# src/qctools/qc_types.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple
import numpy as np

# (i, j) with i < j -> distance (Å), insertion order = scan order
BondMap = Dict[Tuple[int, int], float]

@dataclass(frozen=True)
class Geometry:
    symbols: List[str]
    coords: np.ndarray      # [N,3]
    comment: str = ""

    def __len__(self) -> int:
        return len(self.symbols)

# Extrapolation recipe (YAML)
@dataclass(frozen=True)
class ExtrapolationSpec:
    method: str                                 # "halkier" | "jensen" | "feller"
    points: List[Tuple[float, float]]           # (cardinal, value), ascending cardinal
    B: float = 1.63                             # Jensen decay constant
    p0: Optional[Tuple[float, float, float]] = None   # Feller initial guess

@dataclass(frozen=True)
class Config:
    name: str
    extrapolations: List[ExtrapolationSpec]
