# src/qctools/analysis.py
from __future__ import annotations
import numpy as np
from numpy.typing import NDArray
from typing import List

from .constants import COV_RAD, DEFAULT_BOND_DELTA
from .errors import FormatMismatch, UnknownElement
from .qc_types import BondMap

def _cov_radius(sym: str) -> float:
    try:
        return COV_RAD[sym]
    except KeyError:
        raise UnknownElement(sym) from None

def count_bonds(
    symbols: List[str],
    pts: NDArray[np.float64],
    delta: float = DEFAULT_BOND_DELTA,
) -> BondMap:
    """
    Bonds from covalent radii: i<j are bonded iff
        |r_i - r_j| < R(i) + R(j) + delta
    Pairs are scanned i ascending, then j ascending; the returned dict keeps
    that order. Plain O(n^2) scan, meant for small molecules.
    """
    pts = np.asarray(pts, float)
    if pts.ndim != 2 or pts.shape[1] != 3:
        raise FormatMismatch(f"coordinates must have shape (N, 3), got {pts.shape}")
    if len(symbols) != len(pts):
        raise FormatMismatch(f"{len(symbols)} symbols but {len(pts)} coordinate rows")

    n = len(symbols)
    bonds: BondMap = {}
    for i in range(n - 1):
        for j in range(i + 1, n):
            d = float(np.linalg.norm(pts[i] - pts[j]))
            if d < _cov_radius(symbols[i]) + _cov_radius(symbols[j]) + delta:
                bonds[(i, j)] = d
    return bonds

def coord_numbers(n_atoms: int, bonds: BondMap) -> NDArray[np.int_]:
    cn = np.zeros(n_atoms, dtype=int)
    for i, j in bonds:
        cn[i] += 1
        cn[j] += 1
    return cn

def bond_report(symbols: List[str], bonds: BondMap, one_based: bool = False):
    """Print the bond table followed by per-atom coordination numbers."""
    off = 1 if one_based else 0
    cn = coord_numbers(len(symbols), bonds)

    print(f"\n=== BONDS ({len(bonds)}) ===")
    print("   i     j   pair      d(Å)")
    for (i, j), d in bonds.items():
        pair = f"{symbols[i]}-{symbols[j]}"
        print(f"{i + off:4d}  {j + off:4d}   {pair:6s}  {d:8.4f}")

    print("\n=== COORDINATION NUMBERS ===")
    for i, s in enumerate(symbols):
        print(f"{i + off:4d}  {s:>2s}  {cn[i]}")
