# src/qctools/io_utils.py
from __future__ import annotations
import json, os
from collections import Counter
from typing import List, Optional, Tuple
import numpy as np
from numpy.typing import NDArray

from .errors import FormatMismatch
from .qc_types import BondMap, Geometry

def _parse_natoms(line: str, path: str) -> int:
    try:
        return int(line.strip())
    except ValueError:
        raise FormatMismatch(f"{path}: first line must be the atom count, got {line.strip()!r}") from None

def read_geometry(path: str) -> Geometry:
    """
    Parse an XYZ file:
        line 1   atom count N
        line 2   comment
        3..N+2   <symbol> <x> <y> <z>
    Every non-blank line after the comment counts as a data row, so
    trailing extra atoms are rejected just like missing ones.
    """
    with open(path, "r") as fh:
        natoms = _parse_natoms(fh.readline(), path)
        comment = fh.readline().rstrip("\n")
        rows = [line.split() for line in fh if line.strip()]

    if natoms != len(rows):
        raise FormatMismatch(
            f"{path}: number of atoms listed ({len(rows)}) doesn't match the number declared ({natoms})"
        )

    symbols: List[str] = []
    coords = np.empty((natoms, 3), dtype=float)
    for i, row in enumerate(rows):
        if len(row) != 4:
            raise FormatMismatch(f"{path}: atom record {i + 1} has {len(row)} fields, expected 4")
        try:
            coords[i] = [float(v) for v in row[1:]]
        except ValueError:
            raise FormatMismatch(f"{path}: non-numeric coordinate in atom record {i + 1}") from None
        symbols.append(row[0])

    return Geometry(symbols=symbols, coords=coords, comment=comment)

def read_xyz(path: str) -> Tuple[List[str], NDArray[np.float64]]:
    geo = read_geometry(path)
    return geo.symbols, geo.coords

def write_xyz(path: str, symbols: List[str], pts: NDArray[np.float64], comment: Optional[str] = None) -> None:
    pts = np.asarray(pts, float)
    if len(symbols) != len(pts):
        raise FormatMismatch(f"{len(symbols)} symbols but {len(pts)} coordinate rows")
    if comment is None:
        comment = os.path.basename(path)
    with open(path, "w") as fh:
        fh.write(f"{len(symbols)}\n{comment}\n")
        for s, (x, y, z) in zip(symbols, pts):
            fh.write(f"{s} {x:.6f} {y:.6f} {z:.6f}\n")

def center_coords(pts: NDArray[np.float64]) -> NDArray[np.float64]:
    pts = np.asarray(pts, float)
    com = np.mean(pts, axis=0)
    return pts - com

def write_bond_manifest(path: str, symbols: List[str], bonds: BondMap) -> None:
    out = {
        "counts": Counter(symbols),
        "n_bonds": len(bonds),
        "bonds": [
            {"i": i, "j": j, "pair": f"{symbols[i]}-{symbols[j]}", "distance": d}
            for (i, j), d in bonds.items()
        ],
    }
    with open(path, "w") as fh:
        json.dump(out, fh, indent=2, default=int)
