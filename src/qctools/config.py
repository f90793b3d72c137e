# src/qctools/config.py
from __future__ import annotations
import argparse
import os
import sys
from typing import Dict, List, Tuple

try:
    import yaml
except ImportError:
    sys.exit("pip install pyyaml")

from .constants import DEFAULT_BOND_DELTA, UNITS
from .qc_types import Config, ExtrapolationSpec

METHODS = ("halkier", "jensen", "feller")

# -------------------- CLI --------------------

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="qctools",
        description="Small quantum-chemistry helpers: XYZ bonds, CBS extrapolation, CNT diameters, unit conversion."
    )
    p.add_argument("--verbose", action="store_true", help="Print progress steps")
    sub = p.add_subparsers(dest="command", required=True)

    b = sub.add_parser("bonds", help="List covalent bonds in an XYZ geometry")
    b.add_argument("xyz", help="Input XYZ file")
    b.add_argument("-d", "--delta", type=float, default=DEFAULT_BOND_DELTA,
                   help=f"Tolerance (Å) added to the sum of covalent radii (default: {DEFAULT_BOND_DELTA})")
    b.add_argument("--one-based", action="store_true", help="Print 1-based atom indices")
    b.add_argument("--json", default=None, help="Also write the bond list to this JSON file")
    b.add_argument("--center-out", default=None,
                   help="Write the geometry, centered at its centroid, to this XYZ path")

    c = sub.add_parser("cnt", help="Diameter of a CNT(n,m)")
    c.add_argument("n", type=int)
    c.add_argument("m", type=int)

    e = sub.add_parser("extrapolate", help="CBS extrapolation from a YAML recipe")
    e.add_argument("yaml", help="YAML recipe file (single recipe or 'extrapolations' list)")

    u = sub.add_parser("convert", help="Convert a value in atomic units")
    u.add_argument("value", type=float, help="Value in atomic units (hartree; bohr for the ang target)")
    u.add_argument("--to", nargs="+", choices=sorted(UNITS), default=None,
                   help="Target units (default: all)")

    return p

# -------------------- YAML helpers --------------------

def _parse_points(val) -> List[Tuple[float, float]]:
    """
    Accept {cardinal: value} or [[cardinal, value], ...]; also
    {"x": cardinal, "value": v} list items. Returned sorted by cardinal.
    """
    if isinstance(val, dict):
        items = list(val.items())
    elif isinstance(val, list):
        items = []
        for it in val:
            if isinstance(it, dict) and "x" in it and "value" in it:
                items.append((it["x"], it["value"]))
            elif isinstance(it, (list, tuple)) and len(it) == 2:
                items.append((it[0], it[1]))
            else:
                raise TypeError("values list items must be [cardinal, value] or {x, value}")
    else:
        raise TypeError(f"Unsupported values type: {type(val).__name__}")

    pts: Dict[float, float] = {}
    for x, v in items:
        x = float(x)
        if x in pts:
            raise ValueError(f"duplicate cardinal number {x:g}")
        pts[x] = float(v)
    return sorted(pts.items())

def _parse_spec(raw) -> ExtrapolationSpec:
    if not isinstance(raw, dict):
        raise TypeError("Each extrapolation recipe must be a mapping")
    if "method" not in raw:
        raise KeyError("YAML: need 'method' (halkier | jensen | feller)")
    method = str(raw["method"]).lower()
    if method not in METHODS:
        raise ValueError(f"Unknown extrapolation method {raw['method']!r}")
    if "values" not in raw:
        raise KeyError("YAML: need 'values' (cardinal -> property value)")
    points = _parse_points(raw["values"])

    need = 3 if method == "feller" else 2
    if len(points) < need:
        raise ValueError(f"{method}: needs at least {need} values, got {len(points)}")

    p0 = None
    if raw.get("p0") is not None:
        p0 = tuple(float(v) for v in raw["p0"])
        if len(p0) != 3:
            raise ValueError(f"p0 must be [CBS, A, B], got {raw['p0']!r}")

    return ExtrapolationSpec(
        method=method,
        points=points,
        B=float(raw.get("B", 1.63)),
        p0=p0,
    )

# -------------------- YAML → Config --------------------

def parse_yaml_config(path: str) -> Config:
    with open(path, "r") as fh:
        cfg = yaml.safe_load(fh) or {}
    if not isinstance(cfg, dict):
        raise TypeError("YAML: top level must be a mapping")

    name = str(cfg.get("name", os.path.splitext(os.path.basename(path))[0]))

    # ---- many recipes ----
    if "extrapolations" in cfg:
        raw = cfg["extrapolations"]
        if not isinstance(raw, list) or not raw:
            raise TypeError("'extrapolations' must be a non-empty list")
        return Config(name=name, extrapolations=[_parse_spec(r) for r in raw])

    # ---- single recipe at top level ----
    return Config(name=name, extrapolations=[_parse_spec(cfg)])
