# src/qctools/main.py
from __future__ import annotations
import sys
from typing import List

from .config import build_parser, parse_yaml_config
from .constants import UNITS
from .errors import PreconditionViolation, QCToolsError
from .qc_types import ExtrapolationSpec
from .io_utils import read_geometry, write_xyz, write_bond_manifest, center_coords
from .analysis import count_bonds, bond_report
from .extrapolation import extrapolate_halkier, extrapolate_jensen, fit_feller
from .nanotube import cnt_diameter

def run_extrapolation(spec: ExtrapolationSpec) -> float:
    """CBS estimate for one recipe: two largest cardinals, or a Feller fit over all points."""
    if spec.method == "feller":
        xs = [x for x, _ in spec.points]
        vals = [v for _, v in spec.points]
        p = fit_feller(xs, vals, p0=spec.p0)
        return float(p[0])

    (lo, v_lo), (hi, v_hi) = spec.points[-2:]
    if spec.method == "halkier":
        if hi - lo != 1:
            raise PreconditionViolation(f"halkier: cardinal numbers must be adjacent, got {lo:g} and {hi:g}")
        return extrapolate_halkier(v_hi, v_lo, hi)
    return extrapolate_jensen(v_lo, v_hi, lo, hi, spec.B)

def _cmd_bonds(args) -> int:
    if args.verbose:
        print(f"\n[1] Reading XYZ geometry from {args.xyz}...")
    geo = read_geometry(args.xyz)
    if args.verbose:
        print(f"    - Loaded {len(geo)} atoms")

    if args.verbose:
        print(f"\n[2] Scanning atom pairs (delta={args.delta:.3f} Å)...")
    bonds = count_bonds(geo.symbols, geo.coords, delta=args.delta)
    bond_report(geo.symbols, bonds, one_based=args.one_based)

    if args.json:
        if args.verbose:
            print(f"\n[3] Writing bond manifest to {args.json}")
        write_bond_manifest(args.json, geo.symbols, bonds)

    if args.center_out:
        if args.verbose:
            print(f"\n[4] Writing centered geometry to {args.center_out}")
        write_xyz(args.center_out, geo.symbols, center_coords(geo.coords), comment=geo.comment)
    return 0

def _cmd_extrapolate(args) -> int:
    cfg = parse_yaml_config(args.yaml)
    if args.verbose:
        print(f"\n[1] Recipe '{cfg.name}': {len(cfg.extrapolations)} extrapolation(s)")

    print(f"\n=== CBS EXTRAPOLATION ({cfg.name}) ===")
    for k, spec in enumerate(cfg.extrapolations):
        if args.verbose:
            pts = ", ".join(f"{x:g}:{v:.8f}" for x, v in spec.points)
            print(f"    - #{k} {spec.method}  points=[{pts}]" + (f"  B={spec.B:g}" if spec.method == "jensen" else ""))
        cbs = run_extrapolation(spec)
        print(f"  {spec.method:8s}  CBS = {cbs:.8f}")
    return 0

def _cmd_convert(args) -> int:
    for unit in (args.to or list(UNITS)):
        print(f"  {unit:>5s}  {args.value * UNITS[unit]:.10g}")
    return 0

def main(argv: List[str] | None = None) -> int:
    p = build_parser()
    args = p.parse_args(argv)

    try:
        if args.command == "bonds":
            return _cmd_bonds(args)
        if args.command == "cnt":
            cnt_diameter(args.n, args.m)
            return 0
        if args.command == "extrapolate":
            return _cmd_extrapolate(args)
        return _cmd_convert(args)
    except QCToolsError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

if __name__ == "__main__":
    raise SystemExit(main())
