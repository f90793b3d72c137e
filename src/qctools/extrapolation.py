# src/qctools/extrapolation.py
"""
Complete-basis-set (CBS) extrapolation of computed properties.

x, y are basis-set cardinal numbers (2 for DZ, 3 for TZ, ...).
"""
from __future__ import annotations
from typing import Optional, Sequence, Union
import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy.optimize import curve_fit

from .errors import PreconditionViolation

def extrapolate_halkier(oep_x: float, oep_y: float, x: float) -> float:
    """
    Two-point X^-3 extrapolation of one-electron properties.

    oep_x: value with basis set quality x
    oep_y: value with basis set quality x-1
    x:     cardinal number of the larger basis

    Halkier et al., CPL 289, 243 (1998).
    """
    x3 = x ** 3
    y3 = (x - 1) ** 3
    return (oep_x * x3 - oep_y * y3) / (x3 - y3)

def extrapolate_jensen(oep_x: float, oep_y: float, x: float, y: float, B: float) -> float:
    """
    Two-point exponential-square-root extrapolation, y = x + 1.

    F. Jensen, Introduction to Computational Chemistry, 3rd ed. (2017).
    """
    if y - x != 1:
        raise PreconditionViolation(f"cardinal numbers must be adjacent (y = x + 1), got x={x}, y={y}")
    ex = np.exp(B * np.sqrt(x))
    ey = np.exp(B * np.sqrt(y))
    return float((ex * oep_x - ey * oep_y) / (ex - ey))

def _feller(x, cbs, a, b):
    return cbs + a * np.exp(-np.sqrt(x) * b)

def extrapolate_feller(x: Union[float, ArrayLike], p: Sequence[float]) -> Union[float, NDArray[np.float64]]:
    """p = [CBS limit, A, B]; element-wise over array x."""
    if len(p) != 3:
        raise ValueError(f"Feller parameters must be [CBS, A, B], got {len(p)} values")
    out = _feller(np.asarray(x, float), p[0], p[1], p[2])
    return float(out) if np.ndim(out) == 0 else out

def fit_feller(
    xs: ArrayLike,
    values: ArrayLike,
    p0: Optional[Sequence[float]] = None,
) -> NDArray[np.float64]:
    """
    Least-squares fit of [CBS, A, B] to (cardinal, value) points.
    Needs at least three points; with exactly three the fit is exact.
    """
    xs = np.asarray(xs, float)
    values = np.asarray(values, float)
    if xs.shape != values.shape:
        raise ValueError(f"xs and values differ in shape: {xs.shape} vs {values.shape}")
    if xs.size < 3:
        raise ValueError(f"Feller fit needs at least 3 points, got {xs.size}")

    if p0 is None:
        # largest-basis value as CBS guess, B = 1
        order = np.argsort(xs)
        lo, hi = order[0], order[-1]
        p0 = (values[hi], (values[lo] - values[hi]) * np.exp(np.sqrt(xs[lo])), 1.0)

    popt, _ = curve_fit(_feller, xs, values, p0=p0, maxfev=20000)
    return popt
