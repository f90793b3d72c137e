# src/qctools/__init__.py
from .constants import (
    TOEV, TOMEV, TOCM, TOHZ, TOKJ, TOKCAL, TOANG, TOBOHR, AU2CGS, COV_RAD,
)
from .errors import QCToolsError, FormatMismatch, UnknownElement, PreconditionViolation, DomainError
from .io_utils import read_xyz, read_geometry, write_xyz
from .analysis import count_bonds
from .extrapolation import extrapolate_halkier, extrapolate_jensen, extrapolate_feller, fit_feller
from .nanotube import cnt_diameter

__all__ = [
    "TOEV", "TOMEV", "TOCM", "TOHZ", "TOKJ", "TOKCAL", "TOANG", "TOBOHR", "AU2CGS", "COV_RAD",
    "QCToolsError", "FormatMismatch", "UnknownElement", "PreconditionViolation", "DomainError",
    "read_xyz", "read_geometry", "write_xyz",
    "count_bonds",
    "extrapolate_halkier", "extrapolate_jensen", "extrapolate_feller", "fit_feller",
    "cnt_diameter",
]
