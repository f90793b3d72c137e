# src/qctools/constants.py
import math
from types import MappingProxyType

# Conversion factors from atomic units, as in MOLPRO (TOBOHR is the inverse of TOANG)
TOEV   = 27.2113839
TOMEV  = 27211.3839
TOCM   = 219474.63067
TOHZ   = 6.5796839207     # x 1e15 Hz
TOKJ   = 2625.500
TOKCAL = 627.5096
TOANG  = 0.529177209
TOBOHR = 1.889726131

# polarizability: atomic units -> Å^3
AU2CGS = 16.48778 / (4 * math.pi * 8.854188)

UNITS = MappingProxyType({
    "ev": TOEV, "mev": TOMEV, "cm": TOCM, "hz": TOHZ * 1e15,
    "kj": TOKJ, "kcal": TOKCAL, "ang": TOANG,
})

# Covalent radii (Å), periodictable.com
COV_RAD = MappingProxyType({
    "H": 0.31, "He": 0.28, "Li": 1.28, "Be": 0.96, "B": 0.85,
    "C": 0.76, "N": 0.71, "O": 0.66, "F": 0.57, "Ne": 0.58,
})

DEFAULT_BOND_DELTA = 0.25   # Å
CNT_LATTICE = 2.46          # Å, graphene lattice constant
