# src/qctools/errors.py
"""
Exception hierarchy for qctools.

Each error also derives from the builtin a caller would naturally catch
(ValueError, KeyError, AssertionError), so plain ``except ValueError`` keeps
working.
"""
from __future__ import annotations
from typing import Any, Dict


class QCToolsError(Exception):
    """Base class. ``code`` is a machine-readable tag."""

    code = "QCTOOLS_ERROR"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code, "message": self.message}


class FormatMismatch(QCToolsError, ValueError):
    """Malformed XYZ data (declared atom count vs. rows, bad records)."""
    code = "FORMAT_MISMATCH"


class UnknownElement(QCToolsError, KeyError):
    """Element symbol missing from the covalent-radii table."""
    code = "UNKNOWN_ELEMENT"

    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(f"no covalent radius for element {symbol!r}")


class PreconditionViolation(QCToolsError, AssertionError):
    """Caller broke a documented precondition."""
    code = "PRECONDITION"


class DomainError(QCToolsError, ValueError):
    """Argument outside the mathematical domain of the function."""
    code = "DOMAIN_ERROR"
