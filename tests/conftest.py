import pytest
from pathlib import Path

WATER_XYZ = """3
water, B3LYP/cc-pVTZ
O   0.000000   0.000000   0.117300
H   0.000000   0.757200  -0.469200
H   0.000000  -0.757200  -0.469200
"""

METHANE_XYZ = """5
methane
C   0.000000   0.000000   0.000000
H   0.629118   0.629118   0.629118
H  -0.629118  -0.629118   0.629118
H  -0.629118   0.629118  -0.629118
H   0.629118  -0.629118  -0.629118
"""

@pytest.fixture
def water_xyz(tmp_path: Path) -> Path:
    """Pytest fixture writing a water geometry to a temporary XYZ file."""
    path = tmp_path / "water.xyz"
    path.write_text(WATER_XYZ)
    return path

@pytest.fixture
def methane_xyz(tmp_path: Path) -> Path:
    path = tmp_path / "methane.xyz"
    path.write_text(METHANE_XYZ)
    return path
