import math
import pytest

from qctools.nanotube import cnt_diameter
from qctools.errors import DomainError

def test_armchair_10_10(capsys):
    d = cnt_diameter(10, 10)
    assert d == pytest.approx(2.46 / math.pi * math.sqrt(300))
    assert capsys.readouterr().out == "13.56 Å\n"

def test_returns_unrounded_value(capsys):
    d = cnt_diameter(6, 5)
    assert d == pytest.approx(2.46 / math.pi * math.sqrt(36 + 30 + 25))
    assert d != round(d, 2)
    assert capsys.readouterr().out == f"{round(d, 2)} Å\n"

def test_zigzag(capsys):
    assert cnt_diameter(1, 0) == pytest.approx(2.46 / math.pi)

@pytest.mark.parametrize("n,m", [(5, 7), (0, 0), (3, -1)])
def test_invalid_indices(n, m, capsys):
    with pytest.raises(DomainError):
        cnt_diameter(n, m)
    assert capsys.readouterr().out == ""
