import pytest
from pathlib import Path

from qctools.config import build_parser, parse_yaml_config
from qctools.qc_types import ExtrapolationSpec

def _write(tmp_path: Path, text: str) -> str:
    path = tmp_path / "recipe.yaml"
    path.write_text(text)
    return str(path)

def test_single_recipe_mapping(tmp_path: Path):
    cfg = parse_yaml_config(_write(tmp_path, "method: Halkier\nvalues: {4: 1.86, 3: 1.85}\n"))
    assert cfg.name == "recipe"
    assert cfg.extrapolations == [ExtrapolationSpec(method="halkier", points=[(3.0, 1.85), (4.0, 1.86)])]

def test_recipe_list(tmp_path: Path):
    text = """
name: water
extrapolations:
  - method: jensen
    B: 1.5
    values: [[3, -76.33], [4, -76.36]]
  - method: feller
    p0: [-76.4, 0.5, 1.0]
    values:
      - {x: 2, value: -76.24}
      - {x: 3, value: -76.33}
      - {x: 4, value: -76.36}
"""
    cfg = parse_yaml_config(_write(tmp_path, text))
    assert cfg.name == "water"
    jensen, feller = cfg.extrapolations
    assert jensen.B == 1.5
    assert jensen.points == [(3.0, -76.33), (4.0, -76.36)]
    assert feller.p0 == (-76.4, 0.5, 1.0)
    assert [x for x, _ in feller.points] == [2.0, 3.0, 4.0]

def test_default_jensen_constant(tmp_path: Path):
    cfg = parse_yaml_config(_write(tmp_path, "method: jensen\nvalues: {3: 1.0, 4: 1.1}\n"))
    assert cfg.extrapolations[0].B == 1.63

@pytest.mark.parametrize("text,exc", [
    ("values: {3: 1.0, 4: 1.1}\n", KeyError),
    ("method: halkier\n", KeyError),
    ("method: richardson\nvalues: {3: 1.0, 4: 1.1}\n", ValueError),
    ("method: feller\nvalues: {3: 1.0, 4: 1.1}\n", ValueError),
    ("method: halkier\nvalues: 1.0\n", TypeError),
    ("method: halkier\nvalues: [[3, 1.0], [3, 1.1]]\n", ValueError),
    ("method: feller\np0: [1, 2]\nvalues: {2: 1.2, 3: 1.0, 4: 1.1}\n", ValueError),
    ("- method: halkier\n", TypeError),
    ("extrapolations: []\n", TypeError),
])
def test_bad_recipes(tmp_path: Path, text: str, exc):
    with pytest.raises(exc):
        parse_yaml_config(_write(tmp_path, text))

def test_parser_bonds_defaults():
    args = build_parser().parse_args(["bonds", "mol.xyz"])
    assert args.command == "bonds"
    assert args.delta == 0.25
    assert not args.one_based
    assert args.json is None

def test_parser_requires_command():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])

def test_verbose_flag_help():
    text = build_parser().format_help()
    assert "Print progress steps" in text
    assert "logging" not in text
