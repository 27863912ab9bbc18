"""Tests for dep_spectrum.config."""

import logging
from pathlib import Path

import pytest

from dep_spectrum.config import RunConfig, load_run_config, parse_run_config
from dep_spectrum.types import DomainError, SweepRange

REPO_ROOT = Path(__file__).resolve().parents[1]

CONFIG_YAML = """
sweep:
  start_hz: 2.0e+3
  end_hz: 5.0e+6
  sample_count: 400
parameter_sets:
  - name: "Cell A"
    cell_radius: 5.0e-6
    shell_thickness: 7.0e-9
    media_permittivity: 78
    media_conductivity: 0.01
  - name: "Blank"
  - name: "Cell B"
    cytoplasm_conductivity: 0.5
"""


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "run.yaml"
    path.write_text(CONFIG_YAML)
    return path


class TestLoadRunConfig:
    """Tests for load_run_config / parse_run_config."""

    def test_load(self, config_file):
        cfg = load_run_config(config_file)
        assert isinstance(cfg, RunConfig)
        assert cfg.sweep == SweepRange(2.0e3, 5.0e6, 400)
        assert [p.name for p in cfg.parameter_sets] == ["Cell A", "Cell B"]
        assert cfg.parameter_sets[0].shell_thickness == 7.0e-9
        assert cfg.parameter_sets[0].membrane_permittivity is None
        assert cfg.parameter_sets[1].cytoplasm_conductivity == 0.5

    def test_blank_set_dropped_with_log(self, config_file, caplog):
        with caplog.at_level(logging.INFO, logger="dep_spectrum.config"):
            load_run_config(config_file)
        assert "Dropping parameter set 1 ('Blank')" in caplog.text

    def test_sweep_defaults(self):
        cfg = parse_run_config({"parameter_sets": [{"name": "x", "cell_radius": 1e-6}]})
        assert cfg.sweep == SweepRange()

    def test_no_meaningful_sets(self):
        with pytest.raises(ValueError, match="at least one set of graph parameters"):
            parse_run_config({"parameter_sets": [{"name": "a"}, {"name": "b"}]})

    def test_unknown_parameter_key(self):
        with pytest.raises(ValueError, match="unknown keys"):
            parse_run_config({"parameter_sets": [{"name": "a", "radius": 1e-6}]})

    def test_non_numeric_value(self):
        with pytest.raises(ValueError, match="must be a number"):
            parse_run_config({"parameter_sets": [{"name": "a", "cell_radius": "big"}]})

    @pytest.mark.parametrize("value", [".inf", "-.inf", ".nan", '"inf"', '"nan"'])
    def test_non_finite_value(self, tmp_path, value):
        """Parameter values must be finite, whether YAML floats or strings."""
        path = tmp_path / "run.yaml"
        path.write_text(f"parameter_sets:\n  - name: a\n    cell_radius: {value}\n")
        with pytest.raises(ValueError, match="'cell_radius' must be a number"):
            load_run_config(path)

    def test_invalid_sweep(self):
        with pytest.raises(DomainError):
            parse_run_config({"sweep": {"start_hz": 0}, "parameter_sets": [{"cell_radius": 1e-6}]})

    def test_unknown_sweep_key(self):
        with pytest.raises(ValueError, match="Unknown sweep keys"):
            parse_run_config({"sweep": {"stop_hz": 10}, "parameter_sets": [{"cell_radius": 1e-6}]})

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        with pytest.raises(ValueError, match="Empty run configuration"):
            load_run_config(path)

    def test_bundled_reference_config(self):
        cfg = load_run_config(REPO_ROOT / "experiments" / "reference_cell.yaml")
        assert cfg.sweep == SweepRange(1e3, 1e7, 5000)
        assert cfg.parameter_sets[0].name == "Reference cell"
        assert cfg.parameter_sets[0].cytoplasm_conductivity == 0.3
