from __future__ import annotations

import pytest

from orgchart.config import AnalysisConfig, get_file_config, load_analysis_config, resolve_config


def test_defaults():
    config = AnalysisConfig()

    assert config.max_reporting_level == 4
    assert config.underpaid_ratio == 1.2
    assert config.overpaid_ratio == 1.5


@pytest.mark.parametrize(
    "kwargs",
    [
        {"max_reporting_level": -1},
        {"underpaid_ratio": 0},
        {"underpaid_ratio": 2.0, "overpaid_ratio": 1.5},
    ],
)
def test_invalid_config_is_rejected(kwargs):
    with pytest.raises(ValueError):
        AnalysisConfig(**kwargs)


def test_named_policies():
    assert load_analysis_config() == AnalysisConfig()
    assert load_analysis_config("strict").max_reporting_level == 3
    assert load_analysis_config("lenient").overpaid_ratio == 1.75


def test_unknown_policy():
    with pytest.raises(ValueError, match="Unknown analysis policy"):
        load_analysis_config("generous")


def test_resolve_layers_file_then_overrides():
    config = resolve_config(
        {"policy": "strict", "underpaid_ratio": 1.1},
        max_reporting_level=7,
        overpaid_ratio=None,
    )

    assert config.max_reporting_level == 7
    assert config.underpaid_ratio == 1.1
    assert config.overpaid_ratio == 1.4


def test_resolve_override_policy_wins_over_file():
    config = resolve_config({"policy": "strict"}, policy="lenient")

    assert config == load_analysis_config("lenient")


def test_yaml_file_takes_precedence(tmp_path):
    (tmp_path / "orgchart.yaml").write_text("analysis:\n  max_reporting_level: 2\n")
    (tmp_path / "pyproject.toml").write_text("[tool.orgchart]\nmax_reporting_level = 9\n")

    assert get_file_config(tmp_path) == {"max_reporting_level": 2}


def test_pyproject_table(tmp_path):
    (tmp_path / "pyproject.toml").write_text('[tool.orgchart]\npolicy = "lenient"\n')

    assert resolve_config(get_file_config(tmp_path)) == load_analysis_config("lenient")


def test_no_config_files(tmp_path):
    assert get_file_config(tmp_path) == {}


@pytest.mark.parametrize("content", ["- 1\n- 2\n", "42\n", "analysis: [1, 2]\n"])
def test_yaml_that_is_not_a_mapping(tmp_path, content):
    (tmp_path / "orgchart.yaml").write_text(content)

    with pytest.raises(ValueError, match="must be a mapping"):
        get_file_config(tmp_path)
