"""Analysis configuration: reporting-depth limit and manager pay band."""

import logging
from dataclasses import dataclass, replace
from pathlib import Path

import yaml

from orgchart.utils.io import load_toml_config

type ConfigDict = dict[str, str | int | float]

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent
CONFIG_KEYS = ("max_reporting_level", "underpaid_ratio", "overpaid_ratio")


@dataclass(frozen=True)
class AnalysisConfig:
    """Thresholds that drive the salary and reporting-line analyzers.

    A manager is underpaid when their salary is below ``underpaid_ratio`` times
    the average salary of their direct reports, and overpaid when it is above
    ``overpaid_ratio`` times that average. Employees deeper than
    ``max_reporting_level`` below the root have a too long reporting line.
    """

    max_reporting_level: int = 4
    underpaid_ratio: float = 1.2
    overpaid_ratio: float = 1.5

    def __post_init__(self) -> None:
        if self.max_reporting_level < 0:
            raise ValueError(f"max_reporting_level must be >= 0, got {self.max_reporting_level}")
        if self.underpaid_ratio <= 0 or self.overpaid_ratio <= 0:
            raise ValueError(
                f"Pay ratios must be positive, got {self.underpaid_ratio} and {self.overpaid_ratio}"
            )
        if self.underpaid_ratio > self.overpaid_ratio:
            raise ValueError(
                f"underpaid_ratio ({self.underpaid_ratio}) cannot exceed "
                f"overpaid_ratio ({self.overpaid_ratio})"
            )


def load_analysis_config(policy: str = "default") -> AnalysisConfig:
    match policy:
        case "default":
            return AnalysisConfig()
        case "strict":
            return AnalysisConfig(max_reporting_level=3, underpaid_ratio=1.25, overpaid_ratio=1.4)
        case "lenient":
            return AnalysisConfig(max_reporting_level=6, underpaid_ratio=1.1, overpaid_ratio=1.75)
        case other:
            raise ValueError(f"Unknown analysis policy: {other}")


def get_file_config(root: Path = PROJECT_ROOT) -> ConfigDict:
    """Read overrides from orgchart.yaml, falling back to pyproject.toml."""
    yaml_path = root / "orgchart.yaml"
    if yaml_path.exists():
        with open(yaml_path) as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"{yaml_path.name} must be a mapping")
        section = data.get("analysis", data)
        if not isinstance(section, dict):
            raise ValueError(f"The analysis section of {yaml_path.name} must be a mapping")
        logger.debug("Loaded analysis config from %s", yaml_path)
        return section

    pyproject = root / "pyproject.toml"
    if not pyproject.exists():
        return {}
    data = load_toml_config(pyproject)
    return data.get("tool", {}).get("orgchart", {})


def resolve_config(file_config: ConfigDict | None = None, **overrides: int | float | str | None) -> AnalysisConfig:
    """Layer a named policy, file keys and explicit overrides, later layers winning."""
    file_config = file_config or {}
    policy = overrides.pop("policy", None) or file_config.get("policy", "default")
    config = load_analysis_config(str(policy))

    changes: dict[str, int | float] = {}
    for layer in (file_config, overrides):
        for key in CONFIG_KEYS:
            match layer.get(key):
                case None:
                    continue
                case value if key == "max_reporting_level":
                    changes[key] = int(value)
                case value:
                    changes[key] = float(value)

    return replace(config, **changes)
