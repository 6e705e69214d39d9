"""
Configuration Loading System

Loads YAML run configurations that list the row sizes and algorithms to
compare.
"""

import yaml
from typing import Dict, List, Any

from .disk_state import DiskRow
from .metrics import compare_algorithms
from .sorting import SORT_ALGORITHMS


class ConfigurationError(Exception):
    """Raised when configuration is invalid"""
    pass


def load_config(config_path: str = "config.yaml") -> Dict[str, Any]:
    """Load configuration from YAML file"""
    try:
        with open(config_path, 'r') as f:
            config = yaml.safe_load(f)
    except FileNotFoundError:
        raise ConfigurationError(f"Configuration file not found: {config_path}")
    except OSError as e:
        raise ConfigurationError(f"Cannot read configuration file {config_path}: {e}")
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in configuration file: {e}")

    if config is None:
        raise ConfigurationError(f"Configuration file is empty: {config_path}")
    if not isinstance(config, dict):
        raise ConfigurationError("Configuration root must be a mapping")

    return config


def validate_config(config: Dict[str, Any]) -> List[str]:
    """
    Validate configuration and return list of issues

    Returns:
        List of validation error messages (empty if valid)
    """
    issues = []

    if "rows" not in config:
        issues.append("Missing required section: rows")
    else:
        rows_config = config["rows"]
        if not isinstance(rows_config, dict):
            issues.append("'rows' must be a dictionary")
        else:
            light_counts = rows_config.get("light_counts")
            if not isinstance(light_counts, list) or not light_counts:
                issues.append("rows.light_counts must be a non-empty list")
            else:
                for count in light_counts:
                    if not isinstance(count, int) or isinstance(count, bool):
                        issues.append(f"Light count must be an integer: {count!r}")
                    elif count < 0:
                        issues.append(f"Light count must be non-negative: {count}")

    algorithms = config.get("algorithms")
    if algorithms is not None:
        if not isinstance(algorithms, list) or not algorithms:
            issues.append("'algorithms' must be a non-empty list")
        else:
            for name in algorithms:
                if not isinstance(name, str):
                    issues.append(f"Algorithm name must be a string: {name!r}")
                elif name not in SORT_ALGORITHMS:
                    issues.append(f"Unknown sort algorithm: {name}")

    report_config = config.get("report")
    if report_config is not None and not isinstance(report_config, dict):
        issues.append("'report' must be a dictionary")

    return issues


def _require_valid(config: Dict[str, Any]) -> None:
    issues = validate_config(config)
    if issues:
        raise ConfigurationError("; ".join(issues))


def create_rows_from_config(config: Dict[str, Any]) -> List[DiskRow]:
    """Create one initialized row per configured light count"""
    _require_valid(config)
    return [DiskRow(count) for count in config["rows"]["light_counts"]]


def get_algorithms_from_config(config: Dict[str, Any]) -> List[str]:
    """Configured algorithm names, defaulting to every registered algorithm"""
    algorithms = config.get("algorithms")
    if algorithms is None:
        return list(SORT_ALGORITHMS)
    return list(algorithms)


def get_report_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """Get report configuration, empty when absent or not a mapping"""
    report_config = config.get("report")
    if not isinstance(report_config, dict):
        return {}
    return report_config


def compare_from_config(config_path: str = "config.yaml") -> Dict[str, Any]:
    """
    Run the configured algorithm comparison

    Args:
        config_path: Path to the configuration file

    Returns:
        Comparison dictionary as produced by compare_algorithms
    """
    config = load_config(config_path)
    _require_valid(config)

    return compare_algorithms(
        config["rows"]["light_counts"],
        get_algorithms_from_config(config),
    )
