"""Org chart configuration and environment setup."""

import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import TypeAlias

from orgchart.errors import ConfigError
from orgchart.utils.io import DEFAULT_MAX_BYTES, load_toml_config, load_yaml_config
from orgchart.utils.types import DuplicatePolicy, SourceFormat

ConfigDict: TypeAlias = dict[str, str | int | bool | None]

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent
DEFAULT_MAX_DEPTH = 256


@dataclass(frozen=True)
class OrgChartConfig:
    source: Path = Path("data/org_chart.json")
    source_format: SourceFormat | None = None
    max_bytes: int = DEFAULT_MAX_BYTES
    max_depth: int = DEFAULT_MAX_DEPTH
    duplicate_policy: DuplicatePolicy = DuplicatePolicy.LAST_WRITE_WINS
    include_orphans: bool = False
    log_level: str = "WARNING"

    def with_overrides(self, **overrides) -> "OrgChartConfig":
        """Return a copy with every non-None override applied."""
        values = {key: value for key, value in overrides.items() if value is not None}
        return config_from_dict({**_as_dict(self), **values})


def _as_dict(config: OrgChartConfig) -> ConfigDict:
    return {f.name: getattr(config, f.name) for f in fields(config)}


def _positive_int(key: str, value) -> int:
    match value:
        case bool():
            raise ConfigError(f"{key} must be a positive integer, got {value!r}")
        case int() if value > 0:
            return value
        case str() if value.isdigit() and int(value) > 0:
            return int(value)
        case _:
            raise ConfigError(f"{key} must be a positive integer, got {value!r}")


def config_from_dict(data: ConfigDict) -> OrgChartConfig:
    """Build a config from a flat mapping, rejecting unknown keys."""
    known = {f.name for f in fields(OrgChartConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown org chart config keys: {', '.join(unknown)}")

    config = OrgChartConfig()
    updates = {}
    for key, value in data.items():
        match key:
            case "source":
                updates[key] = Path(value)
            case "source_format":
                updates[key] = _parse_enum(SourceFormat, key, value) if value else None
            case "max_bytes" | "max_depth":
                updates[key] = _positive_int(key, value)
            case "duplicate_policy":
                updates[key] = _parse_enum(DuplicatePolicy, key, value)
            case "include_orphans":
                if not isinstance(value, bool):
                    raise ConfigError(f"include_orphans must be true or false, got {value!r}")
                updates[key] = value
            case "log_level":
                level = str(value).upper()
                if level not in logging.getLevelNamesMapping():
                    raise ConfigError(f"Unknown log level: {value!r}")
                updates[key] = level

    return replace(config, **updates)


def _parse_enum(enum_cls, key: str, value):
    try:
        return enum_cls(str(value).lower())
    except ValueError:
        choices = ", ".join(member.value for member in enum_cls)
        raise ConfigError(f"{key} must be one of {choices}, got {value!r}") from None


def get_env_config(root: Path = PROJECT_ROOT) -> ConfigDict:
    """Read org chart config from orgchart.yaml, falling back to pyproject.toml."""
    yaml_path = root / "orgchart.yaml"
    if yaml_path.exists():
        data = load_yaml_config(yaml_path)
        logger.debug("Loaded config from %s", yaml_path)
        return data.get("orgchart", data)

    pyproject = root / "pyproject.toml"
    if not pyproject.exists():
        return {}
    data = load_toml_config(pyproject)
    return data.get("tool", {}).get("orgchart", {})


def load_config(path: Path | None = None) -> OrgChartConfig:
    """Load the config from an explicit file or from the project root."""
    if path is None:
        return config_from_dict(get_env_config())

    try:
        match path.suffix:
            case ".yaml" | ".yml":
                data = load_yaml_config(path)
                data = data.get("orgchart", data)
            case ".toml":
                data = load_toml_config(path)
                if "tool" in data:
                    data = data["tool"].get("orgchart", {})
                else:
                    data = data.get("orgchart", data)
            case ext:
                raise ConfigError(f"Unsupported config file format: {ext}")
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc

    return config_from_dict(data)
