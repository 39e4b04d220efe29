"""Rebuild reporting hierarchies from flat personnel records."""

from orgchart.config import OrgChartConfig, load_config
from orgchart.errors import (
    ConfigError,
    DuplicateNameError,
    HierarchyDepthError,
    InputUnavailableError,
    OrgChartError,
)
