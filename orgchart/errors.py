"""Exceptions raised while loading and walking an org chart."""


class OrgChartError(Exception):
    """Base exception for org chart errors."""


class InputUnavailableError(OrgChartError):
    """Raised when the personnel records cannot be obtained.

    Covers a missing or unreadable source, a source larger than the
    configured limit, malformed JSON/CSV and schema violations.
    """


class DuplicateNameError(OrgChartError):
    """Raised when two records share a name under the reject policy."""

    def __init__(self, name: str):
        super().__init__(f"Duplicate person name in org chart: {name!r}")
        self.name = name


class HierarchyDepthError(OrgChartError):
    """Raised when a traversal goes deeper than the configured limit.

    A cyclic manager chain always ends here.
    """

    def __init__(self, name: str, max_depth: int):
        super().__init__(
            f"Reporting chain below {name!r} exceeds max depth {max_depth} "
            "(cyclic manager references?)"
        )
        self.name = name
        self.max_depth = max_depth


class ConfigError(OrgChartError):
    """Raised for invalid configuration values."""
