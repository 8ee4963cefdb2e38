"""
Severity levels and their fixed display styles.

Every severity maps to exactly one (color, prefix) pair. The table is
static and total over the enum; callers that need a different look build
their own table and hand it to OutputConfig.

    ←── plain ──────────────────────────────── flagged ──→
    REPORT   LOG      DEV     DEBUG     WARN      ERROR
    magenta  grey     blue    blue      yellow    red
    (none)   <<LOG>>  <<DEV>> <<DEBUG>> <<WARN>>  <<ERROR>>

Colors are rich style names. ``bright_black`` is the terminal "grey".
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional


class Severity(Enum):
    """Named logging level determining color, prefix and gating."""

    LOG = "log"
    WARN = "warn"
    DEV = "dev"
    ERROR = "error"
    DEBUG = "debug"
    REPORT = "report"


@dataclass(frozen=True)
class SeverityStyle:
    """Display style for one severity."""
    color: str
    prefix: Optional[str] = None


SEVERITY_STYLES: Mapping[Severity, SeverityStyle] = MappingProxyType({
    Severity.LOG:    SeverityStyle('bright_black', '<<LOG>>'),
    Severity.WARN:   SeverityStyle('yellow', '<<WARN>>'),
    Severity.DEV:    SeverityStyle('blue', '<<DEV>>'),
    Severity.ERROR:  SeverityStyle('red', '<<ERROR>>'),
    Severity.DEBUG:  SeverityStyle('blue', '<<DEBUG>>'),
    Severity.REPORT: SeverityStyle('magenta', None),
})


def style_for(severity: Severity,
              styles: Mapping[Severity, SeverityStyle] = SEVERITY_STYLES
              ) -> SeverityStyle:
    """Look up the style for a severity, falling back to the default table."""
    return styles.get(severity) or SEVERITY_STYLES[severity]
