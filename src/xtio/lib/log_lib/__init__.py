"""
log_lib — leveled, colorized, buffered output.

A reusable output library providing:
- Fixed severity table (LOG, WARN, DEV, ERROR, DEBUG, REPORT)
- Per-call output buffers rendered once to the sink
- Bounded-depth value inspection
- Function tracing decorator

Public API:
    OutputManager    — central coordinator
    OutputConfig     — sink, debugging flag, color switch, style table
    init_output      — singleton initialization
    get_output       — access singleton
    OutputBuffer     — per-call text accumulator
    Severity         — severity enum
    SEVERITY_STYLES  — severity -> (color, prefix) table
    inspect          — format values for display
    trace            — function tracing decorator
"""

from .manager import OutputManager, OutputConfig, init_output, get_output
from .buffer import OutputBuffer, colorize
from .severity import Severity, SeverityStyle, SEVERITY_STYLES, style_for
from .inspector import InputKind, classify, format_value, inspect
from .trace import trace

__all__ = [
    'OutputManager', 'OutputConfig', 'init_output', 'get_output',
    'OutputBuffer', 'colorize',
    'Severity', 'SeverityStyle', 'SEVERITY_STYLES', 'style_for',
    'InputKind', 'classify', 'format_value', 'inspect',
    'trace',
]
