"""
ValueInspector — turns arbitrary values into display text.

Each argument is classified once into an InputKind and formatted by the
strategy registered for that kind:

    TEXT        str, passed through unchanged
    ABSENT      None, rendered as "None"
    STRUCTURED  anything else, bounded-depth pretty repr

Formatting never raises. A value whose repr blows up degrades to the
default object repr.
"""

from enum import Enum
from typing import Any, Callable, Dict, List

from rich.pretty import pretty_repr


DEFAULT_MAX_DEPTH = 3
DEFAULT_MAX_WIDTH = 80


class InputKind(Enum):
    TEXT = "text"
    ABSENT = "absent"
    STRUCTURED = "structured"


def classify(value: Any) -> InputKind:
    """Resolve the kind of a value."""
    if isinstance(value, str):
        return InputKind.TEXT
    if value is None:
        return InputKind.ABSENT
    return InputKind.STRUCTURED


def _format_text(value: str, max_depth: int, max_width: int) -> str:
    return value


def _format_absent(value: None, max_depth: int, max_width: int) -> str:
    return "None"


def _format_structured(value: Any, max_depth: int, max_width: int) -> str:
    try:
        return pretty_repr(value, max_width=max_width,
                           max_depth=max_depth).strip()
    except Exception:
        return object.__repr__(value)


_STRATEGIES: Dict[InputKind, Callable[[Any, int, int], str]] = {
    InputKind.TEXT: _format_text,
    InputKind.ABSENT: _format_absent,
    InputKind.STRUCTURED: _format_structured,
}


def format_value(value: Any, max_depth: int = DEFAULT_MAX_DEPTH,
                 max_width: int = DEFAULT_MAX_WIDTH) -> str:
    """Format a single value for terminal display.

    Structured values wider than ``max_width`` are spread over several lines.
    """
    return _STRATEGIES[classify(value)](value, max_depth, max_width)


def inspect(*args: Any, max_depth: int = DEFAULT_MAX_DEPTH,
            max_width: int = DEFAULT_MAX_WIDTH) -> List[str]:
    """Format every argument, keeping their order."""
    return [format_value(a, max_depth, max_width) for a in args]
