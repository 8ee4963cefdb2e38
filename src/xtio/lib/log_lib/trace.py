"""
Function tracing decorator.

Routes trace output through the OutputManager singleton at DEBUG
severity, so tracing follows the same debugging flag as debug().
"""

import functools
import inspect
from pathlib import Path


def _short_repr(value):
    if isinstance(value, Path):
        return f"Path('{value}')"
    if isinstance(value, str) and len(value) > 50:
        return f"'{value[:47]}...'"
    if isinstance(value, (list, tuple)) and len(value) > 3:
        return f"[...{len(value)} items...]"
    return repr(value)


def trace(func):
    """Decorator to trace function calls via the OutputManager.

    Shows function entry/exit with arguments and return values when
    debugging is enabled. Exceptions are reported and re-raised.
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        # Lazy import to avoid circular dependency
        from .manager import get_output

        out = get_output()
        if not out.debugging:
            return func(*args, **kwargs)

        module = inspect.getmodule(func)
        name = f"{module.__name__ if module else 'unknown'}.{func.__name__}"

        args_repr = [_short_repr(a) for a in args]
        args_repr.extend(f"{k}={_short_repr(v)}" for k, v in kwargs.items())
        out.debug(f"[TRACE] >> {name}({', '.join(args_repr)})")

        try:
            result = func(*args, **kwargs)
        except Exception as e:
            out.debug(f"[TRACE] !! {name} raised: {type(e).__name__}: {e}")
            raise

        if result is not None:
            out.debug(f"[TRACE] << {name} returned: {_short_repr(result)}")
        return result

    return wrapper
