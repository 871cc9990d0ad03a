"""
Timing markers for the geometry core.

Usage:
    from gutility.profiling import enable_profiling, get_profile_results, profile, perf_marker

    @profile
    def my_function():
        ...

    with perf_marker("my_section"):
        ...

    enable_profiling()
    my_function()
    get_profile_results()
    # {'my_function': {'count': 1, 'total_ms': 5.2, 'avg_ms': 5.2, 'min_ms': 5.2, 'max_ms': 5.2}}

Recording is off until enable_profiling() is called; a disabled marker costs
one flag check. Profiling is compiled out entirely (decorators return the
function unchanged) when:
    - Environment variable GUTILITY_NO_PROFILING=1 is set, OR
    - Python is run with optimization (-O flag, which sets __debug__=False)

Stats are kept in one process-wide table and are not locked.
"""

import os
import time
import functools
from typing import Dict, Any, Optional, Callable, Union, List

_PROFILING_COMPILED_OUT = (
    os.environ.get('GUTILITY_NO_PROFILING', '').lower() in ('1', 'true', 'yes')
    or not __debug__
)

_perf = time.perf_counter

_enabled = False

# name -> [count, total_s, min_s, max_s]
_stats: Dict[str, List[float]] = {}


def _record(name: str, elapsed: float) -> None:
    entry = _stats.get(name)
    if entry is None:
        _stats[name] = [1, elapsed, elapsed, elapsed]
        return
    entry[0] += 1
    entry[1] += elapsed
    if elapsed < entry[2]:
        entry[2] = elapsed
    if elapsed > entry[3]:
        entry[3] = elapsed


class _NoOpMarker:
    """Reusable context manager that records nothing."""
    __slots__ = ()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        return False


_NOOP_MARKER = _NoOpMarker()


class _Marker:
    __slots__ = ('name', 'start')

    def __init__(self, name: str):
        self.name = name
        self.start = 0.0

    def __enter__(self):
        self.start = _perf()
        return self

    def __exit__(self, *args):
        _record(self.name, _perf() - self.start)
        return False


def enable_profiling(enabled: bool = True) -> None:
    """Start (or stop) recording markers. No-op when profiling is compiled out."""
    global _enabled
    if not _PROFILING_COMPILED_OUT:
        _enabled = enabled


def is_profiling_enabled() -> bool:
    return _enabled


def reset_profile():
    """Reset all collected profile data."""
    _stats.clear()


def get_profile_results() -> Dict[str, Dict[str, Any]]:
    """
    Get marker statistics, in milliseconds rounded to 3 places.

    Returns:
        {'marker_name': {'count': 10, 'total_ms': 52.3, 'avg_ms': 5.23,
                         'min_ms': 4.1, 'max_ms': 7.8}}
    """
    results = {}
    for name, (count, total, low, high) in _stats.items():
        results[name] = {
            'count': count,
            'total_ms': round(total * 1000, 3),
            'avg_ms': round(total * 1000 / count, 3),
            'min_ms': round(low * 1000, 3),
            'max_ms': round(high * 1000, 3),
        }
    return results


def perf_marker(name: Optional[str] = None):
    """
    Create a context manager that times its block while profiling is enabled.

    Usage:
        with perf_marker("my_section"):
            # ... do work ...
    """
    if not _enabled:
        return _NOOP_MARKER
    return _Marker(name or "unknown")


def profile(name_or_func: Union[str, Callable, None] = None) -> Callable:
    """
    Decorator for profiling functions.

    Usage:
        @profile
        def my_function():
            ...

        @profile("custom_name")
        def my_function():
            ...
    """
    def decorator(func: Callable) -> Callable:
        if _PROFILING_COMPILED_OUT:
            return func
        marker_name = name_or_func if isinstance(name_or_func, str) else func.__name__

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            if not _enabled:
                return func(*args, **kwargs)
            start = _perf()
            try:
                return func(*args, **kwargs)
            finally:
                _record(marker_name, _perf() - start)

        return wrapper

    if callable(name_or_func):
        return decorator(name_or_func)
    return decorator
