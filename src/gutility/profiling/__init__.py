"""
gutility profiling package.

Lightweight timing markers for the geometry core (@profile decorator,
perf_marker context manager). See profile.py for usage.
"""

from .profile import (
    enable_profiling,
    is_profiling_enabled,
    reset_profile,
    get_profile_results,
    perf_marker,
    profile,
    _PROFILING_COMPILED_OUT,
)

__all__ = [
    'enable_profiling',
    'is_profiling_enabled',
    'reset_profile',
    'get_profile_results',
    'perf_marker',
    'profile',
    '_PROFILING_COMPILED_OUT',
]
