"""
Runtime configuration for the gutility geometry core.

The numerical policy of the library is exact-equality based: a matrix is
singular only when its determinant is exactly zero and a triangle is degenerate
only when its doubled signed area is exactly zero. Both thresholds can be
raised to get a stricter, epsilon-tolerant mode.

Usage:
    from gutility import get_config, set_config

    set_config(singular_epsilon=1e-12)
    ...
    reset_config()

Environment:
    GUTILITY_SINGULAR_EPSILON    default for GUtilityConfig.singular_epsilon
    GUTILITY_DEGENERATE_EPSILON  default for GUtilityConfig.degenerate_epsilon
"""

import os
import warnings
from dataclasses import dataclass, fields, replace
from typing import Optional


def _env_epsilon(name: str) -> float:
    raw = os.environ.get(name, '').strip()
    if not raw:
        return 0.0
    try:
        value = float(raw)
    except ValueError:
        warnings.warn(f"Ignoring {name}={raw!r}: not a number, using 0.0")
        return 0.0
    if value < 0.0:
        warnings.warn(f"Ignoring {name}={raw!r}: must be >= 0, using 0.0")
        return 0.0
    return value


@dataclass(frozen=True)
class GUtilityConfig:
    """
    Configuration options for the geometry core.

    Attributes:
        singular_epsilon: A matrix whose |det| is <= this value is treated as
            singular. 0.0 (default) means exactly zero.

        degenerate_epsilon: A triangle whose |doubled signed area| is <= this
            value is treated as degenerate (never contains a point, never an
            ear). 0.0 (default) rejects only exactly collinear triples.

        validate_polygons: Check triangulation input (vertex count, non-zero
            area) before sweeping. Disable only for trusted hot paths.
    """
    singular_epsilon: float = 0.0
    degenerate_epsilon: float = 0.0
    validate_polygons: bool = True

    @staticmethod
    def from_env() -> 'GUtilityConfig':
        """Build the default configuration, honouring environment overrides."""
        return GUtilityConfig(
            singular_epsilon=_env_epsilon('GUTILITY_SINGULAR_EPSILON'),
            degenerate_epsilon=_env_epsilon('GUTILITY_DEGENERATE_EPSILON'),
        )


_config = GUtilityConfig.from_env()


def get_config() -> GUtilityConfig:
    """Get the active configuration."""
    return _config


def set_config(config: Optional[GUtilityConfig] = None, **overrides) -> GUtilityConfig:
    """
    Replace the active configuration.

    Args:
        config: A full configuration to install. Defaults to the active one.
        **overrides: Individual fields to change, e.g. singular_epsilon=1e-12.

    Returns:
        The configuration that was active before the call, so callers can
        restore it.
    """
    global _config
    known = {f.name for f in fields(GUtilityConfig)}
    unknown = set(overrides) - known
    if unknown:
        raise ValueError(f"Unknown config option(s): {', '.join(sorted(unknown))}")

    new_config = replace(config or _config, **overrides)
    for name in ('singular_epsilon', 'degenerate_epsilon'):
        if getattr(new_config, name) < 0.0:
            raise ValueError(f"{name} must be >= 0, got {getattr(new_config, name)}")

    previous = _config
    _config = new_config
    return previous


def reset_config() -> None:
    """Restore the default (environment-derived) configuration."""
    global _config
    _config = GUtilityConfig.from_env()
