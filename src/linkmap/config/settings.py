"""
Environment-driven settings for link-graph layout

Production visual tuning of the force simulation and of node sizing can be
changed without code changes. Every setting is optional: an unset setting
leaves the built-in default of the corresponding parameter record in place.

Usage:
    from linkmap.layout.engines.force import ForceLayoutConfig

    config = ForceLayoutConfig.from_settings()

Environment Variables:
    LINKMAP_SIM_ITERATIONS=120          - Simulation iteration budget
    LINKMAP_REPULSION_STRENGTH=5000     - Pairwise repulsion constant
    LINKMAP_ATTRACTION_STRENGTH=0.008   - Edge spring constant
    LINKMAP_CENTER_GRAVITY=0.01         - Pull towards canvas center
    LINKMAP_DAMPING=0.92                - Per-iteration velocity decay
    LINKMAP_MIN_DISTANCE=40             - Repulsion distance floor
    LINKMAP_PADDING=30                  - Canvas edge padding
    LINKMAP_NODE_MIN_RADIUS=5           - Radius of degree-0 nodes
    LINKMAP_NODE_MAX_RADIUS=20          - Radius of max-degree nodes
"""

import logging
import os
from typing import Any, Callable, Dict, Optional, Tuple

logger = logging.getLogger(__name__)


# Setting name -> (environment variable, parser)
SETTINGS_SCHEMA: Dict[str, Tuple[str, Callable[[str], Any]]] = {
    # Force simulation
    'sim_iterations': ('LINKMAP_SIM_ITERATIONS', int),
    'repulsion_strength': ('LINKMAP_REPULSION_STRENGTH', float),
    'attraction_strength': ('LINKMAP_ATTRACTION_STRENGTH', float),
    'center_gravity': ('LINKMAP_CENTER_GRAVITY', float),
    'damping': ('LINKMAP_DAMPING', float),
    'min_distance': ('LINKMAP_MIN_DISTANCE', float),
    'padding': ('LINKMAP_PADDING', float),

    # Node sizing
    'node_min_radius': ('LINKMAP_NODE_MIN_RADIUS', float),
    'node_max_radius': ('LINKMAP_NODE_MAX_RADIUS', float),
}

# Setting name -> ForceLayoutConfig field
FORCE_FIELDS: Dict[str, str] = {
    'sim_iterations': 'iterations',
    'repulsion_strength': 'repulsion_strength',
    'attraction_strength': 'attraction_strength',
    'center_gravity': 'center_gravity',
    'damping': 'damping',
    'min_distance': 'min_distance',
    'padding': 'padding',
}

# Setting name -> NodeSizing field
SIZING_FIELDS: Dict[str, str] = {
    'node_min_radius': 'min_radius',
    'node_max_radius': 'max_radius',
}

# Programmatic overrides (testing only)
_overrides: Dict[str, Any] = {}


def _check_name(name: str) -> None:
    if name not in SETTINGS_SCHEMA:
        available = ', '.join(SETTINGS_SCHEMA.keys())
        raise KeyError(
            f"Unknown setting: '{name}'. "
            f"Available settings: {available}"
        )


def get_setting(name: str) -> Optional[Any]:
    """
    Get the configured value of a setting.

    Args:
        name: Setting name (e.g., 'sim_iterations')

    Returns:
        Parsed value, or None if neither an override nor the environment
        variable is set

    Raises:
        KeyError: If setting name is not recognized
        ValueError: If the environment variable cannot be parsed

    Example:
        >>> get_setting('sim_iterations')
        None  # Default

        >>> # After: export LINKMAP_SIM_ITERATIONS=60
        >>> get_setting('sim_iterations')
        60
    """
    _check_name(name)

    if name in _overrides:
        return _overrides[name]

    env_var, parser = SETTINGS_SCHEMA[name]
    raw = os.getenv(env_var)
    if raw is None or raw.strip() == '':
        return None

    try:
        return parser(raw.strip())
    except ValueError as e:
        raise ValueError(f"Invalid value for {env_var}: {raw!r}") from e


def get_all_settings() -> Dict[str, Any]:
    """
    Get every setting that currently has a value.

    Returns:
        Dictionary of setting names to parsed values
    """
    values = {}
    for name in SETTINGS_SCHEMA:
        value = get_setting(name)
        if value is not None:
            values[name] = value
    return values


def set_setting(name: str, value: Any) -> None:
    """
    Programmatically set a setting (for testing only).

    Args:
        name: Setting name
        value: Value to use instead of the environment; None clears it

    Warning:
        This is for testing only. In production, use environment variables.
    """
    _check_name(name)

    if value is None:
        _overrides.pop(name, None)
    else:
        _overrides[name] = value


def reset_settings() -> None:
    """Drop all programmatic overrides."""
    _overrides.clear()


def _collect(fields: Dict[str, str]) -> Dict[str, Any]:
    values = {}
    for name, field in fields.items():
        value = get_setting(name)
        if value is not None:
            values[field] = value
    if values:
        logger.debug(f"Settings overrides in effect: {values}")
    return values


def force_overrides() -> Dict[str, Any]:
    """ForceLayoutConfig keyword arguments for every configured setting."""
    return _collect(FORCE_FIELDS)


def sizing_overrides() -> Dict[str, Any]:
    """NodeSizing keyword arguments for every configured setting."""
    return _collect(SIZING_FIELDS)
