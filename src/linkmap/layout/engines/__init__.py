"""Layout engines registry.

Available engines:
- force: Force-directed simulation (repulsion, springs, gravity, cooling)
"""

from linkmap.layout.engines.base import LayoutEngine
from linkmap.layout.engines.force import ForceLayoutConfig, ForceLayoutEngine

# Engine registry
ENGINES = {
    "force": ForceLayoutEngine,
}


def get_engine(name: str) -> type:
    """Get layout engine class by name.

    Args:
        name: Engine name ('force')

    Returns:
        Layout engine class

    Raises:
        ValueError: If engine not found
    """
    if name not in ENGINES:
        raise ValueError(f"Unknown layout engine: {name}. Available: {list(ENGINES.keys())}")
    return ENGINES[name]


__all__ = [
    "LayoutEngine",
    "ForceLayoutConfig",
    "ForceLayoutEngine",
    "ENGINES",
    "get_engine",
]
