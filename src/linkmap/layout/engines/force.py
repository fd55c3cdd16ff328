"""Force-directed layout engine.

Places link-graph nodes with a small physical simulation:

1. Nodes are seeded on a circle around the canvas center.
2. Node IDs are indexed so edges resolve to array positions once.
3. For a fixed number of iterations, every node pair repels
   (inverse-square), every edge pulls its endpoints together (spring),
   every node is pulled towards the center, and velocities are damped
   and integrated. Forces are scaled by a linearly decreasing ``alpha``
   so the system cools down and comes to rest.
4. The input nodes are returned extended with final position and velocity.

Repulsion is O(N^2) per iteration, so the engine suits graphs of a few
hundred nodes. No randomness is involved: identical input gives identical
output.
"""

import logging
import math
import numbers
from typing import Any, Dict, Iterable, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from linkmap.config.settings import force_overrides
from linkmap.layout.engines.base import (
    EdgeLike,
    LayoutEngine,
    NodeLike,
    coerce_edges,
    coerce_nodes,
)
from linkmap.models.graph_metadata import GraphEdge, GraphNode, SimNode

logger = logging.getLogger(__name__)


class ForceLayoutConfig(BaseModel):
    """Parameters of the force simulation.

    Defaults are the production visual-tuning values for a 1200x800 canvas.
    Tests can pass small, fast-converging parameter sets instead.
    """

    model_config = ConfigDict(frozen=True)

    iterations: int = Field(default=120, ge=0, description="Iteration budget")
    repulsion_strength: float = Field(
        default=5000.0, ge=0, description="Pairwise inverse-square repulsion constant"
    )
    attraction_strength: float = Field(
        default=0.008, ge=0, description="Edge spring constant"
    )
    center_gravity: float = Field(
        default=0.01, ge=0, description="Pull towards the canvas center"
    )
    damping: float = Field(
        default=0.92, ge=0, le=1, description="Velocity multiplier per iteration"
    )
    min_distance: float = Field(
        default=40.0, gt=0, description="Distance floor for repulsion"
    )
    edge_min_distance: float = Field(
        default=1.0, gt=0, description="Distance floor for edge attraction"
    )
    padding: float = Field(
        default=30.0, ge=0, description="Minimum distance from the canvas border"
    )
    initial_radius_ratio: float = Field(
        default=0.35, ge=0, description="Seed circle radius as a share of min(width, height)"
    )
    energy_epsilon: Optional[float] = Field(
        default=None,
        gt=0,
        description="Stop once total kinetic energy drops below this (None: never)",
    )

    @classmethod
    def from_settings(cls, **kwargs: Any) -> "ForceLayoutConfig":
        """Build a config from environment settings; kwargs take precedence."""
        return cls(**{**force_overrides(), **kwargs})


class ForceLayoutEngine(LayoutEngine):
    """Force-directed layout with repulsion, springs, gravity and cooling."""

    def __init__(self, config: Optional[ForceLayoutConfig] = None):
        """Initialize force layout engine.

        Args:
            config: Simulation parameters (reference values if None)
        """
        self._config = config or ForceLayoutConfig()

    @property
    def name(self) -> str:
        return "force"

    @property
    def config(self) -> ForceLayoutConfig:
        return self._config

    def layout(
        self,
        nodes: Iterable[NodeLike],
        edges: Iterable[EdgeLike],
        width: float,
        height: float,
    ) -> List[SimNode]:
        """Compute positions for every node.

        Args:
            nodes: Graph nodes; order is preserved in the output
            edges: Graph edges; edges with unknown endpoints are ignored
            width: Canvas width (> 0)
            height: Canvas height (> 0)

        Returns:
            One SimNode per input node, in input order

        Raises:
            ValueError: If width or height is not a positive finite number
        """
        width = _check_dimension("width", width)
        height = _check_dimension("height", height)

        graph_nodes = coerce_nodes(nodes)
        if not graph_nodes:
            return []

        config = self._config
        xs, ys = self._initial_positions(len(graph_nodes), width, height)
        vxs = [0.0] * len(graph_nodes)
        vys = [0.0] * len(graph_nodes)

        index = self._build_index(graph_nodes)
        links = self._resolve_edges(coerce_edges(edges), index)

        logger.debug(
            f"Force layout: {len(graph_nodes)} nodes, {len(links)} links, "
            f"{config.iterations} iterations on {width}x{height}"
        )

        cx = width / 2
        cy = height / 2
        iterations = config.iterations
        for iteration in range(iterations):
            # Cooling schedule
            alpha = 1 - iteration / iterations

            self._apply_repulsion(xs, ys, vxs, vys, alpha)
            self._apply_attraction(links, xs, ys, vxs, vys, alpha)
            self._apply_gravity(xs, ys, vxs, vys, cx, cy, alpha)
            energy = self._integrate(xs, ys, vxs, vys, width, height)

            if config.energy_epsilon is not None and energy < config.energy_epsilon:
                logger.debug(
                    f"Force layout settled after {iteration + 1} iterations "
                    f"(energy {energy:.6f})"
                )
                break

        return [
            SimNode.from_node(node, xs[i], ys[i], vxs[i], vys[i])
            for i, node in enumerate(graph_nodes)
        ]

    def _initial_positions(
        self, count: int, width: float, height: float
    ) -> Tuple[List[float], List[float]]:
        """Spread ``count`` nodes evenly on a circle around the canvas center.

        Seeds are clamped into the padded canvas like integrated positions.
        """
        cx = width / 2
        cy = height / 2
        radius = min(width, height) * self._config.initial_radius_ratio
        padding = self._config.padding
        max_x = width - padding
        max_y = height - padding

        xs = []
        ys = []
        for i in range(count):
            angle = 2 * math.pi * i / count
            xs.append(max(padding, min(max_x, cx + radius * math.cos(angle))))
            ys.append(max(padding, min(max_y, cy + radius * math.sin(angle))))
        return xs, ys

    def _build_index(self, nodes: List[GraphNode]) -> Dict[str, int]:
        """Map node ID to array index. A repeated ID maps to its last node."""
        return {node.id: i for i, node in enumerate(nodes)}

    def _resolve_edges(
        self, edges: List[GraphEdge], index: Dict[str, int]
    ) -> List[Tuple[int, int]]:
        """Resolve edge endpoints to (source, target) indices, in edge order."""
        links = []
        skipped = 0
        for edge in edges:
            source = index.get(edge.source)
            target = index.get(edge.target)
            if source is None or target is None:
                skipped += 1
                continue
            links.append((source, target))

        if skipped:
            logger.debug(f"Ignoring {skipped} edge(s) with unknown endpoints")
        return links

    def _apply_repulsion(
        self,
        xs: List[float],
        ys: List[float],
        vxs: List[float],
        vys: List[float],
        alpha: float,
    ) -> None:
        """Push every pair of nodes apart (Coulomb's law)."""
        strength = self._config.repulsion_strength * alpha
        min_distance = self._config.min_distance
        count = len(xs)

        for i in range(count):
            for j in range(i + 1, count):
                dx = xs[j] - xs[i]
                dy = ys[j] - ys[i]
                dist = math.sqrt(dx * dx + dy * dy)
                if dist < min_distance:
                    dist = min_distance

                force = strength / (dist * dist)
                fx = dx / dist * force
                fy = dy / dist * force

                vxs[i] -= fx
                vys[i] -= fy
                vxs[j] += fx
                vys[j] += fy

    def _apply_attraction(
        self,
        links: List[Tuple[int, int]],
        xs: List[float],
        ys: List[float],
        vxs: List[float],
        vys: List[float],
        alpha: float,
    ) -> None:
        """Pull edge endpoints together (Hooke's law)."""
        strength = self._config.attraction_strength * alpha
        min_distance = self._config.edge_min_distance

        for source, target in links:
            dx = xs[target] - xs[source]
            dy = ys[target] - ys[source]
            dist = math.sqrt(dx * dx + dy * dy)
            if dist < min_distance:
                dist = min_distance

            force = strength * dist
            fx = dx / dist * force
            fy = dy / dist * force

            vxs[source] += fx
            vys[source] += fy
            vxs[target] -= fx
            vys[target] -= fy

    def _apply_gravity(
        self,
        xs: List[float],
        ys: List[float],
        vxs: List[float],
        vys: List[float],
        cx: float,
        cy: float,
        alpha: float,
    ) -> None:
        """Pull every node towards the canvas center."""
        gravity = self._config.center_gravity * alpha
        for i in range(len(xs)):
            vxs[i] += (cx - xs[i]) * gravity
            vys[i] += (cy - ys[i]) * gravity

    def _integrate(
        self,
        xs: List[float],
        ys: List[float],
        vxs: List[float],
        vys: List[float],
        width: float,
        height: float,
    ) -> float:
        """Damp velocities, move nodes and clamp them into the canvas.

        Returns:
            Total kinetic energy (sum of squared velocities) after damping
        """
        damping = self._config.damping
        padding = self._config.padding
        max_x = width - padding
        max_y = height - padding

        energy = 0.0
        for i in range(len(xs)):
            vxs[i] *= damping
            vys[i] *= damping
            xs[i] = max(padding, min(max_x, xs[i] + vxs[i]))
            ys[i] = max(padding, min(max_y, ys[i] + vys[i]))
            energy += vxs[i] * vxs[i] + vys[i] * vys[i]
        return energy


def _check_dimension(label: str, value: float) -> float:
    if (
        isinstance(value, bool)
        or not isinstance(value, numbers.Real)
        or not math.isfinite(value)
        or value <= 0
    ):
        raise ValueError(f"Canvas {label} must be a positive finite number, got {value!r}")
    return float(value)
