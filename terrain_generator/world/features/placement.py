# terrain_generator/world/features/placement.py
from __future__ import annotations

import logging
from typing import List, Sequence

import numpy as np

from ...core.constants import IDENTITY_ROTATION, MIN_VECTOR_LENGTH
from ...core.errors import ConfigurationError
from ...core.types import HostTransform, MeshBuffers, PlacementRequest, RandomSource, SpawnRule
from ...core.validation import validate_host
from ...numerics.rotation import from_to_rotation, quat_multiply

logger = logging.getLogger(__name__)


class PlacementEngine:
    """
    Scatters world elements over the mesh vertices, at most one per vertex.

    Vertices are visited in ascending index order and rules in configuration
    order. A rule qualifies when spawn_level[0] < raw height < spawn_level[1];
    a qualifying rule consumes exactly one draw from the random source and
    claims the vertex when the draw is below its spawn_frequency. The first
    claim wins; a failed draw is not retried within the pass.
    """

    def __init__(self, rules: Sequence[SpawnRule], rng: RandomSource):
        self.rules = tuple(rules)
        self.rng = rng
        self.occupancy: np.ndarray | None = None

    def _check_inputs(self, mesh: MeshBuffers, normals: np.ndarray | None,
                      host: HostTransform) -> None:
        """Everything that could fail mid-pass is rejected here, before the first draw."""
        validate_host(host)

        if normals is None:
            for i, rule in enumerate(self.rules):
                if rule.rotate_on_normal:
                    raise ConfigurationError(
                        f"world_elements[{i}] rotates on the surface normal but no normals were supplied"
                    )
            return

        if np.shape(normals) != (mesh.vertex_count, 3):
            raise ConfigurationError(
                f"normals must have shape ({mesh.vertex_count}, 3), got {np.shape(normals)}"
            )
        n = np.asarray(normals, dtype=np.float64)
        bad = ~np.isfinite(n).all(axis=1) | (np.linalg.norm(n, axis=1) < MIN_VECTOR_LENGTH)
        if bad.any():
            raise ConfigurationError(
                f"{int(bad.sum())} normals are zero-length or non-finite (first at vertex {int(np.argmax(bad))})"
            )

    def _orientation(self, rule: SpawnRule, normal, host: HostTransform):
        if not rule.rotate_on_normal:
            return IDENTITY_ROTATION
        return quat_multiply(from_to_rotation(host.up, normal), host.rotation)

    def place(self, mesh: MeshBuffers, normals: np.ndarray | None = None,
              host: HostTransform | None = None) -> List[PlacementRequest]:
        host = host or HostTransform()
        self._check_inputs(mesh, normals, host)

        # fresh mask every pass
        occupancy = np.zeros(mesh.vertex_count, dtype=bool)
        self.occupancy = occupancy
        requests: List[PlacementRequest] = []
        if not self.rules:
            return requests

        raw = np.asarray(mesh.raw_heights, dtype=np.float64)
        lo = np.array([r.spawn_level[0] for r in self.rules], dtype=np.float64)
        hi = np.array([r.spawn_level[1] for r in self.rules], dtype=np.float64)
        eligible = (raw[:, None] > lo[None, :]) & (raw[:, None] < hi[None, :])

        origin = np.asarray(host.position, dtype=np.float64)
        for vertex in np.flatnonzero(eligible.any(axis=1)):
            for rule_index in np.flatnonzero(eligible[vertex]):
                rule = self.rules[rule_index]
                if self.rng.random() >= rule.spawn_frequency:
                    continue

                occupancy[vertex] = True
                pos = origin + mesh.positions[vertex].astype(np.float64)
                normal = normals[vertex] if normals is not None else None
                requests.append(PlacementRequest(
                    vertex_index=int(vertex),
                    world_position=(float(pos[0]), float(pos[1]), float(pos[2])),
                    orientation=self._orientation(rule, normal, host),
                    rule_index=int(rule_index),
                    prototype_id=rule.prototype_id,
                ))
                break

        logger.debug("Placed %d elements on %d vertices (%d rules).",
                     len(requests), mesh.vertex_count, len(self.rules))
        return requests


def place(mesh: MeshBuffers, spawn_rules: Sequence[SpawnRule], rng: RandomSource,
          normals: np.ndarray | None = None,
          host: HostTransform | None = None) -> List[PlacementRequest]:
    return PlacementEngine(spawn_rules, rng).place(mesh, normals, host)
