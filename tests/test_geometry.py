# ==============================================================================
# File: tests/test_geometry.py
# Purpose: Unit tests for vertex normals and quaternion helpers.
# ==============================================================================
import unittest
import numpy as np

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

from terrain_generator.core.types import GridSpec
from terrain_generator.numerics.normals import compute_vertex_normals
from terrain_generator.numerics.rotation import (
    from_to_rotation,
    quat_angle_deg,
    quat_multiply,
    rotate_vector,
)
from terrain_generator.world.mesh_builder import grid_triangles


def _grid_positions(grid, height_fn):
    z, x = np.mgrid[0:grid.vertices_z, 0:grid.vertices_x]
    x = x.ravel().astype(np.float64)
    z = z.ravel().astype(np.float64)
    return np.stack([x, height_fn(x, z), z], axis=1).astype(np.float32)


class TestNormals(unittest.TestCase):

    def test_flat_grid_points_up(self):
        print("\n[TEST] Running test_flat_grid_points_up...")
        grid = GridSpec(5, 4)
        normals = compute_vertex_normals(_grid_positions(grid, lambda x, z: 0.0 * x), grid_triangles(grid))
        self.assertEqual(normals.shape, (grid.vertex_count, 3))
        np.testing.assert_allclose(normals, np.tile([0.0, 1.0, 0.0], (grid.vertex_count, 1)), atol=1e-6)
        print("[TEST] test_flat_grid_points_up: OK")

    def test_slope_normal(self):
        grid = GridSpec(4, 4)
        # y = x  ->  normal (-1, 1, 0)/sqrt(2)
        normals = compute_vertex_normals(_grid_positions(grid, lambda x, z: x), grid_triangles(grid))
        expected = np.array([-1.0, 1.0, 0.0]) / np.sqrt(2.0)
        np.testing.assert_allclose(normals, np.tile(expected, (grid.vertex_count, 1)), atol=1e-5)

    def test_unit_length(self):
        grid = GridSpec(8, 8)
        pos = _grid_positions(grid, lambda x, z: np.sin(x * 0.7) * 3.0 + np.cos(z * 0.4))
        normals = compute_vertex_normals(pos, grid_triangles(grid))
        np.testing.assert_allclose(np.linalg.norm(normals, axis=1), 1.0, atol=1e-5)
        self.assertTrue(np.all(normals[:, 1] > 0.0))


class TestRotation(unittest.TestCase):

    def test_from_to_maps_direction(self):
        for target in ([1.0, 0.0, 0.0], [0.0, 0.0, -1.0], [0.3, 0.8, -0.2], [0.0, -1.0, 0.0]):
            q = from_to_rotation((0.0, 1.0, 0.0), target)
            t = np.asarray(target) / np.linalg.norm(target)
            np.testing.assert_allclose(rotate_vector(q, (0.0, 1.0, 0.0)), t, atol=1e-9)

    def test_parallel_is_identity(self):
        self.assertEqual(from_to_rotation((0, 2, 0), (0, 1, 0)), (0.0, 0.0, 0.0, 1.0))

    def test_antiparallel_is_half_turn(self):
        q = from_to_rotation((0, 1, 0), (0, -1, 0))
        self.assertAlmostEqual(quat_angle_deg(q), 180.0)

    def test_multiply_composes(self):
        qa = from_to_rotation((1, 0, 0), (0, 1, 0))
        qb = from_to_rotation((0, 1, 0), (0, 0, 1))
        # apply qa first, then qb
        v = rotate_vector(quat_multiply(qb, qa), (1.0, 0.0, 0.0))
        np.testing.assert_allclose(v, (0.0, 0.0, 1.0), atol=1e-9)

    def test_zero_vector_rejected(self):
        with self.assertRaises(ValueError):
            from_to_rotation((0, 0, 0), (0, 1, 0))


if __name__ == '__main__':
    unittest.main()
