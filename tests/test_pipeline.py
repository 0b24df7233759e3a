# ==============================================================================
# File: tests/test_pipeline.py
# Purpose: Integration tests for a full regeneration pass.
# ==============================================================================
import unittest
import warnings
import numpy as np

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

from terrain_generator import (
    ColorBand,
    ConfigurationError,
    DegenerateInputWarning,
    GenerationConfig,
    GridSpec,
    HostTransform,
    ManagedInstanceSet,
    NoiseConfig,
    ShapeConfig,
    SpawnRule,
    TerrainType,
    make_rng,
    regenerate,
)
from terrain_generator.core.constants import MAGENTA


def _config(**kw):
    base = dict(
        grid=GridSpec(24, 16),
        noise=NoiseConfig(frequency=0.07, octaves=3, seed=21),
        shape=ShapeConfig(policy=TerrainType.TERRACE, terrace_count=8, height_range=(0.0, 40.0)),
        bands=(ColorBand(0.0, (0.1, 0.2, 0.8, 1.0)), ColorBand(0.5, (0.3, 0.7, 0.2, 1.0))),
        spawn_rules=(
            SpawnRule("tree", (0.4, 0.6), 0.3),
            SpawnRule("rock", (0.0, 1.0), 0.1, rotate_on_normal=True),
        ),
        id="test/pipeline",
    )
    base.update(kw)
    return GenerationConfig(**base)


class TestRegenerate(unittest.TestCase):

    def test_idempotent_with_same_seed(self):
        print("\n[TEST] Running test_idempotent_with_same_seed...")
        cfg = _config()
        a = regenerate(cfg, make_rng(5))
        b = regenerate(cfg, seed=5)
        np.testing.assert_array_equal(a.mesh.positions, b.mesh.positions)
        np.testing.assert_array_equal(a.mesh.colors, b.mesh.colors)
        np.testing.assert_array_equal(a.mesh.triangles, b.mesh.triangles)
        self.assertEqual(a.placements, b.placements)
        self.assertGreater(len(a.placements), 0)
        print("[TEST] test_idempotent_with_same_seed: OK")

    def test_always_on_rule_places_on_every_vertex(self):
        cfg = _config(spawn_rules=(SpawnRule("grass", (-10.0, 10.0), 1.0),))
        result = regenerate(cfg, seed=0)
        self.assertEqual(len(result.placements), cfg.grid.vertex_count)
        self.assertTrue(result.occupancy.all())

    def test_metrics(self):
        cfg = _config()
        result = regenerate(cfg, seed=1)
        m = result.metrics
        self.assertEqual(m["vertex_count"], 25 * 17)
        self.assertEqual(m["triangle_count"], 24 * 16 * 2)
        self.assertEqual(sum(m["placements_per_rule"].values()), len(result.placements))
        self.assertEqual(set(m["placements_per_rule"]), {0, 1})
        for key in ("mesh_ms", "normals_ms", "placement_ms", "total_ms"):
            self.assertGreaterEqual(m["gen_timings_ms"][key], 0.0)

    def test_normals_provider_is_used(self):
        cfg = _config()
        calls = []

        def provider(mesh):
            calls.append(mesh.vertex_count)
            n = np.zeros((mesh.vertex_count, 3), dtype=np.float32)
            n[:, 1] = 1.0
            return n

        result = regenerate(cfg, seed=2, normals_provider=provider)
        self.assertEqual(calls, [cfg.grid.vertex_count])
        for p in result.placements:
            self.assertAlmostEqual(p.orientation[3], 1.0)

    def test_invalid_config_is_rejected_before_building(self):
        for bad in (
            _config(noise=NoiseConfig(octaves=0)),
            _config(noise=NoiseConfig(frequency=0.9)),
            _config(grid=GridSpec(70000, 70000)),
            _config(shape=ShapeConfig(terrace_count=0)),
            _config(bands=(ColorBand(float("nan"), (1.0, 1.0, 1.0, 1.0)),)),
            _config(spawn_rules=(SpawnRule("x", (0.0, 1.0), 1.5),)),
        ):
            with self.assertRaises(ConfigurationError):
                regenerate(bad, seed=0)

    def test_degenerate_inputs_warn(self):
        cfg = _config(bands=(), spawn_rules=())
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            result = regenerate(cfg, seed=0)
        kinds = [w.category for w in caught]
        self.assertEqual(kinds.count(DegenerateInputWarning), 2)
        self.assertEqual(result.placements, [])
        np.testing.assert_array_equal(result.mesh.colors[0], np.float32(MAGENTA))

    def test_host_replaces_instances_between_passes(self):
        cfg = _config()
        live = set()
        destroyed = []
        counter = iter(range(10 ** 6))

        def spawn(request):
            handle = next(counter)
            live.add(handle)
            return handle

        def destroy(handle):
            live.discard(handle)
            destroyed.append(handle)

        instances = ManagedInstanceSet()
        first = regenerate(cfg, seed=3)
        instances.replace_all(first.placements, spawn, destroy)
        self.assertEqual(len(live), len(first.placements))

        second = regenerate(cfg, seed=4)
        instances.replace_all(second.placements, spawn, destroy)
        self.assertEqual(len(destroyed), len(first.placements))
        self.assertEqual(len(live), len(second.placements))
        self.assertEqual(len(instances), len(second.placements))


    def test_bad_host_rejected_before_building(self):
        calls = []

        def provider(mesh):
            calls.append(mesh.vertex_count)
            return np.tile(np.float32([0.0, 1.0, 0.0]), (mesh.vertex_count, 1))

        with self.assertRaises(ConfigurationError):
            regenerate(_config(), seed=0, normals_provider=provider, host=HostTransform(up=(0.0, 0.0, 0.0)))
        self.assertEqual(calls, [])

    def test_zero_normal_from_provider_is_configuration_error(self):
        def provider(mesh):
            n = np.tile(np.float32([0.0, 1.0, 0.0]), (mesh.vertex_count, 1))
            n[3] = 0.0
            return n

        with self.assertRaises(ConfigurationError):
            regenerate(_config(), seed=0, normals_provider=provider)

    def test_numpy_int32_oversize_grid_rejected(self):
        big = GridSpec(np.int32(70000), np.int32(70000))
        with self.assertRaises(ConfigurationError):
            regenerate(_config(grid=big), seed=0)


if __name__ == '__main__':
    unittest.main()
