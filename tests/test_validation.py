# ==============================================================================
# File: tests/test_validation.py
# Purpose: Unit tests for config validation, grid clamping and colour parsing.
# ==============================================================================
import unittest
import numpy as np
import warnings

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

from terrain_generator.core.colors import hex_to_rgba, parse_color
from terrain_generator.core.errors import ConfigurationError, DegenerateInputWarning
from terrain_generator.core.types import ColorBand, GridSpec, HostTransform, NoiseConfig
from terrain_generator.core.validation import (
    clamp_grid,
    validate_bands,
    validate_grid,
    validate_host,
    validate_noise,
)


class TestValidation(unittest.TestCase):

    def test_grid_limits(self):
        print("\n[TEST] Running test_grid_limits...")
        validate_grid(GridSpec(1, 1))
        validate_grid(GridSpec(65534, 65534))
        with self.assertRaises(ConfigurationError):
            validate_grid(GridSpec(65535, 65535))
        with self.assertRaises(ConfigurationError):
            validate_grid(GridSpec(-1, 4))
        print("[TEST] test_grid_limits: OK")

    def test_clamp_grid(self):
        with self.assertLogs("terrain_generator.core.validation", level="WARNING"):
            self.assertEqual(clamp_grid(0, 12), GridSpec(1, 1))
        self.assertEqual(clamp_grid(12, 5), GridSpec(12, 5))
        with self.assertRaises(ConfigurationError):
            clamp_grid(100000, 100000)

    def test_noise_rules(self):
        validate_noise(NoiseConfig(frequency=0.0))
        validate_noise(NoiseConfig(frequency=0.5, basis="simplex"))
        for bad in (NoiseConfig(octaves=0), NoiseConfig(frequency=-0.1),
                    NoiseConfig(frequency=float("inf")), NoiseConfig(basis="value"),
                    NoiseConfig(offset=(0.0, float("nan")))):
            with self.assertRaises(ConfigurationError):
                validate_noise(bad)

    def test_empty_bands_warning(self):
        with self.assertWarns(DegenerateInputWarning):
            validate_bands([])
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            validate_bands([], warn_empty=False)
            validate_bands([ColorBand(0.1, (1.0, 1.0, 1.0, 1.0))])

    def test_colors(self):
        self.assertEqual(hex_to_rgba("#FF0000"), (1.0, 0.0, 0.0, 1.0))
        self.assertEqual(hex_to_rgba("00FF0080")[3], 128 / 255.0)
        self.assertEqual(parse_color([0.2, 0.4, 0.6]), (0.2, 0.4, 0.6, 1.0))
        with self.assertRaises(ValueError):
            parse_color("#FFF")
        with self.assertRaises(ValueError):
            parse_color([1.0, 2.0])


    def test_grid_size_types(self):
        print("\n[TEST] Running test_grid_size_types...")
        # int32 products would wrap around below the uint32 limit
        big = GridSpec(np.int32(70000), np.int32(70000))
        self.assertEqual(big.vertex_count, 70001 * 70001)
        with self.assertRaises(ConfigurationError):
            validate_grid(big)
        validate_grid(GridSpec(np.int64(64), np.uint16(32)))
        for bad in (GridSpec(2.5, 3), GridSpec(4, 3.0), GridSpec(True, 2), GridSpec("8", 8)):
            with self.assertRaises(ConfigurationError, msg=str(bad)):
                validate_grid(bad)
        print("[TEST] test_grid_size_types: OK")

    def test_host_transform(self):
        validate_host(HostTransform())
        validate_host(HostTransform(position=(1.0, -2.0, 3.0), rotation=(0.0, 0.70710678, 0.0, 0.70710678),
                                    up=(0.0, 0.0, 5.0)))
        for bad in (
            HostTransform(up=(0.0, 0.0, 0.0)),
            HostTransform(up=(1.0, 0.0)),
            HostTransform(rotation=(0.0, 0.0, 0.0, 0.5)),
            HostTransform(rotation=(float("nan"), 0.0, 0.0, 1.0)),
            HostTransform(position=(float("nan"), 0.0, 0.0)),
        ):
            with self.assertRaises(ConfigurationError, msg=str(bad)):
                validate_host(bad)


if __name__ == '__main__':
    unittest.main()
