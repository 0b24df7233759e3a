# File: run_generator.py
from __future__ import annotations
import argparse
import logging
import pathlib
import sys

ROOT = pathlib.Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from terrain_generator.core.errors import TerrainError
from terrain_generator.core.export import (
    write_color_preview,
    write_heightmap_r16,
    write_mesh_npz,
    write_placements_json,
)
from terrain_generator.core.preset import available_presets, load_preset
from terrain_generator.pipeline import make_rng, regenerate
from terrain_generator.setup_logging import setup_logging

logger = logging.getLogger("terrain_generator.run")


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Generate a terrain mesh and its decorations.")
    ap.add_argument("--preset", default="terrain/default", help="preset id or path to a JSON preset")
    ap.add_argument("--seed", type=int, default=None, help="overrides the preset noise seed and seeds placement")
    ap.add_argument("--out", default="artifacts/terrain", help="output folder")
    ap.add_argument("--verbose", action="store_true")
    ap.add_argument("--list", action="store_true", help="print the known preset ids and exit")
    args = ap.parse_args(argv)

    if args.list:
        for preset_id in available_presets():
            print(preset_id)
        return 0

    out_dir = pathlib.Path(args.out)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO, out_dir / "generator.log")

    try:
        overrides = {"noise": {"seed": args.seed}} if args.seed is not None else None
        config = load_preset(args.preset, overrides)
        seed = args.seed if args.seed is not None else config.noise.seed
        result = regenerate(config, make_rng(seed))
    except TerrainError as e:
        logger.error("Generation failed: %s", e)
        return 1

    write_mesh_npz(str(out_dir / "mesh.npz"), result.mesh, result.normals)
    write_placements_json(str(out_dir / "placements.json"), result.placements)
    write_heightmap_r16(str(out_dir / "heightmap.r16"), result.mesh, config.grid, config.shape.height_range)
    write_color_preview(str(out_dir / "preview.png"), result.mesh, config.grid)

    for rule_index, count in result.metrics["placements_per_rule"].items():
        logger.info("  rule %d (%s): %d placements",
                    rule_index, config.spawn_rules[rule_index].prototype_id, count)
    logger.info("Artifacts written to %s", out_dir.resolve())
    return 0


if __name__ == "__main__":
    sys.exit(main())
