"""Entry point: ``python -m procgen``.

Supports two modes:
  - ``python -m procgen serve``     → Launch the FastAPI generation server (default)
  - ``python -m procgen generate``  → Generate one world and dump it as JSON
"""

from __future__ import annotations

import argparse
import logging
import sys

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Deterministic procedural content generator")
    sub = parser.add_subparsers(dest="command")

    # --- Server mode (default) ---
    srv = sub.add_parser("serve", help="Start the FastAPI generation server (default)")
    srv.add_argument("--host", type=str, default="127.0.0.1")
    srv.add_argument("--port", type=int, default=8000)
    srv.add_argument("--seed", type=int, default=42)
    srv.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])

    # --- One-shot world dump ---
    gen = sub.add_parser("generate", help="Generate a world and write it as JSON")
    gen.add_argument("--seed", type=int, default=42)
    gen.add_argument("--world-name", type=str, default=None)
    gen.add_argument("--regions", type=int, default=3)
    gen.add_argument("--min-locations", type=int, default=3)
    gen.add_argument("--max-locations", type=int, default=6)
    gen.add_argument("--with-content", action="store_true",
                     help="Also generate cached location content (items, dialogue, shops) for every settlement")
    gen.add_argument("--out", type=str, default=None, help="Output file (stdout when omitted)")
    gen.add_argument("--log-level", type=str, default="WARNING", choices=["DEBUG", "INFO", "WARNING"])

    return parser


def _run_server(args: argparse.Namespace) -> None:
    import uvicorn

    from procgen.api.app import create_app
    from procgen.config import GenerationConfig

    config = GenerationConfig(world_seed=args.seed, log_level=args.log_level)
    app = create_app(config)
    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level.lower())


def _run_generate(args: argparse.Namespace) -> None:
    from procgen.config import GenerationConfig
    from procgen.core.context import LocationRef
    from procgen.data import build_default_registry
    from procgen.generators.world import WorldGenerator
    from procgen.systems.location_manager import ProceduralLocationManager
    from procgen.utils.export import WorldExporter, world_to_json
    from procgen.utils.logging import setup_logging

    setup_logging(args.log_level, stream=sys.stderr)
    if args.min_locations > args.max_locations:
        raise SystemExit("--min-locations must not exceed --max-locations")

    config = GenerationConfig(
        world_seed=args.seed,
        region_count=args.regions,
        min_locations_per_region=args.min_locations,
        max_locations_per_region=args.max_locations,
        log_level=args.log_level,
    )
    registry = build_default_registry()
    generator = WorldGenerator(args.seed, world_name=args.world_name, config=config)
    generator.initialize(registry)
    world = generator.generate_world()

    if args.out is None and not args.with_content:
        sys.stdout.write(world_to_json(world) + "\n")
        return

    exporter = WorldExporter(args.out or "world.json", world)
    if args.with_content:
        manager = ProceduralLocationManager(registry, world.seed, config)
        for location in world.iter_locations():
            ref = LocationRef(id=location.id, name=location.name, type=location.type, tags=tuple(location.tags))
            exporter.add_location_content(manager.generate_location_content(ref))
    path = exporter.flush()
    logger.info("Done. World written to %s", path)


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    # Default to serve mode if no subcommand given
    if args.command is None:
        args = parser.parse_args(["serve"])
    if args.command == "serve":
        _run_server(args)
    elif args.command == "generate":
        _run_generate(args)


if __name__ == "__main__":
    main()
