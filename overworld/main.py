"""Overworld - procedural world generation from a seed."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv
from rich.console import Console
from rich.text import Text

from .config import ConfigError, WorldGenConfig, load_config
from .core.biome import tile_color
from .core.types import ChunkCoord
from .generation.chunks import Chunk, ChunkBuilder
from .generation.layout import LayoutGenerationError, generate_layout
from .generation.render import render_layout, render_world_map
from .logging_config import get_logger, setup_logging

logger = get_logger(__name__)

console = Console()


def chunk_text(chunk: Chunk, symbol: str = "██") -> Text:
    """Colored block rendering of a chunk, north at the top."""
    text = Text()
    rows = chunk.rows()
    for local_y in reversed(range(chunk.height)):
        for tile in rows[local_y]:
            r, g, b, _ = tile_color(tile)
            text.append(symbol, style=f"rgb({r},{g},{b})")
        text.append("\n")
    return text


def run_map(config: WorldGenConfig, args: argparse.Namespace) -> int:
    """Render the chunks around a center chunk to a PNG."""
    world = config.build_world()
    out = args.out or config.data_dir / f"world_{config.seed}.png"
    out.parent.mkdir(parents=True, exist_ok=True)

    print(f"Rendering world map (seed={config.seed}, radius={args.radius} chunks)...")
    image = render_world_map(
        world,
        config.chunks.width,
        config.chunks.height,
        args.radius,
        center=ChunkCoord(args.cx, args.cy),
        by_biome=args.biomes,
    )
    image.save(out)
    print(f"  Saved {image.width}x{image.height} map to {out}")
    return 0


def run_chunk(config: WorldGenConfig, args: argparse.Namespace) -> int:
    """Print one chunk's tiles to the terminal."""
    world = config.build_world()
    builder = ChunkBuilder(world, config.chunks.width, config.chunks.height)
    chunk = builder.build(ChunkCoord(args.x, args.y))

    console.print(f"Chunk ({args.x}, {args.y}) seed={config.seed} [{chunk.width}x{chunk.height}]")
    console.print(chunk_text(chunk))

    counts: dict[str, int] = {}
    for tile in chunk.tiles:
        counts[tile.value] = counts.get(tile.value, 0) + 1
    for name, count in sorted(counts.items(), key=lambda item: -item[1]):
        console.print(f"  {name}: {count}")
    return 0


def run_wfc(config: WorldGenConfig, args: argparse.Namespace) -> int:
    """Solve a meadow layout and save it as a PNG."""
    width = args.width or config.wfc.width
    height = args.height or config.wfc.height
    seed = args.seed if args.seed is not None else config.wfc.seed
    out = args.out or config.data_dir / "wfc_generation.png"
    out.parent.mkdir(parents=True, exist_ok=True)

    from tqdm import tqdm
    pbar = tqdm(total=width * height, desc="  Collapsing", unit="cells")
    last_progress = [0]

    def update_progress(current: int, total: int) -> None:
        delta = current - last_progress[0]
        if delta > 0:
            pbar.update(delta)
            last_progress[0] = current

    try:
        solution = generate_layout(
            width,
            height,
            seed=seed,
            max_retries=config.wfc.max_retries,
            progress_callback=update_progress,
        )
    except LayoutGenerationError as e:
        pbar.close()
        logger.error(f"WFC failed: {e}")
        print(f"WFC failed: {e}", file=sys.stderr)
        return 1
    pbar.close()

    image = render_layout(solution, width, height, scale=args.scale)
    image.save(out)
    print(f"  Saved {width}x{height} layout to {out}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for Overworld."""
    # Load environment variables first
    load_dotenv()

    parser = argparse.ArgumentParser(
        description="Overworld - procedural world generation from a seed",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  overworld map --radius 2          # Render 5x5 chunks around the origin
  overworld chunk 0 0               # Print chunk (0, 0)
  overworld wfc --seed 7            # Solve a meadow layout
        """,
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Settings file (default: packaged worldgen.yaml)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="World seed (overrides config and OVERWORLD_SEED)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging to console",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    map_parser = subparsers.add_parser("map", help="Render a world map PNG")
    map_parser.add_argument("--radius", type=int, default=2, help="Radius in chunks (default: 2)")
    map_parser.add_argument("--cx", type=int, default=0, help="Center chunk x")
    map_parser.add_argument("--cy", type=int, default=0, help="Center chunk y")
    map_parser.add_argument("--biomes", action="store_true", help="Color by biome instead of tile")
    map_parser.add_argument("--out", type=Path, default=None, help="Output PNG path")

    chunk_parser = subparsers.add_parser("chunk", help="Print a chunk's tiles")
    chunk_parser.add_argument("x", type=int)
    chunk_parser.add_argument("y", type=int)

    wfc_parser = subparsers.add_parser("wfc", help="Solve a meadow layout to PNG")
    wfc_parser.add_argument("--width", type=int, default=None)
    wfc_parser.add_argument("--height", type=int, default=None)
    wfc_parser.add_argument("--scale", type=int, default=4, help="Pixels per cell (default: 4)")
    wfc_parser.add_argument("--out", type=Path, default=None, help="Output PNG path")

    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    if args.seed is not None and args.command != "wfc":
        config = config.model_copy(update={"seed": args.seed})

    # Setup logging
    console_level = logging.DEBUG if args.debug else logging.WARNING
    log_path = setup_logging(config.data_dir, console_level=console_level)

    from overworld import __version__
    print(f"Overworld v{__version__}")
    print(f"Log file: {log_path}")
    print()

    if args.command == "map":
        return run_map(config, args)
    if args.command == "chunk":
        return run_chunk(config, args)
    return run_wfc(config, args)


if __name__ == "__main__":
    sys.exit(main())
