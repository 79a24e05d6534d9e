"""
Wind-swept procedural tree.

Live mode opens a pygame window and grows a tree in real time:
- Space / G: generate a new tree
- S: save a PNG snapshot
- P: pause / resume
- Esc: quit

Headless mode grows the tree on a simulated clock and writes PNG frames
with Pillow.
"""

from __future__ import annotations

import argparse
import logging
import os
import random
import sys
from typing import List, Optional

from .canvas import PillowCanvas, PygameCanvas
from .config import ConfigurationError, TreeConfig, config_from_dict, load_config
from .factory import ProceduralTree

logger = logging.getLogger(__name__)


def next_image_index(output_dir: str, prefix: str) -> int:
    index = 1
    while os.path.exists(os.path.join(output_dir, f"{prefix}_{index:04d}.png")):
        index += 1
    return index


def image_path(output_dir: str, prefix: str) -> str:
    os.makedirs(output_dir, exist_ok=True)
    return os.path.join(output_dir, f"{prefix}_{next_image_index(output_dir, prefix):04d}.png")


def caption(tree: ProceduralTree, paused: bool) -> str:
    stats = tree.stats()
    text = f"Procedural Tree - {stats.branches} branches, {stats.leaves} leaves, depth {stats.max_depth}"
    if paused:
        text += " (paused)"
    return text


def run_headless(
    tree: ProceduralTree,
    config: TreeConfig,
    frames: int,
    frame_ms: float,
    save_every: int,
    output_dir: str,
    prefix: str,
) -> List[str]:
    canvas = PillowCanvas(config.width, config.height, config.background)
    saved: List[str] = []
    now = 0.0
    tree.regenerate(now)
    for frame in range(1, frames + 1):
        now += frame_ms
        tree.render_frame(canvas, now)
        if save_every > 0 and frame % save_every == 0 and frame != frames:
            path = image_path(output_dir, prefix)
            canvas.save(path)
            saved.append(path)
    path = image_path(output_dir, prefix)
    canvas.save(path)
    saved.append(path)
    logger.info("headless run finished: %s", tree.stats())
    return saved


def run_live(tree: ProceduralTree, config: TreeConfig, fps: int, output_dir: str, prefix: str) -> int:
    try:
        import pygame  # type: ignore
    except Exception as exc:  # pragma: no cover
        print("pygame is required for live mode. Install it or use --headless.", file=sys.stderr)
        print(f"Import error: {exc}", file=sys.stderr)
        return 1

    pygame.init()
    screen = pygame.display.set_mode((config.width, config.height))
    canvas = PygameCanvas(screen)
    clock = pygame.time.Clock()
    tree.regenerate(pygame.time.get_ticks())

    paused = False
    running = True
    frame = 0
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key in (pygame.K_SPACE, pygame.K_g):
                    tree.regenerate(pygame.time.get_ticks())
                elif event.key == pygame.K_p:
                    paused = not paused
                elif event.key == pygame.K_s:
                    path = image_path(output_dir, prefix)
                    pygame.image.save(screen, path)
                    print(f"Saved: {path}")

        if not paused:
            tree.render_frame(canvas, pygame.time.get_ticks())
            pygame.display.flip()
        frame += 1
        if frame % fps == 0:
            pygame.display.set_caption(caption(tree, paused))
        clock.tick(fps)

    pygame.quit()
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    config_parser = argparse.ArgumentParser(add_help=False)
    config_parser.add_argument(
        "--config",
        type=str,
        default="tree_config.json",
        help="Path to JSON config file",
    )
    config_args, remaining = config_parser.parse_known_args(argv)
    config = load_config(config_args.config)

    parser = argparse.ArgumentParser(description="Wind-swept procedural tree")
    parser.add_argument("--config", type=str, default=config_args.config, help="Config file")
    parser.add_argument("--seed", type=int, default=config.get("seed"))
    parser.add_argument("--width", type=int, default=config.get("width", 960))
    parser.add_argument("--height", type=int, default=config.get("height", 960))
    parser.add_argument(
        "--headless",
        action="store_true",
        default=config.get("headless", False),
        help="Render with Pillow on a simulated clock instead of opening a window",
    )
    parser.add_argument("--fps", type=int, default=config.get("fps", 60))
    parser.add_argument(
        "--frames",
        type=int,
        default=config.get("frames", 300),
        help="Frames to simulate in headless mode",
    )
    parser.add_argument(
        "--frame-ms",
        type=float,
        default=config.get("frame_ms", 1000.0 / 60.0),
        help="Simulated milliseconds per headless frame",
    )
    parser.add_argument(
        "--save-every",
        type=int,
        default=config.get("save_every", 0),
        help="Save a frame every N headless frames (0 saves only final)",
    )
    parser.add_argument("--output-dir", type=str, default=config.get("output_dir", "output"))
    parser.add_argument("--output-prefix", type=str, default=config.get("output_prefix", "tree"))
    parser.add_argument("--log-level", type=str, default=config.get("log_level", "WARNING"))
    args = parser.parse_args(remaining)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    tree_section = dict(config.get("tree", {}))
    tree_section["width"] = args.width
    tree_section["height"] = args.height
    try:
        tree_config = config_from_dict(tree_section)
    except ConfigurationError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 2

    tree = ProceduralTree(tree_config, random.Random(args.seed))

    if args.headless:
        for path in run_headless(
            tree,
            tree_config,
            frames=max(1, args.frames),
            frame_ms=args.frame_ms,
            save_every=args.save_every,
            output_dir=args.output_dir,
            prefix=args.output_prefix,
        ):
            print(f"Saved: {path}")
        return 0
    return run_live(tree, tree_config, max(1, args.fps), args.output_dir, args.output_prefix)
