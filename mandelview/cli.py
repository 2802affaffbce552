from __future__ import annotations

import argparse
import logging
from typing import Optional

from mandelview.color import PALETTES
from mandelview.config import load_config, normalise_config
from mandelview.pipeline import render_single, run_viewer
from mandelview.util.logging_setup import close_logging, configure_root_logging, get_logger

def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="mandelview", description="Mandelbrot renderer with interactive box zoom.")
    p.add_argument("--config", type=str, default=None, help="Path to config JSON overriding the built-in defaults.")
    p.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG","INFO","WARNING","ERROR"], help="Log level.")
    p.add_argument("--log-file", type=str, default="mandelview.log", help="Log file path (rotating). Set empty to disable file logging.")
    p.add_argument("--size", type=int, nargs=2, default=None, metavar=("WIDTH", "HEIGHT"), help="Override image size in pixels.")
    p.add_argument("--max-iter", type=int, default=None, help="Override the starting iteration cap.")
    p.add_argument("--palette", type=str, default=None, choices=list(PALETTES), help="Override the palette.")
    p.add_argument("--output", type=str, default=None, help="PNG path for render/export.")
    sub = p.add_subparsers(dest="cmd", required=True)

    r = sub.add_parser("render", help="Render the configured viewport once and write a PNG.")
    r.add_argument("--no-progress", action="store_true", help="Disable the row progress bar.")

    sub.add_parser("view", help="Open the interactive zoom viewer.")

    return p

def _resolve_config(args: argparse.Namespace) -> dict:
    cfg = load_config(args.config)
    if args.size:
        cfg["width"], cfg["height"] = args.size
    if args.max_iter is not None:
        cfg["max_iter"] = args.max_iter
    if args.palette:
        cfg["palette"] = args.palette
    if args.output:
        cfg["output"] = args.output
    return normalise_config(cfg)

def main(argv: Optional[list] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    log_level = getattr(logging, args.log_level.upper(), logging.INFO)
    log_file = args.log_file if args.log_file and args.log_file.strip() else None
    configure_root_logging(level=log_level, console=True, log_file=log_file)

    logger = get_logger()

    try:
        try:
            cfg = _resolve_config(args)
        except ValueError as e:
            logger.error("Invalid configuration: %s", e)
            return 2

        if args.cmd == "render":
            info = render_single(cfg=cfg, progress=not args.no_progress)
            logger.info("Render complete: %s", info["output"])
            return 0

        if args.cmd == "view":
            run_viewer(cfg=cfg)
            return 0

        raise RuntimeError("Unknown command.")
    finally:
        close_logging()

if __name__ == "__main__":
    raise SystemExit(main())
