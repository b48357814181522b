"""
main.py - Entry point for rendering a sheet of handwritten math glyphs.

Writes, into the output directory:
  - glyphs_<ts>.json: raw path data of every glyph (plus the fraction view box)
  - glyphs_<ts>.<format>: Matplotlib preview of the glyphs
"""

import argparse
import json
import logging
import time
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, List, Optional

import matplotlib
matplotlib.use("Agg")  # headless rendering for CLI runs

from .config import RunConfig
from .glyphs import HandwrittenGlyphs
from .logging_utils import configure_logging
from .mpl_preview import render_glyph_sheet
from .outliner import create_stroke_outliner
from .rng import RNG


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="handmath",
        description="Render handwritten-style radical, fraction rule and bracket glyphs.",
    )
    parser.add_argument("--output-dir", type=Path, default=Path("./out"),
                        help="Directory for the JSON path data and preview image")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for reproducible jitter (default: OS entropy)")
    parser.add_argument("--extra-vinculum", type=float, default=0.0,
                        help="Extra vinculum thickness of the radical")
    parser.add_argument("--view-box-height", type=float, default=1000.0,
                        help="View box height passed to the radical generator")
    parser.add_argument("--width", type=float, default=2.0,
                        help="Fraction rule width (em)")
    parser.add_argument("--thickness", type=float, default=0.04,
                        help="Fraction rule thickness (em)")
    parser.add_argument("--height", type=float, default=1.2,
                        help="Bracket height (em)")
    parser.add_argument("--format", choices=["png", "svg", "pdf"], default="png",
                        help="Preview image format")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging verbosity")
    parser.add_argument("--no-log-file", action="store_true",
                        help="Log to the console only")
    return parser


def generate(glyphs: HandwrittenGlyphs, args: argparse.Namespace) -> Dict[str, Any]:
    """Generate all glyphs; returns JSON-ready metadata."""
    rule = glyphs.fraction_line(args.width, args.thickness)
    return {
        "sqrt": glyphs.sqrt(args.extra_vinculum, args.view_box_height),
        "fraction_line": rule["path"],
        "fraction_view_box": rule["viewBox"],
        "bracket_left": glyphs.bracket("left", args.height),
        "bracket_right": glyphs.bracket("right", args.height),
    }


def main(argv: Optional[List[str]] = None) -> int:
    """Run the glyph renderer; returns the process exit code."""
    args = build_parser().parse_args(argv)
    config = RunConfig(
        logger_level=getattr(logging, args.log_level),
        output_dir=args.output_dir,
        seed=args.seed,
    )
    configure_logging(
        level=config.logger_level,
        log_dir=None if args.no_log_file else config.output_dir / "logs",
        name="handmath",
        run_prefix="handmath",
    )
    logger = logging.getLogger("handmath")
    logger.info(f"RunConfig: {asdict(config)}")

    outliner = create_stroke_outliner()
    if outliner.is_null:
        logger.warning("No stroke engine available; glyph paths will be empty.")
    glyphs = HandwrittenGlyphs(rng=RNG(seed=config.seed), outliner=outliner)
    meta = generate(glyphs, args)

    ts = time.strftime("%Y%m%d_%H%M%S")
    meta_file = config.output_dir / f"glyphs_{ts}.json"
    with open(meta_file, "w", encoding="utf-8") as f:
        json.dump(meta, f, indent=2, ensure_ascii=False)
    logger.info(f"Glyph path data written: {meta_file}")

    sheet = {k: v for k, v in meta.items() if k != "fraction_view_box"}
    render_glyph_sheet(sheet, config.output_dir / f"glyphs_{ts}.{args.format}",
                       img_size=config.img_size, dpi=config.dpi)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
