"""Generate a rounded star clip path and an optional SVG preview.

Prints the path data plus a short geometry report. Options outside their
valid range are clamped (with a logged warning), never rejected.
"""
import argparse
import json
import logging
import os

from roundpoly import GeometryError, outline_polygon, poly_area, outline_bbox
from clippath.config import clamp_config
from clippath.constants import PREVIEW_SIZE, PREVIEW_FILL
from clippath.star import build_shape
from clippath.svg import IdSource, ClipPath, render_clip_path_svg, clip_path_style, render_preview_svg

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Rounded star polygon clip path generator")
    p.add_argument("--corners", type=float, help="number of star corners (>= 3)")
    p.add_argument("--outer-radius", type=float, help="outer radius, fraction of the viewport [0, 1]")
    p.add_argument("--inner-ratio", type=float, help="inner / outer radius ratio [0, 1]")
    p.add_argument("--corner-radius", type=float, help="corner rounding ratio [0, 1]")
    p.add_argument("--tilt", type=float, help="rotation in degrees [0, 360]")
    p.add_argument("--config", help="JSON object with options (camelCase or legacy names accepted)")
    p.add_argument("--id", help="clip path id (default: generated)")
    p.add_argument("--size", type=int, default=PREVIEW_SIZE, help="preview size in px")
    p.add_argument("--fill", default=PREVIEW_FILL, help="preview fill color")
    p.add_argument("-o", "--output", help="write a preview SVG to this file")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return p.parse_args(argv)


def raw_options(args: argparse.Namespace) -> dict:
    """Options from --config, overridden by the individual flags."""
    raw = json.loads(args.config) if args.config else {}
    if not isinstance(raw, dict):
        raise ValueError("--config must be a JSON object")
    flags = {
        "corner_count": args.corners, "outer_radius": args.outer_radius,
        "inner_radius_ratio": args.inner_ratio, "corner_radius": args.corner_radius,
        "tilt": args.tilt,
    }
    raw.update({k: v for k, v in flags.items() if v is not None})
    return raw


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    try:
        raw = raw_options(args)
    except ValueError as e:  # json.JSONDecodeError is a ValueError
        logger.error("Invalid --config: %s", e)
        return 2
    cfg, warnings = clamp_config(raw)

    try:
        shape = build_shape(cfg)
    except GeometryError as e:
        logger.error("Cannot build clip path: %s", e)
        return 1
    clip_id = args.id or IdSource().next_id()
    clip = ClipPath(clip_id, shape.path_d, render_clip_path_svg(shape.path_d, clip_id),
                    clip_path_style(clip_id))

    arcs = shape.polygon.arcs
    poly = outline_polygon(arcs, scale=shape.scale, translate=shape.translate)
    bb = outline_bbox(arcs, scale=shape.scale, translate=shape.translate)
    print(f"Clip path id:  {clip.clip_id}")
    print(f"Corners:       {cfg.corner_count} ({len(arcs)} vertices)")
    print(f"Outer radius:  {cfg.outer_radius:g}   inner ratio: {cfg.inner_radius_ratio:g}")
    print(f"Corner radius: {cfg.corner_radius:g}   tilt: {cfg.tilt:g} deg")
    print(f"Max offset:    {shape.polygon.max_offset():.4f}")
    print(f"Compensation:  {shape.scale:.4f}")
    print(f"Outline area:  {poly_area(poly):.4f}")
    print(f"Bounding box:  ({bb.xmin:.4f}, {bb.ymin:.4f}) - ({bb.xmax:.4f}, {bb.ymax:.4f})")
    if warnings:
        print(f"Warnings:      {len(warnings)}")
    print()
    print(clip.path_d)

    if args.output:
        with open(args.output, "w") as f:
            f.write(render_preview_svg(clip, args.size, args.fill))
        print(f"\nPreview written to {os.path.abspath(args.output)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
