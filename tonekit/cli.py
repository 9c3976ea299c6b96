# Copyright (c) 2026 Tonekit
# SPDX-License-Identifier: MIT

"""
Command-line front end.

    tonekit ramp "#6750A4" --variant brand
    tonekit theme "#6750A4" --format tailwind
    tonekit extract logo.png --colors 4 --seed 0
    tonekit contrast "#1A1A1A" "#FFFFFF"
    tonekit simulate "#FF0000" --type protanopia
    tonekit analyze "#6750A4"
    tonekit harmony "#6750A4" --type triadic

Structured results are printed as JSON. Library errors print
``error: ...`` to stderr and exit with status 1.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Optional, Sequence

from tonekit import __version__
from tonekit.color.accessibility import analyze_color, get_accessibility_report
from tonekit.color.clustering import select_primary_color
from tonekit.color.colorblind import get_all_simulations, simulate_color_blindness
from tonekit.color.darkmode import generate_theme_palette
from tonekit.color.extract import extract_colors_from_image
from tonekit.color.ramp import (
    generate_brand_color_ramp,
    generate_color_ramp,
    generate_neutral_ramp,
    suggest_palette,
)
from tonekit.errors import TonekitError
from tonekit.export import ExportFormat, export_theme
from tonekit.schema import ColorBlindnessType, HarmonyType

logger = logging.getLogger(__name__)

RAMP_VARIANTS = {
    "standard": generate_color_ramp,
    "brand": generate_brand_color_ramp,
    "neutral": generate_neutral_ramp,
}


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2))


def _cmd_ramp(args: argparse.Namespace) -> None:
    scale = RAMP_VARIANTS[args.variant](args.seed)
    _print_json(scale.to_dict())


def _cmd_theme(args: argparse.Namespace) -> None:
    palette = generate_theme_palette(args.seed)
    print(export_theme(palette, args.format, project_name=args.name))


def _cmd_extract(args: argparse.Namespace) -> None:
    colors = extract_colors_from_image(
        args.image,
        sample_size=args.sample_size,
        color_count=args.colors,
        seed=args.seed,
    )
    primary = select_primary_color(colors)
    _print_json({
        "colors": [color.to_dict() for color in colors],
        "primary": primary.hex if primary is not None else None,
    })


def _cmd_contrast(args: argparse.Namespace) -> None:
    _print_json(get_accessibility_report(args.foreground, args.background).to_dict())


def _cmd_analyze(args: argparse.Namespace) -> None:
    _print_json(analyze_color(args.color).to_dict())


def _cmd_harmony(args: argparse.Namespace) -> None:
    colors = suggest_palette(args.primary, args.type)
    _print_json({"harmony": args.type, "colors": [color.to_dict() for color in colors]})


def _cmd_simulate(args: argparse.Namespace) -> None:
    if args.type is None:
        simulations = get_all_simulations(args.color)
        _print_json({t.value: hex_color for t, hex_color in simulations.items()})
    else:
        print(simulate_color_blindness(args.color, args.type))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tonekit",
        description="tonekit: HCT tonal ramps, themes, contrast and color vision checks",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"tonekit {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="log debug output to stderr",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    ramp = subparsers.add_parser("ramp", help="generate an 11-step tonal ramp")
    ramp.add_argument("seed", help="seed hex color, e.g. '#6750A4'")
    ramp.add_argument("--variant", choices=sorted(RAMP_VARIANTS), default="standard")
    ramp.set_defaults(handler=_cmd_ramp)

    theme = subparsers.add_parser("theme", help="generate and export a light/dark theme")
    theme.add_argument("seed", help="seed hex color")
    theme.add_argument(
        "--format",
        choices=[f.value for f in ExportFormat],
        default=ExportFormat.CSS.value,
    )
    theme.add_argument("--name", default="Tonekit Design System", help="project name (json, figma)")
    theme.set_defaults(handler=_cmd_theme)

    extract = subparsers.add_parser("extract", help="extract dominant colors from an image")
    extract.add_argument("image", help="image file path")
    extract.add_argument("--colors", type=int, default=6, help="number of clusters")
    extract.add_argument("--sample-size", type=int, default=200, help="resize bound in px")
    extract.add_argument("--seed", type=int, default=None, help="random seed")
    extract.set_defaults(handler=_cmd_extract)

    contrast = subparsers.add_parser("contrast", help="WCAG contrast report for a color pair")
    contrast.add_argument("foreground")
    contrast.add_argument("background")
    contrast.set_defaults(handler=_cmd_contrast)

    simulate = subparsers.add_parser("simulate", help="simulate color vision deficiencies")
    simulate.add_argument("color")
    simulate.add_argument(
        "--type",
        choices=[t.value for t in ColorBlindnessType],
        default=None,
        help="vision model (default: all)",
    )
    simulate.set_defaults(handler=_cmd_simulate)

    analyze = subparsers.add_parser("analyze", help="HCT, luminance and text contrast of one color")
    analyze.add_argument("color")
    analyze.set_defaults(handler=_cmd_analyze)

    harmony = subparsers.add_parser("harmony", help="suggest harmony colors by HCT hue rotation")
    harmony.add_argument("primary", help="primary hex color")
    harmony.add_argument(
        "--type",
        choices=[h.value for h in HarmonyType],
        default=HarmonyType.COMPLEMENTARY.value,
    )
    harmony.set_defaults(handler=_cmd_harmony)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        args.handler(args)
    except (TonekitError, ValueError) as e:
        logger.debug("command failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
