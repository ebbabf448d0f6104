#!/usr/bin/env python3
"""Batch render the example routes to SVG and PNG.

Outputs go to /tmp/linemap_example_renders/.

Usage:
    python scripts/render_examples.py [--straighten] [--theme light]
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from linemap.layout.engine import build_trip_paths, compute_layout  # noqa: E402
from linemap.parser.route_json import RouteDataError, load_route  # noqa: E402
from linemap.render.svg import render_svg  # noqa: E402
from linemap.themes import THEMES  # noqa: E402

OUTPUT_DIR = Path("/tmp/linemap_example_renders")
EXAMPLES_DIR = project_root / "examples"


def render_file(
    json_path: Path, output_dir: Path, theme_name: str, *, straighten: bool = False
) -> tuple[str, list[str]]:
    """Parse, lay out, and render a route file to SVG (and optionally PNG).

    Returns (name, list_of_issues).
    """
    name = json_path.stem
    issues: list[str] = []

    try:
        route = load_route(json_path)
    except RouteDataError as e:
        return name, [f"PARSE ERROR: {e}"]

    result = compute_layout(route)
    paths = build_trip_paths(route, result, straighten=straighten)
    for direction, dropped in result.dropped.items():
        if dropped:
            issues.append(f"{direction.value}: dropped {', '.join(dropped)}")

    svg_str = render_svg(route, result, paths, THEMES[theme_name], title=name)
    (output_dir / f"{name}.svg").write_text(svg_str)

    # Try PNG conversion via cairosvg (optional)
    try:
        import cairosvg

        png_path = output_dir / f"{name}.png"
        cairosvg.svg2png(bytestring=svg_str.encode(), write_to=str(png_path), scale=2)
    except ImportError:
        issues.append("cairosvg not available, skipping PNG")

    return name, issues


def main():
    parser = argparse.ArgumentParser(description="Batch render example routes")
    parser.add_argument(
        "--straighten", action="store_true", help="Use right-angle routing"
    )
    parser.add_argument(
        "--theme", choices=sorted(THEMES), default="slate", help="Visual theme"
    )
    args = parser.parse_args()

    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)

    all_files = sorted(EXAMPLES_DIR.glob("*.json"))
    print(f"Rendering {len(all_files)} files to {OUTPUT_DIR}/")
    print()

    max_name_len = max(len(f.stem) for f in all_files)
    any_errors = False

    for json_path in all_files:
        name, issues = render_file(
            json_path, OUTPUT_DIR, args.theme, straighten=args.straighten
        )
        status = "OK" if not issues else "ISSUES"
        if any("ERROR" in i for i in issues):
            status = "FAIL"
            any_errors = True

        print(f"  {name:<{max_name_len}}  [{status}]")
        for issue in issues:
            print(f"    - {issue}")

    print(f"\nOutputs in: {OUTPUT_DIR}/")

    if any_errors:
        sys.exit(1)


if __name__ == "__main__":
    main()
