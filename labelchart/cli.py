from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
import sys
from typing import Any

from labelchart.chart import create_chart
from labelchart.config import ChartVariant
from labelchart.errors import ChartError
from labelchart.figure import save_figure
from labelchart.mount import RasterMount, RecordingMount
from labelchart.recording import RecordingSurface


LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="labelchart")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    sub = parser.add_subparsers(dest="command", required=True)

    render = sub.add_parser("render", help="Render a point or line graph from a JSON dataset.")
    render.add_argument("data", type=Path, help="JSON object of label -> value, or a list of [label, value] pairs.")
    render.add_argument("-o", "--output", type=Path, required=True)
    render.add_argument("--type", dest="chart_type", choices=[v.value for v in ChartVariant], default=None)
    render.add_argument("--width", type=int, default=None)
    render.add_argument("--height", type=int, default=None)
    render.add_argument("--title", default=None)
    render.add_argument("--caption", default=None)
    render.add_argument("--config", type=Path, default=None, help="JSON object of chart option overrides.")
    render.add_argument(
        "--svg",
        action="store_true",
        help="Write the plot area as SVG instead of a PNG figure (title and caption are not included).",
    )
    return parser


def _load_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ChartError(f"{path}: invalid JSON: {exc}") from exc


def _overrides_from_args(args: argparse.Namespace) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    if args.config is not None:
        loaded = _load_json(args.config)
        if not isinstance(loaded, dict):
            raise ChartError(f"{args.config}: config must be a JSON object")
        overrides.update(loaded)
    for option, value in (
        ("type", args.chart_type),
        ("width", args.width),
        ("height", args.height),
        ("title", args.title),
        ("caption", args.caption),
    ):
        if value is not None:
            overrides[option] = value
    return overrides


def run_render(args: argparse.Namespace) -> Path:
    data = _load_json(args.data)
    overrides = _overrides_from_args(args)
    mount = RecordingMount() if args.svg else RasterMount()
    chart = create_chart(mount, data, overrides)
    if args.svg:
        chart.draw()
        if not isinstance(chart.surface, RecordingSurface):
            raise ChartError(f"svg output needs a recording surface, got {type(chart.surface).__name__}")
        args.output.write_text(chart.surface.to_svg(), encoding="utf-8")
        out = args.output
    else:
        out = save_figure(chart, args.output)
    LOGGER.info("wrote %s", out)
    return out


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        if args.command == "render":
            out = run_render(args)
            print(out)
            return 0
    except (ChartError, OSError) as exc:
        print(f"labelchart: error: {exc}", file=sys.stderr)
        return 2
    parser.error(f"unknown command: {args.command}")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
