"""CLI to print or export the series behind the indicator charts.

Examples:

econ-indicators --list
econ-indicators --chart aclik-siniri --mode real
econ-indicators --all --format json --output out/
"""
from __future__ import annotations

from pathlib import Path
from typing import List, Optional
import argparse
import logging
import sys

from econ_indicators.errors import EconIndicatorsError
from econ_indicators.services.chart_export_service import (
    chart_view_to_frame,
    chart_view_to_json,
    render_table,
    write_chart_view,
)
from econ_indicators.services.chart_view_service import build_chart_view, list_charts

logger = logging.getLogger(__name__)

_SUFFIX = {"json": "json", "csv": "csv", "table": "txt"}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Print or export the derived series of a Türkiye indicator chart.")
    parser.add_argument("--chart", dest="chart", type=str, default=None,
                        help="Chart id (see --list).")
    parser.add_argument("--mode", dest="mode", type=str, default=None,
                        help="Display mode, e.g. nominal|ppp or nominal|real. Defaults to the chart's default mode.")
    parser.add_argument("--all", dest="all_charts", action="store_true",
                        help="Export every chart in every mode.")
    parser.add_argument("--list", dest="list_charts", action="store_true",
                        help="List available charts and their modes.")
    parser.add_argument("--format", dest="fmt", choices=("table", "json", "csv"), default="table",
                        help="Output format (default table).")
    parser.add_argument("--output", dest="output", type=str, default=None,
                        help="Output file (single chart) or directory (--all). Prints to stdout if omitted.")
    parser.add_argument("--verbose", "-v", dest="verbose", action="store_true",
                        help="Enable debug logging.")
    return parser


def _emit(view, fmt: str, output: Optional[Path]) -> None:
    if output is not None:
        write_chart_view(view, output, fmt=fmt)
        return
    if fmt == "json":
        print(chart_view_to_json(view))
    elif fmt == "csv":
        print(chart_view_to_frame(view).to_csv(), end="")
    else:
        print(render_table(view))
        print()


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.list_charts:
        for info in list_charts():
            print(f"{info.chart_id:16} {'|'.join(info.modes):14} {info.title}")
        return 0

    try:
        if args.all_charts:
            out_dir = Path(args.output) if args.output else None
            for info in list_charts():
                for mode in info.modes:
                    view = build_chart_view(info.chart_id, mode)
                    target = out_dir / f"{info.chart_id}_{mode}.{_SUFFIX[args.fmt]}" if out_dir else None
                    _emit(view, args.fmt, target)
            return 0

        if not args.chart:
            logger.error("Pass --chart <id>, --all or --list.")
            return 2

        view = build_chart_view(args.chart, args.mode)
        _emit(view, args.fmt, Path(args.output) if args.output else None)
    except EconIndicatorsError as exc:
        logger.error("%s", exc)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
