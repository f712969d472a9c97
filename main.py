"""Simple CLI to summarize and map the yearly FARS accident files.

Usage examples:
    python main.py summarize 2013 2014 2015 --data-dir data
    python main.py summarize 2013 2014 2015 --out-report data/summary.csv --plot data/summary.png
    python main.py map 1 2013 --data-dir data --out-html data/alabama_2013.html

Input files are looked up in --data-dir as accident_<YEAR>.csv.bz2.
"""

import argparse
import logging

from fars import FarsError, export_summary_csv, map_state, summarize_years
from fars import viz as _viz


def _summarize(args) -> None:
    print(f"Summarizing years {', '.join(str(y) for y in args.years)} from {args.data_dir}...")
    summary = summarize_years(args.years, data_dir=args.data_dir)

    print("=== Accidents per month ===")
    print(summary.to_string(index=False))

    if args.out_report:
        print(f"Writing summary to {args.out_report}...")
        export_summary_csv(summary, args.out_report)

    if args.plot:
        out = _viz.plot_monthly_summary(summary, out_png=args.plot)
        print(f"Monthly chart saved to {out}")


def _map(args) -> None:
    out = map_state(args.state, args.year, data_dir=args.data_dir, out_html=args.out_html)
    if out is None:
        print("No accidents to plot.")
    else:
        print(f"Map saved to {out}")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Summarize and map FARS accident files")
    parser.add_argument("--data-dir", default=".", help="Directory holding accident_<YEAR>.csv.bz2 files")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p_sum = sub.add_parser("summarize", help="Count accidents per month and year")
    p_sum.add_argument("years", nargs="+", type=int, help="Years to summarize")
    p_sum.add_argument("--out-report", help="Path to write the summary CSV")
    p_sum.add_argument("--plot", help="Path to write a monthly counts PNG")
    p_sum.set_defaults(func=_summarize)

    p_map = sub.add_parser("map", help="Map one state's accidents for one year")
    p_map.add_argument("state", type=int, help="FARS STATE code (e.g. 1 for Alabama)")
    p_map.add_argument("year", type=int, help="Year of the accident file")
    p_map.add_argument("--out-html", default=None, help="Path to write the map HTML")
    p_map.set_defaults(func=_map)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s  %(levelname)s  %(message)s",
    )

    try:
        args.func(args)
    except (FileNotFoundError, FarsError, ValueError) as exc:
        raise SystemExit(f"Error: {exc}")

    print("Done.")


if __name__ == '__main__':
    main()
