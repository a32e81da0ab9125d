"""
FARS Command-Line Interface

Exposes three subcommands:

    fars summarize --years 2013 2014 2015 [...]    Month-by-year accident counts
    fars map       --state 1 --year 2013 [...]     Map one state's accidents
    fars report    --years ... --states ... [...]  Write summary CSV + HTML maps

The package must be installed (``pip install -e .``) for the ``fars`` entry
point to be available.

Package Location: src/fars/cli.py
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional


# ===========================================================================
# Shared helpers
# ===========================================================================

def _die(message: str) -> None:
    """Print an error message and exit with status 1.

    Args:
        message: Human-readable error text.
    """
    print(f"\nError: {message}", file=sys.stderr)
    sys.exit(1)


def _data_dir(args: argparse.Namespace) -> Path:
    """Return the data directory from ``--data-dir`` or the working directory."""
    return Path(args.data_dir) if args.data_dir else Path.cwd()


# ===========================================================================
# Subcommand handlers
# ===========================================================================

def handle_summarize(args: argparse.Namespace) -> None:
    """Print (or write as CSV) the month-by-year accident counts.

    Args:
        args: Parsed CLI arguments.  Required field: ``args.years``.
    """
    from fars.reports.generators import fars_summarize_years

    summary = fars_summarize_years(args.years, data_dir=_data_dir(args))

    if summary.empty:
        print("No data loaded for the requested years.")
        return

    if args.output:
        out_path = Path(args.output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        summary.to_csv(out_path)
        print(f"Summary saved → {out_path}")
    else:
        print(summary.to_string())


def handle_map(args: argparse.Namespace) -> None:
    """Show (or write as HTML) the accident map for one state and year.

    Args:
        args: Parsed CLI arguments.  Required fields: ``args.state``,
            ``args.year``.
    """
    from fars.reports.generators import fars_map_state

    try:
        fig = fars_map_state(
            args.state,
            args.year,
            data_dir=_data_dir(args),
            show=not args.output,
        )
    except (FileNotFoundError, ValueError) as exc:
        _die(str(exc))

    if fig is None:
        print(f"No accidents to plot for state {args.state} in {args.year}.")
        return

    if args.output:
        out_path = Path(args.output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        fig.write_html(str(out_path))
        print(f"State map saved → {out_path}")


def handle_report(args: argparse.Namespace) -> None:
    """Write the summary CSV and one HTML map per (state, year).

    Args:
        args: Parsed CLI arguments.
    """
    from fars.reports.generators import ReportGenerator

    gen = ReportGenerator(data_dir=_data_dir(args), output_dir=args.output_dir)
    written = gen.generate(years=args.years, states=args.states)

    print(f"\nReport complete: {len(written)} file(s) written to {args.output_dir}")
    for path in written:
        print(f"    {path.name}")


# ===========================================================================
# Argument parser construction
# ===========================================================================

def _build_parser() -> argparse.ArgumentParser:
    """Construct and return the top-level argument parser.

    Returns:
        Configured ``ArgumentParser`` with ``summarize``, ``map``, and
        ``report`` subcommands attached.
    """
    parser = argparse.ArgumentParser(
        prog="fars",
        description=(
            "FARS – Fatality Analysis Reporting System toolkit\n"
            "Summarise and map yearly accident_<year>.csv.bz2 files."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO).",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        default=False,
        help="Emit log records as single-line JSON.",
    )

    # Shared by every subcommand
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--data-dir",
        default=None,
        metavar="DIR",
        help="Directory containing accident_<year>.csv.bz2 files (default: cwd).",
    )

    subs = parser.add_subparsers(dest="command", metavar="<command>")
    subs.required = True

    # ------------------------------------------------------------------
    # summarize
    # ------------------------------------------------------------------
    p_sum = subs.add_parser(
        "summarize",
        parents=[common],
        help="Count accidents per month for one or more years.",
    )
    p_sum.add_argument(
        "--years",
        required=True,
        nargs="+",
        metavar="YYYY",
        help="Years to summarise, e.g. --years 2013 2014 2015",
    )
    p_sum.add_argument(
        "--output",
        default=None,
        metavar="FILE",
        help="Write the table as CSV instead of printing it.",
    )
    p_sum.set_defaults(func=handle_summarize)

    # ------------------------------------------------------------------
    # map
    # ------------------------------------------------------------------
    p_map = subs.add_parser(
        "map",
        parents=[common],
        help="Map the accidents of one state for one year.",
    )
    p_map.add_argument(
        "--state",
        required=True,
        type=int,
        metavar="N",
        help="FARS state code, e.g. 1 for Alabama.",
    )
    p_map.add_argument(
        "--year",
        required=True,
        type=int,
        metavar="YYYY",
        help="Data year.",
    )
    p_map.add_argument(
        "--output",
        default=None,
        metavar="FILE",
        help="Write the map as HTML instead of opening it.",
    )
    p_map.set_defaults(func=handle_map)

    # ------------------------------------------------------------------
    # report
    # ------------------------------------------------------------------
    p_rep = subs.add_parser(
        "report",
        parents=[common],
        help="Write the summary CSV and per-state HTML maps.",
        description=(
            "Write the month/year summary and one state map per\n"
            "(state, year) pair.  Output files:\n"
            "  <output-dir>/summary_<first>-<last>.csv\n"
            "  <output-dir>/state_<nn>_<year>.html"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p_rep.add_argument(
        "--years",
        required=True,
        nargs="+",
        metavar="YYYY",
        help="Years to include.",
    )
    p_rep.add_argument(
        "--states",
        nargs="+",
        type=int,
        default=[],
        metavar="N",
        help="FARS state codes to map (default: none).",
    )
    p_rep.add_argument(
        "--output-dir",
        required=True,
        metavar="DIR",
        help="Directory for the report files.",
    )
    p_rep.set_defaults(func=handle_report)

    return parser


# ===========================================================================
# Entry point
# ===========================================================================

def main(argv: Optional[List[str]] = None) -> None:
    """Parse CLI arguments and dispatch to the appropriate handler.

    This function is registered as the ``fars`` console script entry point
    in ``pyproject.toml``.
    """
    from fars.utils.logging import configure_logging

    parser = _build_parser()
    args   = parser.parse_args(argv)
    configure_logging(args.log_level, json_format=args.log_json)
    args.func(args)


if __name__ == "__main__":
    main()
