#!/usr/bin/env python3
"""
Sales Dashboard CLI — seed data, print statistics, write reports, run the API.

USAGE:
  python -m sales_dashboard.cli seed                         # Reload from the third-party feed
  python -m sales_dashboard.cli seed --url https://...       # Custom feed URL

  python -m sales_dashboard.cli stats --month March          # Print combined statistics
  python -m sales_dashboard.cli report --month March         # Write Statistics_March.xlsx
  python -m sales_dashboard.cli report --month March --output ./march.xlsx

  python -m sales_dashboard.cli serve                        # Start API server
  python -m sales_dashboard.cli serve --port 3000
"""
from __future__ import annotations

import argparse
import asyncio
import os
import sys

from sales_dashboard.config import MONTH_NAMES, SEED_URL
from sales_dashboard.data.store import DataStore
from sales_dashboard.data.schemas import MonthFilter
from sales_dashboard.data.loader import reseed
from sales_dashboard.analytics.statistics import combined_statistics
from sales_dashboard.errors import InvalidRequest, DependencyFailure


def _banner(title: str) -> None:
    print("\n" + "=" * 70)
    print(f"  SALES DASHBOARD — {title}")
    print("=" * 70)


def cmd_seed(args):
    """Replace the stored transactions with the upstream feed."""
    _banner("SEED")
    store = DataStore().load()
    count = reseed(store, url=args.url)
    print(f"\nSeeded {count:,} transactions -> {store.snapshot_path}\n")


def cmd_stats(args):
    """Print summary, price ranges and categories for a month."""
    month_filter = MonthFilter.from_name(args.month)
    store = DataStore().load()
    data = asyncio.run(combined_statistics(store, month_filter))

    _banner(f"{month_filter.name.upper()} STATISTICS")
    s = data["statistics"]
    print(f"\n  Total sale amount : ${s['totalSaleAmount']:,.2f}")
    print(f"  Sold items        : {s['soldItems']:,}")
    print(f"  Not sold items    : {s['notSoldItems']:,}")

    print("\n  PRICE RANGES")
    for r in data["barChartData"]:
        print(f"    {r['priceRange']:<12}{r['count']:>6}")

    print("\n  CATEGORIES")
    for c in data["pieChartData"]:
        print(f"    {c['category'][:40]:<42}{c['count']:>6}")
    print()


def cmd_report(args):
    """Write the Excel statistics workbook for a month."""
    from sales_dashboard.reports.statistics_report import generate_excel

    month_filter = MonthFilter.from_name(args.month)
    store = DataStore().load()
    out = generate_excel(store, month_filter, args.output)
    print(f"\nReport saved to: {out}\n")


def cmd_serve(args):
    """Start the API server."""
    import uvicorn
    print(f"\nStarting Sales Dashboard API on port {args.port}...")
    uvicorn.run("sales_dashboard.main:app", host="0.0.0.0", port=args.port, reload=args.reload,
                timeout_keep_alive=65)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Sales Dashboard — monthly transaction statistics",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command")

    seed_parser = subparsers.add_parser("seed", help="Reload transactions from the third-party feed")
    seed_parser.add_argument("--url", default=SEED_URL, help="Feed URL")
    seed_parser.set_defaults(func=cmd_seed)

    stats_parser = subparsers.add_parser("stats", help="Print statistics for a month")
    stats_parser.add_argument("--month", required=True, choices=MONTH_NAMES, help="Month name")
    stats_parser.set_defaults(func=cmd_stats)

    report_parser = subparsers.add_parser("report", help="Write the Excel statistics report")
    report_parser.add_argument("--month", required=True, choices=MONTH_NAMES, help="Month name")
    report_parser.add_argument("--output", help="Output .xlsx path (default: reports folder)")
    report_parser.set_defaults(func=cmd_report)

    serve_parser = subparsers.add_parser("serve", help="Start API server")
    serve_parser.add_argument("--port", type=int, default=int(os.environ.get("PORT", "8000")), help="Port (default 8000)")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    serve_parser.set_defaults(func=cmd_serve)

    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return 1

    try:
        args.func(args)
    except (InvalidRequest, DependencyFailure) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
