#!/usr/bin/env python3
"""Exchange BDD CLI.

Runs the BDD suite against the exchange API and reports the results.

Usage:
    exchange-bdd run HOST API_KEY SECRET_KEY OTP [FILENAME]   # Run suite
    exchange-bdd run --suite features --pytest-args "-k orders" # Extra pytest args
    exchange-bdd report out/run.json                          # Print a saved snapshot

Credentials omitted on the command line are read from the environment
(EXCHANGE_API_HOST, EXCHANGE_API_KEY, EXCHANGE_SECRET_KEY, EXCHANGE_OTP,
EXCHANGE_RESULT_FILE), including a local .env file.
"""

from __future__ import annotations

import argparse
import json
import shlex
import sys

from exchange_bdd.config import RunnerConfig
from exchange_bdd.errors import ExchangeBddError


def cmd_run(args) -> int:
    """Run the suite and return the process exit code."""
    from exchange_bdd.testing.runner import BddTestRunner

    config = RunnerConfig.from_env().merged(
        api_host=args.host,
        api_key=args.api_key,
        secret_key=args.secret_key,
        otp=args.otp,
        result_filename=args.filename,
        suite_dir=args.suite,
        output_dir=args.output_dir,
        extra_pytest_args=shlex.split(args.pytest_args) if args.pytest_args else None,
    ).validate()

    outcome = BddTestRunner(config).run()

    if config.result_filename and outcome.snapshot_path is None:
        print(f"Warning: result file '{config.result_filename}' was not written", file=sys.stderr)

    return outcome.exit_code


def cmd_report(args) -> int:
    """Print a previously written snapshot."""
    from exchange_bdd.testing.models.run_stats import RunStats
    from exchange_bdd.testing.report import print_test_results

    try:
        stats = RunStats.load(args.path)
    except (OSError, json.JSONDecodeError, KeyError, ValueError) as e:
        print(f"Error: cannot read snapshot {args.path}: {e}", file=sys.stderr)
        return 2

    print_test_results(stats)
    return 1 if stats.failed_scenarios else 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="exchange-bdd",
        description="BDD runner for the exchange API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    exchange-bdd run api.example.com KEY SECRET 123456 run.json
    exchange-bdd run --suite features --pytest-args "-k orders -x"
    exchange-bdd report out/run.json
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Run
    run_p = subparsers.add_parser("run", help="Run the BDD suite")
    run_p.add_argument("host", nargs="?", help="API host")
    run_p.add_argument("api_key", nargs="?", help="API key")
    run_p.add_argument("secret_key", nargs="?", help="API secret (base64)")
    run_p.add_argument("otp", nargs="?", help="One-time password")
    run_p.add_argument("filename", nargs="?", help="Result snapshot file name")
    run_p.add_argument("--suite", help="pytest-bdd suite directory (default: features)")
    run_p.add_argument("--output-dir", help="Snapshot directory (default: out)")
    run_p.add_argument("--pytest-args", help="Extra pytest arguments, as one quoted string")

    # Report
    report_p = subparsers.add_parser("report", help="Print a saved result snapshot")
    report_p.add_argument("path", help="Snapshot JSON file")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    commands = {
        "run": cmd_run,
        "report": cmd_report,
    }

    if args.command not in commands:
        parser.print_help()
        return 0

    try:
        return commands[args.command](args)
    except ExchangeBddError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
