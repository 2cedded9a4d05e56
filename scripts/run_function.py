#!/usr/bin/env python3
"""
Run a checkout function locally.

Reads the host input JSON, runs the named function and writes the result
JSON to stdout. Diagnostics and logs go to stderr.

Usage:
    python scripts/run_function.py delivery-customization < input.json
    python scripts/run_function.py payment-customization --input input.json
    python scripts/run_function.py payment-customization --pretty < input.json

Exit codes:
    0 - result written
    1 - invocation failed (bad configuration, bad input, unknown function)
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from checkout_functions.adapters.diagnostics import LoggingDiagnostics  # noqa: E402
from checkout_functions.adapters.environment import OsEnvironment  # noqa: E402
from checkout_functions.domain.errors import CheckoutFunctionError  # noqa: E402
from checkout_functions.shell import FUNCTIONS, configure_logging, invoke  # noqa: E402

logger = logging.getLogger("run_function")


# --- CLI ---


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Run a checkout function on host input JSON.")
    parser.add_argument(
        "function",
        choices=sorted(FUNCTIONS),
        help="Function to run",
    )
    parser.add_argument(
        "--input",
        type=Path,
        default=None,
        help="Input JSON file (default: read stdin)",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Indent the result JSON",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    configure_logging(OsEnvironment())

    if args.input is not None:
        input_json = args.input.read_text(encoding="utf-8")
    else:
        input_json = sys.stdin.read()

    try:
        result = invoke(
            args.function,
            input_json,
            diagnostics=LoggingDiagnostics(function_name=args.function),
        )
    except CheckoutFunctionError as e:
        logger.error("%s failed: %s", args.function, e)
        return 1

    json.dump(result, sys.stdout, indent=2 if args.pretty else None)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
