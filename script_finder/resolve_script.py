"""Resolve the bundled script serving a request from the command line.

Prints the candidate script paths for a resource type, or looks them up in a
bundle directory and reports the first match.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from script_finder.build_script_matches import build_script_matches_for_request
from script_finder.bundle import Bundle
from script_finder.bundled_script_finder import BundledScriptFinder
from script_finder.engine_registry import ScriptEngineRegistry
from script_finder.load_config import load_config
from script_finder.request_descriptor import RequestDescriptor


def run_lookup(args: argparse.Namespace) -> int:
    """Execute the lookup for parsed command line arguments."""
    config = load_config(args.config)
    request = RequestDescriptor(
        resource_type=args.resource_type,
        method=args.method.upper(),
        extension=args.extension,
        selectors=tuple(args.selector),
        delegated_resource_type=args.delegated_resource_type,
    )

    if args.list_candidates:
        for match in build_script_matches_for_request(
            request, config["default_methods"]
        ):
            print(match)
        return 0

    if args.bundle is None or not args.bundle.is_dir():
        msg = f"Bundle directory not found: {args.bundle}"
        raise SystemExit(msg)

    finder = BundledScriptFinder(ScriptEngineRegistry.from_config(config), config)
    bundle = Bundle(args.bundle.name, root=args.bundle)
    script = finder.get_script(request, bundle, precompiled=False)
    if script is None:
        print(f"No script found for {request.effective_resource_type}")
        return 1

    engine = script.engine.name if script.engine else "unknown"
    print(f"{script.url} ({engine})")
    return 0


def main() -> int:
    """Run the lookup process."""
    ap = argparse.ArgumentParser(
        description="Find the bundled script that serves a request."
    )
    ap.add_argument("resource_type", help="Resource type, optionally type/version")
    ap.add_argument(
        "--bundle",
        type=Path,
        help="Bundle directory containing the script namespace folder",
    )
    ap.add_argument("--method", default="GET", help="HTTP method (default: GET)")
    ap.add_argument("--extension", help="Request extension, e.g. html")
    ap.add_argument(
        "--selector",
        action="append",
        default=[],
        help="Request selector; repeat in request order",
    )
    ap.add_argument(
        "--delegated-resource-type",
        help="Resource type to resolve instead of the request's own",
    )
    ap.add_argument("--config", help="Path to configuration file")
    ap.add_argument(
        "--list-candidates",
        action="store_true",
        help="Print the candidate script paths without probing a bundle",
    )
    ap.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = ap.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run_lookup(args)


if __name__ == "__main__":
    sys.exit(main())
