"""Command line entry point for running the demo pipelines."""

import argparse
import sys
from pathlib import Path
from typing import Any, Optional

from .demo import DEFAULT_PIPELINE, PIPELINES, DemoRunner
from .errors import CollectionError

EXIT_OK = 0
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="collkit",
        description="Run collection-helper example pipelines over a record dataset",
    )
    ap.add_argument("pipeline", nargs="?", default=DEFAULT_PIPELINE,
                    help=f"Pipeline to run (default: {DEFAULT_PIPELINE})")
    ap.add_argument("--list", action="store_true", help="List pipeline names and exit")
    ap.add_argument("--all", action="store_true", help="Run every pipeline in order")
    ap.add_argument("--data", metavar="PATH", help="YAML or JSON dataset instead of the sample")
    ap.add_argument("--config-dir", metavar="DIR", type=Path,
                    help="Directory holding collkit.yaml (default: working directory)")
    ap.add_argument("--format", choices=["pretty", "json"], help="Output format")
    ap.add_argument("--log-level", metavar="LEVEL", help="Logging level, e.g. DEBUG")
    ap.add_argument("--log-json", action="store_true", help="Emit logs as JSON lines")
    return ap


def overrides_from_args(args: argparse.Namespace) -> dict[str, Any]:
    """Turn the flags the user actually set into a config override dict."""
    overrides: dict[str, Any] = {}
    if args.data:
        overrides.setdefault("dataset", {})["path"] = args.data
    if args.format:
        overrides.setdefault("output", {})["format"] = args.format
    if args.log_level:
        overrides.setdefault("logging", {})["level"] = args.log_level
    if args.log_json:
        overrides.setdefault("logging", {})["format_json"] = True
    return overrides


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.list:
        for name, pipeline in PIPELINES.items():
            summary = (pipeline.__doc__ or "").strip().split("\n")[0]
            print(f"{name:<18} {summary}")
        return EXIT_OK

    try:
        runner = DemoRunner.create(args.config_dir, overrides_from_args(args))
        names = list(PIPELINES) if args.all else [args.pipeline]
        for name in names:
            if args.all:
                print(f"# {name}")
            print(runner.render(name))
    except CollectionError as e:
        print(f"collkit: error: {e}", file=sys.stderr)
        return EXIT_USAGE

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
