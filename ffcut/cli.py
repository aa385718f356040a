"""Thin CLI entry point — builds a Manifest and calls the engine."""

import argparse
import logging
import sys
from decimal import Decimal, InvalidOperation
from pathlib import Path

from ffcut.engine import process
from ffcut.errors import FFCutError
from ffcut.manifest import CutOptions, Manifest, load_manifest


def _seconds(value: str) -> Decimal:
    try:
        seconds = Decimal(value)
    except InvalidOperation:
        seconds = None
    if seconds is None or not seconds.is_finite():
        raise argparse.ArgumentTypeError(f"not a number of seconds: {value!r}")
    return seconds


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ffcut",
        description="ffcut — cut video files into parts via ffmpeg stream copy.",
    )
    sub = parser.add_subparsers(dest="command")

    cut = sub.add_parser(
        "cut",
        help="Cut a file at the given times",
        epilog=(
            "Times are clock digits (130 = 1:30) or seconds with --seconds; "
            "'10-20' is a range, '10-20-30' two ranges, '-15' starts at 0, "
            "'15-' runs to the end, commas separate ranges. "
            "Put '--' before times such as '-1,5' that look like options."
        ),
    )
    cut.add_argument("args", nargs="*", help="Input file, time ranges and an optional output postfix")
    cut.add_argument("--manifest", "-m", type=Path, help="Path to a JSON manifest file")
    cut.add_argument(
        "--seconds", "-s", action="store_true",
        help="Read times as seconds (15123.3 -> 4h12m3.3s) instead of clock digits (15123.3 -> 1h51m23.3s)",
    )
    cut.add_argument(
        "--dry-run", "--dryRun", "-d", dest="dry_run", action="store_true",
        help="Print the ffmpeg commands without running them",
    )
    cut.add_argument("--verbose", "-v", action="store_true", help="Print commands and ffmpeg output")
    cut.add_argument("--before-context", "-b", type=_seconds, default=Decimal(0), help="Seconds to keep before each start")
    cut.add_argument("--after-context", "-a", type=_seconds, default=Decimal(0), help="Seconds to keep after each end")
    cut.add_argument("--context", "-c", type=_seconds, default=Decimal(0), help="Seconds used for whichever of before/after is unset")
    cut.add_argument("--pick", "-p", type=str, default="", help="Comma-separated 1-based parts to produce (default: all)")
    cut.add_argument("--safe-index", "-k", action="store_true", help="Move starts back to the nearest keyframe")

    serve = sub.add_parser("serve", help="Launch the planning web API")
    serve.add_argument("--port", type=int, default=8322, help="Port to listen on")
    serve.add_argument("--host", type=str, default="127.0.0.1", help="Host to bind to")

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "serve":
        from ffcut.web import create_app
        app = create_app()
        print(f"ffcut API: http://{args.host}:{args.port}")
        app.run(host=args.host, port=args.port, debug=False)
        return

    try:
        if args.manifest:
            m = load_manifest(args.manifest)
        else:
            m = Manifest(
                args=args.args,
                options=CutOptions(
                    seconds=args.seconds,
                    dry_run=args.dry_run,
                    verbose=args.verbose,
                    before_context=args.before_context,
                    after_context=args.after_context,
                    context=args.context,
                    pick=args.pick,
                    safe_index=args.safe_index,
                ),
            )
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    logging.basicConfig(
        level=logging.INFO if m.options.verbose else logging.WARNING,
        format="%(message)s",
    )

    def on_progress(stage: str, frac: float) -> None:
        print(f"  [{frac:3.0%}] {stage}")

    try:
        result = process(m, on_progress=on_progress if m.options.verbose else None)
    except FFCutError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if result.dry_run:
        for command in result.commands:
            print(command.command())
        return

    done = len(result.outcomes) - len(result.failures)
    print(f"Done! {done}/{len(result.commands)} parts written")
    for outcome in result.outcomes:
        if outcome.ok:
            print(f"  {outcome.command.output_path}")
    if result.failures:
        for outcome in result.failures:
            print(f"  failed part {outcome.command.number}: {outcome.error}", file=sys.stderr)
        sys.exit(1)
