#!/usr/bin/env python3
"""
Command-line shell for the artwork engine.

Reads the source root and target roots from the command line or from the
JSON settings sidecar, runs one stage or the whole pipeline, and prints a
summary per stage.
"""
import argparse
import sys
from pathlib import Path

from plexart import __version__
from plexart.pipeline import PIPELINE_ORDER, OperationKind, run_all, run_stage
from plexart.utils import EngineIOError, LogLevel, logger
from plexart.utils.constants import SETTINGS_FILE
from plexart.utils.settings import Settings, load_settings, save_settings

STAGE_ALL = "all"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="plexart",
        description="Match downloaded artwork against a Plex-style show library, "
                    "rename it to media-server names and move it into place.",
        epilog='Example: plexart all --source ~/Downloads/art --target "/media/TV Shows"'
    )
    parser.add_argument("stage", nargs="?", default=STAGE_ALL,
                        choices=[STAGE_ALL] + [k.value for k in OperationKind],
                        help="Stage to run (default: all)")
    parser.add_argument("--source", help="Source folder with downloaded artwork and archives")
    parser.add_argument("--target", action="append", default=None,
                        help="Target library root holding 'Name (YYYY)' folders; repeat for several roots")
    parser.add_argument("--extractor", help="Path to the 7-Zip executable (default: auto-detect)")
    parser.add_argument("--settings", default=SETTINGS_FILE,
                        help=f"Settings JSON with last used paths (default: {SETTINGS_FILE})")
    parser.add_argument("--save", action="store_true", help="Save the source/target paths to the settings file")
    parser.add_argument("--no-progress", action="store_true", help="Disable progress bars")
    parser.add_argument("--debug", action="store_true", help="Enable debug output")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logger.set_log_level(LogLevel.DEBUG if args.debug else LogLevel.INFO)

    settings_path = Path(args.settings).expanduser()
    stored = load_settings(settings_path)
    source = args.source or stored.source
    targets = args.target or stored.targets

    if not source or not targets:
        print("ERROR: a source folder and at least one target folder are required "
              "(use --source/--target or a settings file).", file=sys.stderr)
        return 2

    if args.save:
        save_settings(settings_path, Settings(source=source, targets=list(targets)))

    source_root = Path(source).expanduser()
    target_roots = [Path(t).expanduser() for t in targets]
    progress = not args.no_progress

    try:
        if args.stage == STAGE_ALL:
            results = run_all(source_root, target_roots, args.extractor, progress=progress)
        else:
            kind = OperationKind(args.stage)
            results = {kind: run_stage(kind, source_root, target_roots, args.extractor, progress=progress)}
    except EngineIOError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    print()
    failed = False
    for kind in PIPELINE_ORDER:
        if kind not in results:
            continue
        result = results[kind]
        failed = failed or not result.ok
        print(f"{kind.value:<10} {result.outcome.value:<24} changed={result.changed} "
              f"unrecognized={result.unrecognized} errors={len(result.errors)}")
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
