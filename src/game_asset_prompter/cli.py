"""Command-line interface for the asset prompter.

This module provides the CLI entry point for scanning asset folders into a
manifest and for turning prompts into game configs.
"""

import argparse
import json
import logging
import random
import sys
from pathlib import Path

from .core.validator import validate_manifest_with_error_details
from .design import build_design
from .generator import generate_config
from .manifest import dump_manifest, load_manifest, write_manifest
from .scanner import ScanConfig, scan_assets


def _cmd_scan(args: argparse.Namespace) -> int:
    assets_dir = Path(args.assets_dir)
    if assets_dir.exists() and not assets_dir.is_dir():
        print(f"Error: Path is not a directory: {assets_dir}", file=sys.stderr)
        return 1

    config = ScanConfig(
        assets_dir=assets_dir,
        public_root=Path(args.public_root) if args.public_root else None,
        max_workers=args.workers,
    )

    print(f"Scanning directory: {assets_dir.resolve()}", file=sys.stderr)
    manifest = scan_assets(config)
    print(
        f"Found {len(manifest['backgrounds'])} backgrounds, {len(manifest['players'])} players",
        file=sys.stderr,
    )

    print("Validating manifest against schema...", file=sys.stderr)
    is_valid, error_msg = validate_manifest_with_error_details(manifest)
    if not is_valid:
        print("Error: Manifest validation failed:", file=sys.stderr)
        print(error_msg, file=sys.stderr)
        return 1

    if args.output:
        output = Path(args.output)
        write_manifest(manifest, output)
        print(f"Wrote {output}", file=sys.stderr)
    else:
        sys.stdout.write(dump_manifest(manifest))
    return 0


def _cmd_generate(args: argparse.Namespace) -> int:
    manifest = load_manifest(Path(args.manifest))

    design = None
    if args.design:
        rng = random.Random(args.seed) if args.seed is not None else None
        design = build_design(args.prompt, manifest, rng)

    config = generate_config(args.prompt, manifest, design)
    json.dump(config, sys.stdout, indent=2)
    print()
    return 0


def _cmd_design(args: argparse.Namespace) -> int:
    manifest = load_manifest(Path(args.manifest))
    rng = random.Random(args.seed) if args.seed is not None else None
    json.dump(build_design(args.prompt, manifest, rng), sys.stdout, indent=2)
    print()
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="game-assets",
        description="Classify game image assets and turn prompts into game configs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Rebuild the manifest
  game-assets scan --assets-dir assets --output assets/manifest.json

  # Config for a prompt
  game-assets generate --manifest assets/manifest.json --prompt "fast zombie forest"

  # Randomized design brief, reproducible with a seed
  game-assets design --manifest assets/manifest.json --prompt "" --seed 7
        """,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    scan = subparsers.add_parser("scan", help="Scan asset folders and build the manifest")
    scan.add_argument("--assets-dir", default="assets", help="Root of the asset folders")
    scan.add_argument(
        "--public-root",
        help="Directory entry paths are relative to (default: parent of --assets-dir)",
    )
    scan.add_argument("--output", help="Manifest file to write (default: stdout)")
    scan.add_argument("--workers", type=int, help="Threads used to read image headers")
    scan.set_defaults(func=_cmd_scan)

    for name, func, help_text in (
        ("generate", _cmd_generate, "Build a game config from a prompt"),
        ("design", _cmd_design, "Build a randomized design brief from a prompt"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("--manifest", default="assets/manifest.json", help="Manifest file to read")
        sub.add_argument("--prompt", default="", help="Free-text prompt")
        sub.add_argument("--seed", type=int, help="Seed for the random design choices")
        sub.set_defaults(func=func)

    parser_generate = subparsers.choices["generate"]
    parser_generate.add_argument(
        "--design", action="store_true", help="Pick assets through a randomized design brief"
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the game-assets command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        exit_code = args.func(args)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
