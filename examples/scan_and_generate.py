"""Scan an asset folder and build configs for a few prompts.

This example demonstrates how to:
- Scan an assets directory into a manifest
- Validate and save the manifest
- Turn prompts into game configs
- Build a seeded design brief
"""

import json
import random
import sys
from pathlib import Path

from game_asset_prompter import (
    ScanConfig,
    build_design,
    generate_config,
    scan_assets,
    validate_manifest_with_error_details,
    write_manifest,
)


def main():
    # Change this to your game's asset directory
    assets_dir = Path("public") / "assets"

    if not assets_dir.exists():
        print(f"Directory not found: {assets_dir}", file=sys.stderr)
        print("Please update the assets_dir variable in this script", file=sys.stderr)
        return

    print(f"Scanning directory: {assets_dir}", file=sys.stderr)
    manifest = scan_assets(ScanConfig(assets_dir=assets_dir))

    is_valid, error = validate_manifest_with_error_details(manifest)
    if not is_valid:
        print(f"Manifest is invalid: {error}", file=sys.stderr)
        return

    print(f"\n✓ Manifest generated successfully", file=sys.stderr)
    print(f"  Backgrounds: {len(manifest['backgrounds'])}", file=sys.stderr)
    print(f"  Players: {len(manifest['players'])}", file=sys.stderr)

    output_file = assets_dir / "manifest.json"
    write_manifest(manifest, output_file)
    print(f"\nManifest saved to {output_file}", file=sys.stderr)

    for prompt in ("fast zombie forest", "low gravity space shooter", ""):
        config = generate_config(prompt, manifest)
        print(f"\nPrompt: {prompt!r}", file=sys.stderr)
        print(json.dumps(config, indent=2))

    design = build_design("", manifest, random.Random(7))
    print(f"\nDesign brief (seed 7): theme={design['theme']} role={design['role']}", file=sys.stderr)
    print(json.dumps(generate_config("", manifest, design), indent=2))


if __name__ == '__main__':
    main()
