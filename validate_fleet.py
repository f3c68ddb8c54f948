#!/usr/bin/env python3
"""
Check fleet YAML files before handing them to the fleet CLI.

Reports every schema violation in a file, and warns about vehicle ids that
appear more than once: the agency rents and returns the first match, so a
later duplicate is only reachable while the earlier ones are rented.
"""

import argparse
import sys
from collections import Counter
from pathlib import Path
from typing import Any, List, Tuple

import yaml

from rental.loader import fleet_errors, read_fleet

DEFAULT_FLEETS_DIR = Path(__file__).parent / "fleets"


def duplicate_ids(data: Any) -> List[str]:
    """Vehicle ids listed more than once, in first-seen order."""
    ids = [v.get("id") for v in data.get("vehicles") or [] if isinstance(v, dict)]
    counts = Counter(ids)
    return [vid for vid in dict.fromkeys(ids) if counts[vid] > 1]


def check_fleet_file(filepath: Path) -> Tuple[List[str], List[str]]:
    """Check a single fleet file. Returns (errors, warnings)."""
    try:
        data = read_fleet(filepath)
    except yaml.YAMLError as e:
        return [f"YAML parse error: {e}"], []
    except OSError as e:
        return [f"Error: {e}"], []

    errors = fleet_errors(data)
    if errors:
        return errors, []
    warnings = [
        f"Duplicate vehicle id '{vid}': only the first available match is rented"
        for vid in duplicate_ids(data)
    ]
    return [], warnings


def collect_files(paths: List[Path]) -> List[Path]:
    """Expand directories into the YAML files they contain."""
    files = []
    for path in paths:
        if path.is_dir():
            files.extend(sorted(list(path.glob("*.yaml")) + list(path.glob("*.yml"))))
        else:
            files.append(path)
    return files


def main(argv=None):
    parser = argparse.ArgumentParser(description="Validate fleet YAML files")
    parser.add_argument(
        "paths",
        type=Path,
        nargs="*",
        help="Fleet files or directories (default: fleets/)",
    )
    args = parser.parse_args(argv)
    paths = args.paths or [DEFAULT_FLEETS_DIR]

    missing = [p for p in paths if not p.exists()]
    if missing:
        for path in missing:
            print(f"Error: not found: {path}")
        return 1

    files = collect_files(paths)
    if not files:
        print("Warning: No YAML files found")
        return 0

    all_valid = True
    for filepath in files:
        errors, warnings = check_fleet_file(filepath)
        if errors:
            print(f"FAIL: {filepath.name}")
            for error in errors:
                print(f"  {error}")
            all_valid = False
        else:
            print(f"OK: {filepath.name}")
        for warning in warnings:
            print(f"  Warning: {warning}")

    return 0 if all_valid else 1


if __name__ == "__main__":
    sys.exit(main())
