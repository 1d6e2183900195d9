"""Command line entrypoint to generate an outfit from a closet export."""

import argparse
import json
from dataclasses import asdict
from pathlib import Path
from typing import List, Optional

from models.clothing_item import from_storage_row
from outfit_app.app import OutfitGeneratorApp


def _load_closet(path: Path) -> list:
    """Read ``clothing_item`` rows exported as a JSON list."""

    return [asdict(from_storage_row(row)) for row in json.loads(path.read_text())]


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Generate an outfit from your closet.")
    parser.add_argument("closet", type=Path, help="JSON file of clothing_item rows")
    parser.add_argument("--vibe", required=True)
    parser.add_argument("--weather", required=True)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--ignore-outerwear",
        action="store_true",
        help="proceed without a jacket even if the weather calls for one",
    )
    args = parser.parse_args(argv)

    try:
        items = _load_closet(args.closet)
    except ValueError as exc:
        parser.error(f"{args.closet}: {exc}")

    app = OutfitGeneratorApp()
    response = app.generate(
        {
            "vibe": args.vibe,
            "weather": args.weather,
            "items": items,
            "seed": args.seed,
            "ignore_outerwear_requirement": args.ignore_outerwear,
        }
    )
    print(json.dumps(response, indent=2))


if __name__ == "__main__":
    main()
