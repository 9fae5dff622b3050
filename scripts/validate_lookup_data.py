"""Validate product lookup table consistency.

Checks:
1. Entry names are unique and every entry has keywords and materials.
2. Keywords are lowercase and stripped (matching lowercases the product name only).
3. Material references exist in the catalog and resolve to a known collection bin.
4. Packaging types belong to the packaging type enum.
5. No entry lists two materials for the same canonical part.
"""

from __future__ import annotations

import argparse
import runpy
import sys
from pathlib import Path
from typing import get_args

ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
DATA_ROOT = SRC / "envase_lens" / "lookup" / "data"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from envase_lens.compliance.fractions import resolve_fraction  # noqa: E402
from envase_lens.parts import canonical_part  # noqa: E402
from envase_lens.schema import PackagingType  # noqa: E402

VALID_PACKAGING_TYPES = set(get_args(PackagingType))


def fail(message: str) -> None:
    print(f"[lookup-check] ERROR: {message}")
    raise SystemExit(1)


def validate_catalog(catalog: dict[str, dict]) -> None:
    for key, material in catalog.items():
        fraction = resolve_fraction(material.get("material_code"), material.get("material_abbrev"))
        if fraction == "otro":
            fail(f"Catalog material {key} has no collection bin")


def validate_entries(products: list[dict], catalog: dict[str, dict]) -> None:
    names: set[str] = set()
    for entry in products:
        name = entry.get("name")
        if not isinstance(name, str) or not name:
            fail(f"Entry without name: {entry}")
        if name in names:
            fail(f"Duplicate entry name: {name}")
        names.add(name)

        keywords = entry.get("keywords") or []
        if not keywords:
            fail(f"{name}: no keywords")
        for keyword in keywords:
            if keyword != keyword.strip().lower():
                fail(f"{name}: keyword must be lowercase and stripped: {keyword!r}")

        for packaging_type in entry.get("packaging_types", []):
            if packaging_type not in VALID_PACKAGING_TYPES:
                fail(f"{name}: invalid packaging type {packaging_type!r}")

        materials = entry.get("materials") or []
        if not materials:
            fail(f"{name}: no materials")
        parts: set[str] = set()
        for material in materials:
            if material.get("material") not in catalog:
                fail(f"{name}: unknown material reference {material.get('material')!r}")
            part = canonical_part(material.get("part", ""))
            if not part:
                fail(f"{name}: material without part")
            if part in parts:
                fail(f"{name}: duplicate canonical part {part!r}")
            parts.add(part)


def main() -> int:
    parser = argparse.ArgumentParser(description="Validate product lookup data")
    parser.add_argument("--version", default="v1", help="Lookup data version (default: v1)")
    args = parser.parse_args()

    path = DATA_ROOT / args.version / "products.py"
    if not path.exists():
        fail(f"Missing lookup data file: {path}")
    namespace = runpy.run_path(str(path))
    catalog = namespace.get("MATERIALS")
    products = namespace.get("PRODUCTS")
    if not isinstance(catalog, dict) or not isinstance(products, list):
        fail(f"Missing or invalid MATERIALS/PRODUCTS in {path}")

    validate_catalog(catalog)
    validate_entries(products, catalog)
    print(f"[lookup-check] OK: {len(products)} entries, {len(catalog)} catalog materials ({args.version})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
