"""Command-line interface for envase-lens."""

import argparse
import sys

from envase_lens import __version__, analyze
from envase_lens.exceptions import EnvaseLensError

_FRACTION_NAMES = {
    "amarillo": "Amarillo",
    "azul": "Azul",
    "verde": "Verde",
    "otro": "Punto limpio",
}


def main() -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="envase-lens",
        description="Identify packaging materials and RD 1055/2022 labeling obligations",
    )
    parser.add_argument("images", nargs="+", help="Paths to packaging photos (first is the primary view)")
    parser.add_argument("--product", default="Producto", help="Commercial product name")
    parser.add_argument(
        "--use",
        choices=["household", "commercial", "industrial"],
        default="household",
        help="Packaging use (default: household)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )
    parser.add_argument(
        "--api-key",
        help="Gemini API key (default: GEMINI_API_KEY env var)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"envase-lens {__version__}",
    )

    args = parser.parse_args()

    try:
        result = analyze(args.images, product_name=args.product, packaging_use=args.use, api_key=args.api_key)
    except EnvaseLensError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if args.json:
        print(result.model_dump_json(indent=2))
    else:
        _print_formatted(result)

    return 0


def _print_formatted(result) -> None:
    """Print result in human-readable format."""
    analysis = result.analysis
    print()
    print("  envase-lens")
    print()
    print(f"  {'Tipo:':<14} {analysis.packaging_type}")
    print(f"  {'Confianza:':<14} {analysis.overall_confidence:.0%}")
    if result.lookup_applied:
        print(f"  {'Tabla:':<14} producto reconocido")
    print()

    for m in analysis.materials:
        code = " ".join(p for p in [m.material_code, m.material_abbrev] if p) or "-"
        fraction = _FRACTION_NAMES[result.container_fractions.get(m.part, "otro")]
        print(f"  {m.part + ':':<14} {m.material_name} [{code}] -> {fraction} ({m.confidence:.0%})")

    if analysis.guided_query_required:
        print()
        print("  ! Confirma los materiales de baja confianza antes de generar la etiqueta")

    print()
    for item in result.compliance_items:
        mark = "-" if item.passed is None else ("OK" if item.passed else "NO")
        print(f"  [{mark:>2}] {item.check}")

    for violation in result.greenwashing_violations:
        print(f"  ! {violation.severity}: {violation.pattern} ({violation.article})")

    print()


if __name__ == "__main__":
    sys.exit(main())
