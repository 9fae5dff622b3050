"""Compliance checklist for a packaging label per RD 1055/2022 (BOE-A-2022-22199)."""

from __future__ import annotations

from collections.abc import Sequence

from envase_lens.compliance.fractions import MaterialLike, resolve_fraction
from envase_lens.schema import ComplianceItem, MandatoryMarkingInputs, PackagingUse

REGULATORY_VERSION = "RD 1055/2022"
REGULATORY_DATE = "27 de diciembre de 2022"
EXPECTED_REGULATORY_VERSION = "RD 1055/2022"

# Used when legal retrieval finds nothing, so a label always cites its basis.
FALLBACK_LEGAL_CONTEXT = (
    "Etiquetado conforme al artículo 13 del Real Decreto 1055/2022, de 27 de diciembre,\n"
    "sobre envases y residuos de envases.\n"
    "Envase doméstico. Obligación de indicar la fracción de recogida separada conforme al Anexo II.\n"
    "Versión reglamentaria: RD 1055/2022 (BOE-A-2022-22199)."
)

# Display-only notice, never part of the checklist.
PPWR_NOTICE = {
    "label": "Reglamento (UE) 2025/40 (PPWR)",
    "detail": "Aplicable a partir de agosto 2026 — sin impacto normativo hasta esa fecha",
    "article": "Reglamento (UE) 2025/40 — DO L 2025/40",
    "obligation": "upcoming",
}

_USE_LABEL: dict[str, str] = {
    "household": "Doméstico",
    "commercial": "Comercial",
    "industrial": "Industrial",
}


def validate_compliance(
    materials: Sequence[MaterialLike],
    packaging_use: PackagingUse = "household",
    marking: MandatoryMarkingInputs | None = None,
    *,
    regulatory_version: str = REGULATORY_VERSION,
) -> list[ComplianceItem]:
    """Build the checklist for a set of materials.

    Five base items are always present. Marking inputs add four more
    (compostability, SUP pictograms, reuse marking, SDDR).
    """
    all_identified = len(materials) > 0 and all(
        m.material_code is not None or m.material_abbrev is not None for m in materials
    )
    all_fractions_known = len(materials) > 0 and all(
        resolve_fraction(m.material_code, m.material_abbrev) != "otro" for m in materials
    )
    is_household = packaging_use == "household"

    if not is_household:
        fraction_detail = (
            "No aplica — envase no doméstico: exento de indicar fracción de recogida separada (Art. 13.2)"
        )
    elif all_fractions_known:
        fraction_detail = "Todos los materiales tienen contenedor de recogida asignado"
    else:
        fraction_detail = "Algunos materiales no tienen fracción de recogida conocida"

    items = [
        ComplianceItem(
            check="Material identificado",
            passed=all_identified,
            detail=(
                f"{len(materials)} material(es) con código de identificación"
                if all_identified
                else "Faltan códigos en uno o más materiales"
            ),
            obligation="mandatory",
            article="Art. 13.1 RD 1055/2022",
        ),
        ComplianceItem(
            check="Indicación de contenedor (Art. 13.2 — Solo envases domésticos)",
            passed=all_fractions_known if is_household else True,
            detail=fraction_detail,
            obligation="mandatory",
            article="Art. 13.2 RD 1055/2022",
        ),
        ComplianceItem(
            check=f"Texto conforme {regulatory_version}",
            passed=True,
            detail=f"{regulatory_version} — {REGULATORY_DATE} · Art. 13 · Anexo II · BOE-A-2022-22199",
            obligation="mandatory",
            article="Art. 13 RD 1055/2022 (BOE-A-2022-22199)",
        ),
        # Enforced separately by the greenwashing gate before generation.
        ComplianceItem(
            check="Sin claims medioambientales no permitidos",
            passed=True,
            detail="Sin declaraciones ambientales genéricas",
            obligation="mandatory",
            article="Art. 13.3 RD 1055/2022 · Dir. UE 2024/825",
        ),
        ComplianceItem(
            check="Versión reglamentaria validada",
            passed=regulatory_version == EXPECTED_REGULATORY_VERSION,
            detail=f"{regulatory_version} — {REGULATORY_DATE} — Uso: {_USE_LABEL.get(packaging_use, 'Doméstico')}",
            obligation="mandatory",
            article="RD 1055/2022 (BOE-A-2022-22199)",
        ),
    ]

    if marking is not None:
        items.extend(_marking_items(marking))
    return items


def _marking_items(marking: MandatoryMarkingInputs) -> list[ComplianceItem]:
    # No certificate verification exists, so a compostability or SUP claim
    # stays unmet until someone follows it up with documents.
    return [
        ComplianceItem(
            check="Compostabilidad certificada (Art. 13.5)",
            passed=not marking.is_compostable,
            detail=(
                "Requiere certificación UNE EN 13432:2001 — inclúyela en el etiquetado"
                if marking.is_compostable
                else "No aplica — envase no compostable"
            ),
            obligation="mandatory",
            article="Art. 13.5 RD 1055/2022",
        ),
        ComplianceItem(
            check="Pictogramas plástico de un solo uso SUP (Art. 13.7)",
            passed=not marking.is_sup,
            detail=(
                "Requiere pictogramas obligatorios EU 2020/2151 conforme Art. 13.7"
                if marking.is_sup
                else "No aplica — envase no es plástico de un solo uso"
            ),
            obligation="mandatory",
            article="Art. 13.7 RD 1055/2022 · Dir. UE 2020/2151",
        ),
        # The label renderer includes the reuse marking itself.
        ComplianceItem(
            check="Indicación de reutilización (Art. 13.2)",
            passed=True,
            detail=(
                "Condición de reutilización indicada en etiqueta (Art. 13.2)"
                if marking.is_reusable
                else "No aplica — envase no reutilizable"
            ),
            obligation="mandatory",
            article="Art. 13.2 RD 1055/2022",
        ),
        ComplianceItem(
            check="Sistema de depósito SDDR (Arts. 46.8, 47.7)",
            passed=True,
            detail=(
                "Próximamente obligatorio — SDDR en fase de implantación. No es exigible actualmente."
                if marking.is_sddr
                else "No aplica — envase no incluido en SDDR"
            ),
            obligation="upcoming",
            article="Arts. 46.8 · 47.7 RD 1055/2022",
        ),
    ]


def blocking_failures(items: Sequence[ComplianceItem]) -> list[ComplianceItem]:
    """Mandatory items that explicitly failed."""
    return [item for item in items if item.obligation == "mandatory" and item.passed is False]
