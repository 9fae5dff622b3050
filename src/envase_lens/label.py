"""Structured label content handed to a renderer."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Literal

from pydantic import BaseModel, Field

from envase_lens.compliance.checklist import PPWR_NOTICE, REGULATORY_VERSION, validate_compliance
from envase_lens.compliance.fractions import resolve_fraction, resolve_inseparable_group_fraction
from envase_lens.compliance.greenwashing import ensure_no_blocking_claims
from envase_lens.schema import (
    ComplianceItem,
    ContainerFraction,
    DetectedMaterial,
    GreenwashingViolation,
    MandatoryMarkingInputs,
    PackagingAnalysis,
    PackagingUse,
)

FRACTION_LABELS: dict[str, str] = {
    "amarillo": "Contenedor amarillo",
    "azul": "Contenedor azul",
    "verde": "Contenedor verde",
    "otro": "Consulta punto limpio",
}


class LabelRow(BaseModel):
    """One material line; composite rows group every inseparable part."""

    kind: Literal["single", "composite"]
    parts: list[str]
    codes: list[str | None]
    abbrevs: list[str | None]
    fraction: ContainerFraction
    fraction_label: str


class LabelPayload(BaseModel):
    company_name: str
    cif: str
    product_name: str
    packaging_use: PackagingUse
    rows: list[LabelRow]
    compliance_items: list[ComplianceItem]
    marking: MandatoryMarkingInputs | None = None
    regulatory_version: str
    generated_at: str
    warnings: list[GreenwashingViolation] = Field(default_factory=list)
    upcoming_notice: dict[str, str] = Field(default_factory=lambda: dict(PPWR_NOTICE))


def _single_row(material: DetectedMaterial) -> LabelRow:
    fraction = resolve_fraction(material.material_code, material.material_abbrev)
    return LabelRow(
        kind="single",
        parts=[material.part],
        codes=[material.material_code],
        abbrevs=[material.material_abbrev],
        fraction=fraction,
        fraction_label=FRACTION_LABELS[fraction],
    )


def build_label_rows(materials: list[DetectedMaterial]) -> list[LabelRow]:
    """Separable or unannotated materials first, then one composite row."""
    rows = [_single_row(m) for m in materials if m.separability != "inseparable"]
    inseparable = [m for m in materials if m.separability == "inseparable"]
    if inseparable:
        fraction = resolve_inseparable_group_fraction(inseparable)
        rows.append(
            LabelRow(
                kind="composite",
                parts=[m.part for m in inseparable],
                codes=[m.material_code for m in inseparable],
                abbrevs=[m.material_abbrev for m in inseparable],
                fraction=fraction,
                fraction_label=FRACTION_LABELS[fraction],
            )
        )
    return rows


def build_label_payload(
    analysis: PackagingAnalysis,
    *,
    product_name: str,
    company_name: str,
    cif: str,
    packaging_use: PackagingUse | None = None,
    marking: MandatoryMarkingInputs | None = None,
    compliance_items: list[ComplianceItem] | None = None,
    generated_at: str | None = None,
) -> LabelPayload:
    """Assemble label content after the greenwashing gate.

    Raises:
        BlockingClaimsError: If the product name or notes carry a prohibited claim.
    """
    warnings = ensure_no_blocking_claims(product_name, analysis.notes)

    use = packaging_use or analysis.packaging_use or "household"
    marking = marking or analysis.marking_inputs
    if compliance_items is None:
        compliance_items = validate_compliance(analysis.materials, use, marking)

    return LabelPayload(
        company_name=company_name,
        cif=cif,
        product_name=product_name,
        packaging_use=use,
        rows=build_label_rows(analysis.materials),
        compliance_items=compliance_items,
        marking=marking,
        regulatory_version=REGULATORY_VERSION,
        generated_at=generated_at or datetime.now(timezone.utc).isoformat(),
        warnings=warnings,
    )
