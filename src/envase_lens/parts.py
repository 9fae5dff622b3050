"""Canonical part names and material deduplication."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from envase_lens.schema import DetectedMaterial

# Synonyms the vision model uses for the same physical part.
PART_SYNONYMS: dict[str, str] = {
    "tapa": "tapón",
    "cap": "tapón",
    "cierre": "tapón",
    "rosca": "tapón",
    "tapa de rosca": "tapón",
    "tapa superior": "tapón",
    "body": "cuerpo",
    "envase": "cuerpo",
    "botella": "cuerpo",
    "recipiente": "cuerpo",
    "contenedor": "cuerpo",
    "label": "etiqueta",
    "handle": "asa",
    "asa de transporte": "asa",
    "film protector": "film",
    "precinto": "film",
    "base inferior": "base",
}


def canonical_part(part: str) -> str:
    """Return the dedup/merge key for a part label."""
    lowered = part.strip().lower()
    return PART_SYNONYMS.get(lowered, lowered)


def dedupe_materials(materials: Iterable[DetectedMaterial]) -> list[DetectedMaterial]:
    """Keep one material per canonical part.

    The higher-confidence entry wins; on an exact tie the entry carrying a
    material code replaces one without. Output keeps first-seen key order.
    """
    seen: dict[str, DetectedMaterial] = {}
    for material in materials:
        key = canonical_part(material.part)
        existing = seen.get(key)
        if existing is None:
            seen[key] = material
            continue
        better_confidence = material.confidence > existing.confidence
        tie_with_code = (
            material.confidence == existing.confidence
            and material.material_code is not None
            and existing.material_code is None
        )
        if better_confidence or tie_with_code:
            seen[key] = material
    return list(seen.values())
