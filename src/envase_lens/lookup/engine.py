"""Product lookup override and merge with vision results."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from functools import lru_cache

from envase_lens.lookup.repository import LookupRepository
from envase_lens.parts import canonical_part, dedupe_materials
from envase_lens.schema import CONFIDENCE_THRESHOLD, DetectedMaterial

logger = logging.getLogger(__name__)


@lru_cache(maxsize=4)
def _repository(version: str) -> LookupRepository:
    return LookupRepository(version=version)


def lookup_product_materials(
    product_name: str,
    ai_packaging_type: str | None = None,
    *,
    version: str = "v1",
) -> list[DetectedMaterial] | None:
    """Return pre-mapped materials for a known product, or None.

    Keywords are matched as case-insensitive substrings of the product
    name. When several entries match, the detected packaging type narrows
    them down; entries without a type restriction always stay eligible.
    The first survivor wins, falling back to the first match overall.
    """
    matches = _repository(version).find(product_name)
    if not matches:
        return None
    if len(matches) == 1 or not ai_packaging_type:
        return list(matches[0].materials)

    eligible = [entry for entry in matches if entry.accepts_packaging_type(ai_packaging_type)]
    chosen = eligible[0] if eligible else matches[0]
    return list(chosen.materials)


def _is_confident(material: DetectedMaterial) -> bool:
    return material.confidence >= CONFIDENCE_THRESHOLD and material.material_code is not None


def merge_lookup_materials(
    ai_materials: Sequence[DetectedMaterial],
    lookup_materials: Sequence[DetectedMaterial],
) -> list[DetectedMaterial]:
    """Merge lookup materials into vision materials by canonical part.

    A lookup entry is consumed by the first vision material with the same
    canonical part. It replaces that material unless the vision result is
    confident (high confidence and a code). Unconsumed lookup materials
    are appended.
    """
    pending: dict[str, DetectedMaterial] = {}
    for material in lookup_materials:
        pending[canonical_part(material.part)] = material

    merged: list[DetectedMaterial] = []
    for ai_material in ai_materials:
        matched = pending.pop(canonical_part(ai_material.part), None)
        if matched is None or _is_confident(ai_material):
            merged.append(ai_material)
            continue
        evidence = ai_material.visual_evidence or matched.visual_evidence
        merged.append(matched.model_copy(update={"visual_evidence": evidence}))

    merged.extend(pending.values())
    result = dedupe_materials(merged)
    logger.debug("lookup merge: %d vision, %d lookup -> %d", len(ai_materials), len(lookup_materials), len(result))
    return result
