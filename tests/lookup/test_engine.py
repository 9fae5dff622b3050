"""Tests for the product lookup override."""

from envase_lens import DetectedMaterial
from envase_lens.lookup import LookupRepository, lookup_product_materials, merge_lookup_materials


def _ai(part, confidence, code=None, abbrev=None, name="Detectado", evidence="pista visual"):
    return DetectedMaterial(
        part=part,
        material_name=name,
        material_code=code,
        material_abbrev=abbrev,
        confidence=confidence,
        visual_evidence=evidence,
    )


def test_repository_loads_full_table():
    repo = LookupRepository()
    assert len(repo.entries) == 55
    for entry in repo.entries:
        assert entry.keywords
        assert all(m.inference_method == "lookup" and m.confidence == 1.0 for m in entry.materials)


def test_no_match_returns_none():
    assert lookup_product_materials("Tornillos M8") is None


def test_leche_entera_maps_to_single_composite():
    materials = lookup_product_materials("Leche Entera Pascual 1L")
    assert len(materials) == 1
    assert materials[0].material_code == "81"
    assert materials[0].material_abbrev == "C/PAP"
    assert materials[0].inference_method == "lookup"


def test_match_is_case_insensitive_substring():
    materials = lookup_product_materials("MERMELADA de fresa extra")
    assert [m.material_abbrev for m in materials] == ["GL", "FE"]


def test_packaging_type_disambiguates_beer():
    can = lookup_product_materials("Cerveza Mahou 33cl", "can")
    bottle = lookup_product_materials("Cerveza Mahou 33cl", "bottle")
    assert [m.material_abbrev for m in can] == ["ALU"]
    assert [m.material_abbrev for m in bottle] == ["GL", "FE"]


def test_packaging_type_is_case_insensitive():
    assert [m.material_abbrev for m in lookup_product_materials("Coca Cola", "CAN")] == ["ALU"]


def test_ambiguous_without_type_returns_first_match():
    assert [m.material_abbrev for m in lookup_product_materials("cerveza")] == ["ALU"]


def test_no_type_survivor_falls_back_to_first_match():
    assert [m.material_abbrev for m in lookup_product_materials("cerveza", "tray")] == ["ALU"]


def test_merge_replaces_uncertain_material_keeping_ai_evidence():
    lookup = lookup_product_materials("agua mineral")
    merged = merge_lookup_materials([_ai("botella", 0.6, evidence="botella acanalada")], lookup)
    body = merged[0]
    assert body.material_code == "01"
    assert body.inference_method == "lookup"
    assert body.visual_evidence == "botella acanalada"


def test_merge_uses_lookup_evidence_when_ai_has_none():
    lookup = lookup_product_materials("agua mineral")
    merged = merge_lookup_materials([_ai("cuerpo", 0.5, evidence="")], lookup)
    assert merged[0].visual_evidence == "Botella PET transparente estándar para agua mineral"


def test_merge_keeps_confident_ai_material():
    lookup = lookup_product_materials("agua mineral")
    ai = _ai("cuerpo", 0.92, "02", "HDPE")
    merged = merge_lookup_materials([ai], lookup)
    assert merged[0] == ai


def test_merge_confident_without_code_is_replaced():
    lookup = lookup_product_materials("agua mineral")
    merged = merge_lookup_materials([_ai("cuerpo", 0.95)], lookup)
    assert merged[0].material_code == "01"


def test_merge_appends_unmatched_lookup_parts():
    lookup = lookup_product_materials("agua mineral")
    merged = merge_lookup_materials([_ai("etiqueta", 0.9, "05", "PP")], lookup)
    assert [m.part for m in merged] == ["etiqueta", "cuerpo", "tapón"]


def test_merge_consumes_lookup_even_when_ai_kept():
    lookup = lookup_product_materials("agua mineral")
    merged = merge_lookup_materials([_ai("tapa", 0.9, "05", "PP")], lookup)
    parts = [m.part for m in merged]
    assert parts.count("tapón") == 0
    assert parts == ["tapa", "cuerpo"]


def test_merge_dedupes_repeated_ai_parts():
    lookup = lookup_product_materials("agua mineral")
    merged = merge_lookup_materials([_ai("tapa", 0.5), _ai("cap", 0.7)], lookup)
    caps = [m for m in merged if m.part in {"tapa", "cap", "tapón"}]
    assert len(caps) == 1
    assert caps[0].inference_method == "lookup"
