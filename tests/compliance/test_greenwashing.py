"""Tests for the greenwashing scanner."""

import pytest

from envase_lens.compliance import ensure_no_blocking_claims, has_blocking_violations, scan_for_prohibited_language
from envase_lens.compliance.greenwashing import BLOCKING_MESSAGE, scan_texts
from envase_lens.exceptions import BlockingClaimsError


def _patterns(text):
    return [v.pattern for v in scan_for_prohibited_language(text)]


def test_empty_text_has_no_violations():
    assert scan_for_prohibited_language("") == []
    assert scan_for_prohibited_language("   ") == []
    assert scan_for_prohibited_language(None) == []


def test_clean_text_has_no_violations():
    assert scan_for_prohibited_language("Agua mineral natural 1,5 L") == []


def test_eco_friendly_variants_blocked():
    for text in ["Envase eco-friendly", "ECO FRIENDLY", "ecofriendly pack"]:
        violations = scan_for_prohibited_language(text)
        assert violations and violations[0].severity == "error"


def test_respetuoso_blocked():
    violations = scan_for_prohibited_language("Respetuosa con el medio ambiente")
    assert violations[0].pattern == '"respetuoso con el medio ambiente"'
    assert violations[0].matched == "Respetuosa con el medio ambiente"


def test_unqualified_sostenible_blocked():
    violations = scan_for_prohibited_language("Envase sostenible")
    assert has_blocking_violations(violations)


def test_qualified_sostenible_allowed():
    assert scan_for_prohibited_language("Envase sostenible certificado") == []
    assert scan_for_prohibited_language("sostenible según norma ISO 14021") == []
    assert scan_for_prohibited_language("sostenible, verificado por AENOR") == []


def test_carbono_neutro_needs_methodology():
    assert has_blocking_violations(scan_for_prohibited_language("Producto carbono neutro"))
    assert scan_for_prohibited_language("carbono neutro certificado") == []
    assert scan_for_prohibited_language("carbono neutro bajo metodología PAS 2060") == []


def test_100_natural_blocked():
    assert _patterns("Zumo 100 % natural") == ['"100% natural"']


def test_envase_verde_blocked():
    assert '"envase verde"' in _patterns("Nuestro envase verde")


def test_reciclable_is_warning_only():
    violations = scan_for_prohibited_language("Botella reciclable")
    assert [v.severity for v in violations] == ["warning"]
    assert not has_blocking_violations(violations)


def test_biodegradable_qualified_allowed():
    assert scan_for_prohibited_language("biodegradable según norma UNE EN 13432") == []
    assert [v.severity for v in scan_for_prohibited_language("bolsa biodegradable")] == ["warning"]


def test_one_violation_per_pattern():
    violations = scan_for_prohibited_language("eco-friendly y también eco friendly")
    assert len(violations) == 1
    assert violations[0].matched == "eco-friendly"


def test_results_follow_table_order():
    patterns = _patterns("reciclable y eco-friendly")
    assert patterns[0] == '"eco-friendly"'
    assert patterns[1].startswith('"reciclable"')


def test_scan_texts_does_not_match_across_fields():
    assert scan_texts("Zumo de naranja 100%", "Natural: botella de vidrio con tapón metálico") == []
    assert scan_texts("Agua eco", None, "friendly") == []


def test_scan_texts_keeps_first_match_per_pattern():
    violations = scan_texts("Tarro reciclable", None, "Envase verde", "Tapa Reciclable")
    assert [(v.pattern, v.matched) for v in violations] == [
        ('"reciclable" (verificar reciclabilidad real en sistemas municipales españoles)', "reciclable"),
        ('"envase verde"', "Envase verde"),
    ]


def test_gate_raises_with_error_violations_only():
    with pytest.raises(BlockingClaimsError) as excinfo:
        ensure_no_blocking_claims("Envase verde reciclable", "")
    assert str(excinfo.value) == BLOCKING_MESSAGE
    assert [v.severity for v in excinfo.value.violations] == ["error"]


def test_gate_returns_warnings_when_allowed():
    warnings = ensure_no_blocking_claims("Botella reciclable", "sin notas")
    assert [v.severity for v in warnings] == ["warning"]
