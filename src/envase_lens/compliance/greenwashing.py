"""Prohibited environmental claim detection (Art. 13.3 RD 1055/2022, Dir. UE 2024/825)."""

from __future__ import annotations

import re
from dataclasses import dataclass

from envase_lens.exceptions import BlockingClaimsError
from envase_lens.schema import GreenwashingViolation, Severity

_ART_13_3 = "Art. 13.3 RD 1055/2022"


@dataclass(frozen=True)
class ProhibitedPattern:
    regex: re.Pattern[str]
    label: str
    article: str
    severity: Severity


def _rule(pattern: str, label: str, article: str, severity: Severity) -> ProhibitedPattern:
    return ProhibitedPattern(re.compile(pattern, re.IGNORECASE), label, article, severity)


PROHIBITED_PATTERNS: tuple[ProhibitedPattern, ...] = (
    # Hard blocks
    _rule(
        r"\beco[- ]?friendly\b",
        '"eco-friendly"',
        f"{_ART_13_3} · Directiva UE 2024/825 Art. 2",
        "error",
    ),
    _rule(
        r"\brespetuos[ao]s?\s+(con\s+)?el\s+medio\s+ambiente\b",
        '"respetuoso con el medio ambiente"',
        _ART_13_3,
        "error",
    ),
    _rule(
        r"\bsostenible\b(?!\s*[,)]?\s*(?:certificad[ao]|acreditad[ao]|según\s+norma|bajo\s+norma|verificad[ao]))",
        '"sostenible" (sin calificación certificada)',
        f"{_ART_13_3} · Directiva UE 2024/825",
        "error",
    ),
    _rule(r"\b100\s*%\s*natural\b", '"100% natural"', _ART_13_3, "error"),
    _rule(
        r"\bcarbono\s+neutro\b(?!\s*(?:certificado|verificado|según|bajo\s+(?:norma|metodología)))",
        '"carbono neutro" (sin metodología certificada)',
        f"{_ART_13_3} · Directiva UE 2024/825",
        "error",
    ),
    _rule(r"\bplástico\s+sostenible\b", '"plástico sostenible"', _ART_13_3, "error"),
    _rule(r"\benvase\s+verde\b", '"envase verde"', _ART_13_3, "error"),
    # Contextual warnings. Recyclability in Spanish municipal systems
    # cannot be verified automatically.
    _rule(
        r"\breciclabl[ae]s?\b",
        '"reciclable" (verificar reciclabilidad real en sistemas municipales españoles)',
        _ART_13_3,
        "warning",
    ),
    _rule(
        r"\bbiodegradabl[ae]s?\b(?!\s*(?:certificad[ao]|según\s+norma|conforme|bajo))",
        '"biodegradable" (sin certificación específica — p.ej. UNE EN 13432)',
        _ART_13_3,
        "warning",
    ),
)

BLOCKING_MESSAGE = (
    "La etiqueta contiene declaraciones medioambientales genéricas prohibidas por el "
    "Art. 13.3 del RD 1055/2022 y la Directiva UE 2024/825. Elimina o certifica los "
    "claims antes de generar la etiqueta."
)


def scan_for_prohibited_language(text: str | None) -> list[GreenwashingViolation]:
    """Return the first match of each prohibited pattern found in text."""
    if not text or not text.strip():
        return []

    violations: list[GreenwashingViolation] = []
    seen: set[str] = set()
    for rule in PROHIBITED_PATTERNS:
        if rule.label in seen:
            continue
        match = rule.regex.search(text)
        if match:
            seen.add(rule.label)
            violations.append(
                GreenwashingViolation(
                    pattern=rule.label,
                    matched=match.group(0),
                    article=rule.article,
                    severity=rule.severity,
                )
            )
    return violations


def scan_texts(*texts: str | None) -> list[GreenwashingViolation]:
    """Scan each free-text field on its own, keeping the first match per pattern."""
    violations: list[GreenwashingViolation] = []
    seen: set[str] = set()
    for text in texts:
        for violation in scan_for_prohibited_language(text):
            if violation.pattern not in seen:
                seen.add(violation.pattern)
                violations.append(violation)
    return violations


def has_blocking_violations(violations: list[GreenwashingViolation]) -> bool:
    return any(v.severity == "error" for v in violations)


def ensure_no_blocking_claims(*texts: str | None) -> list[GreenwashingViolation]:
    """Gate for label generation.

    Returns the (warning-only) violations when generation may proceed.

    Raises:
        BlockingClaimsError: If any error-severity claim is present.
    """
    violations = scan_texts(*texts)
    if has_blocking_violations(violations):
        raise BlockingClaimsError(
            BLOCKING_MESSAGE,
            [v for v in violations if v.severity == "error"],
        )
    return violations
