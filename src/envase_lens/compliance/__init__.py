"""Compliance decision engine for RD 1055/2022."""

from envase_lens.compliance.checklist import (
    FALLBACK_LEGAL_CONTEXT,
    PPWR_NOTICE,
    REGULATORY_DATE,
    REGULATORY_VERSION,
    blocking_failures,
    validate_compliance,
)
from envase_lens.compliance.classifier import (
    CLASSIFIER_QUESTIONS,
    ClassifierAnswer,
    PackagingUseWizard,
    classification_rationale,
    classify_packaging_use,
)
from envase_lens.compliance.fractions import (
    container_fractions,
    resolve_fraction,
    resolve_inseparable_group_fraction,
)
from envase_lens.compliance.greenwashing import (
    ensure_no_blocking_claims,
    has_blocking_violations,
    scan_for_prohibited_language,
    scan_texts,
)

__all__ = [
    "CLASSIFIER_QUESTIONS",
    "ClassifierAnswer",
    "FALLBACK_LEGAL_CONTEXT",
    "PPWR_NOTICE",
    "PackagingUseWizard",
    "REGULATORY_DATE",
    "REGULATORY_VERSION",
    "blocking_failures",
    "classification_rationale",
    "classify_packaging_use",
    "container_fractions",
    "ensure_no_blocking_claims",
    "has_blocking_violations",
    "resolve_fraction",
    "resolve_inseparable_group_fraction",
    "scan_for_prohibited_language",
    "scan_texts",
    "validate_compliance",
]
