"""envase-lens: Recycling-label compliance data from packaging photos (RD 1055/2022)."""

from envase_lens.core import analyze, analyze_with_metadata, recompute
from envase_lens.schema import (
    AnalysisResult,
    ComplianceItem,
    DetectedMaterial,
    GreenwashingViolation,
    MandatoryMarkingInputs,
    PackagingAnalysis,
)

__version__ = "0.1.0"

__all__ = [
    "analyze",
    "analyze_with_metadata",
    "recompute",
    "AnalysisResult",
    "ComplianceItem",
    "DetectedMaterial",
    "GreenwashingViolation",
    "MandatoryMarkingInputs",
    "PackagingAnalysis",
    "__version__",
]
