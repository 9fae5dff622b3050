"""Data models for envase-lens."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator, model_validator

from envase_lens.parts import canonical_part

ContainerFraction = Literal["amarillo", "azul", "verde", "otro"]
PackagingType = Literal["bottle", "box", "bag", "tray", "can", "jar", "tube", "composite", "unknown"]
PackagingUse = Literal["household", "commercial", "industrial"]
InferenceMethod = Literal["visual", "contextual", "lookup", "user_confirmed"]
Separability = Literal["separable", "inseparable"]
Obligation = Literal["mandatory", "voluntary", "upcoming"]
Severity = Literal["error", "warning"]

CONFIDENCE_THRESHOLD = 0.8


class DetectedMaterial(BaseModel):
    """Material determination for one packaging component."""

    model_config = ConfigDict(frozen=True)

    part: str
    material_name: str
    material_code: str | None = None
    material_abbrev: str | None = None
    confidence: float = Field(ge=0.0, le=1.0)
    visual_evidence: str = ""
    inference_method: InferenceMethod = "visual"
    separability: Separability | None = None

    @property
    def is_authoritative(self) -> bool:
        """Lookup and user-confirmed materials count as fully certain."""
        return self.inference_method in ("lookup", "user_confirmed")

    @property
    def effective_confidence(self) -> float:
        return 1.0 if self.is_authoritative else self.confidence


class MandatoryMarkingInputs(BaseModel):
    """Answers to the mandatory-marking questionnaire."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    is_compostable: bool = Field(alias="isCompostable")
    is_sup: bool = Field(alias="isSUP")
    is_reusable: bool = Field(alias="isReusable")
    is_sddr: bool = Field(alias="isSDDR")


def requires_guided_query(materials: list[DetectedMaterial], overall_confidence: float) -> bool:
    """True when any material, or the analysis as a whole, is below threshold."""
    has_low_confidence = any(m.effective_confidence < CONFIDENCE_THRESHOLD for m in materials)
    return has_low_confidence or overall_confidence < CONFIDENCE_THRESHOLD


class PackagingAnalysis(BaseModel):
    """Aggregate analysis for one upload."""

    model_config = ConfigDict(frozen=True)

    packaging_type: PackagingType
    materials: list[DetectedMaterial] = Field(min_length=1)
    overall_confidence: float = Field(ge=0.0, le=1.0)
    notes: str = ""
    packaging_use: PackagingUse | None = None
    marking_inputs: MandatoryMarkingInputs | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def guided_query_required(self) -> bool:
        return requires_guided_query(self.materials, self.overall_confidence)

    @model_validator(mode="after")
    def _check_unique_parts(self) -> "PackagingAnalysis":
        keys = [canonical_part(m.part) for m in self.materials]
        if len(keys) != len(set(keys)):
            raise ValueError(f"duplicate material parts after canonicalization: {keys}")
        return self


class ComplianceItem(BaseModel):
    """One line of the compliance checklist."""

    check: str
    passed: bool | None = None
    detail: str | None = None
    obligation: Obligation
    article: str


class GreenwashingViolation(BaseModel):
    """A prohibited or contextual environmental claim found in text."""

    pattern: str
    matched: str
    article: str
    severity: Severity


class PackagingFormat(BaseModel):
    """Format identified by the first vision pass."""

    format: PackagingType
    shape_description: str
    visible_codes: list[str] = Field(default_factory=list)


class VisionMaterial(BaseModel):
    """Material entry exactly as the vision model must return it."""

    model_config = ConfigDict(strict=True)

    part: str
    material_name: str
    material_code: str | None
    material_abbrev: str | None
    confidence: float = Field(ge=0.0, le=1.0)
    visual_evidence: str
    inference_method: Literal["visual", "contextual"] = "visual"

    @field_validator("part", mode="before")
    @classmethod
    def _default_part(cls, value):
        return "componente" if value is None else value

    @field_validator("material_name", mode="before")
    @classmethod
    def _default_name(cls, value):
        return "Material desconocido" if value is None else value

    @field_validator("visual_evidence", mode="before")
    @classmethod
    def _default_evidence(cls, value):
        return "" if value is None else value

    @field_validator("inference_method", mode="before")
    @classmethod
    def _default_method(cls, value):
        return "visual" if value is None else value

    def to_detected(self) -> DetectedMaterial:
        return DetectedMaterial(**self.model_dump())


class VisionAnalysis(BaseModel):
    """Material-identification response schema."""

    model_config = ConfigDict(strict=True)

    packaging_type: PackagingType
    materials: list[VisionMaterial] = Field(min_length=1)
    overall_confidence: float = Field(ge=0.0, le=1.0)
    # Accepted but never trusted; recomputed from confidences.
    guided_query_required: bool | None = None
    notes: str = ""

    @field_validator("notes", mode="before")
    @classmethod
    def _default_notes(cls, value):
        return "" if value is None else value


class AnalysisResult(BaseModel):
    """Everything computed for one analysis, as plain structured data."""

    analysis: PackagingAnalysis
    container_fractions: dict[str, ContainerFraction]
    compliance_items: list[ComplianceItem]
    greenwashing_violations: list[GreenwashingViolation] = Field(default_factory=list)
    legal_context: str = ""
    lookup_applied: bool = False
