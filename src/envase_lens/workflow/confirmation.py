"""Confidence-tiered material confirmation.

Tier 1 materials (confident, coded) are accepted as-is. Tier 2 materials
(confident, uncoded) get a yes/no confirmation; "no" escalates them to the
selection form. Tier 3 materials (low confidence) require choosing a
material from MATERIAL_OPTIONS.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from envase_lens.exceptions import WorkflowError
from envase_lens.schema import CONFIDENCE_THRESHOLD, DetectedMaterial, PackagingAnalysis

Tier = Literal[1, 2, 3]


@dataclass(frozen=True)
class MaterialOption:
    code: str
    abbrev: str
    name: str


MATERIAL_OPTIONS: tuple[MaterialOption, ...] = (
    MaterialOption("01", "PET", "Polietileno tereftalato"),
    MaterialOption("02", "HDPE", "Polietileno de alta densidad"),
    MaterialOption("03", "PVC", "Cloruro de polivinilo"),
    MaterialOption("04", "LDPE", "Polietileno de baja densidad"),
    MaterialOption("05", "PP", "Polipropileno"),
    MaterialOption("06", "PS", "Poliestireno"),
    MaterialOption("20", "PAP", "Cartón ondulado"),
    MaterialOption("21", "PAP", "Cartón"),
    MaterialOption("22", "PAP", "Papel"),
    MaterialOption("40", "FE", "Acero"),
    MaterialOption("41", "ALU", "Aluminio"),
    MaterialOption("70", "GL", "Vidrio incoloro"),
)

_OPTIONS_BY_CODE = {option.code: option for option in MATERIAL_OPTIONS}


def material_tier(material: DetectedMaterial) -> Tier:
    # Lookup and user-confirmed materials are never asked about again.
    if material.is_authoritative:
        return 1
    if material.confidence >= CONFIDENCE_THRESHOLD:
        return 1 if material.material_code is not None else 2
    return 3


@dataclass
class MaterialCorrection:
    """Answer state for one material. None means unanswered."""

    confirmed: bool | None = None
    selection: MaterialOption | None = None


class ConfirmationWorkflow:
    """Collects per-material corrections and merges them once on completion."""

    def __init__(self, analysis: PackagingAnalysis):
        self.analysis = analysis
        self.tiers: list[Tier] = [material_tier(m) for m in analysis.materials]
        self.reset()

    def reset(self) -> None:
        """Discard every answer."""
        self.corrections: dict[int, MaterialCorrection] = {
            index: MaterialCorrection() for index, tier in enumerate(self.tiers) if tier != 1
        }
        self.submitted = False

    @property
    def display_order(self) -> list[int]:
        """Indices with the least certain tier first, original order within a tier."""
        return sorted(range(len(self.tiers)), key=lambda index: (-self.tiers[index], index))

    @property
    def required_count(self) -> int:
        return len(self.corrections)

    @property
    def answered_count(self) -> int:
        return sum(1 for index in self.corrections if self.is_answered(index))

    @property
    def is_complete(self) -> bool:
        return self.answered_count == self.required_count

    def is_answered(self, index: int) -> bool:
        correction = self._correction(index)
        if self.tiers[index] == 2 and correction.confirmed is True:
            return True
        return correction.selection is not None

    def needs_selection(self, index: int) -> bool:
        """True when the material shows the selection form."""
        if self.tiers[index] == 3:
            return True
        return self.tiers[index] == 2 and self._correction(index).confirmed is False

    def confirm(self, index: int) -> None:
        """Accept a Tier 2 material as identified."""
        self._require_tier(index, 2)
        self.corrections[index] = MaterialCorrection(confirmed=True)

    def reject(self, index: int) -> None:
        """Escalate a Tier 2 material to the selection form."""
        self._require_tier(index, 2)
        self.corrections[index] = MaterialCorrection(confirmed=False)

    def select_material(self, index: int, code: str) -> None:
        if not self.needs_selection(index):
            raise WorkflowError(f"material {index} does not take a material selection")
        option = _OPTIONS_BY_CODE.get(code)
        if option is None:
            raise WorkflowError(f"unknown material code: {code!r}")
        self._correction(index).selection = option

    def clear_selection(self, index: int) -> None:
        self._correction(index).selection = None

    def complete(self) -> PackagingAnalysis:
        """Merge corrections into the analysis. Allowed once, when every answer is in."""
        if self.submitted:
            raise WorkflowError("confirmation already submitted")
        if not self.is_complete:
            raise WorkflowError(
                f"{self.required_count - self.answered_count} material(s) still need an answer"
            )

        materials = [self._merged(index, m) for index, m in enumerate(self.analysis.materials)]
        self.submitted = True
        return self.analysis.model_copy(update={"materials": materials})

    def _merged(self, index: int, material: DetectedMaterial) -> DetectedMaterial:
        if self.tiers[index] == 1:
            return material
        correction = self.corrections[index]
        if self.tiers[index] == 2 and correction.confirmed is True:
            return material.model_copy(update={"inference_method": "user_confirmed"})
        option = correction.selection
        return material.model_copy(
            update={
                "material_code": option.code,
                "material_abbrev": option.abbrev,
                "material_name": option.name,
                "inference_method": "user_confirmed",
            }
        )

    def _correction(self, index: int) -> MaterialCorrection:
        if index < 0 or index >= len(self.tiers):
            raise WorkflowError(f"no material at index {index}")
        correction = self.corrections.get(index)
        if correction is None:
            raise WorkflowError(f"material {index} is auto-accepted and cannot be corrected")
        return correction

    def _require_tier(self, index: int, tier: Tier) -> None:
        self._correction(index)
        if self.tiers[index] != tier:
            raise WorkflowError(f"material {index} is tier {self.tiers[index]}, expected tier {tier}")
