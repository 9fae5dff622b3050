"""Interactive steps that refine an analysis before a label is generated."""

from envase_lens.workflow.confirmation import (
    MATERIAL_OPTIONS,
    ConfirmationWorkflow,
    MaterialOption,
    material_tier,
)
from envase_lens.workflow.decomposition import DecompositionWorkflow
from envase_lens.workflow.marking import MARKING_QUESTIONS, MarkingQuestionnaire

__all__ = [
    "ConfirmationWorkflow",
    "DecompositionWorkflow",
    "MARKING_QUESTIONS",
    "MATERIAL_OPTIONS",
    "MarkingQuestionnaire",
    "MaterialOption",
    "material_tier",
]
