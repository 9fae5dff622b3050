"""Separability step: which components can be detached before disposal."""

from __future__ import annotations

from envase_lens.exceptions import WorkflowError
from envase_lens.schema import PackagingAnalysis, Separability

SEPARABILITY_NOTE = (
    "Los componentes separables se etiquetan individualmente con su código de material. "
    "Los inseparables se tratan como un conjunto compuesto conforme a la Decisión 97/129/CE."
)


def separability_question(part: str) -> str:
    return f"¿El {part} puede separarse del envase antes de desecharlo?"


class DecompositionWorkflow:
    """Records separable/inseparable per material index."""

    def __init__(self, analysis: PackagingAnalysis):
        self.analysis = analysis
        self.answers: dict[int, Separability] = {}

    @property
    def is_complete(self) -> bool:
        return len(self.answers) == len(self.analysis.materials)

    def set_separability(self, index: int, separable: bool) -> None:
        if index < 0 or index >= len(self.analysis.materials):
            raise WorkflowError(f"no material at index {index}")
        self.answers[index] = "separable" if separable else "inseparable"

    def reset(self) -> None:
        self.answers = {}

    def complete(self) -> PackagingAnalysis:
        """Return the analysis with every material annotated."""
        if not self.is_complete:
            missing = len(self.analysis.materials) - len(self.answers)
            raise WorkflowError(f"{missing} component(s) still need a separability answer")
        materials = [
            material.model_copy(update={"separability": self.answers[index]})
            for index, material in enumerate(self.analysis.materials)
        ]
        return self.analysis.model_copy(update={"materials": materials})
