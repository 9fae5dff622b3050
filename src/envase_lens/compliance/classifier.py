"""Packaging-use classification per Art. 2 of RD 1055/2022.

Definitions (Art. 2):
- Envase doméstico: can reach final consumers through any retail channel.
- Envase comercial: used in commercial establishments (restaurants, hotels, offices).
- Envase industrial: used exclusively in industrial or manufacturing processes.

If a product can reach consumers through ANY retail channel it is domestic,
even when it is also sold B2B (MITECO interpretive note, December 2024).
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Literal

from envase_lens.exceptions import WorkflowError
from envase_lens.schema import PackagingUse

Answer = Literal["yes", "no"]


@dataclass(frozen=True)
class ClassifierQuestion:
    id: str
    text: str
    legal_note: str


@dataclass(frozen=True)
class ClassifierAnswer:
    question_id: str
    answer: Answer


CLASSIFIER_QUESTIONS: tuple[ClassifierQuestion, ...] = (
    ClassifierQuestion(
        id="retail_channel",
        text=(
            "¿El producto llega o podría llegar al consumidor final a través de cualquier canal "
            "minorista (supermercados, farmacias, tiendas, e-commerce al consumidor)?"
        ),
        legal_note=(
            "Art. 2 RD 1055/2022: si el envase puede llegar al consumidor por cualquier canal "
            "minorista → envase doméstico. Aplica aunque el producto también se venda a empresas "
            "(canal dual B2B+B2C → siempre doméstico)."
        ),
    ),
    ClassifierQuestion(
        id="commercial_use",
        text=(
            "¿El envase se usa en establecimientos comerciales (restaurantes, hoteles, oficinas, "
            "colectividades) como parte de un servicio?"
        ),
        legal_note=(
            "Art. 2 RD 1055/2022: envase comercial es aquel que, sin llegar al consumidor final, "
            "se usa en hostelería, restauración y otras actividades comerciales."
        ),
    ),
    ClassifierQuestion(
        id="industrial_use",
        text=(
            "¿El envase se usa exclusivamente en procesos industriales o de fabricación, sin "
            "contacto con comercios ni consumidores finales?"
        ),
        legal_note=(
            "Art. 2 RD 1055/2022: envase industrial es aquel utilizado únicamente en industrias. "
            "No está sujeto a la obligación de indicar la fracción de recogida separada del Art. 13.2."
        ),
    ),
)

# question id -> classification reached by answering "yes"
_YES_OUTCOME: dict[str, PackagingUse] = {
    "retail_channel": "household",
    "commercial_use": "commercial",
    "industrial_use": "industrial",
}


def _answer_map(answers: Iterable[ClassifierAnswer]) -> dict[str, Answer]:
    return {a.question_id: a.answer for a in answers}


def classify_packaging_use(answers: Iterable[ClassifierAnswer]) -> PackagingUse:
    """Classify packaging use from yes/no answers.

    Rules are checked in question order; the first "yes" decides. With no
    "yes" at all the result is household, the use with more obligations.
    """
    answer_map = _answer_map(answers)
    for question in CLASSIFIER_QUESTIONS:
        if answer_map.get(question.id) == "yes":
            return _YES_OUTCOME[question.id]
    return "household"


def classification_rationale(result: PackagingUse, answers: Iterable[ClassifierAnswer]) -> str:
    """Return the legal rationale shown next to a classification."""
    answer_map = _answer_map(answers)

    if result == "household":
        if answer_map.get("retail_channel") == "yes":
            return (
                "Clasificado como doméstico: el producto puede llegar al consumidor final a través de "
                "canales minoristas (Art. 2 RD 1055/2022). Esta clasificación aplica aunque el producto "
                "también se venda a empresas (canal dual B2B+B2C → siempre doméstico, nota interpretativa "
                "MITECO diciembre 2024)."
            )
        return (
            "Clasificado como doméstico por criterio conservador: ante la duda, RD 1055/2022 exige "
            "aplicar las obligaciones del envase doméstico (Art. 13.2 — indicación de fracción de "
            "recogida separada obligatoria)."
        )

    if result == "commercial":
        return (
            "Clasificado como comercial: el envase se usa en establecimientos de hostelería, "
            "restauración u otras actividades comerciales, sin llegar al consumidor final (Art. 2 "
            "RD 1055/2022). Exento de la indicación de fracción de recogida separada (Art. 13.2)."
        )

    return (
        "Clasificado como industrial: el envase se usa exclusivamente en procesos industriales "
        "o de fabricación (Art. 2 RD 1055/2022). Exento de la indicación de fracción de "
        "recogida separada (Art. 13.2)."
    )


class WizardState(str, Enum):
    ASKING = "asking"
    CLASSIFIED = "classified"


class PackagingUseWizard:
    """Step-by-step classifier questionnaire with back and reset."""

    def __init__(self, questions: tuple[ClassifierQuestion, ...] = CLASSIFIER_QUESTIONS):
        self.questions = questions
        self.reset()

    @property
    def current_question(self) -> ClassifierQuestion | None:
        if self.state is WizardState.CLASSIFIED:
            return None
        return self.questions[len(self.answers)]

    @property
    def step(self) -> int:
        return len(self.answers)

    def answer(self, value: Answer) -> PackagingUse | None:
        """Record an answer; return the classification if the wizard terminated."""
        question = self.current_question
        if question is None:
            raise WorkflowError("classification already reached; go back or reset first")
        if value not in ("yes", "no"):
            raise WorkflowError(f"invalid answer: {value!r}")

        self.answers.append(ClassifierAnswer(question_id=question.id, answer=value))
        is_last = len(self.answers) >= len(self.questions)
        if value == "yes" or is_last:
            self.result = classify_packaging_use(self.answers)
            self.rationale = classification_rationale(self.result, self.answers)
            self.state = WizardState.CLASSIFIED
        return self.result

    def back(self) -> None:
        """Reopen the previous question, discarding its answer and any result."""
        if not self.answers:
            raise WorkflowError("no previous question")
        self.answers.pop()
        self.result = None
        self.rationale = ""
        self.state = WizardState.ASKING

    def reset(self) -> None:
        self.answers: list[ClassifierAnswer] = []
        self.result: PackagingUse | None = None
        self.rationale = ""
        self.state = WizardState.ASKING
