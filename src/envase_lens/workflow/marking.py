"""Mandatory-marking questionnaire (compostability, SUP, reuse, SDDR)."""

from __future__ import annotations

from dataclasses import dataclass

from envase_lens.exceptions import WorkflowError
from envase_lens.schema import MandatoryMarkingInputs


@dataclass(frozen=True)
class MarkingQuestion:
    key: str
    label: str
    article: str
    hint: str
    yes_example: str
    no_example: str
    yes_consequence: str


MARKING_QUESTIONS: tuple[MarkingQuestion, ...] = (
    MarkingQuestion(
        key="is_compostable",
        label="¿El envase está certificado como compostable?",
        article="Art. 13.5 RD 1055/2022",
        hint=(
            "Solo si tienes un certificado oficial que lo acredita. "
            "No basta con que el material sea orgánico."
        ),
        yes_example=(
            "Bolsa de bioplástico con certificado EN 13432, envase de cartón compostable certificado"
        ),
        no_example="Lata de aluminio, botella de plástico PET, tarro de vidrio, caja de cartón normal",
        yes_consequence="Requiere certificación UNE EN 13432:2001 en el etiquetado (Art. 13.5).",
    ),
    MarkingQuestion(
        key="is_sup",
        label="¿Es un plástico desechable de un solo uso (SUP)?",
        article="Art. 13.7 RD 1055/2022",
        hint=(
            "Los SUP son productos de plástico pensados para usarse una sola vez y tirarse. "
            "La directiva europea tiene una lista cerrada."
        ),
        yes_example=(
            "Pajitas de plástico, vasos desechables de plástico, cubiertos de plástico, "
            "bastoncillos, platos desechables de plástico"
        ),
        no_example=(
            "Lata de refresco, botella de vidrio, tarro de plástico rígido para alimentos, caja de cartón"
        ),
        yes_consequence="Requiere pictogramas obligatorios EU 2020/2151 en el etiquetado (Art. 13.7).",
    ),
    MarkingQuestion(
        key="is_reusable",
        label="¿Es un envase diseñado para reutilizarse?",
        article="Art. 13.2 RD 1055/2022",
        hint=(
            "Un envase reutilizable está diseñado y certificado para ser devuelto, rellenado y usado "
            "varias veces. No confundir con reciclable."
        ),
        yes_example=(
            "Botella de vidrio retornable de cervecería, caja de madera o plástico duro para transporte "
            "con sistema de devolución, envase rellenable certificado"
        ),
        no_example=(
            "Botella de agua de un solo uso, lata de conservas, tetrabrik, bolsa de plástico de supermercado"
        ),
        yes_consequence="Requiere indicación de condición de reutilización en el etiquetado (Art. 13.2).",
    ),
    MarkingQuestion(
        key="is_sddr",
        label="¿Es un envase de bebida que podría incluirse en el sistema de depósito (SDDR)?",
        article="Arts. 46.8, 47.7 RD 1055/2022",
        hint=(
            "El SDDR es el futuro sistema de 'paga y devuelve' para envases de bebida. Aún no es "
            "obligatorio, pero afectará a latas, botellas de plástico y vidrio de bebidas."
        ),
        yes_example=(
            "Lata de cerveza o refresco, botella de agua de plástico, botella de refresco, "
            "botella de cerveza de vidrio"
        ),
        no_example=(
            "Tarro de mermelada, botella de aceite, caja de leche, botella de vino (exenta temporalmente)"
        ),
        yes_consequence=(
            "Próximamente obligatorio — SDDR en fase de implantación nacional. "
            "No es exigible actualmente (Arts. 46.8, 47.7)."
        ),
    ),
)

_KEYS = tuple(question.key for question in MARKING_QUESTIONS)


class MarkingQuestionnaire:
    """Collects the four marking answers in any order."""

    def __init__(self):
        self.answers: dict[str, bool] = {}

    @property
    def answered_count(self) -> int:
        return len(self.answers)

    @property
    def is_complete(self) -> bool:
        return self.answered_count == len(MARKING_QUESTIONS)

    def answer(self, key: str, value: bool) -> str | None:
        """Record an answer; return the consequence text shown for "yes"."""
        if key not in _KEYS:
            raise WorkflowError(f"unknown marking question: {key!r}")
        self.answers[key] = bool(value)
        if not value:
            return None
        return next(q.yes_consequence for q in MARKING_QUESTIONS if q.key == key)

    def reset(self) -> None:
        self.answers = {}

    def complete(self) -> MandatoryMarkingInputs:
        if not self.is_complete:
            missing = [key for key in _KEYS if key not in self.answers]
            raise WorkflowError(f"unanswered marking questions: {', '.join(missing)}")
        return MandatoryMarkingInputs(**self.answers)
