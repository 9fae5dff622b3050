"""Tests for the mandatory-marking questionnaire."""

import pytest

from envase_lens.compliance import validate_compliance
from envase_lens.exceptions import WorkflowError
from envase_lens.workflow import MARKING_QUESTIONS, MarkingQuestionnaire


def test_four_questions_with_articles():
    assert [q.key for q in MARKING_QUESTIONS] == ["is_compostable", "is_sup", "is_reusable", "is_sddr"]
    assert all(q.article and q.hint and q.yes_consequence for q in MARKING_QUESTIONS)


def test_yes_returns_consequence():
    questionnaire = MarkingQuestionnaire()
    assert "UNE EN 13432" in questionnaire.answer("is_compostable", True)
    assert questionnaire.answer("is_sup", False) is None


def test_unknown_key_rejected():
    with pytest.raises(WorkflowError):
        MarkingQuestionnaire().answer("isCompostable", True)


def test_complete_requires_all_answers():
    questionnaire = MarkingQuestionnaire()
    questionnaire.answer("is_sup", True)
    with pytest.raises(WorkflowError):
        questionnaire.complete()


def test_complete_returns_inputs_for_checklist():
    questionnaire = MarkingQuestionnaire()
    for key, value in [("is_sddr", True), ("is_sup", True), ("is_reusable", False), ("is_compostable", False)]:
        questionnaire.answer(key, value)

    marking = questionnaire.complete()

    assert marking.is_sup is True
    assert marking.is_sddr is True
    assert marking.is_compostable is False
    assert len(validate_compliance([], marking=marking)) == 9


def test_reanswering_overwrites():
    questionnaire = MarkingQuestionnaire()
    questionnaire.answer("is_sup", True)
    questionnaire.answer("is_sup", False)
    assert questionnaire.answered_count == 1
    assert questionnaire.answers["is_sup"] is False
