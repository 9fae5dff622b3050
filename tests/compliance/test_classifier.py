"""Tests for the packaging-use classifier."""

import pytest

from envase_lens.compliance import (
    CLASSIFIER_QUESTIONS,
    ClassifierAnswer,
    PackagingUseWizard,
    classification_rationale,
    classify_packaging_use,
)
from envase_lens.compliance.classifier import WizardState
from envase_lens.exceptions import WorkflowError


def _answers(**values):
    return [ClassifierAnswer(question_id=key, answer=value) for key, value in values.items()]


def test_question_order():
    assert [q.id for q in CLASSIFIER_QUESTIONS] == ["retail_channel", "commercial_use", "industrial_use"]


def test_retail_yes_is_household():
    assert classify_packaging_use(_answers(retail_channel="yes")) == "household"


def test_retail_yes_overrides_later_answers():
    answers = _answers(retail_channel="yes", commercial_use="yes", industrial_use="yes")
    assert classify_packaging_use(answers) == "household"


def test_commercial_yes():
    assert classify_packaging_use(_answers(retail_channel="no", commercial_use="yes")) == "commercial"


def test_industrial_yes():
    answers = _answers(retail_channel="no", commercial_use="no", industrial_use="yes")
    assert classify_packaging_use(answers) == "industrial"


def test_all_no_defaults_to_household():
    answers = _answers(retail_channel="no", commercial_use="no", industrial_use="no")
    assert classify_packaging_use(answers) == "household"
    assert "criterio conservador" in classification_rationale("household", answers)


def test_rationale_cites_dual_channel():
    rationale = classification_rationale("household", _answers(retail_channel="yes"))
    assert "canal dual" in rationale


def test_rationale_for_exempt_uses_mentions_exemption():
    assert "Exento" in classification_rationale("commercial", [])
    assert "industrial" in classification_rationale("industrial", [])


def test_wizard_terminates_on_first_yes():
    wizard = PackagingUseWizard()
    assert wizard.answer("yes") == "household"
    assert wizard.state is WizardState.CLASSIFIED
    assert wizard.current_question is None
    assert wizard.rationale


def test_wizard_terminates_on_commercial_yes():
    wizard = PackagingUseWizard()
    assert wizard.answer("no") is None
    assert wizard.current_question.id == "commercial_use"
    assert wizard.answer("yes") == "commercial"


def test_wizard_last_question_always_terminates():
    wizard = PackagingUseWizard()
    wizard.answer("no")
    wizard.answer("no")
    assert wizard.answer("no") == "household"
    assert wizard.state is WizardState.CLASSIFIED


def test_wizard_rejects_answer_after_classification():
    wizard = PackagingUseWizard()
    wizard.answer("yes")
    with pytest.raises(WorkflowError):
        wizard.answer("no")


def test_wizard_rejects_invalid_answer():
    wizard = PackagingUseWizard()
    with pytest.raises(WorkflowError):
        wizard.answer("maybe")


def test_wizard_back_from_classified_reopens_last_question():
    wizard = PackagingUseWizard()
    wizard.answer("no")
    wizard.answer("yes")
    wizard.back()
    assert wizard.state is WizardState.ASKING
    assert wizard.result is None
    assert wizard.current_question.id == "commercial_use"
    assert wizard.answer("no") is None
    assert wizard.answer("yes") == "industrial"


def test_wizard_back_without_answers_raises():
    with pytest.raises(WorkflowError):
        PackagingUseWizard().back()


def test_wizard_reset_discards_everything():
    wizard = PackagingUseWizard()
    wizard.answer("no")
    wizard.answer("yes")
    wizard.reset()
    assert wizard.step == 0
    assert wizard.result is None
    assert wizard.current_question.id == "retail_channel"
