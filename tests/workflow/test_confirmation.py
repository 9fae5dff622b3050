"""Tests for the tiered material confirmation workflow."""

import pytest

from envase_lens import DetectedMaterial, PackagingAnalysis
from envase_lens.exceptions import WorkflowError
from envase_lens.workflow import MATERIAL_OPTIONS, ConfirmationWorkflow, material_tier


def _material(part, confidence, code=None, abbrev=None, name="Plástico"):
    return DetectedMaterial(
        part=part,
        material_name=name,
        material_code=code,
        material_abbrev=abbrev,
        confidence=confidence,
    )


def _analysis():
    return PackagingAnalysis(
        packaging_type="bottle",
        materials=[
            _material("cuerpo", 0.92, "01", "PET", "Polietileno tereftalato"),
            _material("tapón", 0.85, None, None, "Polipropileno"),
            _material("etiqueta", 0.4),
        ],
        overall_confidence=0.7,
    )


def test_material_tiers():
    assert material_tier(_material("a", 0.8, "01")) == 1
    assert material_tier(_material("a", 0.8)) == 2
    assert material_tier(_material("a", 0.79, "01")) == 3


def test_material_options_table():
    assert len(MATERIAL_OPTIONS) == 12
    assert MATERIAL_OPTIONS[0].code == "01"
    assert MATERIAL_OPTIONS[-1].abbrev == "GL"


def test_display_order_puts_least_certain_first():
    workflow = ConfirmationWorkflow(_analysis())
    assert workflow.display_order == [2, 1, 0]


def test_display_order_ties_by_index():
    analysis = PackagingAnalysis(
        packaging_type="box",
        materials=[_material("a", 0.5), _material("b", 0.9, "21"), _material("c", 0.3)],
        overall_confidence=0.5,
    )
    assert ConfirmationWorkflow(analysis).display_order == [0, 2, 1]


def test_tier_one_only_is_complete_immediately():
    analysis = PackagingAnalysis(
        packaging_type="can",
        materials=[_material("cuerpo", 0.95, "41", "ALU")],
        overall_confidence=0.95,
    )
    workflow = ConfirmationWorkflow(analysis)
    assert workflow.required_count == 0
    assert workflow.is_complete
    assert workflow.complete() == analysis


def test_incomplete_workflow_cannot_submit():
    workflow = ConfirmationWorkflow(_analysis())
    workflow.confirm(1)
    assert workflow.answered_count == 1
    assert workflow.required_count == 2
    with pytest.raises(WorkflowError):
        workflow.complete()


def test_confirm_and_select_merge():
    workflow = ConfirmationWorkflow(_analysis())
    workflow.confirm(1)
    workflow.select_material(2, "04")

    corrected = workflow.complete()

    body, cap, label = corrected.materials
    assert body.inference_method == "visual"
    assert cap.inference_method == "user_confirmed"
    assert cap.material_code is None
    assert cap.material_name == "Polipropileno"
    assert label.material_code == "04"
    assert label.material_abbrev == "LDPE"
    assert label.material_name == "Polietileno de baja densidad"
    assert label.inference_method == "user_confirmed"
    assert label.confidence == 0.4


def test_rejected_tier_two_needs_selection():
    workflow = ConfirmationWorkflow(_analysis())
    workflow.reject(1)
    assert workflow.needs_selection(1)
    assert not workflow.is_answered(1)

    workflow.select_material(1, "05")
    workflow.select_material(2, "22")
    corrected = workflow.complete()

    assert corrected.materials[1].material_code == "05"
    assert corrected.materials[1].material_abbrev == "PP"


def test_clear_selection_unanswers():
    workflow = ConfirmationWorkflow(_analysis())
    workflow.select_material(2, "22")
    workflow.clear_selection(2)
    assert not workflow.is_answered(2)


def test_unknown_code_rejected():
    workflow = ConfirmationWorkflow(_analysis())
    with pytest.raises(WorkflowError):
        workflow.select_material(2, "99")


def test_tier_one_cannot_be_corrected():
    workflow = ConfirmationWorkflow(_analysis())
    with pytest.raises(WorkflowError):
        workflow.select_material(0, "02")
    with pytest.raises(WorkflowError):
        workflow.confirm(0)


def test_tier_two_requires_rejection_before_selection():
    workflow = ConfirmationWorkflow(_analysis())
    with pytest.raises(WorkflowError):
        workflow.select_material(1, "05")


def test_confirm_only_applies_to_tier_two():
    workflow = ConfirmationWorkflow(_analysis())
    with pytest.raises(WorkflowError):
        workflow.confirm(2)


def test_complete_is_single_shot():
    workflow = ConfirmationWorkflow(_analysis())
    workflow.confirm(1)
    workflow.select_material(2, "04")
    workflow.complete()
    with pytest.raises(WorkflowError):
        workflow.complete()


def test_reset_discards_answers():
    workflow = ConfirmationWorkflow(_analysis())
    workflow.confirm(1)
    workflow.select_material(2, "04")
    workflow.reset()
    assert workflow.answered_count == 0
    assert not workflow.submitted


def test_original_analysis_untouched():
    analysis = _analysis()
    workflow = ConfirmationWorkflow(analysis)
    workflow.confirm(1)
    workflow.select_material(2, "04")
    workflow.complete()
    assert analysis.materials[2].material_code is None


def test_authoritative_materials_are_tier_one():
    lookup = _material("a", 0.3, "81", "C/PAP").model_copy(update={"inference_method": "lookup"})
    confirmed = _material("a", 0.85).model_copy(update={"inference_method": "user_confirmed"})
    assert material_tier(lookup) == 1
    assert material_tier(confirmed) == 1


def test_completed_analysis_needs_no_further_confirmation():
    analysis = PackagingAnalysis(
        packaging_type="bottle",
        materials=[
            _material("cuerpo", 0.92, "01", "PET", "Polietileno tereftalato"),
            _material("tapón", 0.85),
            _material("etiqueta", 0.4),
        ],
        overall_confidence=0.85,
    )
    assert analysis.guided_query_required is True

    workflow = ConfirmationWorkflow(analysis)
    workflow.confirm(1)
    workflow.select_material(2, "22")
    corrected = workflow.complete()

    assert corrected.guided_query_required is False
    again = ConfirmationWorkflow(corrected)
    assert again.required_count == 0
    assert again.is_complete
