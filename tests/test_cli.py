"""Tests for the command-line entry point."""

import json
import sys

from envase_lens import DetectedMaterial, PackagingAnalysis, cli, recompute
from envase_lens.exceptions import VisionTimeoutError


def _result():
    analysis = PackagingAnalysis(
        packaging_type="jar",
        materials=[
            DetectedMaterial(part="tarro", material_name="Vidrio", material_code="70", material_abbrev="GL", confidence=0.95),
            DetectedMaterial(part="tapa", material_name="Metal", confidence=0.4),
        ],
        overall_confidence=0.7,
    )
    return recompute(analysis, "Mermelada")


def test_formatted_output(mocker, monkeypatch, capsys):
    analyze = mocker.patch("envase_lens.cli.analyze", return_value=_result())
    monkeypatch.setattr(sys, "argv", ["envase-lens", "front.jpg", "back.jpg", "--product", "Mermelada", "--use", "commercial"])

    assert cli.main() == 0

    analyze.assert_called_once_with(
        ["front.jpg", "back.jpg"], product_name="Mermelada", packaging_use="commercial", api_key=None
    )
    out = capsys.readouterr().out
    assert "tarro:" in out
    assert "-> Verde" in out
    assert "-> Punto limpio" in out
    assert "Confirma los materiales" in out


def test_json_output(mocker, monkeypatch, capsys):
    mocker.patch("envase_lens.cli.analyze", return_value=_result())
    monkeypatch.setattr(sys, "argv", ["envase-lens", "front.jpg", "--json"])

    assert cli.main() == 0

    data = json.loads(capsys.readouterr().out)
    assert data["container_fractions"] == {"tarro": "verde", "tapa": "otro"}


def test_library_error_exit_code(mocker, monkeypatch, capsys):
    mocker.patch("envase_lens.cli.analyze", side_effect=VisionTimeoutError("too slow"))
    monkeypatch.setattr(sys, "argv", ["envase-lens", "front.jpg"])

    assert cli.main() == 1
    assert "Error: too slow" in capsys.readouterr().err
