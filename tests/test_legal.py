"""Tests for legal-context retrieval."""

from envase_lens import DetectedMaterial
from envase_lens.compliance import FALLBACK_LEGAL_CONTEXT
from envase_lens.config import AnalysisConfig
from envase_lens.legal import (
    LEGAL_CONTEXT_UNAVAILABLE,
    PgVectorLegalRetriever,
    build_legal_query,
    format_matches,
    search_legal_context,
)


def _row(i):
    return {"article_ref": f"Art. {i}", "title": f"Título {i}", "content": f"Contenido {i}", "similarity": 0.9}


def test_build_query_handles_missing_abbrev():
    materials = [
        DetectedMaterial(part="cuerpo", material_name="Vidrio", material_code="70", material_abbrev="GL", confidence=1),
        DetectedMaterial(part="tapa", material_name="Metal", confidence=0.5),
    ]
    assert build_legal_query(materials) == "Vidrio GL envase, Metal  envase"


def test_format_matches_keeps_top_five():
    text = format_matches([_row(i) for i in range(8)])
    blocks = text.split("\n\n---\n\n")
    assert len(blocks) == 5
    assert blocks[0] == "[Art. 0] Título 0\nContenido 0"


def test_retriever_formats_rows(mocker):
    retriever = PgVectorLegalRetriever("postgresql://example")
    mocker.patch.object(retriever, "embed", return_value=[0.1, 0.2])
    fetch = mocker.patch.object(retriever, "fetch_matches", return_value=[_row(1), _row(2)])

    text = retriever.search("botella PET")

    fetch.assert_called_once_with([0.1, 0.2])
    assert text == "[Art. 1] Título 1\nContenido 1\n\n---\n\n[Art. 2] Título 2\nContenido 2"


def test_retriever_no_rows_uses_fallback(mocker):
    retriever = PgVectorLegalRetriever("postgresql://example")
    mocker.patch.object(retriever, "embed", return_value=[0.1])
    mocker.patch.object(retriever, "fetch_matches", return_value=[])
    assert retriever.search("x") == FALLBACK_LEGAL_CONTEXT


def test_search_never_raises(mocker):
    retriever = PgVectorLegalRetriever("postgresql://example")
    mocker.patch.object(retriever, "embed", side_effect=RuntimeError("no network"))
    assert search_legal_context("x", retriever) == LEGAL_CONTEXT_UNAVAILABLE


def test_search_without_retriever_uses_fallback():
    assert search_legal_context("x", None) == FALLBACK_LEGAL_CONTEXT


def test_from_config_needs_database():
    assert PgVectorLegalRetriever.from_config(AnalysisConfig()) is None
    retriever = PgVectorLegalRetriever.from_config(AnalysisConfig(legal_database_url="postgresql://db", legal_top_k=3))
    assert retriever.database_url == "postgresql://db"
    assert retriever.top_k == 3
    assert retriever.match_count == 8
