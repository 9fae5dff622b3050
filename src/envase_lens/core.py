"""Core analysis functions."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError

from envase_lens.compliance.checklist import validate_compliance
from envase_lens.compliance.fractions import container_fractions
from envase_lens.compliance.greenwashing import scan_texts
from envase_lens.config import AnalysisConfig
from envase_lens.exceptions import VisionTimeoutError
from envase_lens.legal import BaseLegalRetriever, PgVectorLegalRetriever, build_legal_query, search_legal_context
from envase_lens.lookup.engine import lookup_product_materials, merge_lookup_materials
from envase_lens.providers.base import BaseProvider, ImageInput
from envase_lens.schema import AnalysisResult, MandatoryMarkingInputs, PackagingAnalysis, PackagingUse
from envase_lens.vision import analyze_packaging

logger = logging.getLogger(__name__)


def _build_gemini_provider(api_key: str | None) -> BaseProvider:
    from envase_lens.providers.gemini import GeminiProvider

    return GeminiProvider(api_key=api_key)


def _select_provider(provider: str | BaseProvider | None, api_key: str | None) -> BaseProvider:
    if isinstance(provider, BaseProvider):
        return provider
    provider_name = (provider or AnalysisConfig.from_env().provider).strip().lower()
    if provider_name in {"gemini", "vision"}:
        return _build_gemini_provider(api_key)
    raise ValueError(f"Unsupported provider: {provider_name}")


def _run_with_timeout(images: Sequence[ImageInput], engine: BaseProvider, timeout_sec: float) -> PackagingAnalysis:
    executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="envase-lens-vision")
    future = executor.submit(analyze_packaging, images, engine)
    try:
        return future.result(timeout=timeout_sec)
    except FutureTimeoutError as exc:
        raise VisionTimeoutError(f"Vision analysis timed out after {timeout_sec:g} seconds") from exc
    finally:
        # A timed-out call keeps running in its thread; nothing waits for it.
        executor.shutdown(wait=False, cancel_futures=True)


def apply_product_lookup(
    analysis: PackagingAnalysis,
    product_name: str,
    *,
    version: str = "v1",
) -> tuple[PackagingAnalysis, bool]:
    """Merge known-product materials into the analysis. Returns (analysis, applied)."""
    lookup = lookup_product_materials(product_name, analysis.packaging_type, version=version)
    if lookup is None:
        return analysis, False
    merged = merge_lookup_materials(analysis.materials, lookup)
    logger.info("product lookup applied for %r: %d material(s)", product_name, len(merged))
    return analysis.model_copy(update={"materials": merged}), True


def recompute(
    analysis: PackagingAnalysis,
    product_name: str = "Producto",
    *,
    legal_context: str = "",
    lookup_applied: bool = False,
) -> AnalysisResult:
    """Derive fractions, checklist and claims from a stored or corrected analysis."""
    use = analysis.packaging_use or "household"
    return AnalysisResult(
        analysis=analysis,
        container_fractions=container_fractions(analysis.materials),
        compliance_items=validate_compliance(analysis.materials, use, analysis.marking_inputs),
        greenwashing_violations=scan_texts(product_name, analysis.notes),
        legal_context=legal_context,
        lookup_applied=lookup_applied,
    )


def analyze(
    images: Sequence[ImageInput],
    *,
    product_name: str = "Producto",
    packaging_use: PackagingUse = "household",
    marking: MandatoryMarkingInputs | None = None,
    provider: str | BaseProvider | None = None,
    api_key: str | None = None,
    legal_retriever: BaseLegalRetriever | None = None,
    timeout_sec: float | None = None,
    config: AnalysisConfig | None = None,
) -> AnalysisResult:
    """Analyze packaging photos and derive everything a recycling label needs.

    Args:
        images: One to five images of the same packaging. The first is the primary view.
        product_name: Commercial product name, used for the lookup table and claim scan.
        packaging_use: Household, commercial or industrial packaging.
        marking: Answers to the mandatory-marking questionnaire, if collected.
        provider: Provider name or instance. Defaults to `ENVASE_LENS_PROVIDER`, then `gemini`.
        api_key: Gemini API key. Falls back to GEMINI_API_KEY env var.
        legal_retriever: Legal search backend. Built from the environment when omitted.
        timeout_sec: Budget for the vision passes. Defaults to `ENVASE_LENS_VISION_TIMEOUT_SEC`.

    Returns:
        AnalysisResult with the analysis, fractions, checklist and legal context.

    Raises:
        VisionResponseError: If the material pass returns nothing usable.
        VisionTimeoutError: If the vision passes exceed the time budget.
    """
    result, _ = analyze_with_metadata(
        images,
        product_name=product_name,
        packaging_use=packaging_use,
        marking=marking,
        provider=provider,
        api_key=api_key,
        legal_retriever=legal_retriever,
        timeout_sec=timeout_sec,
        config=config,
    )
    return result


def analyze_with_metadata(
    images: Sequence[ImageInput],
    *,
    product_name: str = "Producto",
    packaging_use: PackagingUse = "household",
    marking: MandatoryMarkingInputs | None = None,
    provider: str | BaseProvider | None = None,
    api_key: str | None = None,
    legal_retriever: BaseLegalRetriever | None = None,
    timeout_sec: float | None = None,
    config: AnalysisConfig | None = None,
) -> tuple[AnalysisResult, dict[str, str]]:
    """Analyze packaging photos and return provider metadata."""
    config = config or AnalysisConfig.from_env()
    engine = _select_provider(provider, api_key)
    product_name = product_name.strip() or "Producto"

    analysis = _run_with_timeout(images, engine, timeout_sec or config.vision_timeout_sec)
    analysis, lookup_applied = apply_product_lookup(analysis, product_name, version=config.lookup_version)
    analysis = analysis.model_copy(update={"packaging_use": packaging_use, "marking_inputs": marking})

    if legal_retriever is None:
        legal_retriever = PgVectorLegalRetriever.from_config(config, api_key=api_key)
    legal_context = search_legal_context(build_legal_query(analysis.materials), legal_retriever)

    result = recompute(analysis, product_name, legal_context=legal_context, lookup_applied=lookup_applied)
    return result, engine.get_metadata() or {}
