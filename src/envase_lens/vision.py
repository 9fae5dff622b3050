"""Two-pass packaging analysis with a vision model.

Pass 1 identifies the physical format from the primary image. Pass 2
identifies materials from every image, using the Pass 1 result as context.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence

from pydantic import ValidationError

from envase_lens.exceptions import (
    EmptyResponseError,
    InvalidJSONError,
    SchemaValidationError,
)
from envase_lens.parts import dedupe_materials
from envase_lens.providers.base import BaseProvider, ImageInput
from envase_lens.schema import PackagingAnalysis, PackagingFormat, VisionAnalysis

logger = logging.getLogger(__name__)

MAX_IMAGES = 5
PASS_1_MAX_TOKENS = 256
PASS_2_MAX_TOKENS = 1024

PASS_1_PROMPT = """Identifica el formato físico de este envase.
Devuelve ÚNICAMENTE un objeto JSON válido:
{
  "format": "bottle | box | bag | tray | can | jar | tube | composite | unknown",
  "shape_description": "descripción en una frase del formato (ej: botella cilíndrica transparente 500ml con tapón azul)",
  "visible_codes": ["lista de códigos de material visibles en la imagen (ej: '01', 'PET', 'HDPE', '♻05') — array vacío si no hay ninguno"]
}"""

MATERIAL_PROMPT = """Eres un experto en identificación de materiales de envases para el cumplimiento del RD 1055/2022 (España).

Analiza el envase de la imagen e identifica TODOS los materiales visibles.

REGLAS CRÍTICAS:
- NUNCA inventes ni adivines regulaciones o artículos legales.
- Si no puedes identificar claramente un material, asigna confidence < 0.8.
- Solo identifica lo que puedes confirmar visualmente en la imagen.
- Si el material es ambiguo, deja material_code y material_abbrev como null.
- guided_query_required debe ser true si CUALQUIER material tiene confidence < 0.8.

CAMPO inference_method — usa estos valores:
- "visual": el tipo de material es directamente visible (código ♻ con número, texto HDPE/PET/PP, color/opacidad característicos confirmatorios)
- "contextual": material inferido del formato del envase sin marcas directas visibles (ej: tapón pequeño de botella de agua → PP por ser el formato estándar)

GUÍA DE IDENTIFICACIÓN VISUAL — PLÁSTICOS (MUY IMPORTANTE):
- PET (01): Botellas transparentes o ligeramente azuladas para agua/refrescos/zumos. Paredes finas, acanaladas, se arruga al apretarlas. El cuerpo de cualquier botella de agua 500ml-2L estándar es SIEMPRE PET.
- HDPE (02): Envases OPACOS (garrafas de leche, botellas de detergente, champú). Paredes rígidas y gruesas. NUNCA es transparente.
- PP (05): Tapones de rosca de botellas de agua/refrescos, yogures, envases de comida para llevar, film de microondas. Los tapones pequeños de botellas PET son CASI SIEMPRE PP.
- LDPE (04): Film transparente, bolsas de plástico suaves y flexibles.
- PS (06): Bandejas de corcho blanco, vasos de plástico rígido transparente.
- PVC (03): Muy poco común hoy. Film retráctil, algunos blísteres farmacéuticos.

REGLA CLAVE — PRIORIDAD DE IDENTIFICACIÓN:
1. Si hay un número ♻ VISIBLE en la imagen (triángulo de reciclaje con número) → ese código SIEMPRE prevalece sobre cualquier inferencia por forma, color o tamaño. Léelo y úsalo. Asigna confidence = 0.92 e inference_method "visual".
2. Solo si NO hay código ♻ visible Y la botella es transparente, fina y acanalada (paredes muy delgadas, típico envase de agua/refresco de un solo uso) → cuerpo PET (01), tapón PP (05), inference_method "contextual".
3. Si NO hay código ♻ visible Y el envase parece deportivo o reutilizable (paredes gruesas, opaco o semitransparente, sin acanaladuras, marca deportiva) → NO asumas PET. Asigna confidence < 0.8 y deja material_code null para que el usuario confirme.

CÓDIGOS DE REFERENCIA (Anexo II RD 1055/2022):
Plásticos: 01-PET, 02-HDPE, 03-PVC, 04-LDPE, 05-PP, 06-PS, 07-O
Papel/Cartón: 20-PAP (cartón corrugado), 21-PAP (cartón), 22-PAP (papel)
Metales: 40-FE (acero), 41-ALU (aluminio)
Vidrio: 70-GL (incoloro), 71-GL (verde), 72-GL (marrón)
Compuestos: 81-C/PAP (tetrabrik), 84-C/PS, etc.

Devuelve ÚNICAMENTE un objeto JSON válido con esta estructura exacta:
{
  "packaging_type": "bottle | box | bag | tray | can | jar | tube | composite | unknown",
  "materials": [
    {
      "part": "nombre de la parte en español (e.g. cuerpo, tapón, etiqueta, film)",
      "material_name": "nombre completo en español (e.g. Polietileno tereftalato)",
      "material_code": "código numérico (e.g. 01) o null si no está claro",
      "material_abbrev": "abreviatura (e.g. PET) o null si no está claro",
      "confidence": 0.0,
      "visual_evidence": "descripción breve de las pistas visuales usadas",
      "inference_method": "visual | contextual"
    }
  ],
  "overall_confidence": 0.0,
  "guided_query_required": false,
  "notes": "observaciones relevantes sobre el envase"
}"""


def build_material_prompt(packaging_format: PackagingFormat | None, image_count: int = 1) -> str:
    """Build the Pass 2 prompt, prefixed with multi-image and format context."""
    sections: list[str] = []
    if image_count > 1:
        sections.append(
            f"Se proporcionan {image_count} fotografías del mismo envase desde distintos ángulos. "
            "Analiza todas las vistas para identificar mejor los materiales y sus códigos ♻.\n\n"
        )
    if packaging_format is not None:
        codes = ", ".join(packaging_format.visible_codes) or "ninguno detectado"
        sections.append(
            "CONTEXTO DE FORMATO (identificado en primera pasada):\n"
            f"- Formato: {packaging_format.format}\n"
            f"- Descripción: {packaging_format.shape_description}\n"
            f"- Códigos visibles en imagen: {codes}\n\n"
            "Usa este contexto para mejorar la identificación de materiales.\n\n"
        )
    sections.append(MATERIAL_PROMPT)
    return "".join(sections)


def identify_packaging_format(image: ImageInput, provider: BaseProvider) -> PackagingFormat | None:
    """Pass 1. Returns None on any failure; the caller continues without context."""
    try:
        raw = provider.generate_json([image], PASS_1_PROMPT, max_output_tokens=PASS_1_MAX_TOKENS)
        if not raw:
            logger.warning("format pass returned an empty response")
            return None
        return PackagingFormat.model_validate_json(raw)
    except Exception as exc:
        logger.warning("format pass failed: %s", exc)
        return None


def parse_material_response(raw: str | None) -> VisionAnalysis:
    """Validate a Pass 2 response against the material schema."""
    if not raw or not raw.strip():
        raise EmptyResponseError("Vision model returned an empty response")
    try:
        json.loads(raw)
    except json.JSONDecodeError as exc:
        raise InvalidJSONError(f"Vision model returned invalid JSON: {raw[:200]}") from exc
    try:
        return VisionAnalysis.model_validate_json(raw)
    except ValidationError as exc:
        issues = ", ".join(
            f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        raise SchemaValidationError(f"Vision response failed validation: {issues}") from exc


def analyze_packaging(images: Sequence[ImageInput], provider: BaseProvider) -> PackagingAnalysis:
    """Analyze one to five images of the same packaging.

    The first image is the primary view. Extra images beyond five are
    dropped. Materials are deduplicated by canonical part and the guided
    query flag is derived from the returned confidences.

    Raises:
        ValueError: If no image is given
        VisionResponseError: If the material pass is empty, not JSON, or off-schema
    """
    if not images:
        raise ValueError("At least one image is required")
    if len(images) > MAX_IMAGES:
        logger.warning("received %d images; analyzing the first %d", len(images), MAX_IMAGES)
        images = images[:MAX_IMAGES]

    packaging_format = identify_packaging_format(images[0], provider)
    prompt = build_material_prompt(packaging_format, len(images))
    raw = provider.generate_json(list(images), prompt, max_output_tokens=PASS_2_MAX_TOKENS)
    parsed = parse_material_response(raw)

    materials = dedupe_materials(m.to_detected() for m in parsed.materials)
    return PackagingAnalysis(
        packaging_type=parsed.packaging_type,
        materials=materials,
        overall_confidence=parsed.overall_confidence,
        notes=parsed.notes,
    )
