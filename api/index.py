from io import BytesIO
import logging
import os
from pathlib import Path
import sys

from fastapi import BackgroundTasks, FastAPI, File, Form, HTTPException, Query, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from PIL import Image, UnidentifiedImageError
from pydantic import BaseModel, Field, ValidationError

# Ensure local src package is importable in serverless runtime.
ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from api.analysis_logging import AnalysisLogger, AnalysisLoggingConfig  # noqa: E402
from envase_lens.compliance import (  # noqa: E402
    container_fractions,
    has_blocking_violations,
    scan_texts,
    validate_compliance,
)
from envase_lens.core import analyze_with_metadata  # noqa: E402
from envase_lens.exceptions import (  # noqa: E402
    AuthenticationError,
    BlockingClaimsError,
    ImageError,
    RateLimitError,
    VisionModelError,
    VisionResponseError,
    VisionTimeoutError,
)
from envase_lens.label import LabelPayload, build_label_payload  # noqa: E402
from envase_lens.lookup import lookup_product_materials  # noqa: E402
from envase_lens.notify import LabelNotification, send_label_notification  # noqa: E402
from envase_lens.schema import (  # noqa: E402
    AnalysisResult,
    ComplianceItem,
    ContainerFraction,
    DetectedMaterial,
    GreenwashingViolation,
    MandatoryMarkingInputs,
    PackagingAnalysis,
    PackagingUse,
)
from envase_lens.vision import MAX_IMAGES  # noqa: E402

app = FastAPI(title="envase-lens API", version="1.0.0")
logger = logging.getLogger(__name__)
ANALYSIS_LOGGER = AnalysisLogger(AnalysisLoggingConfig.from_env())

raw_origins = os.getenv("FRONTEND_ORIGINS", "*")
allow_origins = [origin.strip() for origin in raw_origins.split(",") if origin.strip()]
MAX_IMAGE_BYTES = int(os.getenv("MAX_IMAGE_BYTES", str(8 * 1024 * 1024)))
ALLOWED_MIME_TYPES = {"image/jpeg", "image/jpg", "image/png", "image/webp"}
VALID_PACKAGING_USES = ("household", "commercial", "industrial")
CLAIMS_ARTICLE = "Art. 13.3 RD 1055/2022 (BOE-A-2022-22199)"

app.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
def health() -> dict[str, bool]:
    return {"ok": True}


class ComplianceRequest(BaseModel):
    materials: list[DetectedMaterial] = Field(min_length=1)
    packaging_use: PackagingUse = "household"
    marking: MandatoryMarkingInputs | None = None


class ComplianceResponse(BaseModel):
    container_fractions: dict[str, ContainerFraction]
    compliance_items: list[ComplianceItem]


class ScanRequest(BaseModel):
    texts: list[str] = Field(default_factory=list)


class ScanResponse(BaseModel):
    blocking: bool
    violations: list[GreenwashingViolation]


class LookupResponse(BaseModel):
    product_name: str
    matched: bool
    materials: list[DetectedMaterial] = Field(default_factory=list)


class LabelRequest(BaseModel):
    analysis: PackagingAnalysis
    product_name: str
    company_name: str
    cif: str
    packaging_use: PackagingUse | None = None
    marking: MandatoryMarkingInputs | None = None
    analysis_id: str | None = None
    notify_phone: str | None = None
    pdf_url: str | None = None


def _validate_payload_size(payload: bytes) -> None:
    if len(payload) > MAX_IMAGE_BYTES:
        raise HTTPException(status_code=413, detail="image too large")


def _validate_multipart_content_type(content_type: str | None) -> None:
    if not content_type:
        raise HTTPException(status_code=400, detail="image file is required")
    normalized = content_type.split(";")[0].strip().lower()
    if normalized not in ALLOWED_MIME_TYPES:
        raise HTTPException(status_code=400, detail="All images must be JPEG, PNG or WebP")


def _parse_marking(raw: str | None) -> MandatoryMarkingInputs | None:
    if not raw:
        return None
    try:
        return MandatoryMarkingInputs.model_validate_json(raw)
    except ValidationError:
        logger.warning("ignoring malformed marking_inputs")
        return None


@app.post("/analyze", response_model=AnalysisResult)
async def analyze_packaging_images(
    image: list[UploadFile] | None = File(default=None),
    product_name: str = Form(default="Producto"),
    packaging_use: str = Form(default="household"),
    marking_inputs: str | None = Form(default=None),
) -> AnalysisResult:
    request_id = ANALYSIS_LOGGER.new_request_id()
    if not image:
        raise HTTPException(status_code=400, detail="No image provided")
    if packaging_use not in VALID_PACKAGING_USES:
        raise HTTPException(status_code=400, detail=f"invalid packaging_use: {packaging_use}")

    payloads: list[bytes] = []
    for upload in image[:MAX_IMAGES]:
        _validate_multipart_content_type(upload.content_type)
        payload = await upload.read()
        if not payload:
            raise HTTPException(status_code=400, detail="empty file")
        _validate_payload_size(payload)
        payloads.append(payload)

    marking = _parse_marking(marking_inputs)
    product_name = product_name.strip() or "Producto"

    try:
        pil_images = [Image.open(BytesIO(payload)) for payload in payloads]
        result, metadata = await run_in_threadpool(
            analyze_with_metadata,
            pil_images,
            product_name=product_name,
            packaging_use=packaging_use,
            marking=marking,
        )
        await run_in_threadpool(
            ANALYSIS_LOGGER.log_success,
            request_id=request_id,
            payloads=payloads,
            product_name=product_name,
            packaging_use=packaging_use,
            result=result.model_dump(mode="json"),
            metadata=metadata,
        )
        return result
    except UnidentifiedImageError as exc:
        raise HTTPException(status_code=400, detail="invalid image format") from exc
    except AuthenticationError as exc:
        raise HTTPException(status_code=401, detail=str(exc)) from exc
    except RateLimitError as exc:
        raise HTTPException(status_code=429, detail=str(exc)) from exc
    except ImageError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except VisionTimeoutError as exc:
        await run_in_threadpool(_log_failure, request_id, payloads, product_name, packaging_use, exc)
        raise HTTPException(status_code=504, detail=str(exc)) from exc
    except (VisionResponseError, VisionModelError) as exc:
        await run_in_threadpool(_log_failure, request_id, payloads, product_name, packaging_use, exc)
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    except HTTPException:
        raise
    except Exception as exc:
        await run_in_threadpool(_log_failure, request_id, payloads, product_name, packaging_use, exc)
        logger.exception("analyze failed")
        raise HTTPException(status_code=500, detail="internal_error")


def _log_failure(request_id: str, payloads: list[bytes], product_name: str, packaging_use: str, exc: Exception) -> None:
    ANALYSIS_LOGGER.log_error(
        request_id=request_id,
        payloads=payloads,
        product_name=product_name,
        packaging_use=packaging_use,
        error_detail=str(exc),
    )


@app.post("/compliance", response_model=ComplianceResponse)
def compliance(body: ComplianceRequest) -> ComplianceResponse:
    return ComplianceResponse(
        container_fractions=container_fractions(body.materials),
        compliance_items=validate_compliance(body.materials, body.packaging_use, body.marking),
    )


@app.post("/greenwashing/scan", response_model=ScanResponse)
def greenwashing_scan(body: ScanRequest) -> ScanResponse:
    violations = scan_texts(*body.texts)
    return ScanResponse(blocking=has_blocking_violations(violations), violations=violations)


@app.get("/lookup", response_model=LookupResponse)
def lookup(
    product_name: str = Query(min_length=1),
    packaging_type: str | None = Query(default=None),
) -> LookupResponse:
    materials = lookup_product_materials(product_name, packaging_type)
    return LookupResponse(
        product_name=product_name,
        matched=materials is not None,
        materials=materials or [],
    )


@app.post("/label", response_model=LabelPayload)
def label(body: LabelRequest, background_tasks: BackgroundTasks) -> LabelPayload:
    try:
        payload = build_label_payload(
            body.analysis,
            product_name=body.product_name,
            company_name=body.company_name,
            cif=body.cif,
            packaging_use=body.packaging_use,
            marking=body.marking,
        )
    except BlockingClaimsError as exc:
        raise HTTPException(
            status_code=422,
            detail={
                "error": str(exc),
                "violations": [v.model_dump() for v in exc.violations],
                "article": CLAIMS_ARTICLE,
            },
        ) from exc

    if body.notify_phone:
        background_tasks.add_task(
            send_label_notification,
            LabelNotification(
                to_phone=body.notify_phone,
                company_name=body.company_name,
                product_name=body.product_name,
                analysis_id=body.analysis_id or "",
                materials=list(body.analysis.materials),
                pdf_url=body.pdf_url,
            ),
        )
    return payload
