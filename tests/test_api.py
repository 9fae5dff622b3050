"""HTTP surface tests."""

from io import BytesIO

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from api.index import app
from envase_lens import DetectedMaterial, PackagingAnalysis, recompute
from envase_lens.exceptions import AuthenticationError, VisionTimeoutError

METADATA = {"provider": "gemini", "model": "gemini-2.0-flash"}


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def png_bytes():
    buffer = BytesIO()
    Image.new("RGB", (4, 4), color="white").save(buffer, format="PNG")
    return buffer.getvalue()


def _result():
    analysis = PackagingAnalysis(
        packaging_type="bottle",
        materials=[
            DetectedMaterial(
                part="cuerpo",
                material_name="Polietileno tereftalato",
                material_code="01",
                material_abbrev="PET",
                confidence=0.95,
            )
        ],
        overall_confidence=0.95,
    )
    return recompute(analysis, "Agua mineral")


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"ok": True}


def test_compliance_endpoint(client):
    response = client.post(
        "/compliance",
        json={
            "materials": [
                {"part": "tarro", "material_name": "Vidrio", "material_code": "70", "material_abbrev": "GL", "confidence": 1},
            ],
            "packaging_use": "household",
        },
    )
    assert response.status_code == 200
    body = response.json()
    assert body["container_fractions"] == {"tarro": "verde"}
    assert len(body["compliance_items"]) == 5


def test_compliance_requires_materials(client):
    response = client.post("/compliance", json={"materials": []})
    assert response.status_code == 422


def test_greenwashing_scan(client):
    response = client.post("/greenwashing/scan", json={"texts": ["Envase eco-friendly", None]})
    assert response.status_code == 422

    response = client.post("/greenwashing/scan", json={"texts": ["Envase eco-friendly", "reciclable"]})
    body = response.json()
    assert body["blocking"] is True
    assert [v["severity"] for v in body["violations"]] == ["error", "warning"]


def test_lookup_known_product(client):
    response = client.get("/lookup", params={"product_name": "Leche entera 1L"})
    assert response.status_code == 200
    body = response.json()
    assert body["matched"] is True
    assert body["materials"]
    assert all(m["inference_method"] == "lookup" for m in body["materials"])


def test_lookup_unknown_product(client):
    response = client.get("/lookup", params={"product_name": "Tornillos M8"})
    assert response.json() == {"product_name": "Tornillos M8", "matched": False, "materials": []}


def test_label_blocks_prohibited_claim(client):
    response = client.post(
        "/label",
        json={
            "analysis": _result().analysis.model_dump(mode="json"),
            "product_name": "Agua 100% natural",
            "company_name": "Aguas Ejemplo SL",
            "cif": "B12345678",
        },
    )
    assert response.status_code == 422
    detail = response.json()["detail"]
    assert detail["article"].startswith("Art. 13.3")
    assert detail["violations"][0]["severity"] == "error"


def test_label_payload(client):
    response = client.post(
        "/label",
        json={
            "analysis": _result().analysis.model_dump(mode="json"),
            "product_name": "Agua mineral",
            "company_name": "Aguas Ejemplo SL",
            "cif": "B12345678",
        },
    )
    assert response.status_code == 200
    rows = response.json()["rows"]
    assert rows[0]["fraction"] == "amarillo"
    assert rows[0]["fraction_label"] == "Contenedor amarillo"


def test_analyze_passes_form_fields(client, png_bytes, mocker):
    analyze = mocker.patch("api.index.analyze_with_metadata", return_value=(_result(), METADATA))

    response = client.post(
        "/analyze",
        files=[("image", ("front.png", png_bytes, "image/png")), ("image", ("back.png", png_bytes, "image/png"))],
        data={
            "product_name": " Agua mineral ",
            "packaging_use": "commercial",
            "marking_inputs": '{"is_compostable": false, "is_sup": true, "is_reusable": false, "is_sddr": false}',
        },
    )

    assert response.status_code == 200
    assert response.json()["container_fractions"] == {"cuerpo": "amarillo"}
    args, kwargs = analyze.call_args
    assert len(args[0]) == 2
    assert kwargs["product_name"] == "Agua mineral"
    assert kwargs["packaging_use"] == "commercial"
    assert kwargs["marking"].is_sup is True


def test_analyze_requires_image(client):
    response = client.post("/analyze", data={"product_name": "Agua"})
    assert response.status_code == 400


def test_analyze_rejects_unsupported_type(client):
    response = client.post("/analyze", files={"image": ("notes.txt", b"hola", "text/plain")})
    assert response.status_code == 400


def test_analyze_rejects_unknown_use(client, png_bytes):
    response = client.post(
        "/analyze",
        files={"image": ("front.png", png_bytes, "image/png")},
        data={"packaging_use": "hospital"},
    )
    assert response.status_code == 400


@pytest.mark.parametrize(
    "exc,status",
    [
        (VisionTimeoutError("slow"), 504),
        (AuthenticationError("no key"), 401),
        (RuntimeError("boom"), 500),
    ],
)
def test_analyze_maps_errors(client, png_bytes, mocker, exc, status):
    mocker.patch("api.index.analyze_with_metadata", side_effect=exc)
    response = client.post("/analyze", files={"image": ("front.png", png_bytes, "image/png")})
    assert response.status_code == status


def test_analyze_runs_off_the_event_loop(client, png_bytes, mocker):
    import api.index as index

    analyze = mocker.patch("api.index.analyze_with_metadata", return_value=(_result(), METADATA))
    threadpool = mocker.patch("api.index.run_in_threadpool", wraps=index.run_in_threadpool)

    response = client.post("/analyze", files={"image": ("front.png", png_bytes, "image/png")})

    assert response.status_code == 200
    assert threadpool.call_args_list[0].args[0] is analyze


def test_analyze_logs_provider_metadata(client, png_bytes, mocker):
    mocker.patch("api.index.analyze_with_metadata", return_value=(_result(), METADATA))
    log_success = mocker.patch("api.index.ANALYSIS_LOGGER.log_success")

    client.post("/analyze", files={"image": ("front.png", png_bytes, "image/png")})

    assert log_success.call_args.kwargs["metadata"] == METADATA


def test_label_queues_notification(client, mocker):
    send = mocker.patch("api.index.send_label_notification", return_value=2)

    response = client.post(
        "/label",
        json={
            "analysis": _result().analysis.model_dump(mode="json"),
            "product_name": "Agua mineral",
            "company_name": "Aguas Ejemplo SL",
            "cif": "B12345678",
            "analysis_id": "abc-123",
            "notify_phone": "+34612345678",
        },
    )

    assert response.status_code == 200
    notification = send.call_args.args[0]
    assert notification.to_phone == "+34612345678"
    assert notification.analysis_id == "abc-123"
    assert [m.part for m in notification.materials] == ["cuerpo"]


def test_label_without_recipient_sends_nothing(client, mocker):
    send = mocker.patch("api.index.send_label_notification")
    client.post(
        "/label",
        json={
            "analysis": _result().analysis.model_dump(mode="json"),
            "product_name": "Agua mineral",
            "company_name": "Aguas Ejemplo SL",
            "cif": "B12345678",
        },
    )
    send.assert_not_called()
