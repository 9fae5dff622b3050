"""Label-ready notifications delivered through a webhook."""

from __future__ import annotations

import http.client
import json
import logging
from dataclasses import dataclass, field
from urllib import error, request

from envase_lens.config import NotificationConfig
from envase_lens.schema import DetectedMaterial

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LabelNotification:
    to_phone: str
    company_name: str
    product_name: str
    analysis_id: str
    materials: list[DetectedMaterial] = field(default_factory=list)
    pdf_url: str | None = None


def build_messages(notification: LabelNotification) -> list[str]:
    """The label-ready message followed by the material breakdown."""
    download = (
        f"📄 Descarga el PDF aquí:\n{notification.pdf_url}"
        if notification.pdf_url
        else "📄 Accede al panel para descargar el PDF."
    )
    ready = "\n".join(
        [
            f"✅ *Etiqueta generada* — {notification.company_name}",
            f"📦 Producto: {notification.product_name}",
            download,
            f"\nID de análisis: {notification.analysis_id}",
        ]
    )

    lines = []
    for m in notification.materials:
        abbrev = f" ({m.material_abbrev})" if m.material_abbrev else ""
        lines.append(f"• {m.part}: {m.material_name}{abbrev} — Confianza: {round(m.confidence * 100)}%")
    breakdown = "\n".join(
        [
            "📋 *Desglose de materiales (RD 1055/2022)*",
            "\n".join(lines),
            "\n⚠️ Revisa el etiquetado antes de imprimir. Esta etiqueta ha sido generada automáticamente por IA.",
        ]
    )
    return [ready, breakdown]


def send_label_notification(notification: LabelNotification, config: NotificationConfig | None = None) -> int:
    """POST both messages; return how many were delivered.

    A no-op when no webhook is configured or no recipient is given.
    Delivery failures are logged, never raised.
    """
    config = config or NotificationConfig.from_env()
    if not config.enabled or not notification.to_phone:
        return 0

    delivered = 0
    for index, body in enumerate(build_messages(notification), start=1):
        payload = {"to": notification.to_phone, "body": body, "analysis_id": notification.analysis_id}
        if _post_webhook(config, payload):
            delivered += 1
        else:
            logger.warning("label notification message %d failed for %s", index, notification.analysis_id)
    return delivered


def _post_webhook(config: NotificationConfig, payload: dict) -> bool:
    data = json.dumps(payload, ensure_ascii=False).encode("utf-8")
    headers = {"Content-Type": "application/json"}
    if config.webhook_token:
        headers["x-webhook-token"] = config.webhook_token
    req = request.Request(config.webhook_url, data=data, headers=headers, method="POST")
    try:
        with request.urlopen(req, timeout=config.timeout_sec):
            pass
    except (error.URLError, http.client.HTTPException, OSError, ValueError) as exc:
        logger.warning("label notification webhook failed: %s", exc)
        return False
    return True
