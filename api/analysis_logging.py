"""Best-effort analysis logging to PostgreSQL."""

from __future__ import annotations

import hashlib
import json
import logging
import os
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone

from envase_lens.config import parse_bool

logger = logging.getLogger(__name__)


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass(frozen=True)
class AnalysisLoggingConfig:
    enabled: bool = False
    database_url: str | None = None
    table: str = "analysis_logs"

    @classmethod
    def from_env(cls) -> "AnalysisLoggingConfig":
        return cls(
            enabled=parse_bool(os.getenv("SAVE_ANALYSIS_LOG"), False),
            database_url=os.getenv("ANALYSIS_LOG_DATABASE_URL") or os.getenv("DATABASE_URL"),
            table=os.getenv("ANALYSIS_LOG_TABLE", "analysis_logs"),
        )


class AnalysisLogger:
    def __init__(self, config: AnalysisLoggingConfig):
        self.config = config
        self._db_ready = False

    def should_log(self) -> bool:
        return self.config.enabled and bool(self.config.database_url)

    def new_request_id(self) -> str:
        return str(uuid.uuid4())

    def images_sha256(self, payloads: list[bytes]) -> list[str]:
        return [hashlib.sha256(payload).hexdigest() for payload in payloads]

    def log_success(
        self,
        *,
        request_id: str,
        payloads: list[bytes],
        product_name: str,
        packaging_use: str,
        result: dict,
        metadata: dict,
    ) -> None:
        if not self.should_log():
            return
        analysis = result.get("analysis") or {}
        self._insert_row(
            {
                "request_id": request_id,
                "created_at": _utc_now_iso(),
                "product_name": product_name,
                "packaging_use": packaging_use,
                "provider": metadata.get("provider"),
                "model": metadata.get("model"),
                "image_count": len(payloads),
                "image_sha256_json": self.images_sha256(payloads),
                "guided_query_required": analysis.get("guided_query_required"),
                "lookup_applied": result.get("lookup_applied"),
                "result_json": result,
                "error_detail": None,
            }
        )

    def log_error(
        self,
        *,
        request_id: str,
        payloads: list[bytes],
        product_name: str | None,
        packaging_use: str | None,
        error_detail: str,
    ) -> None:
        if not self.should_log():
            return
        self._insert_row(
            {
                "request_id": request_id,
                "created_at": _utc_now_iso(),
                "product_name": product_name,
                "packaging_use": packaging_use,
                "provider": None,
                "model": None,
                "image_count": len(payloads),
                "image_sha256_json": self.images_sha256(payloads),
                "guided_query_required": None,
                "lookup_applied": None,
                "result_json": None,
                "error_detail": error_detail[:2000],
            }
        )

    def _insert_row(self, row: dict) -> None:
        try:
            import psycopg
        except Exception:
            return

        if not self.config.database_url:
            return

        table = self.config.table
        create_sql = f"""
            create table if not exists {table} (
              id bigserial primary key,
              request_id text not null unique,
              created_at timestamptz not null default now(),
              product_name text null,
              packaging_use text null,
              provider text null,
              model text null,
              image_count integer not null default 0,
              image_sha256_json jsonb not null default '[]'::jsonb,
              guided_query_required boolean null,
              lookup_applied boolean null,
              result_json jsonb null,
              error_detail text null
            )
        """
        insert_sql = f"""
            insert into {table} (
              request_id, created_at, product_name, packaging_use, provider, model, image_count,
              image_sha256_json, guided_query_required, lookup_applied, result_json, error_detail
            ) values (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s)
            on conflict (request_id) do nothing
        """
        try:
            with psycopg.connect(self.config.database_url) as conn:
                with conn.cursor() as cur:
                    if not self._db_ready:
                        cur.execute(create_sql)
                        self._db_ready = True
                    cur.execute(
                        insert_sql,
                        (
                            row.get("request_id"),
                            row.get("created_at"),
                            row.get("product_name"),
                            row.get("packaging_use"),
                            row.get("provider"),
                            row.get("model"),
                            row.get("image_count"),
                            json.dumps(row.get("image_sha256_json") or []),
                            row.get("guided_query_required"),
                            row.get("lookup_applied"),
                            json.dumps(row.get("result_json"), ensure_ascii=False)
                            if row.get("result_json") is not None
                            else None,
                            row.get("error_detail"),
                        ),
                    )
                conn.commit()
        except Exception as exc:
            # Logging never breaks the analysis API.
            logger.warning("analysis log insert failed: %s", exc)
