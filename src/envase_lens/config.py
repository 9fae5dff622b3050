"""Environment-driven configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_VISION_TIMEOUT_SEC = 55.0


def parse_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def safe_float(value: str | None, default: float) -> float:
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def safe_int(value: str | None, default: int) -> int:
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class AnalysisConfig:
    provider: str = "gemini"
    vision_timeout_sec: float = DEFAULT_VISION_TIMEOUT_SEC
    lookup_version: str = "v1"
    legal_database_url: str | None = None
    legal_embedding_model: str = "text-embedding-004"
    legal_match_count: int = 8
    legal_similarity_threshold: float = 0.4
    legal_top_k: int = 5

    @classmethod
    def from_env(cls) -> "AnalysisConfig":
        timeout = safe_float(os.getenv("ENVASE_LENS_VISION_TIMEOUT_SEC"), DEFAULT_VISION_TIMEOUT_SEC)
        return cls(
            provider=(os.getenv("ENVASE_LENS_PROVIDER", "gemini").strip().lower() or "gemini"),
            vision_timeout_sec=timeout if timeout > 0 else DEFAULT_VISION_TIMEOUT_SEC,
            lookup_version=os.getenv("ENVASE_LENS_LOOKUP_VERSION", "v1"),
            legal_database_url=os.getenv("LEGAL_DATABASE_URL") or os.getenv("DATABASE_URL"),
            legal_embedding_model=os.getenv("LEGAL_EMBEDDING_MODEL", "text-embedding-004"),
            legal_match_count=max(1, safe_int(os.getenv("LEGAL_MATCH_COUNT"), 8)),
            legal_similarity_threshold=max(
                0.0, min(1.0, safe_float(os.getenv("LEGAL_SIMILARITY_THRESHOLD"), 0.4))
            ),
            legal_top_k=max(1, safe_int(os.getenv("LEGAL_TOP_K"), 5)),
        )


@dataclass(frozen=True)
class NotificationConfig:
    webhook_url: str | None = None
    webhook_token: str | None = None
    timeout_sec: float = 2.0

    @property
    def enabled(self) -> bool:
        return bool(self.webhook_url)

    @classmethod
    def from_env(cls) -> "NotificationConfig":
        return cls(
            webhook_url=os.getenv("LABEL_NOTIFY_WEBHOOK_URL"),
            webhook_token=os.getenv("LABEL_NOTIFY_WEBHOOK_TOKEN"),
            timeout_sec=safe_float(os.getenv("LABEL_NOTIFY_WEBHOOK_TIMEOUT_SEC"), 2.0),
        )
