"""Legal-context retrieval over the RD 1055/2022 knowledge base."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable

from envase_lens.compliance.checklist import FALLBACK_LEGAL_CONTEXT
from envase_lens.config import AnalysisConfig
from envase_lens.schema import DetectedMaterial

logger = logging.getLogger(__name__)

LEGAL_CONTEXT_UNAVAILABLE = "No se pudo obtener contexto legal en este momento."
SEPARATOR = "\n\n---\n\n"


def build_legal_query(materials: Iterable[DetectedMaterial]) -> str:
    """One retrieval query describing every material."""
    return ", ".join(f"{m.material_name} {m.material_abbrev or ''} envase" for m in materials)


def format_matches(rows: Iterable[dict], limit: int = 5) -> str:
    return SEPARATOR.join(
        f"[{row['article_ref']}] {row['title']}\n{row['content']}" for row in list(rows)[:limit]
    )


class BaseLegalRetriever(ABC):
    """Abstract base class for legal-context search backends."""

    @abstractmethod
    def search(self, query: str) -> str:
        """Return formatted legal passages relevant to the query."""
        pass


class PgVectorLegalRetriever(BaseLegalRetriever):
    """Vector search through the `search_legal_docs` SQL function.

    The query is embedded with Gemini and matched in PostgreSQL (pgvector).
    Rows come back ordered by similarity; the best `top_k` are kept.
    """

    def __init__(
        self,
        database_url: str,
        *,
        api_key: str | None = None,
        embedding_model: str = "text-embedding-004",
        match_count: int = 8,
        similarity_threshold: float = 0.4,
        top_k: int = 5,
    ):
        self.database_url = database_url
        self.api_key = api_key
        self.embedding_model = embedding_model
        self.match_count = match_count
        self.similarity_threshold = similarity_threshold
        self.top_k = top_k
        self._client = None

    @classmethod
    def from_config(cls, config: AnalysisConfig, api_key: str | None = None) -> "PgVectorLegalRetriever | None":
        if not config.legal_database_url:
            return None
        return cls(
            config.legal_database_url,
            api_key=api_key,
            embedding_model=config.legal_embedding_model,
            match_count=config.legal_match_count,
            similarity_threshold=config.legal_similarity_threshold,
            top_k=config.legal_top_k,
        )

    def embed(self, query: str) -> list[float]:
        if self._client is None:
            from google import genai

            self._client = genai.Client(api_key=self.api_key) if self.api_key else genai.Client()
        response = self._client.models.embed_content(model=self.embedding_model, contents=query)
        return list(response.embeddings[0].values)

    def fetch_matches(self, embedding: list[float]) -> list[dict]:
        import psycopg
        from psycopg.rows import dict_row

        vector = "[" + ",".join(str(value) for value in embedding) + "]"
        with psycopg.connect(self.database_url, row_factory=dict_row) as conn:
            with conn.cursor() as cur:
                cur.execute(
                    "select title, article_ref, content, similarity "
                    "from search_legal_docs(%s::vector, %s, %s)",
                    (vector, self.match_count, self.similarity_threshold),
                )
                return list(cur.fetchall())

    def search(self, query: str) -> str:
        rows = self.fetch_matches(self.embed(query))
        if not rows:
            return FALLBACK_LEGAL_CONTEXT
        return format_matches(rows, self.top_k)


def search_legal_context(query: str, retriever: BaseLegalRetriever | None) -> str:
    """Search without ever failing the caller."""
    if retriever is None:
        return FALLBACK_LEGAL_CONTEXT
    try:
        return retriever.search(query)
    except Exception as exc:
        logger.warning("legal context search failed: %s", exc)
        return LEGAL_CONTEXT_UNAVAILABLE
