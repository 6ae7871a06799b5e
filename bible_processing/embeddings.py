from openai import OpenAI
from supabase import create_client

from . import config
from .console import log
from .models import VerseRecord


class EmbeddingError(RuntimeError):
    """The embedding service or vector table rejected a batch."""


# ===============================
# 🔧 CLIENTS (created on first use)
# ===============================
_oai = None
_supabase = None


def get_clients():
    global _oai, _supabase
    if _oai is None or _supabase is None:
        if not config.SUPABASE_URL or not config.SUPABASE_KEY or not config.OPENAI_API_KEY:
            raise RuntimeError(
                "Missing one or more environment variables: SUPABASE_URL, SUPABASE_SERVICE_KEY, OPENAI_API_KEY"
            )
        _oai = OpenAI(api_key=config.OPENAI_API_KEY)
        _supabase = create_client(config.SUPABASE_URL, config.SUPABASE_KEY)
    return _oai, _supabase


# ===============================
# 🔢 BATCH EMBEDDING
# ===============================
def embed_batch(texts: list[str], client=None) -> list[list[float]]:
    oai = client or get_clients()[0]
    response = oai.embeddings.create(input=texts, model=config.EMBED_MODEL)
    embeddings = [item.embedding for item in response.data]
    if len(embeddings) != len(texts):
        raise EmbeddingError(f"Expected {len(texts)} embeddings, got {len(embeddings)}")
    for i, emb in enumerate(embeddings):
        if len(emb) != config.VECTOR_DIM:
            log(f"⚠️ Embedding {i} has dimension {len(emb)} (expected {config.VECTOR_DIM})")
    return embeddings


def build_rows(records: list[VerseRecord], embeddings: list[list[float]]) -> list[dict]:
    return [
        {
            "id": record.id,
            "content": record.text,
            "embedding": embedding,
            "metadata": record.to_dict(),
        }
        for record, embedding in zip(records, embeddings)
    ]


# ===============================
# 🚀 BATCH UPSERT TO SUPABASE
# ===============================
def process_batch_embeddings(batch: list[VerseRecord], oai=None, supabase=None):
    """Embed a batch of verses and upsert them; raises on any failure."""
    if oai is None or supabase is None:
        oai, supabase = get_clients()

    with_text = [r for r in batch if r.text]
    for r in batch:
        if not r.text:
            log(f"⚠️ Skipping {r.id} due to missing text")
    if not with_text:
        return

    embeddings = embed_batch([r.text for r in with_text], client=oai)
    rows = build_rows(with_text, embeddings)
    res = supabase.table(config.SUPABASE_TABLE).upsert(rows, on_conflict="id").execute()
    if hasattr(res, "error") and res.error is not None:
        raise EmbeddingError(getattr(res.error, "message", str(res.error)))
