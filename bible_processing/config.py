import os
from dotenv import load_dotenv

load_dotenv()

# ===============================
# 📌 PIPELINE CONFIGURATION
# ===============================
BATCH_SIZE = int(os.getenv("BATCH_SIZE", "100"))           # verses per embedding batch
MAX_RETRIES = int(os.getenv("MAX_RETRIES", "3"))           # attempts per batch
RETRY_BASE_DELAY = float(os.getenv("RETRY_BASE_DELAY", "1.0"))  # seconds, scaled by attempt
CHECKPOINT_DIR = os.getenv("CHECKPOINT_DIR", ".")

# ===============================
# 🌐 SOURCE
# ===============================
SCROLLMAPPER_URL = os.getenv(
    "SCROLLMAPPER_URL",
    "https://raw.githubusercontent.com/scrollmapper/bible_databases/master/formats/json/{version}.json",
)
HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "60"))

# ===============================
# 🔢 EMBEDDINGS + STORAGE
# ===============================
EMBED_MODEL = os.getenv("EMBED_MODEL", "text-embedding-3-large")
VECTOR_DIM = int(os.getenv("VECTOR_DIM", "3072"))
SUPABASE_TABLE = os.getenv("SUPABASE_TABLE", "bible_verses")

SUPABASE_URL = os.getenv("SUPABASE_URL")
SUPABASE_KEY = os.getenv("SUPABASE_SERVICE_KEY")
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
