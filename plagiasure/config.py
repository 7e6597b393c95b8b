import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()

# ───── Auth ─────
JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", "your_supabase_jwt_secret")
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")

# ───── AI detection ─────
HF_TOKEN = os.getenv("HF_TOKEN", "")
AI_MODEL = os.getenv("AI_MODEL", "fakespot-ai/roberta-base-ai-text-detection-v1")
AI_MIN_TEXT_LENGTH = 20
AI_MAX_TEXT_LENGTH = 2000

# ───── Provider endpoints ─────
GOOGLE_SEARCH_URL = "https://www.googleapis.com/customsearch/v1"
BING_SEARCH_URL = "https://api.bing.microsoft.com/v7.0/search"
DUPLICHECKER_URL = "https://www.duplichecker.com/api/v1/check"
DUCKDUCKGO_URL = "https://api.duckduckgo.com/"
CROSSREF_URL = "https://api.crossref.org/works"
ARXIV_URL = "http://export.arxiv.org/api/query"
SEMANTIC_SCHOLAR_URL = "https://api.semanticscholar.org/graph/v1/paper/search"

# ───── Request policy ─────
REQUEST_TIMEOUT = float(os.getenv("PROVIDER_REQUEST_TIMEOUT", "8"))
DUPLICHECKER_TIMEOUT = 10
SEMANTIC_SCHOLAR_TIMEOUT = 15
USER_AGENT = "PlagiaSure/1.0 (Academic Integrity Tool)"

# Minimum seconds between two calls to the same provider
GOOGLE_DELAY = 1.2
BING_DELAY = 1.0
DUPLICHECKER_DELAY = 1.0
CROSSREF_DELAY = 1.0
ARXIV_DELAY = 1.0
DUCKDUCKGO_DELAY = 2.0
SEMANTIC_SCHOLAR_DELAY = 5.0

# ───── Probe extraction ─────
GOOGLE_MIN_SENTENCE_LENGTH = 30
GOOGLE_MAX_QUERIES = 3
GOOGLE_QUERY_CHARS = 80
BING_MIN_SENTENCE_LENGTH = 25
BING_MAX_QUERIES = 2
BING_QUERY_CHARS = 70
ACADEMIC_MIN_LENGTH = 40
ACADEMIC_MAX_PHRASES = 5
ACADEMIC_PHRASE_CHARS = 100
CAPITALIZED_TERM_MIN_LENGTH = 10
MAX_CAPITALIZED_TERMS = 3
KEY_PHRASE_SENTENCE_MIN = 20
MAX_KEY_PHRASES = 3
CHUNK_SIZE = 1000

# ───── Aggregation ─────
MAX_HIGHLIGHTS = 15
DEDUP_PREFIX_CHARS = 50
DETECTION_METHOD = "Multi-API Free Detection"

# ───── App ─────
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE", "")
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))


class ProviderConfig(BaseModel):
    """Keys and limits handed to every provider client at construction."""

    model_config = {"frozen": True}

    google_api_key: Optional[str] = None
    google_engine_id: Optional[str] = None
    bing_api_key: Optional[str] = None
    duplichecker_api_key: Optional[str] = None
    crossref_mailto: str = "support@plagiasure.app"
    user_agent: str = USER_AGENT
    request_timeout: float = REQUEST_TIMEOUT


def load_provider_config() -> ProviderConfig:
    return ProviderConfig(
        google_api_key=os.getenv("GOOGLE_SEARCH_API_KEY") or None,
        google_engine_id=os.getenv("GOOGLE_SEARCH_ENGINE_ID") or None,
        bing_api_key=os.getenv("BING_SEARCH_API_KEY") or None,
        duplichecker_api_key=os.getenv("DUPLICHECKER_API_KEY") or None,
        crossref_mailto=os.getenv("CROSSREF_MAILTO", "support@plagiasure.app"),
        request_timeout=float(os.getenv("PROVIDER_REQUEST_TIMEOUT", REQUEST_TIMEOUT)),
    )
