"""
roofcompliance service configuration.

Read once from the environment at import.
"""
import os

from .. import __version__
from ..canon import knowledge_pack_hash
from ..knowledge import KNOWLEDGE_BASE

RC_ENGINE_VERSION = os.getenv("RC_ENGINE_VERSION", __version__)
RC_LOG_LEVEL = os.getenv("RC_LOG_LEVEL", "INFO")
RC_DOCS_ENABLED = os.getenv("RC_DOCS_ENABLED", "true").lower() == "true"
RC_MAX_REQUEST_SIZE = int(os.getenv("RC_MAX_REQUEST_SIZE", "65536"))  # 64KB default
RC_CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("RC_CORS_ORIGINS", "*").split(",")
    if origin.strip()
]
RC_HOST = os.getenv("RC_HOST", "0.0.0.0")
RC_PORT = int(os.getenv("RC_PORT", "8000"))

# Full 64-char SHA-256 for provenance
KNOWLEDGE_PACK_HASH = knowledge_pack_hash(KNOWLEDGE_BASE)
