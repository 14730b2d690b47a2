"""
Central configuration for the banner service.
Values are read from environment variables; Flask loads every
upper-case name in this module via ``app.config.from_object``.
"""
import os

# ── MongoDB ────────────────────────────────────────────────────────
MONGODB_URI = os.getenv("MONGODB_URI", "")
# used only when MONGODB_URI names no database
MONGODB_DB_NAME = os.getenv("MONGODB_DB_NAME", "banners")
MONGO_SERVER_SELECTION_TIMEOUT_MS = int(
    os.getenv("MONGO_SERVER_SELECTION_TIMEOUT_MS", "5000")
)

# Collection names
COLLECTION_BANNERS = "banners"

# ── Cleanup cron ───────────────────────────────────────────────────
# Vercel cron sends "Authorization: Bearer $CRON_SECRET" when it is set.
CRON_SECRET = os.getenv("CRON_SECRET", "")

# ── HTTP ───────────────────────────────────────────────────────────
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# ── Flask ──────────────────────────────────────────────────────────
FLASK_HOST = os.getenv("FLASK_HOST", "0.0.0.0")
FLASK_PORT = int(os.getenv("FLASK_PORT", "5000"))
FLASK_DEBUG = os.getenv("FLASK_DEBUG", "").lower() in ("1", "true", "yes")
