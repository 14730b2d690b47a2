"""
Banner service — Flask application entry point.
Serves the active banner URLs and the scheduled cleanup endpoint.
"""
import atexit
import hmac
import logging
from datetime import datetime, timezone

from flask import Blueprint, Flask, current_app, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import InternalServerError

from errors import BannerServiceError
from storage.banners import BannerRepository
from storage.mongo_client import MongoConnection

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__, url_prefix="/api")

LOAD_ERROR = "Falha ao carregar banners."
CLEANUP_ERROR = "Falha na rotina de limpeza."
CLEANUP_DONE = "Rotina de limpeza de banners concluída com sucesso."
UNAUTHORIZED = "Não autorizado."
INTERNAL_ERROR = "Erro interno do servidor."


def _repository() -> BannerRepository:
    return current_app.extensions["banner_repository"]


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# API endpoints
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@api_bp.route("/health")
def health():
    """Service status and whether MongoDB answers a ping."""
    connection = current_app.extensions["mongo_connection"]
    return jsonify({
        "status": "ok",
        "mongo_connected": connection.ping(),
        "timestamp": datetime.now(timezone.utc).isoformat(),
    })


@api_bp.route("/banners")
def banners():
    """Return the URLs of every active banner as a JSON array."""
    try:
        urls = _repository().active_urls()
    except BannerServiceError:
        logger.exception("Failed to load banners")
        return jsonify({"error": LOAD_ERROR}), 500

    if not urls:
        logger.info("No active banners found")
    return jsonify(urls), 200


@api_bp.route("/cleanup-banners")
def cleanup_banners():
    """
    Deactivate every active banner. Called once a day by the cron
    configured in vercel.json.
    """
    if not _cron_authorized():
        logger.warning("Rejected cleanup call from %s", request.remote_addr)
        return jsonify({"error": UNAUTHORIZED}), 401

    try:
        count = _repository().deactivate_all()
    except BannerServiceError:
        logger.exception("Banner cleanup failed")
        return jsonify({"error": CLEANUP_ERROR}), 500

    logger.info("Banner cleanup finished, %d deactivated", count)
    return jsonify({"message": CLEANUP_DONE, "count": count}), 200


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Helpers
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

def _cron_authorized() -> bool:
    """True when no secret is configured or the bearer token matches it."""
    secret = current_app.config.get("CRON_SECRET")
    if not secret:
        return True
    header = request.headers.get("Authorization", "")
    # bytes, since compare_digest rejects non-ASCII str
    return hmac.compare_digest(header.encode(), f"Bearer {secret}".encode())


def _internal_error(exc):
    logger.error("Unhandled error: %r", getattr(exc, "original_exception", exc))
    return jsonify({"error": INTERNAL_ERROR}), 500


def create_app(test_config=None, connection=None) -> Flask:
    """
    Build the application. ``test_config`` overrides values from
    ``config``; ``connection`` replaces the MongoConnection built from
    them. Raises ConfigurationError when MONGODB_URI is missing.
    """
    app = Flask(__name__)
    app.config.from_object("config")
    if test_config:
        app.config.update(test_config)

    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if connection is None:
        connection = MongoConnection(
            app.config["MONGODB_URI"],
            app.config["MONGODB_DB_NAME"],
            server_selection_timeout_ms=app.config["MONGO_SERVER_SELECTION_TIMEOUT_MS"],
        )
        atexit.register(connection.close)

    app.extensions["mongo_connection"] = connection
    app.extensions["banner_repository"] = BannerRepository(
        connection, app.config["COLLECTION_BANNERS"]
    )

    if not app.config.get("CRON_SECRET"):
        logger.warning("CRON_SECRET is not set; /api/cleanup-banners is open")

    CORS(app, resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}})
    app.register_blueprint(api_bp)
    app.register_error_handler(InternalServerError, _internal_error)
    return app


app = create_app()


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

if __name__ == "__main__":
    logger.info("Banner service starting …")
    app.run(
        host=app.config["FLASK_HOST"],
        port=app.config["FLASK_PORT"],
        debug=app.config["FLASK_DEBUG"],
    )
