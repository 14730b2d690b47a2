"""
MongoDB connection helper.
Owns one lazily created MongoClient that is reused for the life of the
process, so warm serverless invocations skip the connect handshake.
"""
import logging
import threading

from pymongo import MongoClient
from pymongo.errors import PyMongoError

from errors import ConfigurationError, DatabaseConnectionError

logger = logging.getLogger(__name__)


class MongoConnection:
    """Cached connection to the banners database.

    The connection string is checked when the object is built, so a
    missing ``MONGODB_URI`` stops the app at startup instead of on the
    first request. The client itself is created on the first
    :meth:`connect` call; concurrent first calls are serialized so only
    one client is ever opened.
    """

    def __init__(self, uri: str, db_name: str,
                 server_selection_timeout_ms: int = 5000,
                 client_factory=MongoClient):
        if not uri:
            raise ConfigurationError(
                "MONGODB_URI is not set; define it in the environment."
            )
        self.uri = uri
        self.db_name = db_name
        self.server_selection_timeout_ms = server_selection_timeout_ms
        self._client_factory = client_factory
        self._client = None
        self._db = None
        self._lock = threading.Lock()

    @property
    def is_open(self) -> bool:
        return self._client is not None

    def connect(self):
        """Return the database handle, opening the client on first use."""
        db = self._db
        if db is not None:
            logger.debug("Using cached MongoDB connection")
            return db

        with self._lock:
            if self._client is None:
                self._client, self._db = self._open()
            return self._db

    def _open(self):
        # pymongo never queues operations; a short server selection
        # timeout makes a dead cluster fail the request quickly.
        client = None
        try:
            # mongodb+srv:// URIs resolve DNS here and raise on failure
            client = self._client_factory(
                self.uri,
                serverSelectionTimeoutMS=self.server_selection_timeout_ms,
            )
            client.admin.command("ping")
            # the database named in the URI wins; db_name is the fallback
            db = client.get_default_database(default=self.db_name)
        except PyMongoError as exc:
            logger.exception("Could not connect to MongoDB")
            if client is not None:
                client.close()
            raise DatabaseConnectionError(str(exc)) from exc
        logger.info("MongoDB connection established (database %s)", db.name)
        return client, db

    def ping(self) -> bool:
        """Quick connectivity check (used by the health endpoint)."""
        try:
            self.connect().client.admin.command("ping")
            return True
        except (DatabaseConnectionError, PyMongoError):
            return False

    def close(self) -> None:
        """Close the client and drop the cache. Safe to call twice."""
        with self._lock:
            if self._client is not None:
                self._db = None
                self._client.close()
                self._client = None
                logger.info("MongoDB connection closed")
